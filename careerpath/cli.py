"""
CareerPath Command Line Interface

Provides CLI commands for running the job board: database setup,
accounts, job postings, skill matching and admin statistics.
"""

from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from careerpath.data.database import DatabaseManager
from careerpath.services import ServiceContainer, build_services
from careerpath.utils.config import get_settings
from careerpath.utils.exceptions import CareerPathError
from careerpath.utils.logger import setup_logging

app = typer.Typer(
    name="careerpath",
    help="CareerPath job board CLI",
    add_completion=False,
)
console = Console()

TOKEN_OPTION = typer.Option(
    None, "--token", envvar="CAREERPATH_TOKEN", help="Session token from 'login' or 'register'"
)

_db_manager: Optional[DatabaseManager] = None
_services: Optional[ServiceContainer] = None


def get_database_manager() -> DatabaseManager:
    """Database handle for this CLI process, built on first use."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(get_settings().database)
    return _db_manager


def get_services() -> ServiceContainer:
    """Services for this CLI process, built on first use."""
    global _services
    if _services is None:
        _services = build_services(get_settings(), get_database_manager())
    return _services


def _fail(error: CareerPathError) -> NoReturn:
    console.print(f"[red]Error: {error.message}[/red]")
    if getattr(error, "fields", None):
        console.print(f"[dim]Fields: {', '.join(error.fields)}[/dim]")
    raise typer.Exit(1)


def _truncate(text: Optional[str], width: int) -> str:
    if not text:
        return ""
    return text[:width] + "..." if len(text) > width else text


def _print_token(token: str) -> None:
    console.print(f"[bold]Token:[/bold] {token}")
    console.print("[dim]Export it as CAREERPATH_TOKEN or pass it with --token.[/dim]")


def _jobs_table(title: str, jobs: list) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", width=24)
    table.add_column("Title", style="cyan")
    table.add_column("Company")
    table.add_column("Location")
    table.add_column("Type", justify="center")
    table.add_column("Salary", justify="right", style="green")

    for job in jobs:
        table.add_row(
            str(job.id),
            _truncate(job.title, 40),
            _truncate(job.company, 20),
            _truncate(job.location, 20),
            job.work_type or "-",
            job.salary_display or "-",
        )
    return table


def close_database() -> None:
    """Close the MongoDB clients opened by this CLI process."""
    global _db_manager, _services
    if _db_manager is not None:
        _db_manager.close_all()
    _db_manager = None
    _services = None


@app.callback()
def main(ctx: typer.Context) -> None:
    """CareerPath job board."""
    setup_logging()
    ctx.call_on_close(close_database)


# =============================================================================
# System
# =============================================================================


@app.command()
def version():
    """Show application version."""
    from careerpath import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    settings = get_settings()

    table = Table(title="CareerPath Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", f"{settings.database.host}:{settings.database.port}")
    table.add_row("Database Name", settings.database.name)
    table.add_row("Token Lifetime", f"{settings.auth.token_ttl_days} days")
    table.add_row("Admin Signup", str(settings.auth.allow_admin_signup))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Create indexes and seed the default admin account."""
    import asyncio

    console.print("[yellow]Initializing database...[/yellow]")

    db_manager = get_database_manager()

    console.print("  Checking database connection...")
    if not db_manager.check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)
    console.print("  [green]✓[/green] Connected to MongoDB")

    try:
        console.print("  Creating indexes...")
        asyncio.run(db_manager.ensure_indexes())
        console.print("  [green]✓[/green] Indexes created")

        admin = get_services().accounts.ensure_admin_user()
    except CareerPathError as e:
        _fail(e)

    if admin is not None:
        console.print(f"  [green]✓[/green] Seeded admin account {admin.email}")
    else:
        console.print("  [dim]Admin account already present[/dim]")

    console.print("\n[green]Database initialized successfully![/green]")


@app.command()
def health_check():
    """Check database connectivity."""
    settings = get_settings()

    console.print("[bold cyan]System Health Check[/bold cyan]")
    console.print(f"[dim]{'─' * 50}[/dim]")

    console.print("\n[bold]Database:[/bold]")
    if get_database_manager().check_sync_connection():
        console.print("  [green]✓[/green] MongoDB connected")
        console.print(f"    Host: {settings.database.host}:{settings.database.port}")
        console.print(f"    Database: {settings.database.name}")
        console.print("\n[green]All critical systems operational.[/green]")
    else:
        console.print("  [red]✗[/red] MongoDB not connected")
        console.print("\n[red]Some systems require attention.[/red]")
        raise typer.Exit(1)


# =============================================================================
# Accounts
# =============================================================================


@app.command()
def register(
    name: str = typer.Option(..., "--name", "-n", help="Display name"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
    role: str = typer.Option("seeker", "--role", "-r", help="seeker or employer"),
    company_name: Optional[str] = typer.Option(None, "--company", help="Company name (employers)"),
    company_website: Optional[str] = typer.Option(None, "--website", help="Company website"),
    company_size: Optional[str] = typer.Option(None, "--size", help="Company size"),
):
    """Create an account and print a session token."""
    payload = {
        "name": name,
        "email": email,
        "password": password,
        "role": role,
        "company_name": company_name,
        "company_website": company_website,
        "company_size": company_size,
    }
    try:
        user, token = get_services().accounts.register(payload)
    except CareerPathError as e:
        _fail(e)

    console.print(f"[green]✓ Registered {user.email} as {user.to_public_dict()['role']}[/green]")
    _print_token(token)


@app.command()
def login(
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
):
    """Sign in and print a session token."""
    try:
        user, token = get_services().accounts.login(email, password)
    except CareerPathError as e:
        _fail(e)

    console.print(f"[green]✓ Signed in as {user.name}[/green]")
    _print_token(token)


@app.command()
def whoami(token: Optional[str] = TOKEN_OPTION):
    """Show the signed-in user."""
    try:
        user = get_services().accounts.current_user(token)
    except CareerPathError as e:
        _fail(e)
    if user is None:
        console.print("[yellow]Not signed in.[/yellow]")
        raise typer.Exit(0)

    profile = user.to_public_dict()
    console.print(f"[bold]ID:[/bold] {profile['id']}")
    console.print(f"[bold]Name:[/bold] {profile['name']}")
    console.print(f"[bold]Email:[/bold] {profile['email']}")
    console.print(f"[bold]Role:[/bold] {profile['role']}")
    if profile["company_name"]:
        console.print(f"[bold]Company:[/bold] {profile['company_name']}")
    console.print(f"[bold]Skills:[/bold] {', '.join(profile['skills']) or '-'}")


@app.command()
def set_skills(
    skills: str = typer.Argument(..., help="Comma-separated skills"),
    token: Optional[str] = TOKEN_OPTION,
):
    """Replace your skills."""
    from careerpath.core.skills import parse_skills

    services = get_services()
    try:
        user = services.accounts.authenticate(token)
        saved = services.accounts.update_skills(user, parse_skills(skills))
    except CareerPathError as e:
        _fail(e)

    console.print(f"[green]✓ Saved {len(saved)} skill(s):[/green] {', '.join(saved)}")


@app.command()
def list_users(token: Optional[str] = TOKEN_OPTION):
    """List all users. Admin only."""
    services = get_services()
    try:
        users = services.accounts.list_users(services.accounts.authenticate(token))
    except CareerPathError as e:
        _fail(e)

    table = Table(title=f"Users ({len(users)} total)")
    table.add_column("ID", style="dim", width=24)
    table.add_column("Name", style="cyan")
    table.add_column("Email")
    table.add_column("Role", justify="center")
    table.add_column("Skills", justify="right")

    for user in users:
        profile = user.to_public_dict()
        table.add_row(
            profile["id"],
            _truncate(profile["name"], 30),
            _truncate(profile["email"], 30),
            profile["role"],
            str(len(profile["skills"])),
        )
    console.print(table)


# =============================================================================
# Jobs
# =============================================================================


@app.command()
def list_jobs():
    """List all jobs, newest first."""
    try:
        jobs = get_services().jobs.list_jobs()
    except CareerPathError as e:
        _fail(e)

    if not jobs:
        console.print("[yellow]No jobs found.[/yellow]")
        raise typer.Exit(0)

    console.print(_jobs_table(f"Jobs ({len(jobs)} total)", jobs))


@app.command()
def show_job(job_id: str = typer.Argument(..., help="Job ID to display")):
    """Show detailed information about a job."""
    try:
        job = get_services().jobs.get_job(job_id)
    except CareerPathError as e:
        _fail(e)

    console.print("\n[bold cyan]Job Details[/bold cyan]")
    console.print(f"[dim]{'─' * 50}[/dim]")
    console.print(f"[bold]ID:[/bold] {job.id}")
    console.print(f"[bold]Title:[/bold] {job.title}")
    console.print(f"[bold]Company:[/bold] {job.company}")
    console.print(f"[bold]Location:[/bold] {job.location}")
    if job.work_type:
        console.print(f"[bold]Work Type:[/bold] {job.work_type}")
    if job.seniority:
        console.print(f"[bold]Seniority:[/bold] {job.seniority}")
    if job.salary_display:
        console.print(f"[bold]Salary:[/bold] {job.salary_display}")
    console.print(f"[bold]Apply:[/bold] {job.apply_url}")
    console.print(f"[bold]Created:[/bold] {job.created_at}")

    if job.summary:
        console.print("\n[bold]Summary:[/bold]")
        console.print(f"  {_truncate(job.summary, 500)}")
    if job.required_skills:
        console.print(f"\n[bold]Required Skills:[/bold] {', '.join(job.required_skills)}")


@app.command()
def post_job(
    title: str = typer.Option(..., "--title", "-t", help="Job title"),
    company: str = typer.Option(..., "--company", "-c", help="Company name"),
    location: str = typer.Option(..., "--location", "-l", help="Location"),
    apply_url: str = typer.Option(..., "--apply-url", "-u", help="Application link"),
    skills: str = typer.Option(..., "--skills", "-s", help="Comma-separated required skills"),
    work_type: Optional[str] = typer.Option(None, "--work-type", help="Remote, Hybrid, On-site..."),
    seniority: Optional[str] = typer.Option(None, "--seniority", help="Seniority level"),
    salary: Optional[float] = typer.Option(None, "--salary", help="Annual salary"),
    summary: Optional[str] = typer.Option(None, "--summary", help="Short description"),
    token: Optional[str] = TOKEN_OPTION,
):
    """Post a job. Employers only."""
    from careerpath.core.skills import parse_skills

    payload = {
        "title": title,
        "company": company,
        "location": location,
        "apply_url": apply_url,
        "required_skills": parse_skills(skills),
        "work_type": work_type,
        "seniority": seniority,
        "salary": salary,
        "summary": summary,
    }
    services = get_services()
    try:
        job = services.jobs.create_job(services.accounts.authenticate(token), payload)
    except CareerPathError as e:
        _fail(e)

    console.print("[green]✓ Job created successfully![/green]")
    console.print(f"  ID: [cyan]{job.id}[/cyan]")
    console.print(f"  Title: {job.title}")
    console.print(f"  Required skills: {', '.join(job.required_skills)}")


@app.command()
def delete_job(
    job_id: str = typer.Argument(..., help="Job ID to delete"),
    token: Optional[str] = TOKEN_OPTION,
):
    """Delete one of your jobs. Employers only."""
    services = get_services()
    try:
        services.jobs.delete_job(services.accounts.authenticate(token), job_id)
    except CareerPathError as e:
        _fail(e)

    console.print(f"[green]✓ Deleted job {job_id}[/green]")


@app.command()
def my_jobs(token: Optional[str] = TOKEN_OPTION):
    """List the jobs you posted. Employers only."""
    services = get_services()
    try:
        jobs = services.jobs.list_my_jobs(services.accounts.authenticate(token))
    except CareerPathError as e:
        _fail(e)

    if not jobs:
        console.print("[yellow]You have not posted any jobs.[/yellow]")
        raise typer.Exit(0)

    console.print(_jobs_table(f"My Jobs ({len(jobs)} total)", jobs))


@app.command()
def admin_delete_job(
    job_id: str = typer.Argument(..., help="Job ID to delete"),
    token: Optional[str] = TOKEN_OPTION,
):
    """Delete any job. Admin only."""
    services = get_services()
    try:
        services.jobs.admin_delete_job(services.accounts.authenticate(token), job_id)
    except CareerPathError as e:
        _fail(e)

    console.print(f"[green]✓ Deleted job {job_id}[/green]")


# =============================================================================
# Matching
# =============================================================================


@app.command()
def match(
    skills: Optional[str] = typer.Option(
        None, "--skills", "-s", help="Comma-separated skills (defaults to your saved skills)"
    ),
    limit: int = typer.Option(10, "--limit", "-l", help="Number of matches to show"),
    token: Optional[str] = TOKEN_OPTION,
):
    """Rank jobs by how many of their required skills you have."""
    services = get_services()
    try:
        if skills is None:
            user = services.accounts.authenticate(token)
            results = services.matching.match_jobs(user.skills)
        else:
            results = services.matching.match_jobs(skills)
    except CareerPathError as e:
        _fail(e)

    if not results:
        console.print("[yellow]No jobs to match against.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {min(limit, len(results))} Matches")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Title", style="cyan")
    table.add_column("Company")
    table.add_column("Match", justify="right")
    table.add_column("Missing")

    level_colors = {"excellent": "green", "good": "blue", "fair": "yellow", "poor": "red"}

    for i, result in enumerate(results[:limit], 1):
        color = level_colors.get(result.level.value, "white")
        table.add_row(
            str(i),
            _truncate(result.job.title, 30),
            _truncate(result.job.company, 20),
            f"[{color}]{result.match_percent}%[/{color}]",
            ", ".join(result.missing_skills) or "-",
        )
    console.print(table)


# =============================================================================
# Admin
# =============================================================================


@app.command()
def stats(token: Optional[str] = TOKEN_OPTION):
    """Show user, job and skill statistics. Admin only."""
    services = get_services()
    try:
        summary = services.admin.stats(services.accounts.authenticate(token))
    except CareerPathError as e:
        _fail(e)

    console.print("[bold cyan]System Statistics[/bold cyan]")
    console.print(f"[dim]{'─' * 50}[/dim]")

    table = Table(title="Counts")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Users", str(summary.users_total))
    for role, count in summary.roles.items():
        table.add_row(f"  {role}", str(count))
    table.add_row("Jobs", str(summary.jobs_total))
    console.print(table)

    if summary.jobs_by_work_type:
        console.print("\n[bold]Jobs by Work Type:[/bold]")
        for entry in summary.jobs_by_work_type:
            console.print(f"  {entry.work_type}: {entry.count}")

    if summary.top_skills:
        console.print("\n[bold]Top Skills:[/bold]")
        for entry in summary.top_skills:
            console.print(f"  {entry.name}: {entry.count}")


if __name__ == "__main__":
    app()
