"""
Admin statistics over users and jobs.

Pure functions over in-memory collections; loading the users and jobs is
the caller's job.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from careerpath.core.skills import split_stored_skills
from careerpath.data.models import Job, User
from careerpath.utils.constants import TOP_SKILLS_LIMIT, UserRole


class WorkTypeCount(BaseModel):
    work_type: str
    count: int


class SkillCount(BaseModel):
    name: str
    count: int


class AdminStats(BaseModel):
    """Aggregate counts shown on the admin dashboard."""

    users_total: int = 0
    roles: dict[str, int] = Field(default_factory=dict)
    jobs_total: int = 0
    jobs_by_work_type: list[WorkTypeCount] = Field(default_factory=list)
    top_skills: list[SkillCount] = Field(default_factory=list)


def count_roles(users: Iterable[User]) -> dict[str, int]:
    """Users per role; every known role is present even at zero."""
    roles = {role.value: 0 for role in UserRole}
    for user in users:
        role = UserRole(user.role).value
        roles[role] = roles.get(role, 0) + 1
    return roles


def count_work_types(jobs: Iterable[Job]) -> list[WorkTypeCount]:
    """Jobs per non-empty work type, in first-seen order."""
    counts = Counter(job.work_type for job in jobs if job.work_type)
    return [WorkTypeCount(work_type=work_type, count=count) for work_type, count in counts.items()]


def tally_skills(users: Iterable[User], limit: int = TOP_SKILLS_LIMIT) -> list[SkillCount]:
    """
    Most frequent skills across all users.

    Skills are counted exactly as stored (no case folding). Ties keep the
    order in which skills were first seen during the scan.
    """
    tally: Counter[str] = Counter()
    for user in users:
        tally.update(split_stored_skills(user.skills))

    ranked = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    return [SkillCount(name=name, count=count) for name, count in ranked[:limit]]


def compute_stats(
    users: Sequence[User],
    jobs: Sequence[Job],
    top_n: int = TOP_SKILLS_LIMIT,
) -> AdminStats:
    """Build the admin statistics for the given users and jobs."""
    return AdminStats(
        users_total=len(users),
        roles=count_roles(users),
        jobs_total=len(jobs),
        jobs_by_work_type=count_work_types(jobs),
        top_skills=tally_skills(users, limit=top_n),
    )
