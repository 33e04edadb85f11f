"""
Application services for CareerPath.

Services enforce roles and validation on top of the repositories. They are
wired together explicitly by :func:`build_services`.
"""

from dataclasses import dataclass

from careerpath.core.auth import TokenManager
from careerpath.core.matching import MatchingEngine
from careerpath.data.database import DatabaseManager
from careerpath.data.repositories import JobRepository, UserRepository
from careerpath.utils.config import AppSettings

from .account_service import AccountService
from .admin_service import AdminService
from .job_service import JobService
from .matching_service import MatchingService
from .validation import parse_payload


@dataclass
class ServiceContainer:
    """Everything a front end needs to serve requests."""

    accounts: AccountService
    jobs: JobService
    matching: MatchingService
    admin: AdminService
    tokens: TokenManager


def build_services(settings: AppSettings, db_manager: DatabaseManager) -> ServiceContainer:
    """Construct repositories and services over one database connection."""
    users = UserRepository(db_manager)
    jobs = JobRepository(db_manager)
    tokens = TokenManager(settings.auth)

    return ServiceContainer(
        accounts=AccountService(users, tokens, settings.auth, settings.admin),
        jobs=JobService(jobs),
        matching=MatchingService(jobs, MatchingEngine()),
        admin=AdminService(users, jobs),
        tokens=tokens,
    )


__all__ = [
    "AccountService",
    "AdminService",
    "JobService",
    "MatchingService",
    "ServiceContainer",
    "build_services",
    "parse_payload",
]
