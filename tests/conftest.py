"""
Shared test fixtures for the CareerPath test suite.

Sets environment variables before any careerpath imports so settings load
with test values, then provides factory fixtures for users and jobs,
in-memory repositories and services wired on top of them.
"""

import os

# === Set environment BEFORE any careerpath imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "careerpath_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("AUTH_BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret-that-is-long-enough-for-hs256")

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest
from bson import ObjectId

from careerpath.core.auth import TokenManager, hash_password
from careerpath.core.matching import MatchingEngine
from careerpath.data.models import Job, User
from careerpath.services import (
    AccountService,
    AdminService,
    JobService,
    MatchingService,
    ServiceContainer,
)
from careerpath.utils.config import AdminSettings, AuthSettings
from careerpath.utils.constants import UserRole
from careerpath.utils.exceptions import ConflictError

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_user():
    """Factory that returns a callable to build User models."""

    def _factory(
        name: str = "Jane Smith",
        email: str = "jane.smith@example.com",
        role: UserRole = UserRole.SEEKER,
        skills: Optional[list[str]] = None,
        password: str = "secret123",
        with_id: bool = True,
        **kwargs,
    ) -> User:
        return User(
            _id=ObjectId() if with_id else None,
            name=name,
            email=email,
            password_hash=hash_password(password, rounds=4),
            role=role,
            skills=skills or [],
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_job():
    """Factory that returns a callable to build Job models."""

    def _factory(
        title: str = "Backend Engineer",
        company: str = "Acme Corp",
        location: str = "Remote",
        required_skills: Optional[list[str]] = None,
        work_type: Optional[str] = "Remote",
        salary: Optional[int] = 120000,
        owner_user_id: Optional[ObjectId] = None,
        with_id: bool = True,
        **kwargs,
    ) -> Job:
        if required_skills is None:
            required_skills = ["Python", "SQL", "Docker"]
        return Job(
            _id=ObjectId() if with_id else None,
            title=title,
            company=company,
            location=location,
            required_skills=required_skills,
            work_type=work_type,
            salary=salary,
            apply_url="https://jobs.example.com/apply",
            owner_user_id=owner_user_id,
            **kwargs,
        )

    return _factory


@pytest.fixture
def job_payload() -> dict[str, Any]:
    """A valid job posting request body."""
    return {
        "title": "Data Engineer",
        "company": "Acme Corp",
        "location": "Berlin",
        "apply_url": "https://jobs.example.com/data-engineer",
        "required_skills": ["Python", "Spark"],
        "work_type": "Hybrid",
        "seniority": "Senior",
        "salary": 95000,
        "summary": "Build pipelines.",
    }


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryRepository:
    """Dict-backed stand-in for BaseRepository, newest documents first."""

    def __init__(self) -> None:
        self.documents: dict[ObjectId, Any] = {}
        self._clock = BASE_TIME

    @staticmethod
    def _key(id_value: Any) -> Optional[ObjectId]:
        if isinstance(id_value, ObjectId):
            return id_value
        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)
        return None

    def add(self, model: Any) -> Any:
        """Store ``model`` as-is, assigning an id and a later timestamp."""
        if model.id is None:
            model.id = ObjectId()
        self._clock += timedelta(seconds=1)
        model.created_at = self._clock
        self.documents[model.id] = model
        return model

    def create(self, model: Any) -> Any:
        return self.add(model)

    def get_by_id(self, id_value: Any) -> Optional[Any]:
        key = self._key(id_value)
        return self.documents.get(key) if key else None

    def list_all(self) -> list[Any]:
        return sorted(
            self.documents.values(),
            key=lambda m: (m.created_at, str(m.id)),
            reverse=True,
        )

    def delete(self, id_value: Any) -> bool:
        key = self._key(id_value)
        return self.documents.pop(key, None) is not None if key else False

    def count(self, query: Optional[dict[str, Any]] = None) -> int:
        return len(self.documents)


class InMemoryUserRepository(InMemoryRepository):
    def create(self, model: User) -> User:
        if self.email_exists(model.email):
            raise ConflictError("Email already registered")
        return self.add(model)

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self.documents.values() if u.email == email), None)

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def update_skills(self, id_value: Any, skills: list[str]) -> bool:
        user = self.get_by_id(id_value)
        if user is None:
            return False
        user.skills = list(skills)
        return True


class InMemoryJobRepository(InMemoryRepository):
    def get_by_owner(self, owner_id: Any) -> list[Job]:
        key = self._key(owner_id)
        return [job for job in self.list_all() if key is not None and job.owner_user_id == key]


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def job_repo() -> InMemoryJobRepository:
    return InMemoryJobRepository()


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(bcrypt_rounds=4, jwt_secret="test-secret-that-is-long-enough-for-hs256")


@pytest.fixture
def admin_settings() -> AdminSettings:
    return AdminSettings(email="admin@example.com", password="adminpass", name="Admin")


@pytest.fixture
def token_manager(auth_settings) -> TokenManager:
    return TokenManager(auth_settings)


@pytest.fixture
def account_service(user_repo, token_manager, auth_settings, admin_settings) -> AccountService:
    return AccountService(user_repo, token_manager, auth_settings, admin_settings)


@pytest.fixture
def job_service(job_repo) -> JobService:
    return JobService(job_repo)


@pytest.fixture
def matching_service(job_repo) -> MatchingService:
    return MatchingService(job_repo, MatchingEngine())


@pytest.fixture
def admin_service(user_repo, job_repo) -> AdminService:
    return AdminService(user_repo, job_repo)


@pytest.fixture
def services(account_service, job_service, matching_service, admin_service, token_manager) -> ServiceContainer:
    return ServiceContainer(
        accounts=account_service,
        jobs=job_service,
        matching=matching_service,
        admin=admin_service,
        tokens=token_manager,
    )


@pytest.fixture
def seeker(user_repo, make_user) -> User:
    return user_repo.add(make_user(name="Sam Seeker", email="seeker@example.com", skills=["Python"]))


@pytest.fixture
def employer(user_repo, make_user) -> User:
    return user_repo.add(make_user(name="Erin Employer", email="employer@example.com", role=UserRole.EMPLOYER))


@pytest.fixture
def other_employer(user_repo, make_user) -> User:
    return user_repo.add(make_user(name="Olli Other", email="other@example.com", role=UserRole.EMPLOYER))


@pytest.fixture
def admin(user_repo, make_user) -> User:
    return user_repo.add(make_user(name="Ada Admin", email="ada@example.com", role=UserRole.ADMIN))


@pytest.fixture
def matching_engine() -> MatchingEngine:
    return MatchingEngine()
