"""Admin dashboard statistics."""

from typing import Optional

from careerpath.core.analytics import AdminStats, compute_stats
from careerpath.core.auth import require_role
from careerpath.data.models import User
from careerpath.data.repositories import JobRepository, UserRepository
from careerpath.utils.constants import TOP_SKILLS_LIMIT, UserRole
from careerpath.utils.logger import LoggerMixin


class AdminService(LoggerMixin):
    def __init__(self, users: UserRepository, jobs: JobRepository) -> None:
        self._users = users
        self._jobs = jobs

    def stats(self, actor: Optional[User], top_n: int = TOP_SKILLS_LIMIT) -> AdminStats:
        """Counts over all users and jobs. Admin only."""
        require_role(actor, UserRole.ADMIN)
        users = self._users.list_all()
        jobs = self._jobs.list_all()
        self.logger.debug(f"Computing stats over {len(users)} users and {len(jobs)} jobs")
        return compute_stats(users, jobs, top_n=top_n)
