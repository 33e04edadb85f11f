"""
Job posting operations for the public listing, employers and admins.
"""

from typing import Any, Optional

from careerpath.core.auth import require_role
from careerpath.data.models import Job, JobCreate, User
from careerpath.data.repositories import JobRepository
from careerpath.utils.constants import AuditAction, AuditType, UserRole
from careerpath.utils.exceptions import NotFoundError, PermissionDeniedError
from careerpath.utils.logger import LoggerMixin, audit_log

from .validation import parse_payload


class JobService(LoggerMixin):
    """Lists, posts and removes job postings."""

    def __init__(self, jobs: JobRepository) -> None:
        self._jobs = jobs

    # -------------------------------------------------------------------------
    # Public
    # -------------------------------------------------------------------------

    def list_jobs(self) -> list[Job]:
        """All postings, newest first."""
        return self._jobs.list_all()

    def get_job(self, job_id: str) -> Job:
        """
        Fetch one posting.

        Raises:
            NotFoundError: Unknown or malformed id
        """
        job = self._jobs.get_by_id(job_id)
        if job is None:
            raise NotFoundError("Job not found")
        return job

    # -------------------------------------------------------------------------
    # Employer
    # -------------------------------------------------------------------------

    def create_job(self, actor: Optional[User], payload: JobCreate | dict[str, Any]) -> Job:
        """Post a job owned by the acting employer."""
        employer = require_role(actor, UserRole.EMPLOYER)
        data = parse_payload(JobCreate, payload)

        job = self._jobs.create(data.to_job(owner_user_id=employer.id))

        self.logger.info(f"Employer {employer.id} posted job {job.id}")
        audit_log(
            AuditAction.JOB_CREATED,
            {"job_id": str(job.id), "owner_user_id": str(employer.id), "title": job.title},
            audit_type=AuditType.CHANGE,
        )
        return job

    def delete_job(self, actor: Optional[User], job_id: str) -> None:
        """
        Delete a posting as its employer.

        Postings without an owner predate ownership tracking and may be
        removed by any employer.

        Raises:
            NotFoundError: Unknown job
            PermissionDeniedError: The job belongs to another employer
        """
        employer = require_role(actor, UserRole.EMPLOYER)
        job = self.get_job(job_id)
        if job.owner_user_id is not None and not job.is_owned_by(employer.id):
            raise PermissionDeniedError("Forbidden")

        self._delete(job)
        audit_log(
            AuditAction.JOB_DELETED,
            {"job_id": str(job.id), "actor_id": str(employer.id)},
            audit_type=AuditType.CHANGE,
        )

    def list_my_jobs(self, actor: Optional[User]) -> list[Job]:
        """Postings owned by the acting employer, newest first."""
        employer = require_role(actor, UserRole.EMPLOYER)
        return self._jobs.get_by_owner(employer.id)

    # -------------------------------------------------------------------------
    # Admin
    # -------------------------------------------------------------------------

    def admin_list_jobs(self, actor: Optional[User]) -> list[Job]:
        require_role(actor, UserRole.ADMIN)
        return self._jobs.list_all()

    def admin_delete_job(self, actor: Optional[User], job_id: str) -> None:
        """Delete any posting. Admin only."""
        admin = require_role(actor, UserRole.ADMIN)
        job = self.get_job(job_id)

        self._delete(job)
        audit_log(
            AuditAction.JOB_DELETED_BY_ADMIN,
            {"job_id": str(job.id), "actor_id": str(admin.id), "owner_user_id": str(job.owner_user_id)},
            audit_type=AuditType.ADMIN,
        )

    def _delete(self, job: Job) -> None:
        # A concurrent delete between lookup and removal reads as not found
        if not self._jobs.delete(job.id):
            raise NotFoundError("Job not found")
        self.logger.info(f"Deleted job {job.id}")
