"""
Tests for careerpath.services.job_service: listing, posting and deleting
jobs under role and ownership rules.
"""

import pytest
from bson import ObjectId

from careerpath.utils.exceptions import (
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


# ── public ──────────────────────────────────────────────────────────────────


class TestPublicListing:
    def test_newest_first(self, job_service, job_repo, make_job):
        for title in ("First", "Second", "Third"):
            job_repo.add(make_job(title=title))
        assert [j.title for j in job_service.list_jobs()] == ["Third", "Second", "First"]

    def test_empty(self, job_service):
        assert job_service.list_jobs() == []

    def test_get_job(self, job_service, job_repo, make_job):
        job = job_repo.add(make_job())
        assert job_service.get_job(str(job.id)) is job

    def test_get_unknown_job(self, job_service):
        with pytest.raises(NotFoundError) as exc:
            job_service.get_job(str(ObjectId()))
        assert exc.value.message == "Job not found"

    def test_get_malformed_id(self, job_service):
        with pytest.raises(NotFoundError):
            job_service.get_job("not-an-id")


# ── create_job ──────────────────────────────────────────────────────────────


class TestCreateJob:
    def test_employer_posts(self, job_service, job_repo, employer, job_payload):
        job = job_service.create_job(employer, job_payload)

        assert job.id is not None
        assert job.owner_user_id == employer.id
        assert job.required_skills == ["Python", "Spark"]
        assert job_repo.get_by_id(job.id) is job

    def test_seeker_forbidden(self, job_service, seeker, job_payload):
        with pytest.raises(PermissionDeniedError):
            job_service.create_job(seeker, job_payload)

    def test_admin_forbidden(self, job_service, admin, job_payload):
        with pytest.raises(PermissionDeniedError):
            job_service.create_job(admin, job_payload)

    def test_anonymous(self, job_service, job_payload):
        with pytest.raises(AuthenticationError):
            job_service.create_job(None, job_payload)

    def test_missing_fields(self, job_service, employer, job_payload):
        payload = dict(job_payload, title="", apply_url="")
        with pytest.raises(ValidationError) as exc:
            job_service.create_job(employer, payload)
        assert exc.value.message == "Missing required fields"
        assert set(exc.value.fields) == {"title", "apply_url"}

    def test_empty_required_skills(self, job_service, employer, job_payload):
        with pytest.raises(ValidationError) as exc:
            job_service.create_job(employer, dict(job_payload, required_skills=[]))
        assert exc.value.fields == ["required_skills"]

    def test_negative_salary(self, job_service, employer, job_payload):
        with pytest.raises(ValidationError) as exc:
            job_service.create_job(employer, dict(job_payload, salary=-10))
        assert exc.value.message == "Salary must be a positive number"
        assert exc.value.fields == ["salary"]

    def test_nothing_stored_on_error(self, job_service, job_repo, employer, job_payload):
        with pytest.raises(ValidationError):
            job_service.create_job(employer, dict(job_payload, salary="lots"))
        assert job_repo.count() == 0


# ── delete_job ──────────────────────────────────────────────────────────────


class TestDeleteJob:
    def test_owner_deletes(self, job_service, job_repo, employer, make_job):
        job = job_repo.add(make_job(owner_user_id=employer.id))
        job_service.delete_job(employer, str(job.id))
        assert job_repo.get_by_id(job.id) is None

    def test_other_employer_forbidden(self, job_service, job_repo, employer, other_employer, make_job):
        job = job_repo.add(make_job(owner_user_id=employer.id))
        with pytest.raises(PermissionDeniedError) as exc:
            job_service.delete_job(other_employer, str(job.id))
        assert exc.value.message == "Forbidden"
        assert job_repo.get_by_id(job.id) is job

    def test_unowned_job_deletable(self, job_service, job_repo, employer, make_job):
        job = job_repo.add(make_job(owner_user_id=None))
        job_service.delete_job(employer, str(job.id))
        assert job_repo.count() == 0

    def test_unknown_job(self, job_service, employer):
        with pytest.raises(NotFoundError):
            job_service.delete_job(employer, str(ObjectId()))

    def test_seeker_forbidden(self, job_service, job_repo, seeker, make_job):
        job = job_repo.add(make_job())
        with pytest.raises(PermissionDeniedError):
            job_service.delete_job(seeker, str(job.id))


# ── list_my_jobs ────────────────────────────────────────────────────────────


class TestListMyJobs:
    def test_only_own_jobs(self, job_service, job_repo, employer, other_employer, make_job):
        job_repo.add(make_job(title="Mine 1", owner_user_id=employer.id))
        job_repo.add(make_job(title="Theirs", owner_user_id=other_employer.id))
        job_repo.add(make_job(title="Legacy", owner_user_id=None))
        job_repo.add(make_job(title="Mine 2", owner_user_id=employer.id))

        assert [j.title for j in job_service.list_my_jobs(employer)] == ["Mine 2", "Mine 1"]

    def test_seeker_forbidden(self, job_service, seeker):
        with pytest.raises(PermissionDeniedError):
            job_service.list_my_jobs(seeker)


# ── admin ───────────────────────────────────────────────────────────────────


class TestAdminJobs:
    def test_admin_lists_all(self, job_service, job_repo, admin, employer, make_job):
        job_repo.add(make_job(owner_user_id=employer.id))
        job_repo.add(make_job(owner_user_id=None))
        assert len(job_service.admin_list_jobs(admin)) == 2

    def test_admin_deletes_any(self, job_service, job_repo, admin, employer, make_job):
        job = job_repo.add(make_job(owner_user_id=employer.id))
        job_service.admin_delete_job(admin, str(job.id))
        assert job_repo.get_by_id(job.id) is None

    def test_admin_delete_unknown(self, job_service, admin):
        with pytest.raises(NotFoundError):
            job_service.admin_delete_job(admin, str(ObjectId()))

    def test_employer_cannot_use_admin_delete(self, job_service, job_repo, employer, make_job):
        job = job_repo.add(make_job(owner_user_id=employer.id))
        with pytest.raises(PermissionDeniedError):
            job_service.admin_delete_job(employer, str(job.id))

    def test_employer_cannot_list_as_admin(self, job_service, employer):
        with pytest.raises(PermissionDeniedError):
            job_service.admin_list_jobs(employer)
