"""
Tests for Pydantic data models in careerpath.data.models.
"""

from datetime import timezone

import pytest
from bson import ObjectId
from pydantic import ValidationError as PydanticValidationError

from careerpath.data.models import (
    CompanyProfile,
    Job,
    JobCreate,
    User,
    UserRegistration,
    format_salary,
)
from careerpath.data.models.base import parse_object_id, utc_now
from careerpath.utils.constants import UserRole


# ── Base ────────────────────────────────────────────────────────────────────


class TestBaseDocument:
    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo == timezone.utc

    def test_id_from_string(self, make_job):
        oid = ObjectId()
        job = Job.model_validate({**make_job(with_id=False).model_dump_mongo(), "_id": str(oid)})
        assert job.id == oid

    def test_invalid_object_id(self):
        with pytest.raises(ValueError):
            parse_object_id("not-an-id")

    def test_dump_mongo_omits_missing_id(self, make_job):
        data = make_job(with_id=False).model_dump_mongo()
        assert "_id" not in data
        assert "created_at" in data

    def test_dump_mongo_keeps_object_ids(self, make_job):
        owner = ObjectId()
        job = make_job(owner_user_id=owner)
        data = job.model_dump_mongo()
        assert data["_id"] == job.id
        assert isinstance(data["owner_user_id"], ObjectId)
        assert data["owner_user_id"] == owner


# ── User ────────────────────────────────────────────────────────────────────


class TestUser:
    def test_defaults(self):
        user = User(name="Jane", email="jane@example.com", password_hash="x")
        assert user.role == "seeker"
        assert user.skills == []
        assert user.company is None

    def test_email_lowercased(self):
        user = User(name="Jane", email="  Jane@Example.COM ", password_hash="x")
        assert user.email == "jane@example.com"

    def test_invalid_email(self):
        with pytest.raises(PydanticValidationError):
            User(name="Jane", email="not-an-email", password_hash="x")

    def test_legacy_comma_skills(self):
        user = User.model_validate(
            {"name": "Jane", "email": "jane@example.com", "password_hash": "x", "skills": "Python, SQL"}
        )
        assert user.skills == ["Python", "SQL"]

    def test_role_helpers(self, make_user):
        admin = make_user(role=UserRole.ADMIN)
        assert admin.is_admin
        assert not admin.is_employer
        assert admin.has_role(UserRole.ADMIN)
        assert not admin.has_role(UserRole.SEEKER)

    def test_role_stored_as_value(self, make_user):
        data = make_user(role=UserRole.EMPLOYER).model_dump_mongo()
        assert data["role"] == "employer"

    def test_public_dict_hides_hash(self, make_user):
        user = make_user(company=CompanyProfile(name="Acme"))
        data = user.to_public_dict()
        assert "password_hash" not in data
        assert data["id"] == str(user.id)
        assert data["role"] == "seeker"
        assert data["company_name"] == "Acme"
        assert data["company_website"] is None

    def test_unknown_role_rejected(self):
        with pytest.raises(PydanticValidationError):
            User(name="Jane", email="jane@example.com", password_hash="x", role="superuser")


class TestUserRegistration:
    def test_company_profile(self):
        reg = UserRegistration(
            name=" Jane ",
            email="jane@example.com",
            password="secret123",
            company_name=" Acme ",
            company_size="  ",
        )
        assert reg.name == "Jane"
        profile = reg.company_profile()
        assert profile.name == "Acme"
        assert profile.size is None

    def test_no_company_profile(self):
        reg = UserRegistration(name="Jane", email="jane@example.com", password="secret123")
        assert reg.company_profile() is None

    def test_blank_name_rejected(self):
        with pytest.raises(PydanticValidationError):
            UserRegistration(name="   ", email="jane@example.com", password="secret123")


# ── Job ─────────────────────────────────────────────────────────────────────


class TestFormatSalary:
    def test_thousands_separator(self):
        assert format_salary(120000) == "$120,000"

    def test_small(self):
        assert format_salary(950) == "$950"

    def test_zero_and_none(self):
        assert format_salary(0) is None
        assert format_salary(None) is None


class TestJob:
    def test_legacy_comma_required_skills(self):
        job = Job.model_validate(
            {
                "title": "Dev",
                "company": "Acme",
                "location": "Remote",
                "apply_url": "https://jobs.example.com",
                "required_skills": "Python,  Go ,",
            }
        )
        assert job.required_skills == ["Python", "Go"]

    def test_is_owned_by(self, make_job):
        owner = ObjectId()
        job = make_job(owner_user_id=owner)
        assert job.is_owned_by(owner)
        assert job.is_owned_by(str(owner))
        assert not job.is_owned_by(ObjectId())

    def test_unowned_job(self, make_job):
        assert not make_job(owner_user_id=None).is_owned_by(ObjectId())

    def test_public_dict(self, make_job):
        job = make_job(salary=85000)
        data = job.to_public_dict()
        assert data["salary"] == 85000
        assert data["owner_user_id"] is None
        assert data["required_skills"] == ["Python", "SQL", "Docker"]


class TestJobCreate:
    def test_valid(self, job_payload):
        job = JobCreate.model_validate(job_payload)
        assert job.required_skills == ["Python", "Spark"]
        assert job.salary == 95000

    def test_trims_fields(self, job_payload):
        job = JobCreate.model_validate({**job_payload, "title": "  Data Engineer ", "work_type": "  "})
        assert job.title == "Data Engineer"
        assert job.work_type is None

    def test_salary_rounded(self, job_payload):
        assert JobCreate.model_validate({**job_payload, "salary": 99999.6}).salary == 100000

    @pytest.mark.parametrize("salary", [-1, "100", True, float("inf")])
    def test_bad_salary(self, job_payload, salary):
        with pytest.raises(PydanticValidationError):
            JobCreate.model_validate({**job_payload, "salary": salary})

    def test_salary_optional(self, job_payload):
        payload = dict(job_payload)
        del payload["salary"]
        assert JobCreate.model_validate(payload).salary is None

    def test_missing_title(self, job_payload):
        payload = dict(job_payload)
        del payload["title"]
        with pytest.raises(PydanticValidationError):
            JobCreate.model_validate(payload)

    def test_blank_required_skills(self, job_payload):
        with pytest.raises(PydanticValidationError):
            JobCreate.model_validate({**job_payload, "required_skills": [" ", ""]})

    def test_non_string_required_skill(self, job_payload):
        with pytest.raises(PydanticValidationError):
            JobCreate.model_validate({**job_payload, "required_skills": ["Python", 7]})

    def test_to_job(self, job_payload):
        owner = ObjectId()
        job = JobCreate.model_validate(job_payload).to_job(owner_user_id=owner)
        assert isinstance(job, Job)
        assert job.owner_user_id == owner
        assert job.id is None
        assert job.salary_display == "$95,000"
