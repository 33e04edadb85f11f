"""
Tests for careerpath.services.validation and the error taxonomy in
careerpath.utils.exceptions.
"""

import pytest

from careerpath.data.models import JobCreate, UserRegistration
from careerpath.services import parse_payload
from careerpath.utils.exceptions import (
    AuthenticationError,
    CareerPathError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    ValidationError,
)


class TestParsePayload:
    def test_valid(self, job_payload):
        job = parse_payload(JobCreate, job_payload)
        assert isinstance(job, JobCreate)

    def test_model_passthrough(self, job_payload):
        job = JobCreate.model_validate(job_payload)
        assert parse_payload(JobCreate, job) is job

    def test_not_an_object(self):
        with pytest.raises(ValidationError) as exc:
            parse_payload(JobCreate, "title=Dev")
        assert exc.value.message == "Request body must be an object"

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as exc:
            parse_payload(JobCreate, {})
        assert exc.value.message == "Missing required fields"
        assert set(exc.value.fields) == {"title", "company", "location", "apply_url", "required_skills"}

    def test_single_error_message(self):
        with pytest.raises(ValidationError) as exc:
            parse_payload(UserRegistration, {"name": "Jane", "email": "bad", "password": "secret123"})
        assert exc.value.fields == ["email"]
        assert not exc.value.message.startswith("Value error")

    def test_mixed_errors(self, job_payload):
        with pytest.raises(ValidationError) as exc:
            parse_payload(JobCreate, dict(job_payload, title="", salary=-1))
        assert exc.value.message == "Invalid input"
        assert set(exc.value.fields) == {"title", "salary"}


class TestExceptions:
    @pytest.mark.parametrize(
        "error_cls,message",
        [
            (CareerPathError, "Server error"),
            (ValidationError, "Invalid input"),
            (AuthenticationError, "Unauthorized"),
            (PermissionDeniedError, "Forbidden"),
            (NotFoundError, "Not found"),
            (ConflictError, "Already exists"),
            (PersistenceError, "Server error"),
        ],
    )
    def test_default_messages(self, error_cls, message):
        error = error_cls()
        assert error.message == message
        assert str(error) == message
        assert isinstance(error, CareerPathError)

    def test_to_dict(self):
        assert NotFoundError("Job not found").to_dict() == {"error": "Job not found"}

    def test_validation_to_dict_fields(self):
        error = ValidationError("Missing required fields", fields=["title"])
        assert error.to_dict() == {"error": "Missing required fields", "fields": ["title"]}

    def test_validation_to_dict_without_fields(self):
        assert ValidationError("Bad").to_dict() == {"error": "Bad"}

    def test_permission_error_not_builtin(self):
        assert not issubclass(PermissionDeniedError, PermissionError)
