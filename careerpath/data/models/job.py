"""
Job posting data models for CareerPath.

Defines the stored job document and the payload employers submit when
posting a job.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from careerpath.core.skills import split_stored_skills

from .base import BaseDocument, PyObjectId


def _clean_optional(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def format_salary(salary: Optional[int]) -> Optional[str]:
    """Render a salary for display, e.g. 120000 -> "$120,000"."""
    if not salary:
        return None
    return f"${salary:,}"


class Job(BaseDocument):
    """
    Job posting document.

    ``owner_user_id`` is None for legacy postings created before ownership
    was tracked.
    """

    title: str
    company: str
    location: str
    work_type: Optional[str] = None
    seniority: Optional[str] = None
    salary: Optional[int] = Field(default=None, ge=0)
    summary: Optional[str] = None
    required_skills: list[str] = Field(default_factory=list)
    apply_url: str
    owner_user_id: Optional[PyObjectId] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def read_required_skills(cls, v: Any) -> list[str]:
        """Accept both list and legacy comma-separated storage."""
        return split_stored_skills(v)

    @property
    def salary_display(self) -> Optional[str]:
        return format_salary(self.salary)

    def is_owned_by(self, user_id: Any) -> bool:
        return self.owner_user_id is not None and str(self.owner_user_id) == str(user_id)

    def to_public_dict(self) -> dict[str, Any]:
        """JSON-friendly view of the posting."""
        return {
            "id": str(self.id) if self.id else None,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "work_type": self.work_type,
            "salary": self.salary,
            "seniority": self.seniority,
            "summary": self.summary,
            "required_skills": list(self.required_skills),
            "apply_url": self.apply_url,
            "created_at": self.created_at.isoformat(),
            "owner_user_id": str(self.owner_user_id) if self.owner_user_id else None,
        }


class JobCreate(BaseModel):
    """Schema for posting a new job."""

    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    apply_url: str = Field(..., min_length=1)
    required_skills: list[str] = Field(..., min_length=1)
    work_type: Optional[str] = Field(None, max_length=64)
    seniority: Optional[str] = Field(None, max_length=64)
    salary: Optional[int] = None
    summary: Optional[str] = None

    @field_validator("title", "company", "location", "apply_url", mode="before")
    @classmethod
    def trim_required(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("work_type", "seniority", "summary", mode="before")
    @classmethod
    def trim_optional(cls, v: Any) -> Optional[str]:
        return _clean_optional(v)

    @field_validator("required_skills", mode="before")
    @classmethod
    def clean_required_skills(cls, v: Any) -> Any:
        """Trim skills and drop blanks; the min_length check runs afterwards."""
        if isinstance(v, (list, tuple)):
            if any(not isinstance(item, str) for item in v):
                raise ValueError("Required skills must be strings")
            return [item.strip() for item in v if item.strip()]
        return v

    @field_validator("salary", mode="before")
    @classmethod
    def validate_salary(cls, v: Any) -> Optional[int]:
        """Salary must be a non-negative number; strings and booleans are rejected."""
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("Salary must be a positive number")
        if not math.isfinite(v) or v < 0:
            raise ValueError("Salary must be a positive number")
        return int(round(v))

    def to_job(self, owner_user_id: Any) -> Job:
        """Build the stored document owned by ``owner_user_id``."""
        return Job(
            title=self.title,
            company=self.company,
            location=self.location,
            work_type=self.work_type,
            seniority=self.seniority,
            salary=self.salary,
            summary=self.summary,
            required_skills=self.required_skills,
            apply_url=self.apply_url,
            owner_user_id=owner_user_id,
        )
