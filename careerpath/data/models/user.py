"""
User account data models for CareerPath.

Covers job seekers, employers (with an optional company profile) and
administrators, plus the registration payload.
"""

from typing import Any, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from careerpath.core.skills import split_stored_skills
from careerpath.utils.constants import UserRole

from .base import BaseDocument, EmbeddedModel


def _clean_optional(value: Any) -> Optional[str]:
    """Trim an optional text field; blank becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class CompanyProfile(EmbeddedModel):
    """Employer company details captured at registration."""

    name: Optional[str] = None
    website: Optional[str] = None
    size: Optional[str] = None

    @field_validator("name", "website", "size", mode="before")
    @classmethod
    def trim(cls, v: Any) -> Optional[str]:
        return _clean_optional(v)

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.website or self.size)


class User(BaseDocument):
    """
    User account document.

    ``password_hash`` is never part of the public view returned by
    :meth:`to_public_dict`.
    """

    name: str
    email: EmailStr
    password_hash: str
    role: UserRole = UserRole.SEEKER
    company: Optional[CompanyProfile] = None
    skills: list[str] = Field(default_factory=list)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("skills", mode="before")
    @classmethod
    def read_skills(cls, v: Any) -> list[str]:
        """Accept both list and legacy comma-separated storage."""
        return split_stored_skills(v)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER.value

    def has_role(self, role: UserRole) -> bool:
        return self.role == role.value

    def to_public_dict(self) -> dict[str, Any]:
        """JSON-friendly view without credentials."""
        company = self.company or CompanyProfile()
        return {
            "id": str(self.id) if self.id else None,
            "name": self.name,
            "email": self.email,
            "role": UserRole(self.role).value,
            "company_name": company.name,
            "company_website": company.website,
            "company_size": company.size,
            "skills": list(self.skills),
            "created_at": self.created_at.isoformat(),
        }


class UserRegistration(BaseModel):
    """Schema for registering a new account."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Optional[str] = None
    company_name: Optional[str] = Field(None, max_length=255)
    company_website: Optional[str] = Field(None, max_length=255)
    company_size: Optional[str] = Field(None, max_length=64)

    @field_validator("name", mode="before")
    @classmethod
    def trim_name(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("company_name", "company_website", "company_size", mode="before")
    @classmethod
    def trim_company(cls, v: Any) -> Optional[str]:
        return _clean_optional(v)

    def company_profile(self) -> Optional[CompanyProfile]:
        profile = CompanyProfile(
            name=self.company_name,
            website=self.company_website,
            size=self.company_size,
        )
        return None if profile.is_empty else profile
