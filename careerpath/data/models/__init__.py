"""
Pydantic data models and schemas for CareerPath.

This module provides the stored documents (users, jobs) and the validated
input payloads used to create them.
"""

# Base models
from .base import BaseDocument, EmbeddedModel, PyObjectId, parse_object_id, utc_now

# User models
from .user import CompanyProfile, User, UserRegistration

# Job models
from .job import Job, JobCreate, format_salary

__all__ = [
    # Base
    "BaseDocument",
    "EmbeddedModel",
    "PyObjectId",
    "parse_object_id",
    "utc_now",
    # User
    "CompanyProfile",
    "User",
    "UserRegistration",
    # Job
    "Job",
    "JobCreate",
    "format_salary",
]
