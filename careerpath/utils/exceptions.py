"""
Error types raised by CareerPath services and stores.

Callers (the CLI, or any HTTP layer put in front of the services) translate
these into user-facing responses.
"""

from typing import Optional


class CareerPathError(Exception):
    """Base class for all CareerPath errors."""

    default_message = "Server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, object]:
        return {"error": self.message}


class ValidationError(CareerPathError):
    """Bad or missing input, with the offending field names."""

    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, fields: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.fields = list(fields or [])

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        if self.fields:
            data["fields"] = self.fields
        return data


class AuthenticationError(CareerPathError):
    """Missing or invalid credentials or session token."""

    default_message = "Unauthorized"


class PermissionDeniedError(CareerPathError):
    """Actor lacks the required role or does not own the entity."""

    default_message = "Forbidden"


class NotFoundError(CareerPathError):
    """Referenced entity does not exist."""

    default_message = "Not found"


class ConflictError(CareerPathError):
    """A unique constraint was violated."""

    default_message = "Already exists"


class PersistenceError(CareerPathError):
    """A storage operation failed."""

    default_message = "Server error"
