"""
User repository for CareerPath.

Stores account documents. Email addresses are unique; the unique index is
created by ``DatabaseManager.ensure_indexes``.
"""

from typing import Optional

from bson import ObjectId

from careerpath.data.models.user import User
from careerpath.utils.constants import USERS_COLLECTION
from careerpath.utils.exceptions import ConflictError

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user account documents."""

    @property
    def collection_name(self) -> str:
        return USERS_COLLECTION

    @property
    def model_class(self) -> type[User]:
        return User

    def create(self, model: User) -> User:
        """Insert a user; a taken email raises ConflictError."""
        try:
            return super().create(model)
        except ConflictError as e:
            raise ConflictError("Email already registered") from e

    def get_by_email(self, email: str) -> Optional[User]:
        """Look up a user by (case-insensitive) email."""
        return self.find_one({"email": email.strip().lower()})

    def email_exists(self, email: str) -> bool:
        return self.exists({"email": email.strip().lower()})

    def update_skills(self, id_value: str | ObjectId, skills: list[str]) -> bool:
        """Replace the stored skill list of a user."""
        return self.update(id_value, {"skills": list(skills)})
