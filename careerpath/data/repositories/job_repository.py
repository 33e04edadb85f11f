"""
Job repository for CareerPath.

Provides data access operations for job posting documents.
"""

from bson import ObjectId

from careerpath.data.models.job import Job
from careerpath.utils.constants import JOBS_COLLECTION

from .base import BaseRepository


class JobRepository(BaseRepository[Job]):
    """Repository for job posting document operations."""

    @property
    def collection_name(self) -> str:
        return JOBS_COLLECTION

    @property
    def model_class(self) -> type[Job]:
        return Job

    def get_by_owner(self, owner_id: str | ObjectId) -> list[Job]:
        """Jobs posted by one employer, newest first."""
        object_id = self._to_object_id(owner_id)
        if object_id is None:
            return []
        return self.find({"owner_user_id": object_id})
