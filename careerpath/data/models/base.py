"""
Shared pydantic bases for the documents CareerPath keeps in MongoDB.

A stored document carries its ObjectId as ``id`` in Python and ``_id`` in
the collection. ObjectIds survive ``model_dump()`` untouched, so dumps can
go straight back to PyMongo, and become hex strings only in JSON output.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_object_id(value: Any) -> ObjectId:
    """Accept an ObjectId or its 24-character hex form."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise ValueError(f"Invalid ObjectId: {value!r}")


PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(parse_object_id),
    PlainSerializer(str, return_type=str, when_used="json"),
]


class BaseDocument(BaseModel):
    """A top-level document with an ObjectId and a creation time."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        use_enum_values=True,
    )

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    created_at: datetime = Field(default_factory=utc_now)

    def model_dump_mongo(self) -> dict[str, Any]:
        """Document ready for insert_one; unset fields, ``_id`` included, are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EmbeddedModel(BaseModel):
    """Subdocument stored inside another document."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
