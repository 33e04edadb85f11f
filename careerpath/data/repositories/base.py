"""
Base repository class providing common CRUD operations.

All entity-specific repositories inherit from this base class. Every
operation is a single MongoDB statement; PyMongo failures are translated
into CareerPath errors so callers never see driver exceptions.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, Optional, TypeVar

from bson import ObjectId
from pydantic import ValidationError as PydanticValidationError
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from careerpath.data.database import DatabaseManager
from careerpath.data.models.base import BaseDocument, parse_object_id
from careerpath.utils.exceptions import ConflictError, PersistenceError
from careerpath.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)

# Newest first; _id breaks ties between documents created in the same instant
DEFAULT_SORT: list[tuple[str, int]] = [("created_at", DESCENDING), ("_id", DESCENDING)]


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing common database operations.

    Subclasses must define the collection name and model class.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db_manager = db_manager

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _get_collection(self) -> Collection:
        return self._db_manager.get_sync_collection(self.collection_name)

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        """Translate driver errors raised by ``operation``."""
        try:
            yield
        except DuplicateKeyError as e:
            logger.warning(f"Duplicate key on {self.collection_name}.{operation}")
            raise ConflictError(f"Duplicate {self.collection_name} entry") from e
        except PyMongoError as e:
            logger.error(f"{self.collection_name}.{operation} failed: {e}")
            raise PersistenceError() from e

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        """Convert MongoDB document to Pydantic model."""
        if document is None:
            return None
        try:
            return self.model_class.model_validate(document)
        except PydanticValidationError as e:
            logger.error(f"Unreadable {self.collection_name} document {document.get('_id')}: {e}")
            raise PersistenceError() from e

    def _to_models(self, documents: list[dict[str, Any]]) -> list[T]:
        """Convert list of MongoDB documents to Pydantic models."""
        return [self._to_model(doc) for doc in documents if doc is not None]

    def _to_document(self, model: T) -> dict[str, Any]:
        """Convert Pydantic model to MongoDB document."""
        return model.model_dump_mongo()

    @staticmethod
    def _to_object_id(id_value: str | ObjectId) -> Optional[ObjectId]:
        """Convert to ObjectId; malformed ids yield None."""
        try:
            return parse_object_id(id_value)
        except ValueError:
            return None

    # -------------------------------------------------------------------------
    # CRUD Operations
    # -------------------------------------------------------------------------

    def create(self, model: T) -> T:
        """Insert a new document and set its id on the model."""
        document = self._to_document(model)
        with self._guard("create"):
            result: InsertOneResult = self._get_collection().insert_one(document)
        model.id = result.inserted_id
        logger.debug(f"Created {self.collection_name} document: {result.inserted_id}")
        return model

    def get_by_id(self, id_value: str | ObjectId) -> Optional[T]:
        """Get a document by its ID; malformed ids are treated as missing."""
        object_id = self._to_object_id(id_value)
        if object_id is None:
            return None
        with self._guard("get_by_id"):
            document = self._get_collection().find_one({"_id": object_id})
        return self._to_model(document)

    def find(
        self,
        query: dict[str, Any],
        skip: int = 0,
        limit: int = 0,
        sort: Optional[list[tuple[str, int]]] = None,
    ) -> list[T]:
        """Find documents matching a query, newest first by default. limit=0 means no limit."""
        with self._guard("find"):
            cursor = (
                self._get_collection()
                .find(query)
                .sort(sort or DEFAULT_SORT)
                .skip(skip)
                .limit(limit)
            )
            documents = list(cursor)
        return self._to_models(documents)

    def find_one(self, query: dict[str, Any]) -> Optional[T]:
        """Find a single document matching a query."""
        with self._guard("find_one"):
            document = self._get_collection().find_one(query)
        return self._to_model(document)

    def list_all(self) -> list[T]:
        """All documents, newest first."""
        return self.find({})

    def update(self, id_value: str | ObjectId, update_data: dict[str, Any]) -> bool:
        """Set fields on a document. Returns whether a document matched."""
        object_id = self._to_object_id(id_value)
        if object_id is None:
            return False
        with self._guard("update"):
            result: UpdateResult = self._get_collection().update_one(
                {"_id": object_id},
                {"$set": update_data},
            )
        if result.matched_count > 0:
            logger.debug(f"Updated {self.collection_name} document: {id_value}")
            return True
        return False

    def delete(self, id_value: str | ObjectId) -> bool:
        """Delete a document by ID."""
        object_id = self._to_object_id(id_value)
        if object_id is None:
            return False
        with self._guard("delete"):
            result: DeleteResult = self._get_collection().delete_one({"_id": object_id})
        if result.deleted_count > 0:
            logger.debug(f"Deleted {self.collection_name} document: {id_value}")
            return True
        return False

    def count(self, query: Optional[dict[str, Any]] = None) -> int:
        """Count documents matching a query."""
        with self._guard("count"):
            return self._get_collection().count_documents(query or {})

    def exists(self, query: dict[str, Any]) -> bool:
        """Check if any document matches the query."""
        with self._guard("exists"):
            return self._get_collection().count_documents(query, limit=1) > 0
