"""
Database connection manager for CareerPath.

Provides MongoDB connection management with a synchronous (PyMongo) client
for request handling and an asynchronous (Motor) client for maintenance work
such as index creation.

A manager is constructed explicitly by the caller and handed to the
repositories; there is no process-wide instance.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError

from careerpath.utils.config import DatabaseSettings
from careerpath.utils.constants import JOBS_COLLECTION, USERS_COLLECTION
from careerpath.utils.exceptions import PersistenceError
from careerpath.utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """
    Manages MongoDB database connections.

    Clients are created lazily on first use and reused until closed.
    """

    def __init__(self, settings: DatabaseSettings) -> None:
        self._settings = settings
        self._db_name = settings.name
        self._uri = self._build_uri()
        self._sync_client: Optional[MongoClient] = None
        self._async_client: Optional[AsyncIOMotorClient] = None

    def _build_uri(self) -> str:
        """
        Build MongoDB connection URI from settings.

        Security: URL-encodes credentials to prevent injection attacks.
        """
        db_settings = self._settings

        host = db_settings.host.strip()
        if not host or any(c in host for c in [";", "&", "|", "$", "`"]):
            raise ValueError(f"Invalid database host: {host}")

        auth = ""
        if db_settings.username and db_settings.password:
            encoded_user = quote_plus(db_settings.username)
            encoded_pass = quote_plus(db_settings.password)
            auth = f"{encoded_user}:{encoded_pass}@"

        return f"mongodb://{auth}{host}:{db_settings.port}"

    @property
    def database_name(self) -> str:
        return self._db_name

    # -------------------------------------------------------------------------
    # Synchronous Client
    # -------------------------------------------------------------------------

    def get_sync_client(self) -> MongoClient:
        """Get or create synchronous MongoDB client."""
        if self._sync_client is None:
            logger.info("Creating synchronous MongoDB client")
            self._sync_client = MongoClient(
                self._uri,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
                connectTimeoutMS=self._settings.server_selection_timeout_ms,
                maxPoolSize=self._settings.max_pool_size,
            )
        return self._sync_client

    def get_sync_database(self) -> Database:
        """Get synchronous database instance."""
        return self.get_sync_client()[self._db_name]

    def get_sync_collection(self, collection_name: str) -> Any:
        """Get a synchronous collection by name."""
        return self.get_sync_database()[collection_name]

    def check_sync_connection(self) -> bool:
        """Check if synchronous connection is healthy."""
        try:
            self.get_sync_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"Sync connection check failed: {e}")
            self.close_sync()
            return False

    # -------------------------------------------------------------------------
    # Asynchronous Client
    # -------------------------------------------------------------------------

    def get_async_client(self) -> AsyncIOMotorClient:
        """Get or create asynchronous MongoDB client."""
        if self._async_client is None:
            logger.info("Creating asynchronous MongoDB client")
            self._async_client = AsyncIOMotorClient(
                self._uri,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
                connectTimeoutMS=self._settings.server_selection_timeout_ms,
                maxPoolSize=self._settings.max_pool_size,
            )
        return self._async_client

    def get_async_database(self) -> AsyncIOMotorDatabase:
        """Get asynchronous database instance."""
        return self.get_async_client()[self._db_name]

    def get_async_collection(self, collection_name: str) -> Any:
        """Get an asynchronous collection by name."""
        return self.get_async_database()[collection_name]

    # -------------------------------------------------------------------------
    # Lifecycle Management
    # -------------------------------------------------------------------------

    def close_sync(self) -> None:
        """Close synchronous client connection."""
        if self._sync_client:
            logger.info("Closing synchronous MongoDB client")
            self._sync_client.close()
            self._sync_client = None

    def close_async(self) -> None:
        """Close asynchronous client connection."""
        if self._async_client:
            logger.info("Closing asynchronous MongoDB client")
            self._async_client.close()
            self._async_client = None

    def close_all(self) -> None:
        """Close all database connections."""
        self.close_sync()
        self.close_async()

    # -------------------------------------------------------------------------
    # Index Management
    # -------------------------------------------------------------------------

    async def ensure_indexes(self) -> None:
        """Create indexes for all collections."""
        logger.info("Ensuring database indexes")

        try:
            users = self.get_async_collection(USERS_COLLECTION)
            await users.create_index("email", unique=True)
            await users.create_index("role")
            await users.create_index([("created_at", DESCENDING)])

            jobs = self.get_async_collection(JOBS_COLLECTION)
            await jobs.create_index("owner_user_id")
            await jobs.create_index("work_type")
            await jobs.create_index([("created_at", DESCENDING), ("_id", DESCENDING)])
        except PyMongoError as e:
            logger.error(f"Index creation failed: {e}")
            raise PersistenceError("Could not create database indexes") from e

        logger.info("Database indexes created successfully")
