"""MongoDB connection and management for CareerPilot.

``MongoDB`` owns the motor client for the process; ``MongoDBOperations``
wraps the handful of collection operations the services need and turns driver
failures into ``DatabaseError``.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING, DESCENDING, IndexModel, errors

from careerpilot.core.config import get_settings
from careerpilot.utils.constants import Collections
from careerpilot.utils.datetime_utils import utc_now
from careerpilot.utils.exceptions import DatabaseError
from careerpilot.utils.logger import get_database_logger

settings = get_settings()
logger = get_database_logger()


# Index definitions per collection, created at startup
COLLECTION_INDEXES: Dict[str, List[IndexModel]] = {
    Collections.PROFILES: [
        IndexModel([("user_id", ASCENDING)], unique=True, name="by_user_id"),
    ],
    Collections.ASSESSMENTS: [
        IndexModel([("user_id", ASCENDING), ("created_at", DESCENDING)], name="by_user_id"),
        IndexModel([("created_at", DESCENDING)], name="by_created_at"),
    ],
    Collections.MENTORSHIP_SESSIONS: [
        IndexModel([("user_id", ASCENDING), ("session_date", DESCENDING)], name="by_user_id"),
    ],
    Collections.SAVED_CAREERS: [
        IndexModel([("user_id", ASCENDING)], name="by_user_id"),
        IndexModel(
            [("user_id", ASCENDING), ("career_path_id", ASCENDING)],
            unique=True,
            name="by_user_id_and_career_path_id",
        ),
    ],
    Collections.GOALS: [
        IndexModel([("user_id", ASCENDING)], name="by_user_id"),
    ],
    Collections.FEEDBACK: [
        IndexModel([("user_id", ASCENDING), ("created_at", DESCENDING)], name="by_user_id"),
        IndexModel([("category", ASCENDING)], name="by_category"),
    ],
}


class MongoDB:
    """MongoDB connection manager."""

    _client: Optional[AsyncIOMotorClient] = None
    _database: Optional[AsyncIOMotorDatabase] = None
    _initialized: bool = False
    _lock: asyncio.Lock = asyncio.Lock()

    @classmethod
    async def connect(
        cls,
        url: Optional[str] = None,
        db_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Connect to MongoDB with connection pooling.

        Args:
            url: MongoDB connection URL
            db_name: Database name
            **kwargs: Pool overrides (max_pool_size, min_pool_size, connect_timeout_ms)
        """
        async with cls._lock:
            if cls._initialized:
                logger.warning("MongoDB already connected")
                return

            connection_url = url or settings.get_database_url()
            database_name = db_name or settings.MONGODB_DB_NAME

            connection_params = {
                "maxPoolSize": kwargs.get("max_pool_size", settings.MONGODB_MAX_POOL_SIZE),
                "minPoolSize": kwargs.get("min_pool_size", settings.MONGODB_MIN_POOL_SIZE),
                "connectTimeoutMS": kwargs.get("connect_timeout_ms", settings.MONGODB_CONNECT_TIMEOUT_MS),
                "serverSelectionTimeoutMS": kwargs.get("server_selection_timeout_ms", 5000),
                "retryWrites": True,
                "retryReads": True,
                "w": "majority",
            }

            try:
                cls._client = AsyncIOMotorClient(connection_url, **connection_params)
                cls._database = cls._client[database_name]
                await cls._client.admin.command("ping")
            except Exception as e:
                cls._client = None
                cls._database = None
                logger.error(f"MongoDB connection failed: {str(e)}", exc_info=True)
                raise DatabaseError("MongoDB connection failed", operation="connect", cause=e)

            cls._initialized = True
            logger.info(
                "MongoDB connected successfully",
                extra={"database": database_name, "pool_size": connection_params["maxPoolSize"]}
            )

    @classmethod
    async def disconnect(cls) -> None:
        """Disconnect from MongoDB."""
        async with cls._lock:
            if cls._client is not None:
                cls._client.close()
                cls._client = None
                cls._database = None
                cls._initialized = False
                logger.info("MongoDB disconnected")

    @classmethod
    async def ping(cls) -> bool:
        """Check if MongoDB connection is alive."""
        if not cls._initialized or cls._client is None:
            return False

        try:
            await cls._client.admin.command("ping")
            return True
        except errors.PyMongoError as e:
            logger.error(f"MongoDB ping failed: {str(e)}")
            return False

    @classmethod
    def get_database(cls) -> Optional[AsyncIOMotorDatabase]:
        return cls._database

    @classmethod
    def get_collection(cls, name: str) -> AsyncIOMotorCollection:
        """Get a collection by name.

        Raises:
            DatabaseError: If the client has not been connected
        """
        if cls._database is None:
            raise DatabaseError("MongoDB not connected", collection=name)
        return cls._database[name]

    @classmethod
    async def create_indexes(cls) -> Dict[str, List[str]]:
        """Create the indexes declared in ``COLLECTION_INDEXES``.

        Returns:
            Mapping of collection name to created index names
        """
        created: Dict[str, List[str]] = {}
        for collection_name, indexes in COLLECTION_INDEXES.items():
            collection = cls.get_collection(collection_name)
            try:
                created[collection_name] = await collection.create_indexes(indexes)
            except errors.PyMongoError as e:
                logger.error(
                    f"Failed to create indexes on {collection_name}: {str(e)}",
                    exc_info=True
                )
                created[collection_name] = []
        logger.info("Database indexes ensured", extra={"indexes": created})
        return created


class MongoDBOperations:
    """Helper class for common MongoDB operations."""

    @staticmethod
    async def find_one(
        collection_name: str,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Find the first document matching a filter."""
        collection = MongoDB.get_collection(collection_name)
        try:
            return await collection.find_one(filter_dict, sort=sort)
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error finding document: {str(e)}",
                operation="find_one",
                collection=collection_name,
                cause=e,
            )

    @staticmethod
    async def find_one_by_id(
        collection_name: str,
        document_id: Any,
    ) -> Optional[Dict[str, Any]]:
        """Find a document by its ID; malformed ids simply match nothing."""
        if isinstance(document_id, str):
            if not ObjectId.is_valid(document_id):
                return None
            document_id = ObjectId(document_id)
        return await MongoDBOperations.find_one(collection_name, {"_id": document_id})

    @staticmethod
    async def find_many(
        collection_name: str,
        filter_dict: Optional[Dict[str, Any]] = None,
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """Find multiple documents.

        Args:
            collection_name: Name of the collection
            filter_dict: Query filter
            sort: Sort specification
            limit: Maximum number of documents to return (0 for all)

        Returns:
            List of documents
        """
        collection = MongoDB.get_collection(collection_name)
        try:
            cursor = collection.find(filter_dict or {})
            if sort:
                cursor = cursor.sort(sort)
            if limit > 0:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=None)
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error finding documents: {str(e)}",
                operation="find",
                collection=collection_name,
                cause=e,
            )

    @staticmethod
    async def count_documents(
        collection_name: str,
        filter_dict: Optional[Dict[str, Any]] = None,
    ) -> int:
        collection = MongoDB.get_collection(collection_name)
        try:
            return await collection.count_documents(filter_dict or {})
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error counting documents: {str(e)}",
                operation="count",
                collection=collection_name,
                cause=e,
            )

    @staticmethod
    async def insert_one(
        collection_name: str,
        document: Dict[str, Any],
    ) -> str:
        """Insert a single document.

        Returns:
            Inserted document ID
        """
        collection = MongoDB.get_collection(collection_name)
        document.setdefault("created_at", utc_now())
        document.setdefault("updated_at", utc_now())
        try:
            result = await collection.insert_one(document)
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error inserting document: {str(e)}",
                operation="insert",
                collection=collection_name,
                cause=e,
            )
        return str(result.inserted_id)

    @staticmethod
    async def insert_many(
        collection_name: str,
        documents: List[Dict[str, Any]],
    ) -> List[str]:
        if not documents:
            return []
        collection = MongoDB.get_collection(collection_name)
        now = utc_now()
        for doc in documents:
            doc.setdefault("created_at", now)
            doc.setdefault("updated_at", now)
        try:
            result = await collection.insert_many(documents)
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error inserting documents: {str(e)}",
                operation="insert_many",
                collection=collection_name,
                cause=e,
            )
        return [str(id_) for id_ in result.inserted_ids]

    @staticmethod
    async def update_one(
        collection_name: str,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> bool:
        """Update a single document, stamping ``updated_at``.

        Returns:
            bool: True if a document matched (or was upserted)
        """
        collection = MongoDB.get_collection(collection_name)
        update_dict.setdefault("$set", {})["updated_at"] = utc_now()
        try:
            result = await collection.update_one(filter_dict, update_dict, upsert=upsert)
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error updating document: {str(e)}",
                operation="update",
                collection=collection_name,
                cause=e,
            )
        return result.matched_count > 0 or result.upserted_id is not None

    @staticmethod
    async def delete_one(
        collection_name: str,
        filter_dict: Dict[str, Any],
    ) -> bool:
        collection = MongoDB.get_collection(collection_name)
        try:
            result = await collection.delete_one(filter_dict)
        except errors.PyMongoError as e:
            raise DatabaseError(
                f"Error deleting document: {str(e)}",
                operation="delete",
                collection=collection_name,
                cause=e,
            )
        return result.deleted_count > 0


async def get_database() -> Optional[AsyncIOMotorDatabase]:
    """Get the current database instance."""
    return MongoDB.get_database()


__all__ = [
    "COLLECTION_INDEXES",
    "MongoDB",
    "MongoDBOperations",
    "get_database",
]
