"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Database handle management
- Document mapping (domain <-> MongoDB)
- Sequential integer ids via a counters collection
- Error handling and logging

All concrete MongoDB repositories should inherit from MongoBaseRepository.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

COUNTERS_COLLECTION = "counters"

logger = logging.getLogger(__name__)


def create_database() -> Database:
    """
    Open the configured database.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )

    client: MongoClient = MongoClient(uri, tz_aware=True)
    return client[get_mongodb_database()]


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Any mapping that supports ``database[name]`` works as the database
    handle, which keeps the repositories testable without a server.
    """

    def __init__(self, database: Optional[Database] = None):
        """
        Initialize repository.

        Args:
            database: pymongo Database (if None, opened from config)
        """
        self._db = database if database is not None else create_database()
        self._collection: Collection = self._db[self.collection_name]
        self._counters: Collection = self._db[COUNTERS_COLLECTION]

        logger.info(
            f"Initialized {self.__class__.__name__} for collection '{self.collection_name}'"
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert a persisted domain entity to a MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    def ensure_indexes(self) -> None:
        """Create the collection's indexes. No-op unless overridden."""

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> Collection:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def date_to_str(value: date) -> str:
        """ISO date string; lexicographic order equals date order."""
        return value.isoformat()

    @staticmethod
    def str_to_date(value: str) -> date:
        return date.fromisoformat(value)

    @staticmethod
    def ensure_utc(dt: datetime) -> datetime:
        """Attach UTC to naive datetimes read from a non tz-aware client."""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    def _next_id(self) -> int:
        """Next value of this collection's sequence (starts at 1)."""
        try:
            counter = self._counters.find_one_and_update(
                {"_id": self.collection_name},
                {"$inc": {"seq": 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(f"Error in next_id: collection={self.collection_name}, error={e}")
            raise
        return int(counter["seq"])

    def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return self._collection.find_one(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            return list(cursor)
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    def _replace_one(self, document: Dict[str, Any]) -> None:
        """
        Upsert a document by its _id.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            self._collection.replace_one({"_id": document["_id"]}, document, upsert=True)
        except Exception as e:
            logger.error(f"Error in replace_one: collection={self.collection_name}, error={e}")
            raise

    def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)
        """
        try:
            result = self._collection.delete_one(filter_dict)
            return int(result.deleted_count)
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    def _count(self, filter_dict: Dict[str, Any], limit: int = 0) -> int:
        """Count documents with error handling."""
        try:
            return int(self._collection.count_documents(filter_dict, limit=limit))
        except Exception as e:
            logger.error(
                f"Error in count: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
