"""Base MongoDB repository with reusable patterns.

Provides common functionality for MongoDB repositories:
- Connection management
- Document mapping (domain <-> MongoDB)
- Multi-document transactions carried through a ContextVar
- Error handling and logging

Concrete MongoDB repositories inherit from MongoBaseRepository.
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Generic, Optional, TypeVar
import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorClientSession,
    AsyncIOMotorCollection,
)
from pymongo.errors import DuplicateKeyError

from infrastructure.config import get_mongodb_database, get_mongodb_uri


TEntity = TypeVar("TEntity")  # Domain entity type

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Transaction scope: every helper joins the session opened by
      transaction() in the current task, if any
    - Error handling with proper logging
    - Datetime handling (timezone-aware)

    Transactions require a replica set or sharded cluster.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient] = None,
        database_name: Optional[str] = None,
    ):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
            database_name: Database name (defaults to MONGODB_DATABASE)
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient = AsyncIOMotorClient(uri, tz_aware=True)
        else:
            self._client = client

        self._db = self._client[database_name or get_mongodb_database()]
        self._collection = self._db[self.collection_name]
        self._session: ContextVar[Optional[AsyncIOMotorClientSession]] = ContextVar(
            f"{self.__class__.__name__}_session", default=None
        )

        logger.info(
            f"Initialized {self.__class__.__name__} for collection '{self.collection_name}'"
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    @property
    def current_session(self) -> Optional[AsyncIOMotorClientSession]:
        """Session of the transaction open in this task, if any."""
        return self._session.get()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        Run the enclosed block in a multi-document transaction.

        Commits when the block exits normally, aborts when it raises.
        Nested calls reuse the outer transaction.
        """
        if self._session.get() is not None:
            yield
            return

        async with await self._client.start_session() as session:
            async with session.start_transaction():
                token = self._session.set(session)
                try:
                    yield
                finally:
                    self._session.reset(token)

    @staticmethod
    def ensure_utc(dt: datetime) -> datetime:
        """Attach UTC to naive datetimes read back from MongoDB."""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            doc: Optional[Dict[str, Any]] = await self._collection.find_one(
                filter_dict, session=self.current_session
            )
            return doc
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document.

        Duplicate key errors propagate unlogged so subclasses can translate
        them; other failures are logged and re-raised.
        """
        try:
            await self._collection.insert_one(document, session=self.current_session)
        except DuplicateKeyError:
            raise
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, error={e}")
            raise

    async def _update_one(self, filter_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> int:
        """
        Update single document.

        Returns:
            Number of documents matched (0 or 1)
        """
        try:
            result = await self._collection.update_one(
                filter_dict, update_dict, session=self.current_session
            )
            return int(result.matched_count)
        except DuplicateKeyError:
            raise
        except Exception as e:
            logger.error(
                f"Error in update_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _count(self, filter_dict: Dict[str, Any], limit: int = 0) -> int:
        """Count documents with error handling."""
        try:
            options: Dict[str, Any] = {"limit": limit} if limit > 0 else {}
            count = await self._collection.count_documents(
                filter_dict, session=self.current_session, **options
            )
            return int(count)
        except Exception as e:
            logger.error(
                f"Error in count: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")
