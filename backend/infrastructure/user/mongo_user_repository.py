"""MongoDB User Repository implementation."""

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UniqueConstraintError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


logger = logging.getLogger(__name__)

# (field, index name); each backed by a unique index
UNIQUE_INDEXES = (
    ("user_id", "idx_user_id_unique"),
    ("login_id", "idx_login_id_unique"),
    ("email", "idx_email_unique"),
    ("display_name", "idx_display_name_unique"),
)


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document layout:
    - user_id: Internal UUID (unique)
    - login_id: Login identifier (unique)
    - password_hash: bcrypt digest
    - display_name: Nickname (unique)
    - email: Contact address (unique)
    - profile_image: Optional image URL
    - created_at / updated_at: UTC timestamps

    Unique indexes are the final arbiter for concurrent signups and
    nickname changes; call ensure_indexes() once at startup (or run
    scripts/setup_mongodb_indexes.py).

    Examples:
        >>> repo = MongoUserRepository(client)
        >>> await repo.ensure_indexes()
        >>> async with repo.transaction():
        ...     await repo.save(User.create("kim01", "hash", "Kim", "kim@x.com"))
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient] = None,
        database_name: Optional[str] = None,
    ) -> None:
        super().__init__(client, database_name)

    @property
    def collection_name(self) -> str:
        return "users"

    async def ensure_indexes(self) -> None:
        """Create the unique indexes backing identity constraints."""
        for field, name in UNIQUE_INDEXES:
            await self.collection.create_index([(field, ASCENDING)], name=name, unique=True)
        logger.info("User indexes ensured", extra={"collection": self.collection_name})

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_user({"user_id": str(user_id)})

    async def find_by_login_id(self, login_id: str) -> Optional[User]:
        return await self._find_user({"login_id": login_id})

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_user({"email": email})

    async def exists_by_display_name(self, display_name: str) -> bool:
        return await self._count({"display_name": display_name}, limit=1) > 0

    async def save(self, user: User) -> None:
        """Insert a new user document.

        Raises:
            UniqueConstraintError: If a unique index rejects the insert
        """
        try:
            await self._insert_one(self.to_document(user))
        except DuplicateKeyError as e:
            raise self._unique_error(e, user) from e

    async def update(self, user: User) -> None:
        """Update mutable fields of an existing user.

        Raises:
            UserNotFoundError: If no document has this user_id
            UniqueConstraintError: If the new display_name is taken
        """
        changes = {
            "password_hash": user.password_hash,
            "display_name": user.display_name,
            "profile_image": user.profile_image,
            "updated_at": user.updated_at,
        }
        try:
            matched = await self._update_one({"user_id": str(user.user_id)}, {"$set": changes})
        except DuplicateKeyError as e:
            raise self._unique_error(e, user) from e

        if matched == 0:
            raise UserNotFoundError(str(user.user_id))

    def to_document(self, entity: User) -> Dict[str, Any]:
        return {
            "user_id": str(entity.user_id),
            "login_id": entity.login_id,
            "password_hash": entity.password_hash,
            "display_name": entity.display_name,
            "email": entity.email,
            "profile_image": entity.profile_image,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        try:
            return User(
                user_id=UserId(doc["user_id"]),
                login_id=doc["login_id"],
                password_hash=doc["password_hash"],
                display_name=doc["display_name"],
                email=doc["email"],
                created_at=self.ensure_utc(doc["created_at"]),
                updated_at=self.ensure_utc(doc["updated_at"]),
                profile_image=doc.get("profile_image"),
            )
        except KeyError as e:
            raise ValueError(f"User document missing field: {e.args[0]}") from e

    async def _find_user(self, filter_dict: Dict[str, Any]) -> Optional[User]:
        document = await self._find_one(filter_dict)
        if not document:
            return None
        return self.from_document(document)

    @staticmethod
    def _unique_error(error: DuplicateKeyError, user: User) -> UniqueConstraintError:
        """Translate a duplicate key error into the violated field."""
        details = error.details or {}
        key_pattern = details.get("keyPattern") or {}
        field = next(iter(key_pattern), None)

        if field is None:
            # Older servers only report the index name in the message
            message = str(error)
            field = next(
                (name for name, index in UNIQUE_INDEXES if index in message),
                "unknown",
            )

        value = str(getattr(user, field, "")) if field != "unknown" else ""
        return UniqueConstraintError(field, value)
