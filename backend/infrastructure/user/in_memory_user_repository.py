"""In-memory User Repository for testing and local runs."""

import asyncio
import copy
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UniqueConstraintError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


logger = logging.getLogger(__name__)

UNIQUE_FIELDS = ("login_id", "email", "display_name")


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores private copies of users keyed by user_id, so callers only change
    stored state through save()/update(). login_id, email and display_name
    are kept unique the same way a database unique index would.

    Transactions are serialised with a single asyncio.Lock and roll back to
    a snapshot when the block raises.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = User.create("kim01", "hash", "Kim", "kim@x.com")
        >>> await repo.save(user)
        >>> found = await repo.find_by_login_id("kim01")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Serialise a read-check-write sequence and roll back on error."""
        async with self._lock:
            snapshot = dict(self._users)
            try:
                yield
            except BaseException:
                self._users = snapshot
                logger.debug("In-memory transaction rolled back")
                raise

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by internal user_id."""
        return self._copy(self._users.get(str(user_id)))

    async def find_by_login_id(self, login_id: str) -> Optional[User]:
        """Find user by login identifier."""
        return self._copy(self._find_by("login_id", login_id))

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address."""
        return self._copy(self._find_by("email", email))

    async def exists_by_display_name(self, display_name: str) -> bool:
        """Check if any user has this display name."""
        return self._find_by("display_name", display_name) is not None

    async def save(self, user: User) -> None:
        """Insert a new user.

        Raises:
            UniqueConstraintError: If user_id or a unique attribute is taken
        """
        key = str(user.user_id)
        if key in self._users:
            raise UniqueConstraintError("user_id", key)

        self._check_unique(user)
        self._users[key] = self._copy(user)

    async def update(self, user: User) -> None:
        """Replace a stored user.

        Raises:
            UserNotFoundError: If user doesn't exist
            UniqueConstraintError: If a unique attribute collides with another user
        """
        key = str(user.user_id)
        if key not in self._users:
            raise UserNotFoundError(key)

        self._check_unique(user)
        self._users[key] = self._copy(user)

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)

    def _find_by(self, field: str, value: str) -> Optional[User]:
        for user in self._users.values():
            if getattr(user, field) == value:
                return user
        return None

    def _check_unique(self, user: User) -> None:
        for field in UNIQUE_FIELDS:
            value = getattr(user, field)
            other = self._find_by(field, value)
            if other is not None and other.user_id != user.user_id:
                raise UniqueConstraintError(field, value)

    @staticmethod
    def _copy(user: Optional[User]) -> Optional[User]:
        if user is None:
            return None
        stored = copy.copy(user)
        # Pending events belong to the caller's instance, not to the store
        stored._events = []
        return stored
