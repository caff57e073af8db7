"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Lookups return None for missing users and never raise for "not found".

    Uniqueness of login_id, email and display_name is enforced by the store
    itself: save() and update() raise UniqueConstraintError when a write would
    break one of them, even if the caller pre-checked.

    Examples:
        >>> async with repository.transaction():
        ...     if await repository.find_by_email(email) is None:
        ...         await repository.save(user)
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Open an atomic scope for a read-check-write sequence.

        Changes made inside the scope are committed when the block exits
        normally and discarded when it raises.

        Examples:
            >>> async with repository.transaction():
            ...     user = await repository.find_by_id(user_id)
            ...     user.rename("Kim")
            ...     await repository.update(user)
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by internal ID.

        Args:
            user_id: Internal user identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_login_id(self, login_id: str) -> Optional[User]:
        """Find user by login identifier.

        Args:
            login_id: Login identifier chosen at signup

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address.

        Args:
            email: Contact address

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_display_name(self, display_name: str) -> bool:
        """Check if any user has this display name.

        Args:
            display_name: Nickname to look up (exact match)

        Returns:
            True if a user has it, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persist a new user.

        Args:
            user: User entity to insert

        Raises:
            UniqueConstraintError: If user_id, login_id, email or display_name
                is already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes of an existing user.

        Args:
            user: User entity with modified state

        Raises:
            UserNotFoundError: If the user does not exist
            UniqueConstraintError: If the new display_name is already taken
        """
        pass
