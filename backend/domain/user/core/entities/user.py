"""User entity - aggregate root."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Any

from domain.user.core.value_objects.user_id import UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """User aggregate root.

    Represents a registered account of the travel planner.
    Primary identifier is user_id; login_id is what the person types to log in.

    Invariants:
    - user_id is generated and immutable
    - login_id and email are unique and not changed after creation
    - display_name is unique (enforced by the repository)
    - password_hash is never empty and never a plaintext password
    - updated_at cannot be before created_at

    Examples:
        >>> user = User.create("kim01", "$2b$12$hash", "Kim", "kim@x.com")
        >>> user.profile_image is None
        True

        >>> user.rename("Kimmy")
        >>> user.display_name
        'Kimmy'
    """

    user_id: UserId
    login_id: str
    password_hash: str
    display_name: str
    email: str
    created_at: datetime
    updated_at: datetime
    profile_image: Optional[str] = None
    _events: List[Any] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.password_hash:
            raise ValueError("password_hash cannot be empty")

        if self.updated_at < self.created_at:
            raise ValueError(
                "updated_at cannot be before created_at: "
                f"{self.updated_at} < {self.created_at}"
            )

    @staticmethod
    def create(
        login_id: str,
        password_hash: str,
        display_name: str,
        email: str,
        profile_image: Optional[str] = None,
    ) -> "User":
        """Factory method to create a new account.

        Args:
            login_id: Unique login identifier
            password_hash: Output of the password hasher
            display_name: Initial nickname
            email: Contact address
            profile_image: Optional image URL; blank values are ignored

        Returns:
            New User instance with UserRegistered event

        Examples:
            >>> user = User.create("kim01", "hash", "Kim", "kim@x.com", "   ")
            >>> user.profile_image is None
            True
            >>> len(user.collect_events())
            1
        """
        from domain.user.core.events.user_registered import UserRegistered

        now = _utcnow()
        user = User(
            user_id=UserId.generate(),
            login_id=login_id,
            password_hash=password_hash,
            display_name=display_name,
            email=email,
            created_at=now,
            updated_at=now,
        )

        if profile_image is not None and profile_image.strip():
            user.profile_image = profile_image

        user._add_event(
            UserRegistered(
                user_id=user.user_id,
                login_id=login_id,
                display_name=display_name,
                registered_at=now,
            )
        )

        return user

    def rename(self, new_display_name: str) -> None:
        """Change the display name.

        Uniqueness is checked by the caller and enforced by the repository.

        Args:
            new_display_name: New nickname
        """
        from domain.user.core.events.nickname_changed import UserNicknameChanged

        old_display_name = self.display_name
        self.display_name = new_display_name
        self.updated_at = _utcnow()

        self._add_event(
            UserNicknameChanged(
                user_id=self.user_id,
                old_nickname=old_display_name,
                new_nickname=new_display_name,
                changed_at=self.updated_at,
            )
        )

    def change_password(self, new_password_hash: str) -> None:
        """Replace the stored password hash.

        Args:
            new_password_hash: Hash of the new password

        Raises:
            ValueError: If the hash is empty
        """
        from domain.user.core.events.password_changed import UserPasswordChanged

        if not new_password_hash:
            raise ValueError("password_hash cannot be empty")

        self.password_hash = new_password_hash
        self.updated_at = _utcnow()

        self._add_event(UserPasswordChanged(user_id=self.user_id, changed_at=self.updated_at))

    def change_profile_image(self, profile_image: str) -> None:
        """Replace the profile image reference.

        Args:
            profile_image: New image URL
        """
        from domain.user.core.events.profile_image_changed import UserProfileImageChanged

        old_profile_image = self.profile_image
        self.profile_image = profile_image
        self.updated_at = _utcnow()

        self._add_event(
            UserProfileImageChanged(
                user_id=self.user_id,
                old_profile_image=old_profile_image,
                new_profile_image=profile_image,
                changed_at=self.updated_at,
            )
        )

    def _add_event(self, event: Any) -> None:
        """Add domain event to internal list."""
        self._events.append(event)

    def collect_events(self) -> List[Any]:
        """Collect and clear domain events.

        Returns:
            List of domain events that occurred

        Examples:
            >>> user = User.create("kim01", "hash", "Kim", "kim@x.com")
            >>> events = user.collect_events()
            >>> len(events) > 0
            True
            >>> user.collect_events()  # Events cleared after collection
            []
        """
        events = self._events.copy()
        self._events.clear()
        return events

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
