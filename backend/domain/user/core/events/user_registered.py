"""UserRegistered domain event."""

from dataclasses import dataclass
from datetime import datetime

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserRegistered:
    """Domain event: a new account was created by signup.

    Attributes:
        user_id: Internal user identifier
        login_id: Login identifier chosen at signup
        display_name: Initial nickname
        registered_at: Timestamp of account creation

    Examples:
        >>> from datetime import datetime, timezone
        >>> event = UserRegistered(
        ...     user_id=UserId.generate(),
        ...     login_id="kim01",
        ...     display_name="Kim",
        ...     registered_at=datetime.now(timezone.utc),
        ... )
        >>> event.login_id
        'kim01'
    """

    user_id: UserId
    login_id: str
    display_name: str
    registered_at: datetime
