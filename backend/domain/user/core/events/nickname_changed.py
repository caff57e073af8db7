"""UserNicknameChanged domain event."""

from dataclasses import dataclass
from datetime import datetime

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserNicknameChanged:
    """Domain event: user display name was changed.

    Attributes:
        user_id: Internal user identifier
        old_nickname: Previous display name
        new_nickname: New display name
        changed_at: Timestamp of change
    """

    user_id: UserId
    old_nickname: str
    new_nickname: str
    changed_at: datetime
