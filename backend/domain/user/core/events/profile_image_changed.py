"""UserProfileImageChanged domain event."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserProfileImageChanged:
    """Domain event: profile image reference was replaced.

    Attributes:
        user_id: Internal user identifier
        old_profile_image: Previous image URL (None if unset)
        new_profile_image: New image URL
        changed_at: Timestamp of change
    """

    user_id: UserId
    old_profile_image: Optional[str]
    new_profile_image: str
    changed_at: datetime
