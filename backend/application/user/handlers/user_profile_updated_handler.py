"""Profile change event handler."""

from dataclasses import dataclass
import logging
from typing import Union

from domain.user.core.events.nickname_changed import UserNicknameChanged
from domain.user.core.events.password_changed import UserPasswordChanged
from domain.user.core.events.profile_image_changed import UserProfileImageChanged


logger = logging.getLogger(__name__)

ProfileEvent = Union[UserNicknameChanged, UserProfileImageChanged, UserPasswordChanged]


@dataclass
class UserProfileUpdatedHandler:
    """Handler for account change events.

    Writes an audit line per change. Password events are logged without
    any credential material.
    """

    async def handle(self, event: ProfileEvent) -> None:
        """Handle a profile change event.

        Args:
            event: Nickname, profile image or password change event
        """
        extra = {
            "user_id": str(event.user_id),
            "event_type": type(event).__name__,
            "changed_at": event.changed_at.isoformat(),
        }

        if isinstance(event, UserNicknameChanged):
            extra["old_nickname"] = event.old_nickname
            extra["new_nickname"] = event.new_nickname
        elif isinstance(event, UserProfileImageChanged):
            extra["new_profile_image"] = event.new_profile_image

        logger.info("User profile updated", extra=extra)
