"""Update profile image command."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.user.event_publishing import publish_collected_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.exceptions.user_errors import InvalidInputError, UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


logger = logging.getLogger(__name__)


@dataclass
class UpdateProfileImageCommand:
    """Command to replace a user's profile image URL."""

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, user_id: UserId, profile_image: Optional[str]) -> None:
        """Execute profile image change.

        Args:
            user_id: Internal user identifier
            profile_image: New image URL

        Raises:
            UserNotFoundError: If user doesn't exist
            InvalidInputError: If profile_image is missing or blank
        """
        async with self.repository.transaction():
            user = await self.repository.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))

            if profile_image is None or not profile_image.strip():
                raise InvalidInputError("profile_image")

            user.change_profile_image(profile_image)
            await self.repository.update(user)

        logger.info("Profile image changed", extra={"user_id": str(user_id)})
        await publish_collected_events(self.event_bus, user)
