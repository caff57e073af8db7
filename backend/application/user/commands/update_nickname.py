"""Update nickname command."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.user.event_publishing import publish_collected_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.exceptions.user_errors import (
    InvalidInputError,
    NicknameConflictError,
    UniqueConstraintError,
    UserNotFoundError,
)
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


logger = logging.getLogger(__name__)


@dataclass
class UpdateNicknameCommand:
    """Command to change a user's display name.

    The availability check does not exclude the caller: renaming to the
    current name is rejected as a conflict.
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, user_id: UserId, new_nickname: Optional[str]) -> None:
        """Execute nickname change.

        Args:
            user_id: Internal user identifier
            new_nickname: Requested display name

        Raises:
            UserNotFoundError: If user doesn't exist
            InvalidInputError: If new_nickname is missing or blank
            NicknameConflictError: If the nickname is already used
        """
        async with self.repository.transaction():
            user = await self.repository.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))

            if new_nickname is None or not new_nickname.strip():
                raise InvalidInputError("nickname")

            if await self.repository.exists_by_display_name(new_nickname):
                raise NicknameConflictError(new_nickname)

            user.rename(new_nickname)

            try:
                await self.repository.update(user)
            except UniqueConstraintError as e:
                raise NicknameConflictError(new_nickname) from e

        logger.info("Nickname changed", extra={"user_id": str(user_id)})
        await publish_collected_events(self.event_bus, user)
