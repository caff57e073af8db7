"""Update password command."""

from dataclasses import dataclass, field
import logging
from typing import Optional

from application.user.event_publishing import publish_collected_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.core.exceptions.user_errors import (
    InvalidCredentialError,
    PasswordMismatchError,
    UserNotFoundError,
)
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.password_policy import PasswordPolicy
from domain.user.core.value_objects.user_id import UserId


logger = logging.getLogger(__name__)


@dataclass
class UpdatePasswordCommand:
    """Command to rotate a user's password.

    Checks run in a fixed order: current password, confirmation match,
    policy. The new password is hashed only after all checks pass.
    """

    repository: IUserRepository
    password_hasher: IPasswordHasher
    event_bus: Optional[IEventBus] = None
    policy: PasswordPolicy = field(default_factory=PasswordPolicy)

    async def execute(
        self,
        user_id: UserId,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        """Execute password change.

        Args:
            user_id: Internal user identifier
            current_password: Password currently in use
            new_password: Requested password
            confirm_password: Repetition of the requested password

        Raises:
            UserNotFoundError: If user doesn't exist
            InvalidCredentialError: If current_password is wrong
            PasswordMismatchError: If new and confirmation differ
            PasswordPolicyError: If new_password is too short
        """
        async with self.repository.transaction():
            user = await self.repository.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(str(user_id))

            if not await self.password_hasher.verify(current_password, user.password_hash):
                logger.warning(
                    "Password change with wrong current password",
                    extra={"user_id": str(user_id)},
                )
                raise InvalidCredentialError()

            if new_password != confirm_password:
                raise PasswordMismatchError()

            self.policy.validate(new_password)

            user.change_password(await self.password_hasher.hash(new_password))
            await self.repository.update(user)

        logger.info("Password changed", extra={"user_id": str(user_id)})
        await publish_collected_events(self.event_bus, user)
