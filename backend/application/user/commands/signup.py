"""Signup command."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.user.event_publishing import publish_collected_events
from application.user.results import SignupResult
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.password_hasher import IPasswordHasher
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    DuplicateIdentityError,
    UniqueConstraintError,
)
from domain.user.core.ports.user_repository import IUserRepository


logger = logging.getLogger(__name__)


@dataclass
class SignupCommand:
    """Command to register a new account.

    Email and login id must be unused. The password is hashed before the
    user is built; no length policy is applied at signup.

    Examples:
        >>> command = SignupCommand(repository, hasher)
        >>> result = await command.execute("kim01", "p@ssword1", "Kim", "kim@x.com")
        >>> result.login_id
        'kim01'
    """

    repository: IUserRepository
    password_hasher: IPasswordHasher
    event_bus: Optional[IEventBus] = None

    async def execute(
        self,
        login_id: str,
        password: str,
        display_name: str,
        email: str,
        profile_image: Optional[str] = None,
    ) -> SignupResult:
        """Execute signup.

        Args:
            login_id: Requested login identifier
            password: Plaintext password
            display_name: Initial nickname
            email: Contact address
            profile_image: Optional image URL (ignored when blank)

        Returns:
            SignupResult with the generated user_id

        Raises:
            DuplicateIdentityError: If email, login_id or display_name is taken
        """
        async with self.repository.transaction():
            if await self.repository.find_by_email(email) is not None:
                raise DuplicateIdentityError("email", email)

            if await self.repository.find_by_login_id(login_id) is not None:
                raise DuplicateIdentityError("login_id", login_id)

            password_hash = await self.password_hasher.hash(password)
            user = User.create(
                login_id=login_id,
                password_hash=password_hash,
                display_name=display_name,
                email=email,
                profile_image=profile_image,
            )

            try:
                await self.repository.save(user)
            except UniqueConstraintError as e:
                raise DuplicateIdentityError(e.field, e.value) from e

        logger.info(
            "User registered",
            extra={"user_id": str(user.user_id), "login_id": login_id},
        )
        await publish_collected_events(self.event_bus, user)

        return SignupResult(
            user_id=user.user_id,
            login_id=user.login_id,
            display_name=user.display_name,
        )
