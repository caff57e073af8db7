"""User registered event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_registered import UserRegistered


logger = logging.getLogger(__name__)


@dataclass
class UserRegisteredHandler:
    """Handler for UserRegistered domain event.

    Triggered after a signup has been committed.

    Examples:
        >>> handler = UserRegisteredHandler()
        >>> await handler.handle(UserRegistered(...))
    """

    async def handle(self, event: UserRegistered) -> None:
        """Handle UserRegistered event.

        Args:
            event: UserRegistered domain event
        """
        logger.info(
            "User registered",
            extra={
                "user_id": str(event.user_id),
                "login_id": event.login_id,
                "registered_at": event.registered_at.isoformat(),
            },
        )
