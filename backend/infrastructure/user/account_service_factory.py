"""Composition of the AccountService from environment configuration."""

from typing import Optional

from application.user.account_service import AccountService
from application.user.handlers.registry import register_account_handlers
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.user.bcrypt_password_hasher import BcryptPasswordHasher
from infrastructure.user.jwt_token_issuer import JwtTokenIssuer
from infrastructure.user.repository_factory import get_user_repository


def create_account_service(
    repository: Optional[IUserRepository] = None,
    event_bus: Optional[IEventBus] = None,
) -> AccountService:
    """Build an AccountService with concrete adapters.

    Args:
        repository: Repository to use (defaults to the configured singleton)
        event_bus: Event bus to use (defaults to a fresh InMemoryEventBus
            with the account handlers subscribed)

    Returns:
        Ready-to-use AccountService

    Raises:
        ValueError: If JWT_SECRET or the repository configuration is missing
    """
    if repository is None:
        repository = get_user_repository()

    if event_bus is None:
        event_bus = InMemoryEventBus()
        register_account_handlers(event_bus)

    return AccountService(
        repository=repository,
        password_hasher=BcryptPasswordHasher(),
        token_issuer=JwtTokenIssuer(),
        event_bus=event_bus,
    )
