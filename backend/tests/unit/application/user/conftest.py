"""Fixtures for account application tests."""

import pytest

from application.user.account_service import AccountService
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.user.bcrypt_password_hasher import BcryptPasswordHasher
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.jwt_token_issuer import JwtTokenIssuer


@pytest.fixture
def repository():
    """Create in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher():
    """Create a fast bcrypt hasher (minimum cost)."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    """Create JWT issuer with a test secret."""
    return JwtTokenIssuer(secret="test-secret", expires_in=3600)


class RecordingEventBus(InMemoryEventBus):
    """Event bus that remembers every published event."""

    def __init__(self) -> None:
        super().__init__()
        self.published = []

    async def publish(self, event):
        self.published.append(event)
        await super().publish(event)


@pytest.fixture
def event_bus():
    """Create recording event bus."""
    return RecordingEventBus()


@pytest.fixture
def service(repository, password_hasher, token_issuer, event_bus):
    """Create AccountService wired with test collaborators."""
    return AccountService(repository, password_hasher, token_issuer, event_bus)


@pytest.fixture
async def kim(service):
    """Register the reference account and return its SignupResult."""
    return await service.signup("kim01", "p@ssword1", "Kim", "kim@x.com")
