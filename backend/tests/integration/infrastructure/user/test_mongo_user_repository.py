"""Integration tests for MongoUserRepository.

Tests actual MongoDB operations against a test database.
Requires MONGODB_URI to point at a replica set (transactions).
"""

import os

import pytest

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UniqueConstraintError
from infrastructure.user.mongo_user_repository import MongoUserRepository


pytestmark = pytest.mark.skipif(
    os.getenv("USER_REPOSITORY") != "mongodb",
    reason="MongoDB integration tests require USER_REPOSITORY=mongodb",
)


@pytest.fixture
async def mongo_repo():
    """Create a MongoUserRepository on a scratch database."""
    repo = MongoUserRepository(database_name="pusan_trip_test")
    await repo.collection.delete_many({})
    await repo.ensure_indexes()
    yield repo
    await repo.collection.delete_many({})
    await repo.close()


@pytest.fixture
def sample_user():
    return User.create("test_kim01", "$2b$04$hash", "TestKim", "test_kim@x.com")


@pytest.mark.asyncio
class TestMongoUserRepository:
    """Test persistence and constraints."""

    async def test_save_and_find(self, mongo_repo, sample_user):
        """Should save a user and read it back by every lookup."""
        await mongo_repo.save(sample_user)

        by_id = await mongo_repo.find_by_id(sample_user.user_id)
        by_login = await mongo_repo.find_by_login_id("test_kim01")
        by_email = await mongo_repo.find_by_email("test_kim@x.com")

        assert by_id.user_id == sample_user.user_id
        assert by_login.user_id == sample_user.user_id
        assert by_email.user_id == sample_user.user_id
        assert by_id.created_at.tzinfo is not None
        assert await mongo_repo.exists_by_display_name("TestKim") is True

    async def test_unique_email(self, mongo_repo, sample_user):
        """Should reject a second user with the same email."""
        await mongo_repo.save(sample_user)
        other = User.create("test_lee02", "$2b$04$hash", "TestLee", "test_kim@x.com")

        with pytest.raises(UniqueConstraintError) as exc_info:
            await mongo_repo.save(other)

        assert exc_info.value.field == "email"

    async def test_update_display_name(self, mongo_repo, sample_user):
        """Should persist a rename."""
        await mongo_repo.save(sample_user)
        sample_user.rename("TestKimmy")

        await mongo_repo.update(sample_user)

        found = await mongo_repo.find_by_id(sample_user.user_id)
        assert found.display_name == "TestKimmy"

    async def test_transaction_rolls_back(self, mongo_repo, sample_user):
        """Should discard writes when the transaction block raises."""
        with pytest.raises(RuntimeError):
            async with mongo_repo.transaction():
                await mongo_repo.save(sample_user)
                raise RuntimeError("abort")

        assert await mongo_repo.find_by_id(sample_user.user_id) is None
