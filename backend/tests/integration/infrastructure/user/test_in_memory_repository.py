"""Integration tests for InMemoryUserRepository."""

import asyncio

import pytest

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UniqueConstraintError, UserNotFoundError
from domain.user.core.value_objects.user_id import UserId
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


class TestInMemoryUserRepository:
    """Test InMemoryUserRepository implementation."""

    @pytest.fixture
    def repository(self):
        """Create fresh repository for each test."""
        return InMemoryUserRepository()

    @pytest.fixture
    def sample_user(self):
        """Create sample user for testing."""
        return User.create("kim01", "$2b$04$hash", "Kim", "kim@x.com")

    @pytest.mark.asyncio
    async def test_save_and_find(self, repository, sample_user):
        """Test saving and retrieving user by every lookup."""
        await repository.save(sample_user)

        assert (await repository.find_by_id(sample_user.user_id)).login_id == "kim01"
        assert (await repository.find_by_login_id("kim01")).user_id == sample_user.user_id
        assert (await repository.find_by_email("kim@x.com")).user_id == sample_user.user_id
        assert await repository.exists_by_display_name("Kim") is True

    @pytest.mark.asyncio
    async def test_find_non_existent_returns_none(self, repository):
        """Test finding non-existent user returns None."""
        assert await repository.find_by_id(UserId.generate()) is None
        assert await repository.find_by_login_id("nobody") is None
        assert await repository.find_by_email("nobody@x.com") is None
        assert await repository.exists_by_display_name("Nobody") is False

    @pytest.mark.asyncio
    async def test_returned_user_is_a_copy(self, repository, sample_user):
        """Test that mutating a loaded user does not touch the store."""
        await repository.save(sample_user)

        loaded = await repository.find_by_id(sample_user.user_id)
        loaded.rename("Changed")

        assert (await repository.find_by_id(sample_user.user_id)).display_name == "Kim"
        assert loaded.collect_events()
        assert (await repository.find_by_id(sample_user.user_id)).collect_events() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, kwargs",
        [
            ("login_id", {"login_id": "kim01"}),
            ("email", {"email": "kim@x.com"}),
            ("display_name", {"display_name": "Kim"}),
        ],
    )
    async def test_save_enforces_uniqueness(self, repository, sample_user, field, kwargs):
        """Test that each identity attribute is unique."""
        await repository.save(sample_user)
        values = {"login_id": "lee02", "display_name": "Lee", "email": "lee@x.com"}
        values.update(kwargs)
        other = User.create(password_hash="$2b$04$hash", **values)

        with pytest.raises(UniqueConstraintError) as exc_info:
            await repository.save(other)

        assert exc_info.value.field == field
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_save_same_user_twice_fails(self, repository, sample_user):
        """Test that user_id is unique."""
        await repository.save(sample_user)

        with pytest.raises(UniqueConstraintError):
            await repository.save(sample_user)

    @pytest.mark.asyncio
    async def test_update_existing_user(self, repository, sample_user):
        """Test updating an existing user."""
        await repository.save(sample_user)
        sample_user.rename("Kimmy")

        await repository.update(sample_user)

        assert (await repository.find_by_id(sample_user.user_id)).display_name == "Kimmy"
        assert await repository.exists_by_display_name("Kim") is False

    @pytest.mark.asyncio
    async def test_update_non_existent_user_raises_error(self, repository, sample_user):
        """Test updating non-existent user raises error."""
        with pytest.raises(UserNotFoundError):
            await repository.update(sample_user)

    @pytest.mark.asyncio
    async def test_update_onto_taken_name_fails(self, repository, sample_user):
        """Test that update keeps display_name unique."""
        other = User.create("lee02", "$2b$04$hash", "Lee", "lee@x.com")
        await repository.save(sample_user)
        await repository.save(other)
        other.rename("Kim")

        with pytest.raises(UniqueConstraintError):
            await repository.update(other)

        assert (await repository.find_by_id(other.user_id)).display_name == "Lee"

    @pytest.mark.asyncio
    async def test_transaction_commits(self, repository, sample_user):
        """Test that writes inside a successful transaction persist."""
        async with repository.transaction():
            await repository.save(sample_user)

        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_transaction_rolls_back_on_error(self, repository, sample_user):
        """Test that writes inside a failed transaction are discarded."""
        await repository.save(sample_user)
        renamed = await repository.find_by_id(sample_user.user_id)
        renamed.rename("Kimmy")
        newcomer = User.create("lee02", "$2b$04$hash", "Lee", "lee@x.com")

        with pytest.raises(RuntimeError):
            async with repository.transaction():
                await repository.update(renamed)
                await repository.save(newcomer)
                raise RuntimeError("abort")

        assert repository.count() == 1
        assert (await repository.find_by_id(sample_user.user_id)).display_name == "Kim"

    @pytest.mark.asyncio
    async def test_transactions_are_serialised(self, repository):
        """Test that check-then-insert sequences do not interleave."""

        async def register(login_id):
            async with repository.transaction():
                if await repository.find_by_email("same@x.com") is not None:
                    return False
                await asyncio.sleep(0)
                await repository.save(
                    User.create(login_id, "$2b$04$hash", login_id, "same@x.com")
                )
                return True

        results = await asyncio.gather(*[register(f"user{i}") for i in range(5)])

        assert results.count(True) == 1
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_clear(self, repository, sample_user):
        """Test clearing repository."""
        await repository.save(sample_user)

        repository.clear()

        assert repository.count() == 0
