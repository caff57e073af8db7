"""Unit tests for User entity."""

import pytest
from datetime import datetime, timedelta, timezone

from domain.user.core.entities.user import User
from domain.user.core.events.nickname_changed import UserNicknameChanged
from domain.user.core.events.password_changed import UserPasswordChanged
from domain.user.core.events.profile_image_changed import UserProfileImageChanged
from domain.user.core.events.user_registered import UserRegistered
from domain.user.core.value_objects.user_id import UserId


def make_user(**overrides):
    """Create a user with sensible defaults."""
    fields = {
        "login_id": "kim01",
        "password_hash": "$2b$04$hash",
        "display_name": "Kim",
        "email": "kim@x.com",
    }
    fields.update(overrides)
    return User.create(**fields)


class TestUserCreation:
    """Test User.create factory."""

    def test_create_sets_fields(self):
        """Test that create() copies the given attributes."""
        user = make_user()

        assert user.login_id == "kim01"
        assert user.password_hash == "$2b$04$hash"
        assert user.display_name == "Kim"
        assert user.email == "kim@x.com"
        assert user.profile_image is None
        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is not None

    def test_create_generates_distinct_ids(self):
        """Test that every new user gets its own identity handle."""
        assert make_user().user_id != make_user().user_id

    def test_create_keeps_non_blank_profile_image(self):
        """Test that a provided image is stored as given."""
        user = make_user(profile_image=" http://img/a.png ")

        assert user.profile_image == " http://img/a.png "

    @pytest.mark.parametrize("image", [None, "", "   ", "\t\n"])
    def test_create_ignores_blank_profile_image(self, image):
        """Test that blank images leave profile_image unset."""
        user = make_user(profile_image=image)

        assert user.profile_image is None

    def test_create_emits_user_registered_event(self):
        """Test that create() emits UserRegistered."""
        user = make_user()

        events = user.collect_events()

        assert len(events) == 1
        assert isinstance(events[0], UserRegistered)
        assert events[0].user_id == user.user_id
        assert events[0].login_id == "kim01"

    def test_empty_password_hash_rejected(self):
        """Test that a user cannot exist without a password hash."""
        with pytest.raises(ValueError, match="password_hash"):
            make_user(password_hash="")

    def test_updated_before_created_rejected(self):
        """Test timestamp invariant."""
        now = datetime.now(timezone.utc)

        with pytest.raises(ValueError, match="updated_at"):
            User(
                user_id=UserId.generate(),
                login_id="kim01",
                password_hash="hash",
                display_name="Kim",
                email="kim@x.com",
                created_at=now,
                updated_at=now - timedelta(seconds=1),
            )


class TestUserMutations:
    """Test state transitions."""

    def test_rename(self):
        """Test that rename() changes display_name and emits an event."""
        user = make_user()
        user.collect_events()

        user.rename("Kimmy")

        assert user.display_name == "Kimmy"
        events = user.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], UserNicknameChanged)
        assert events[0].old_nickname == "Kim"
        assert events[0].new_nickname == "Kimmy"

    def test_change_password(self):
        """Test that change_password() replaces only the hash."""
        user = make_user()
        user.collect_events()
        created_at = user.created_at

        user.change_password("$2b$04$other")

        assert user.password_hash == "$2b$04$other"
        assert user.created_at == created_at
        assert user.updated_at >= created_at
        events = user.collect_events()
        assert isinstance(events[0], UserPasswordChanged)
        assert not hasattr(events[0], "password_hash")

    def test_change_password_rejects_empty_hash(self):
        """Test that the hash can never become empty."""
        user = make_user()

        with pytest.raises(ValueError):
            user.change_password("")

        assert user.password_hash == "$2b$04$hash"

    def test_change_profile_image(self):
        """Test that change_profile_image() records old and new values."""
        user = make_user(profile_image="http://img/old.png")
        user.collect_events()

        user.change_profile_image("http://img/a.png")

        assert user.profile_image == "http://img/a.png"
        event = user.collect_events()[0]
        assert isinstance(event, UserProfileImageChanged)
        assert event.old_profile_image == "http://img/old.png"
        assert event.new_profile_image == "http://img/a.png"

    def test_mutations_keep_identity(self):
        """Test that user_id and login_id never change."""
        user = make_user()
        user_id = user.user_id

        user.rename("Kimmy")
        user.change_password("other")
        user.change_profile_image("http://img/a.png")

        assert user.user_id == user_id
        assert user.login_id == "kim01"
        assert user.email == "kim@x.com"


class TestUserEquality:
    """Test aggregate identity semantics."""

    def test_equality_based_on_user_id(self):
        """Test that equality only looks at user_id."""
        user = make_user()
        same = User(
            user_id=user.user_id,
            login_id="other",
            password_hash="x",
            display_name="Other",
            email="o@x.com",
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        assert user == same
        assert hash(user) == hash(same)
        assert user != make_user()
        assert user != "kim01"
