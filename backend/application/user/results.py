"""Result objects returned by account operations."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class SignupResult:
    """Identity of a freshly registered account."""

    user_id: UserId
    login_id: str
    display_name: str


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    display_name: str
    user_id: UserId
    access_token: str


@dataclass(frozen=True)
class ProfileView:
    """Read model for the "my page" profile screen."""

    user_id: UserId
    login_id: str
    display_name: str
    profile_image: Optional[str] = None
