"""UserPasswordChanged domain event."""

from dataclasses import dataclass
from datetime import datetime

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserPasswordChanged:
    """Domain event: user password was rotated.

    Carries no credential material.
    """

    user_id: UserId
    changed_at: datetime
