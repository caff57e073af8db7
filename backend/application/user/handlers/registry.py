"""Wiring of account event handlers onto an event bus."""

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.events.nickname_changed import UserNicknameChanged
from domain.user.core.events.password_changed import UserPasswordChanged
from domain.user.core.events.profile_image_changed import UserProfileImageChanged
from domain.user.core.events.user_registered import UserRegistered
from application.user.handlers.user_profile_updated_handler import UserProfileUpdatedHandler
from application.user.handlers.user_registered_handler import UserRegisteredHandler


def register_account_handlers(event_bus: IEventBus) -> None:
    """Subscribe the default account handlers."""
    registered = UserRegisteredHandler()
    profile_updated = UserProfileUpdatedHandler()

    event_bus.subscribe(UserRegistered, registered.handle)
    event_bus.subscribe(UserNicknameChanged, profile_updated.handle)
    event_bus.subscribe(UserProfileImageChanged, profile_updated.handle)
    event_bus.subscribe(UserPasswordChanged, profile_updated.handle)
