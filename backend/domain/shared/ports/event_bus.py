"""Event bus port (interface).

Defines contract for event publishing and subscription.
The domain defines the port, infrastructure provides the implementation.
"""

from typing import Any, Awaitable, Callable, Protocol, Type, TypeVar

TEvent = TypeVar("TEvent")

# Event handler type: async function that takes an event and returns None
EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """
    Interface for event publishing and subscription.

    Account events (UserRegistered, UserNicknameChanged, ...) are published
    after the transaction that produced them has committed.

    Example usage (application layer):
        >>> async def on_registered(event: UserRegistered) -> None:
        ...     print(f"Welcome {event.display_name}")
        ...
        >>> event_bus.subscribe(UserRegistered, on_registered)
        >>> await event_bus.publish(event)
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Type of event to listen for (e.g., UserRegistered)
            handler: Async function to call when event is published
        """
        ...

    async def publish(self, event: Any) -> None:
        """
        Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - If a handler fails, other handlers still execute
            - Failed handlers should log errors but not raise
        """
        ...

    def unsubscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        ...
