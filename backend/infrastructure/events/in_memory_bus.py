"""In-memory event bus implementation.

Provides an in-memory implementation of the IEventBus port.
Handlers are stored in memory and awaited in subscription order.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Type, TypeVar

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent")


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Persistence: Handlers lost on process restart (in-memory only)
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def log_event(event: UserRegistered) -> None:
        ...     print(f"Registered: {event.login_id}")
        >>>
        >>> bus.subscribe(UserRegistered, log_event)
        >>> await bus.publish(UserRegistered(...))
    """

    def __init__(self) -> None:
        """Initialize event bus with empty handler registry."""
        self._handlers: Dict[Type[Any], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Async function to call when event is published

        Note:
            - Same handler can be subscribed multiple times (will be called multiple times)
            - Handlers are called in subscription order
        """
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": getattr(handler, "__name__", repr(handler)),
            },
        )

    async def publish(self, event: Any) -> None:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: Domain event to publish

        Note:
            - If a handler fails, it logs an error but other handlers still execute
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug("No handlers for event", extra={"event_type": event_type.__name__})
            return

        logger.debug(
            "Publishing event",
            extra={"event_type": event_type.__name__, "handler_count": len(handlers)},
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Log error but don't prevent other handlers from running
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": getattr(handler, "__name__", repr(handler)),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise

        Note:
            - If handler was subscribed multiple times, only first occurrence is removed
        """
        handlers = self._handlers.get(event_type)
        if not handlers:
            return False

        try:
            handlers.remove(handler)
        except ValueError:
            return False

        logger.debug("Handler unsubscribed", extra={"event_type": event_type.__name__})
        return True

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()

    def get_handler_count(self, event_type: Type[Any]) -> int:
        """Get number of handlers for an event type."""
        return len(self._handlers.get(event_type, []))
