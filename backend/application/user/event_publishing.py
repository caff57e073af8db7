"""Publishing of collected aggregate events."""

from typing import Optional

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User


async def publish_collected_events(event_bus: Optional[IEventBus], user: User) -> None:
    """Drain the aggregate's pending events and publish them.

    Must be called after the transaction that produced the events has
    committed. Events are dropped when no bus is configured.

    Args:
        event_bus: Bus to publish to, or None
        user: Aggregate holding pending events
    """
    events = user.collect_events()
    if event_bus is None:
        return

    for event in events:
        await event_bus.publish(event)
