# shipgrid/core/event_bus.py
"""
Tick notifications for observers of a ComponentManager.

The manager publishes one ``TickEvent`` after each resolved tick; recorders
and drivers subscribe to it instead of polling the ledger.
"""

import logging
from dataclasses import dataclass

from shipgrid.core.resources import Resources

logger = logging.getLogger(__name__)

TICK_COMPLETE = "tick_complete"


@dataclass(frozen=True)
class TickEvent:
    """Ledger snapshot taken at the end of a tick."""
    tick: int
    tick_ms: int
    resources: Resources


class EventBus:
    """Dispatches manager events to subscribed handlers.

    A handler that raises is logged against the tick it failed on and the
    remaining handlers still run.
    """

    def __init__(self):
        self.subscribers = {}

    def subscribe(self, event_type, callback):
        self.subscribers.setdefault(event_type, []).append(callback)
        return callback

    def unsubscribe(self, event_type, callback):
        handlers = self.subscribers.get(event_type, [])
        if callback in handlers:
            handlers.remove(callback)
            return True
        return False

    def publish(self, event_type, event):
        """
        Deliver an event to every handler of ``event_type``

        Args:
            event_type (str): Event name, e.g. ``TICK_COMPLETE``
            event: Payload handed to each handler as-is

        Returns:
            int: Number of handlers that ran without raising
        """
        tick = getattr(event, "tick", None)
        count = 0
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event)
                count += 1
            except Exception as e:
                logger.error(f"tick {tick}: {event_type} handler {callback!r} failed: {e}")
        return count

    def publish_tick(self, tick, time, resources):
        """Publish a ``TickEvent`` holding a copy of ``resources``."""
        event = TickEvent(tick=tick, tick_ms=time.ms, resources=resources.copy())
        logger.debug(f"tick complete: {event.resources}", extra={"tick": tick})
        return self.publish(TICK_COMPLETE, event)
