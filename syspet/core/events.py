"""Fan-out event broadcaster for metrics updates."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List

logger = logging.getLogger("syspet.core.events")

METRICS_UPDATE = "metrics-update"


@dataclass
class Event:
    """A single published event."""
    type: str
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=datetime.now)


class EventBroadcaster:
    """
    Publish/subscribe channel between the poll loop and its observers.

    Delivery is fire-and-forget: listeners are called inline on the
    publishing thread, and a failing listener is logged and skipped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: Dict[str, List[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: str, callback: Callable[[Event], None]) -> None:
        """Register a callback for an event type."""
        with self._lock:
            self._subscribers.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: str, callback: Callable[[Event], None]) -> bool:
        """Remove a callback. Returns True if it was registered."""
        with self._lock:
            callbacks = self._subscribers.get(event_type, [])
            if callback not in callbacks:
                return False
            callbacks.remove(callback)
            return True

    def subscriber_count(self, event_type: str) -> int:
        with self._lock:
            return len(self._subscribers.get(event_type, []))

    def publish(self, event_type: str, data: Dict[str, Any]) -> Event:
        """Deliver an event to every current subscriber."""
        event = Event(type=event_type, data=data)

        # Copy so listeners can unsubscribe during dispatch
        with self._lock:
            callbacks = list(self._subscribers.get(event_type, []))

        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:
                logger.error("Listener %s failed on %s: %s",
                             getattr(callback, "__name__", repr(callback)), event_type, e)
        return event
