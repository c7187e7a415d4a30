"""Background poll loop that samples, classifies and publishes."""
import logging
import threading
import time
from enum import Enum
from typing import Optional

from .commands import MetricsResponse
from .events import METRICS_UPDATE, EventBroadcaster
from .health import HealthState
from .shared_data import MonitorState

logger = logging.getLogger("syspet.core.poller")

POLL_INTERVAL = 5.0  # seconds


class PollerState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class HealthPoller:
    """Drives the shared monitor state on a fixed interval."""

    def __init__(self, state: MonitorState, broadcaster: EventBroadcaster):
        """Initialize the poller in the idle state."""
        self.state = state
        self.broadcaster = broadcaster
        self.interval = POLL_INTERVAL
        self.status = PollerState.IDLE
        self.running = threading.Event()
        self._wake = threading.Event()
        self.thread: Optional[threading.Thread] = None
        self._last_state: Optional[HealthState] = None

    def start(self):
        """Start the polling thread. Calling it again has no effect."""
        if self.status is PollerState.RUNNING:
            return
        self.status = PollerState.RUNNING
        self.running.set()
        self.thread = threading.Thread(target=self._poll_loop, name="syspet-poller", daemon=True)
        self.thread.start()
        logger.info("Polling every %.0fs", self.interval)

    def stop(self):
        """Signal the polling thread to exit at shutdown."""
        self.running.clear()
        self._wake.set()
        if self.thread and self.thread.is_alive():
            self.thread.join(timeout=1)

    def tick(self) -> Optional[MetricsResponse]:
        """Run one sample/classify/publish cycle.

        Returns None when the shared state was busy and the tick was skipped.
        """
        result = self.state.try_refresh_and_classify()
        if result is None:
            logger.debug("Monitor state busy, skipping tick")
            return None

        metrics, health = result
        if self._last_state is not None and health != self._last_state:
            logger.info("Pet state changed: %s -> %s (%s)",
                        self._last_state.label, health.label, health.description)
        self._last_state = health

        response = MetricsResponse.build(metrics, health)
        self.broadcaster.publish(METRICS_UPDATE, response.to_payload())
        return response

    def _poll_loop(self):
        """Tick immediately, then once per interval until stopped."""
        while self.running.is_set():
            next_tick = time.monotonic() + self.interval
            self.tick()
            # Overrunning ticks are not caught up; the next one starts on schedule.
            if self._wake.wait(max(0.0, next_tick - time.monotonic())):
                break
