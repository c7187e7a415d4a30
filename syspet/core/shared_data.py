"""Shared monitor state for thread-safe sampling and classification."""

import threading
from typing import Optional, Tuple

from ..collectors.system_collector import MetricsSampler
from ..collectors.system_models import Metrics
from .health import HealthClassifier, HealthState


class MonitorState:
    """Sampler and classifier pair guarded by a single lock."""

    def __init__(self, sampler: MetricsSampler, classifier: Optional[HealthClassifier] = None):
        """Initialize the shared state with thread safety."""
        self._lock = threading.Lock()
        self.sampler = sampler
        self.classifier = classifier or HealthClassifier()
        self.metrics: Optional[Metrics] = None

    def refresh_and_classify(self) -> Tuple[Metrics, HealthState]:
        """Sample and classify, waiting for the lock if needed."""
        with self._lock:
            return self._update()

    def try_refresh_and_classify(self) -> Optional[Tuple[Metrics, HealthState]]:
        """Sample and classify only if the lock is free, else return None."""
        if not self._lock.acquire(blocking=False):
            return None
        try:
            return self._update()
        finally:
            self._lock.release()

    def snapshot(self) -> Tuple[Optional[Metrics], HealthState]:
        """Get the last metrics and state without resampling."""
        with self._lock:
            return self.metrics, self.classifier.state

    def _update(self) -> Tuple[Metrics, HealthState]:
        self.sampler.refresh()
        metrics = self.sampler.sample()
        state = self.classifier.classify(metrics)
        self.metrics = metrics
        return metrics, state
