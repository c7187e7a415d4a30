"""Health classification: three metric readings to one pet mood."""
from enum import Enum, IntEnum

from ..collectors.system_models import Metrics
from ..config.threshold_config import THRESHOLDS


class HealthState(IntEnum):
    """Pet mood, ordered by increasing severity."""
    HAPPY = 0
    OKAY = 1
    STRESSED = 2
    CRITICAL = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_DESCRIPTIONS = {
    HealthState.HAPPY: "Pet is happy - system healthy!",
    HealthState.OKAY: "Pet is okay - minor resource usage",
    HealthState.STRESSED: "Pet is stressed - high resource usage",
    HealthState.CRITICAL: "Pet is critical - system overloaded!",
}

_EMOJI = {
    HealthState.HAPPY: "😊",
    HealthState.OKAY: "😐",
    HealthState.STRESSED: "😰",
    HealthState.CRITICAL: "🔥",
}


class MetricStatus(Enum):
    """Per-metric classification used during aggregation."""
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


def classify_metric(value: float, warn: float = THRESHOLDS.ram_warn,
                    critical: float = THRESHOLDS.ram_critical) -> MetricStatus:
    """Classify a RAM or CPU percentage."""
    if value >= critical:
        return MetricStatus.CRITICAL
    if value >= warn:
        return MetricStatus.WARNING
    return MetricStatus.GOOD


def classify_disk_percent(percent: float) -> MetricStatus:
    """Classify temp-file junk as a percentage of total disk."""
    return classify_metric(percent, THRESHOLDS.disk_junk_warn, THRESHOLDS.disk_junk_critical)


def aggregate(statuses) -> HealthState:
    """Combine per-metric statuses, worst first."""
    statuses = list(statuses)
    if MetricStatus.CRITICAL in statuses:
        return HealthState.CRITICAL
    # Two elevated metrics compound even if neither is critical.
    elevated = sum(1 for s in statuses if s is not MetricStatus.GOOD)
    if elevated >= 2:
        return HealthState.STRESSED
    if elevated == 1:
        return HealthState.OKAY
    return HealthState.HAPPY


class HealthClassifier:
    """Holds the current pet mood and recomputes it from metrics."""

    def __init__(self):
        self._state = HealthState.HAPPY

    @property
    def state(self) -> HealthState:
        return self._state

    def classify(self, metrics: Metrics) -> HealthState:
        """Update and return the held state for a metrics snapshot."""
        statuses = (
            classify_metric(metrics.ram_percent, THRESHOLDS.ram_warn, THRESHOLDS.ram_critical),
            classify_metric(metrics.cpu_percent, THRESHOLDS.cpu_warn, THRESHOLDS.cpu_critical),
            classify_disk_percent(metrics.disk_junk_percent),
        )
        self._state = aggregate(statuses)
        return self._state
