"""On-demand query handlers and response structures."""
import logging
from dataclasses import dataclass
from typing import Optional

from ..collectors import temp_scanner
from ..collectors.system_models import Metrics
from .health import HealthState
from .shared_data import MonitorState

logger = logging.getLogger("syspet.core.commands")


@dataclass
class MetricsResponse:
    """Current metrics together with the pet state they produced."""
    metrics: Metrics
    health_state: HealthState
    label: str
    description: str
    emoji: str

    @classmethod
    def build(cls, metrics: Metrics, state: HealthState) -> "MetricsResponse":
        return cls(metrics, state, state.label, state.description, state.emoji)

    def to_payload(self) -> dict:
        """Event payload shape broadcast on every tick."""
        return {
            "metrics": self.metrics.to_dict(),
            "health_state": self.health_state.name,
            "label": self.label,
            "description": self.description,
            "emoji": self.emoji,
        }


@dataclass
class HealthStateResponse:
    """Pet state without metrics."""
    health_state: HealthState
    label: str
    description: str
    emoji: str


@dataclass
class CleanupResponse:
    """Result of a temp cleanup request."""
    success: bool
    deleted_mb: int
    message: str


def get_metrics(state: MonitorState) -> MetricsResponse:
    """Refresh, classify and return the result."""
    metrics, health = state.refresh_and_classify()
    return MetricsResponse.build(metrics, health)


def get_health_state(state: MonitorState) -> HealthStateResponse:
    """Return the cached pet state without resampling."""
    _, health = state.snapshot()
    return HealthStateResponse(health, health.label, health.description, health.emoji)


def cleanup_temp(scratch_dir: Optional[str] = None) -> CleanupResponse:
    """Delete loose temp files and report what was freed."""
    try:
        result = temp_scanner.cleanup_temp(scratch_dir)
    except OSError as e:
        logger.warning("Cleanup failed: %s", e)
        return CleanupResponse(
            success=False,
            deleted_mb=0,
            message=f"Cleanup encountered errors: {e}",
        )
    return CleanupResponse(
        success=True,
        deleted_mb=result.deleted_mb,
        message=f"Successfully cleaned up {result.deleted_mb} MB of temporary files",
    )
