"""System data models for the metrics sampler."""
from dataclasses import dataclass, field
from datetime import datetime

BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class Metrics:
    """Immutable snapshot of one sampling tick."""
    ram_percent: float
    cpu_percent: float  # smoothed over the rolling history
    disk_junk_bytes: int
    total_disk_bytes: int
    timestamp: datetime = field(default_factory=datetime.now)
    disk_junk_percent: float = field(init=False)

    def __post_init__(self):
        """Derive the junk percentage from the byte counts."""
        # Junk is scanned from a temp directory, so it may exceed the volume total.
        if self.total_disk_bytes > 0:
            percent = min(self.disk_junk_bytes / self.total_disk_bytes * 100.0, 100.0)
        else:
            percent = 0.0
        object.__setattr__(self, "disk_junk_percent", percent)

    @property
    def disk_junk_mb(self) -> int:
        return self.disk_junk_bytes // BYTES_PER_MB

    @property
    def total_disk_mb(self) -> int:
        return self.total_disk_bytes // BYTES_PER_MB

    def to_dict(self) -> dict:
        """Serialisable form used in event payloads."""
        return {
            "ram_percent": self.ram_percent,
            "cpu_percent": self.cpu_percent,
            "disk_junk_percent": self.disk_junk_percent,
            "disk_junk_bytes": self.disk_junk_bytes,
            "total_disk_bytes": self.total_disk_bytes,
            "disk_junk_mb": self.disk_junk_mb,
            "total_disk_mb": self.total_disk_mb,
            "timestamp": self.timestamp.isoformat(),
        }
