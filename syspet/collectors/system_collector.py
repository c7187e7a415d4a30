"""System metrics sampler for RAM, CPU and temp-file bloat."""
import logging
import time
from collections import deque
from datetime import datetime
from typing import Optional

import psutil

from ..config.collection_config import ScanConfig
from .system_models import Metrics
from .temp_scanner import directory_size, resolve_scratch_dir

logger = logging.getLogger("syspet.collectors.system")

# 30 seconds of readings at the 5 second poll interval
CPU_HISTORY_SIZE = 6
NOMINAL_DISK_BYTES = 256 * 1024 * 1024 * 1024
# Shortest span psutil can turn into a meaningful CPU percentage
MIN_CPU_WINDOW = 0.1


class CpuHistory:
    """Bounded FIFO of raw CPU readings, averaged for smoothing."""

    def __init__(self, size: int = CPU_HISTORY_SIZE):
        self.size = size
        self._readings = deque()

    def push(self, raw: float) -> float:
        """Record a raw reading and return the smoothed value."""
        self._readings.append(raw)
        if len(self._readings) > self.size:
            self._readings.popleft()
        return self.mean()

    def mean(self) -> float:
        if not self._readings:
            return 0.0
        return sum(self._readings) / len(self._readings)

    def __len__(self):
        return len(self._readings)


class MetricsSampler:
    """Reads host counters through psutil and builds Metrics snapshots."""

    def __init__(self, scan_config: Optional[ScanConfig] = None,
                 scratch_dir: Optional[str] = None):
        """Initialize the sampler and prime the CPU counter."""
        self.scan_config = scan_config or ScanConfig()
        self.scratch_dir = scratch_dir
        self.cpu_history = CpuHistory()
        self._memory = None
        self._raw_cpu = 0.0
        self._cpu_baseline: Optional[float] = None

        # First non-blocking cpu_percent() call only establishes a baseline.
        self._read_cpu(interval=None)

    def refresh(self):
        """Re-read memory and aggregate CPU counters."""
        try:
            self._memory = psutil.virtual_memory()
        except (OSError, psutil.Error) as e:
            logger.debug("Memory info unavailable: %s", e)
            self._memory = None
        # A window shorter than MIN_CPU_WINDOW reads as 0.0, so block for a full one.
        interval = None
        if self._cpu_baseline is None or time.monotonic() - self._cpu_baseline < MIN_CPU_WINDOW:
            interval = MIN_CPU_WINDOW
        self._raw_cpu = self._read_cpu(interval)

    def _read_cpu(self, interval: Optional[float]) -> float:
        """Read aggregate CPU percent and restart the measurement window."""
        try:
            value = psutil.cpu_percent(interval=interval)
        except (OSError, psutil.Error) as e:
            logger.debug("CPU counter unavailable: %s", e)
            value = 0.0
        self._cpu_baseline = time.monotonic()
        return value

    def sample(self) -> Metrics:
        """Build a Metrics snapshot from the cached counters and a temp scan."""
        ram_percent = self._get_ram_percent()
        cpu_percent = self.cpu_history.push(self._raw_cpu)

        scratch_dir = self.scratch_dir or resolve_scratch_dir()
        junk_bytes = self._get_junk_bytes(scratch_dir)
        total_bytes = self._get_total_disk_bytes(scratch_dir)

        return Metrics(
            ram_percent=ram_percent,
            cpu_percent=cpu_percent,
            disk_junk_bytes=junk_bytes,
            total_disk_bytes=total_bytes,
            timestamp=datetime.now(),
        )

    def _get_ram_percent(self) -> float:
        """Get used memory as a percentage of total, 0 without memory info."""
        if self._memory is None or not self._memory.total:
            return 0.0
        return self._memory.used / self._memory.total * 100.0

    def _get_junk_bytes(self, scratch_dir: str) -> int:
        """Get the total size of files under the scratch directory."""
        deadline = None
        if self.scan_config.time_budget is not None:
            deadline = time.monotonic() + self.scan_config.time_budget
        return directory_size(scratch_dir, self.scan_config.max_depth, deadline)

    def _get_total_disk_bytes(self, scratch_dir: str) -> int:
        """Get the capacity of the volume holding the scratch directory."""
        try:
            return psutil.disk_usage(scratch_dir).total
        except (OSError, psutil.Error) as e:
            logger.debug("Disk usage unavailable for %s: %s", scratch_dir, e)
            return NOMINAL_DISK_BYTES
