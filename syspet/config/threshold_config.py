"""Threshold configuration data structure."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ThresholdConfig:
    """Fixed per-metric thresholds for health classification."""
    ram_warn: float = 70.0
    ram_critical: float = 95.0
    cpu_warn: float = 70.0
    cpu_critical: float = 95.0
    disk_junk_warn: float = 5.0  # percent of total disk
    disk_junk_critical: float = 20.0


THRESHOLDS = ThresholdConfig()
