"""Scratch directory scan configuration."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ScanConfig:
    """Bounds applied to the recursive temp directory scan."""
    max_depth: Optional[int] = 64
    time_budget: Optional[float] = 3.0  # seconds

    def __post_init__(self):
        """Treat zero or negative bounds as unbounded."""
        if self.max_depth is not None and self.max_depth <= 0:
            self.max_depth = None
        if self.time_budget is not None and self.time_budget <= 0:
            self.time_budget = None
