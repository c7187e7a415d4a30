"""Logging configuration data structure."""
import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class LoggingConfig:
    """Log level and optional log file."""
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self):
        """Fix invalid values."""
        self.level = str(self.level).upper()
        if not isinstance(logging.getLevelName(self.level), int):
            self.level = "INFO"
        if not self.file:
            self.file = None
