"""Main configuration data structure."""
from dataclasses import dataclass, field
from .collection_config import ScanConfig
from .display_config import DisplayConfig
from .logging_config import LoggingConfig


@dataclass
class Config:
    """Main configuration class."""
    scan: ScanConfig = field(default_factory=ScanConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
