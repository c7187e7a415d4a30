"""Display configuration data structure."""
from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Display preferences configuration."""
    show_colors: bool = True
    show_progress_bars: bool = True
    time_format: str = "%H:%M:%S"

    def __post_init__(self):
        """Fix invalid values."""
        if not self.time_format:
            self.time_format = "%H:%M:%S"
