"""Text formatting shared by the terminal displays."""
from datetime import datetime
from typing import List

from ..config.display_config import DisplayConfig

HELP_TEXT = "r=refresh  c=clean temp  h=help  q/x=exit"

STATE_STYLES = {
    "HAPPY": "green",
    "OKAY": "yellow",
    "STRESSED": "dark_orange",
    "CRITICAL": "red",
}


def make_progress_bar(value: float, width: int = 15) -> str:
    """Render a percentage as a fixed-width text bar."""
    value = max(0.0, min(value, 100.0))
    filled = int(value * width / 100)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}] {value:5.1f}%"


def mood_line(payload: dict) -> str:
    return f"{payload['emoji']} {payload['label']} - {payload['description']}"


def metric_lines(payload: dict, display: DisplayConfig) -> List[str]:
    """Build the metric rows for a metrics-update payload."""
    metrics = payload["metrics"]

    def fmt(value: float) -> str:
        if display.show_progress_bars:
            return make_progress_bar(value)
        return f"{value:5.1f}%"

    timestamp = datetime.fromisoformat(metrics["timestamp"])
    return [
        f"Time:   {timestamp.strftime(display.time_format)}",
        f"RAM:    {fmt(metrics['ram_percent'])}",
        f"CPU:    {fmt(metrics['cpu_percent'])}  (30s avg)",
        f"Junk:   {fmt(metrics['disk_junk_percent'])}  "
        f"{metrics['disk_junk_mb']} MB of {metrics['total_disk_mb']} MB",
    ]
