"""One-shot Rich report of the current pet state."""
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..config.display_config import DisplayConfig
from ..core.commands import CleanupResponse, MetricsResponse
from .formatting import STATE_STYLES, metric_lines, mood_line


def create_report_panel(response: MetricsResponse, display: DisplayConfig) -> Panel:
    """Create the report panel for one metrics response."""
    payload = response.to_payload()
    style = STATE_STYLES.get(payload["health_state"], "white") if display.show_colors else "none"

    body = Text()
    body.append(mood_line(payload) + "\n\n", style=f"bold {style}" if display.show_colors else "")
    body.append("\n".join(metric_lines(payload, display)))

    return Panel(body, title="System Pet", border_style=style)


def print_report(console: Console, response: MetricsResponse, display: DisplayConfig):
    console.print(create_report_panel(response, display))


def print_cleanup(console: Console, response: CleanupResponse):
    style = "green" if response.success else "red"
    console.print(Text(response.message, style=style))
