"""Live pet display using Textual."""

import logging

from textual.app import App
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from ..config.config import Config
from ..core import commands
from ..core.events import METRICS_UPDATE, Event, EventBroadcaster
from ..core.shared_data import MonitorState
from .formatting import HELP_TEXT, metric_lines, mood_line

logger = logging.getLogger("syspet.ui")


class HelpScreen(ModalScreen):
    """Modal screen to display help text."""

    CSS = """
    HelpScreen {
        align: center middle;
    }

    #help_box {
        width: 50;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $panel;
    }

    #help_box > Static {
        width: 100%;
        content-align: center middle;
    }

    #help_title { text-style: bold; }
    #help_content { margin: 1 0; }
    #help_footer { color: $text-muted; text-style: italic; }
    """

    def compose(self):
        with Vertical(id="help_box"):
            yield Static("Keys", id="help_title")
            yield Static(HELP_TEXT, id="help_content")
            yield Static("Press any key to close", id="help_footer")

    def on_key(self, event):
        """Close help screen on any key press."""
        self.dismiss()


class DisplayManager(App):
    """Shows the pet mood and metrics, updated from the broadcaster."""

    CSS = """
    #mood {
        height: 3;
        padding: 1 1 0 1;
        text-style: bold;
    }

    #mood.happy { color: $success; }
    #mood.okay { color: $warning; }
    #mood.stressed { color: $warning; text-style: bold reverse; }
    #mood.critical { color: $error; text-style: bold reverse; }

    #metrics {
        padding: 1;
        border: round $primary;
    }

    #status {
        height: 1;
        color: $text-muted;
    }
    """

    def __init__(self, config: Config, state: MonitorState, broadcaster: EventBroadcaster):
        """Initialize the display manager."""
        super().__init__()
        self.config = config
        self.state = state
        self.broadcaster = broadcaster

    def compose(self):
        with Vertical():
            yield Static("Waiting for first sample...", id="mood", markup=False)
            yield Static("", id="metrics", markup=False)
            yield Static("", id="status", markup=False)
            yield Static(HELP_TEXT, id="help", markup=False)

    def on_mount(self):
        """Subscribe to metrics updates when the app mounts."""
        self.broadcaster.subscribe(METRICS_UPDATE, self._on_metrics_event)
        # The poller may have ticked before we subscribed.
        metrics, health = self.state.snapshot()
        if metrics is not None:
            self._apply_payload(commands.MetricsResponse.build(metrics, health).to_payload())

    def on_unmount(self):
        self.broadcaster.unsubscribe(METRICS_UPDATE, self._on_metrics_event)

    def on_key(self, event):
        """Handle key press events."""
        if event.key in ("x", "q"):
            self.exit()
        elif event.key == "r":
            self._set_status("Refreshing...")
            self.run_worker(self._refresh_now, thread=True, exclusive=True, group="refresh")
        elif event.key == "c":
            self._set_status("Cleaning temp files...")
            self.run_worker(self._cleanup, thread=True, exclusive=True, group="cleanup")
        elif event.key == "h":
            self.push_screen(HelpScreen())

    def _on_metrics_event(self, event: Event):
        """Called on the poller thread; hand the payload to the UI thread."""
        self.call_from_thread(self._apply_payload, event.data)

    def _refresh_now(self):
        response = commands.get_metrics(self.state)
        self.call_from_thread(self._apply_payload, response.to_payload())
        self.call_from_thread(self._set_status, "Refreshed")

    def _cleanup(self):
        response = commands.cleanup_temp(self.state.sampler.scratch_dir)
        self.call_from_thread(self._set_status, response.message)

    def _apply_payload(self, payload: dict):
        """Update the widgets from a metrics-update payload."""
        self.query_one("#mood", Static).update(mood_line(payload))
        self.query_one("#metrics", Static).update(
            "\n".join(metric_lines(payload, self.config.display))
        )
        self._set_mood_class(payload["health_state"])

    def _set_mood_class(self, state_name: str):
        mood = self.query_one("#mood", Static)
        for name in ("happy", "okay", "stressed", "critical"):
            mood.remove_class(name)
        if self.config.display.show_colors:
            mood.add_class(state_name.lower())

    def _set_status(self, message: str):
        self.query_one("#status", Static).update(message)
