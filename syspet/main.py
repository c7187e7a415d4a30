"""Main entry point for the syspet system health pet."""
import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from textual.logging import TextualHandler

from .collectors.system_collector import MetricsSampler
from .config.config_manager import DEFAULT_CONFIG_PATH, ConfigManager
from .config.logging_config import LoggingConfig
from .core import commands
from .core.events import EventBroadcaster
from .core.poller import HealthPoller
from .core.shared_data import MonitorState
from .ui.console_report import print_cleanup, print_report
from .ui.display_manager import DisplayManager


def configure_logging(level: str, log_file, interactive: bool, console: Console):
    """Route log records to a file, the Textual devtools, or the console."""
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    elif interactive:
        # The Textual app owns the terminal while it runs.
        handler = TextualHandler()
    else:
        handler = RichHandler(console=console, show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)


def main(argv=None):
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(description="System health pet")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--once", action="store_true",
                        help="print one report and exit")
    parser.add_argument("--cleanup", action="store_true",
                        help="delete loose files in the temp directory and exit")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    # Load configuration - let it crash if bad
    config = ConfigManager.load_config(args.config)
    if args.no_color:
        config.display.show_colors = False
    if args.log_level:
        config.logging = LoggingConfig(level=args.log_level, file=config.logging.file)

    console = Console(no_color=not config.display.show_colors)
    interactive = not (args.once or args.cleanup)
    configure_logging(config.logging.level, config.logging.file, interactive, console)

    if args.cleanup:
        response = commands.cleanup_temp()
        print_cleanup(console, response)
        return 0 if response.success else 1

    state = MonitorState(MetricsSampler(config.scan))

    if args.once:
        print_report(console, commands.get_metrics(state), config.display)
        return 0

    broadcaster = EventBroadcaster()
    poller = HealthPoller(state, broadcaster)
    display_manager = DisplayManager(config, state, broadcaster)

    poller.start()
    try:
        display_manager.run()
    except KeyboardInterrupt:
        pass
    finally:
        poller.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
