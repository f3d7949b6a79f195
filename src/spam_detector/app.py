# =============================================================================
# Spam Detector Main Application
# =============================================================================
# The Textual application class and the command-line entry point.
#
# Two ways to run:
#   - Interactive TUI (default): trains on startup, then checks messages
#     typed or pasted into the input box
#   - Headless (--classify TEXT): trains, prints the verdict, exits
#
# Both train from the dataset configured in config.toml, which can be
# overridden with --dataset.
# =============================================================================

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from spam_detector import __version__, __app_name__
from spam_detector.config import Config, ConfigError, print_paths
from spam_detector.dataset import DatasetError
from spam_detector.detector import EmptyInputError, SpamDetector
from spam_detector.logging_setup import setup_logging
from spam_detector.spam import DegenerateTrainingDataError
from spam_detector.ui.screens.detector import DetectorScreen


logger = logging.getLogger(__name__)


class SpamDetectorApp(App):
    """
    The main Spam Detector application.

    Attributes:
        config: The loaded application configuration.
        detector: Detector service shared with the screen.
        TITLE: Window title shown in terminal.
        SUB_TITLE: Subtitle shown in header.
        BINDINGS: Global keyboard shortcuts.
    """

    # Application metadata
    TITLE = "Spam Detection"
    SUB_TITLE = "Naive Bayes message classifier"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+r", "retrain", "Retrain"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        *,
        config_error: str | None = None,
    ) -> None:
        """
        Initialize the Spam Detector application.

        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
            config_error: Error from loading configuration, shown on startup.
        """
        super().__init__()

        self._config_error = config_error

        # Load configuration if not provided
        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

        self.detector = SpamDetector(self.config)

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        self.theme = "textual-light" if self.config.ui.theme == "light" else "textual-dark"

        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        await self.push_screen(
            DetectorScreen(self.detector, show_samples=self.config.ui.show_samples)
        )

    def action_retrain(self) -> None:
        """Retrain the classifier from the dataset."""
        current_screen = self.screen
        if isinstance(current_screen, DetectorScreen):
            current_screen.start_training()
        else:
            self.notify("Retrain not available on this screen")


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Spam Detector: classify SMS and email messages as spam or ham",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--dataset",
        metavar="PATH_OR_URL",
        help="Train from this CSV file or URL instead of the configured one",
    )

    parser.add_argument(
        "--classify",
        metavar="TEXT",
        help="Classify TEXT without starting the UI, then exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def apply_dataset_override(config: Config, source: str) -> None:
    """
    Point the config at a different dataset.

    URLs (http:// or https://) replace the download URL, anything else is
    treated as a local file path.
    """
    if source.startswith(("http://", "https://")):
        config.dataset.url = source
        config.dataset.path = ""
    else:
        config.dataset.path = source


async def classify_once(config: Config, text: str) -> int:
    """
    Train from the dataset and print the verdict for one message.

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    detector = SpamDetector(config)

    try:
        await detector.retrain()
        prediction = detector.check(text)
    except (DatasetError, DegenerateTrainingDataError, EmptyInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{prediction.label.value.upper()} ({prediction.percent}% confidence)")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Spam Detector.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and sets up logging
        4. Classifies one message (--classify) or starts the Textual app

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    # Load configuration. A broken default config still lets the UI start
    # with defaults; an explicit --config or headless run has to be valid.
    config_error = None
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        if args.config or args.classify is not None:
            print(f"Config error: {e}", file=sys.stderr)
            return 1
        config = Config()
        config_error = str(e)

    if args.dataset:
        apply_dataset_override(config, args.dataset)

    log_path = setup_logging(config, debug=args.debug)
    logger.info(f"{__app_name__} {__version__} starting, logging to {log_path}")

    if args.classify is not None:
        return asyncio.run(classify_once(config, args.classify))

    # Create and run the application
    app = SpamDetectorApp(config=config, config_error=config_error)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
