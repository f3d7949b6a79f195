# =============================================================================
# Logging Setup
# =============================================================================
# Modules log through logging.getLogger(__name__). This module wires the
# root logger to a file in the XDG state directory, because Textual takes
# over the terminal and anything printed to stderr would corrupt the screen.
# =============================================================================

import logging
from pathlib import Path

from spam_detector.config import Config

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
HANDLER_NAME = "spam-detector-file"


def setup_logging(config: Config, *, debug: bool = False) -> Path:
    """
    Configure the root logger to write to the log file.

    Args:
        config: Loaded configuration (log level and file).
        debug: Force DEBUG level regardless of config.

    Returns:
        Path of the log file.
    """
    log_path = config.log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(HANDLER_NAME)

    root = logging.getLogger()
    # Replace the handler from a previous call
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else config.log_level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return log_path
