# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Spam Detector configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spam-detector/  (default: ~/.config/spam-detector/)
#   - State:   $XDG_STATE_HOME/spam-detector/   (default: ~/.local/state/spam-detector/)
#
# Files:
#   - config.toml: User configuration (dataset source, UI, logging)
#   - spam-detector.log: Log file (in state directory)
#
# There is no model file. The classifier is retrained from the dataset on
# every start.
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spam-detector"

# Public SMS spam collection: "v1" holds the label, "v2" the message
DEFAULT_DATASET_URL = "https://raw.githubusercontent.com/Apaulgithub/oibsip_taskno4/main/spam.csv"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
THEMES = ("dark", "light")


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Spam Detector.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spam-detector/
    This is where user configuration files live (config.toml).
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for Spam Detector.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/spam-detector/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates all required XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DatasetConfig:
    """
    Where the training data comes from and how to read it.

    Attributes:
        url: URL of a CSV file with labeled messages.
        path: Local CSV file. Takes precedence over url when set.
        label_column: Column holding "spam" / "ham".
        message_column: Column holding the message text.
        encoding: Text encoding of the CSV file.
        timeout: HTTP timeout in seconds for downloading the dataset.
    """
    url: str = DEFAULT_DATASET_URL
    path: str = ""
    label_column: str = "v1"
    message_column: str = "v2"
    encoding: str = "latin-1"
    timeout: float = 30.0

    @property
    def source(self) -> str:
        """The location training data will be read from."""
        return self.path or self.url


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        theme: Color theme ("dark" or "light").
        show_samples: Show the sample spam / ham message panels.
    """
    theme: str = "dark"
    show_samples: bool = True


@dataclass
class LoggingConfig:
    """
    Configuration for logging.

    The TUI owns the terminal, so logs always go to a file.

    Attributes:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file: Log file path. Empty means the default in the state directory.
    """
    level: str = "INFO"
    file: str = ""


@dataclass
class Config:
    """
    Main configuration container for Spam Detector.

    Attributes:
        dataset: Training data source.
        ui: User interface configuration.
        logging: Logging configuration.

    Usage:
        >>> config = Config.load()
        >>> print(config.dataset.label_column)
        'v1'
    """
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def default_log_path() -> Path:
        """Returns the default path of the log file."""
        return get_xdg_state_home() / f"{APP_NAME}.log"

    def log_file_path(self) -> Path:
        """Returns the configured log file path."""
        if self.logging.file:
            return Path(self.logging.file).expanduser()
        return self.default_log_path()

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.
        Creates necessary directories if they don't exist.

        Args:
            path: Config file to read. Uses the XDG location if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        # Ensure all XDG directories exist
        ensure_directories()

        config_path = path or cls.config_file_path()

        if not config_path.exists():
            if path is not None:
                raise ConfigError(f"Config file not found: {config_path}")
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to the config file.

        Args:
            path: File to write. Uses the XDG location if None.
        """
        ensure_directories()

        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        data = self._to_dict()

        with open(config_path, "wb") as f:
            tomli_w.dump(data, f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value is out of range.
        """
        config = cls()

        # Dataset settings
        dataset = data.get("dataset", {})
        config.dataset = DatasetConfig(
            url=dataset.get("url", DEFAULT_DATASET_URL),
            path=dataset.get("path", ""),
            label_column=dataset.get("label_column", "v1"),
            message_column=dataset.get("message_column", "v2"),
            encoding=dataset.get("encoding", "latin-1"),
            timeout=dataset.get("timeout", 30.0),
        )
        timeout = config.dataset.timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"dataset.timeout must be a positive number, got {timeout!r}")
        if not config.dataset.source:
            raise ConfigError("dataset.url or dataset.path must be set")

        # UI settings
        ui = data.get("ui", {})
        config.ui = UIConfig(
            theme=ui.get("theme", "dark"),
            show_samples=ui.get("show_samples", True),
        )
        if config.ui.theme not in THEMES:
            raise ConfigError(f"ui.theme must be one of {', '.join(THEMES)}, got {config.ui.theme!r}")

        # Logging settings
        log = data.get("logging", {})
        config.logging = LoggingConfig(
            level=str(log.get("level", "INFO")).upper(),
            file=log.get("file", ""),
        )
        if config.logging.level not in LOG_LEVELS:
            raise ConfigError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {config.logging.level!r}"
            )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["dataset"] = {
            "url": self.dataset.url,
            "path": self.dataset.path,
            "label_column": self.dataset.label_column,
            "message_column": self.dataset.message_column,
            "encoding": self.dataset.encoding,
            "timeout": self.dataset.timeout,
        }

        data["ui"] = {
            "theme": self.ui.theme,
            "show_samples": self.ui.show_samples,
        }

        data["logging"] = {
            "level": self.logging.level,
            "file": self.logging.file,
        }

        return data

    @property
    def log_level(self) -> int:
        """The configured log level as a logging module constant."""
        return getattr(logging, self.logging.level)


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config and logs are stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.default_log_path()}")
