"""
Logging configuration for redfish_proxy.

Provides configurable logging with:
- Log directory management
- Size or time based rotation
- Verbosity levels
"""
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional

from redfish_proxy.config.constants import DATA_DIR


class LogLevel(str, Enum):
    """Log verbosity levels."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Parse log level from string (case-insensitive)."""
        level = level.upper()
        try:
            return cls(level)
        except ValueError:
            aliases = {
                "WARN": cls.WARNING,
                "ERR": cls.ERROR,
                "FATAL": cls.CRITICAL,
            }
            if level in aliases:
                return aliases[level]
            raise ValueError(f"Unknown log level: {level}") from None


@dataclass
class LogConfig:
    """
    Configuration for redfish_proxy logging.

    Attributes:
        log_dir: Directory for log files (default: ~/.redfish_proxy/logs)
        app_log_name: Log filename
        console_level: Log level for console output
        file_level: Log level for file output
        rotation: Size ("10 MB") or time ("1 day") before rotation
        retention: How long to keep old logs
        compression: Compress rotated files (zip, gz, or None)
        console_enabled: Log to stderr even without verbose
    """
    log_dir: str = ""
    app_log_name: str = "redfish_proxy.log"

    console_level: str = "WARNING"
    file_level: str = "DEBUG"

    rotation: str = "10 MB"
    retention: str = "1 week"
    compression: Optional[str] = "gz"

    console_enabled: bool = False

    _VALID_COMPRESSION: ClassVar[frozenset] = frozenset({"zip", "gz", None})

    def __post_init__(self):
        """Validate and set defaults."""
        if not self.log_dir:
            self.log_dir = str(DATA_DIR / "logs")

        try:
            self.console_level = LogLevel.from_string(self.console_level).value
            self.file_level = LogLevel.from_string(self.file_level).value
        except ValueError as e:
            raise ValueError(f"Invalid log level: {e}") from e

        if self.compression not in self._VALID_COMPRESSION:
            raise ValueError(
                f"compression must be one of {set(self._VALID_COMPRESSION)}, "
                f"got: {self.compression!r}"
            )

    @property
    def log_path(self) -> Path:
        """Get the full path to the log file."""
        return Path(self.log_dir) / self.app_log_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Create from dictionary, ignoring unknown keys."""
        known_fields = {
            "log_dir", "app_log_name", "console_level", "file_level",
            "rotation", "retention", "compression", "console_enabled",
        }
        return cls(**{k: v for k, v in data.items() if k in known_fields})


def load_log_config() -> LogConfig:
    """
    Load logging configuration.

    Priority:
    1. Environment variables (REDFISH_PROXY_LOG_*)
    2. Defaults
    """
    config_data: Dict[str, Any] = {}

    env_mappings = {
        "REDFISH_PROXY_LOG_DIR": "log_dir",
        "REDFISH_PROXY_LOG_LEVEL": "console_level",
        "REDFISH_PROXY_LOG_FILE_LEVEL": "file_level",
        "REDFISH_PROXY_LOG_ROTATION": "rotation",
        "REDFISH_PROXY_LOG_RETENTION": "retention",
        "REDFISH_PROXY_LOG_COMPRESSION": "compression",
        "REDFISH_PROXY_LOG_CONSOLE": "console_enabled",
    }

    for env_var, config_key in env_mappings.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if config_key == "console_enabled":
            config_data[config_key] = value.lower() in ("1", "true", "yes", "on")
        elif config_key == "compression":
            config_data[config_key] = value if value.lower() not in ("none", "") else None
        else:
            config_data[config_key] = value

    return LogConfig.from_dict(config_data)
