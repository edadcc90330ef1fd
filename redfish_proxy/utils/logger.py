"""
Centralized logging for redfish_proxy.

Library modules log through loguru's shared logger. Applications embedding
the proxy call setup_logger() once to get:
- A rotated log file
- Optional console output
- Credential redaction on every record

Configuration is read from REDFISH_PROXY_LOG_* environment variables.
See log_config.py for details.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from redfish_proxy.utils.log_config import LogConfig, load_log_config
from redfish_proxy.utils.security import redact_sensitive_info


def setup_logger(
    verbose: bool = False,
    session_id: Optional[str] = None,
    config: Optional[LogConfig] = None,
) -> None:
    """
    Configure the logger.

    Rules:
    1. FILE: Always log to the configured file (rotated).
    2. CONSOLE: Log to stderr when verbose (DEBUG+) or console_enabled.

    Args:
        verbose: Enable DEBUG console logging
        session_id: Optional ID bound to every record of this process
        config: Optional LogConfig override (for testing)
    """
    logger.remove()

    if config is None:
        config = load_log_config()

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    def format_record(record):
        """Format log record with optional session_id."""
        sid = record["extra"].get("session_id", "")
        if sid:
            return "{time:YYYY-MM-DD HH:mm:ss} | " + sid + " | {level: <8} | {name}:{function}:{line} - {message}\n"
        return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}\n"

    logger.add(
        config.log_path,
        rotation=config.rotation,
        retention=config.retention,
        level=config.file_level,
        format=format_record,
        compression=config.compression,
        enqueue=True,
    )

    if verbose or config.console_enabled:
        logger.add(
            sys.stderr,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level="DEBUG" if verbose else config.console_level,
            colorize=True,
        )

    def redaction_filter(record):
        """Redact credentials from all logs."""
        try:
            record["message"] = redact_sensitive_info(record["message"])
        except Exception:
            # Don't leak original data if redaction fails
            record["message"] = "[REDACTED]"

    logger.configure(patcher=redaction_filter, extra={"session_id": session_id} if session_id else {})


def get_session_logger(session_id: str):
    """
    Get a logger bound to a specific session ID.

    Example:
        >>> session_logger = get_session_logger("bmc-42")
        >>> session_logger.info("Walking /redfish/v1/Systems")
    """
    return logger.bind(session_id=session_id)
