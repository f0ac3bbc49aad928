"""Logging configuration for urlpath-mcp.

JSON-formatted logging to stderr (default) and optional human-readable file
logging for development.

IMPORTANT: No logging at import time. All logging setup must happen explicitly
via setup_logging().
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

# Request ID for correlating the log lines of one tool call
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

# Extra record attributes copied into JSON output when present
EXTRA_FIELDS = ("operation", "input_length", "duration", "error_code")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON lines for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as a single JSON line.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log line with timestamp, level, logger and message,
            plus request_id, any EXTRA_FIELDS and exception text when present
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Correlate with the tool call being served
        if request_id := request_id_var.get():
            log_obj["request_id"] = request_id

        # Codec fields passed through logger.*(..., extra={...})
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


class RequestIdFilter(logging.Filter):
    """Inject request_id into log records from context variable."""

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Copy the current request_id onto the record, if one is set.

        Args:
            record: Log record to filter

        Returns:
            True (records are never dropped)
        """
        if request_id := request_id_var.get():
            record.request_id = request_id  # type: ignore[attr-defined]
        return True


def setup_logging(config: "Config") -> None:
    """
    Configure logging based on config.log_mode.

    Args:
        config: Configuration instance with logging settings

    Logging Modes:
        - "stderr": JSON formatter to stderr (default)
        - "file": Human-readable format to config.log_file
        - "both": Both outputs

    The root logger and the urlpath_mcp logger both take config.log_level.
    Stdout is never written to: it carries the MCP stdio transport.

    IMPORTANT: Call this once at startup, before the server module is
    imported, NOT at module import time.
    """
    # Root logger receives records from every urlpath_mcp.* logger
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Formatters: JSON for machines, plain text for people
    json_formatter = JsonFormatter()
    human_formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Shared by all handlers
    request_id_filter = RequestIdFilter()

    # stderr handler (JSON)
    if config.log_mode in ("stderr", "both"):
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(json_formatter)
        stderr_handler.addFilter(request_id_filter)
        root_logger.addHandler(stderr_handler)

    # File handler (human-readable, rotated)
    if config.log_mode in ("file", "both"):
        log_file = _get_log_file(config)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setFormatter(human_formatter)
        file_handler.addFilter(request_id_filter)
        root_logger.addHandler(file_handler)

        # current.log always points at the newest file
        _create_current_log_symlink(log_file)

    package_logger = logging.getLogger("urlpath_mcp")
    package_logger.setLevel(config.log_level)

    logging.info(
        "Logging initialized",
        extra={
            "log_mode": config.log_mode,
            "log_level": config.log_level,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the urlpath_mcp namespace.

    Args:
        name: Logger name (e.g., "tools.encode")

    Returns:
        Logger instance for "urlpath_mcp.<name>"

    Example:
        >>> logger = get_logger("tools.encode")
        >>> logger.name
        'urlpath_mcp.tools.encode'
    """
    return logging.getLogger(f"urlpath_mcp.{name}")


def _get_log_file(config: "Config") -> Path:
    """
    Get the log file path, choosing one if it is not configured.

    Args:
        config: Configuration instance

    Returns:
        config.log_file when set, otherwise a timestamped file under the
        platform log directory
    """
    if config.log_file:
        return config.log_file

    log_dir = _get_log_directory()
    log_dir.mkdir(parents=True, exist_ok=True)

    # One file per server start
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return log_dir / f"urlpath-mcp-{timestamp}.log"


def _get_log_directory() -> Path:
    """
    Get platform-appropriate log directory.

    Returns:
        %LOCALAPPDATA%-style path on Windows, ~/.urlpath-mcp/logs elsewhere
    """
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / "urlpath-mcp" / "logs"
    return Path.home() / ".urlpath-mcp" / "logs"


def _create_current_log_symlink(log_file: Path) -> None:
    """
    Create or update the current.log symlink next to log_file.

    Args:
        log_file: Path to current log file
    """
    current_link = log_file.parent / "current.log"

    if current_link.exists() or current_link.is_symlink():
        current_link.unlink()

    try:
        current_link.symlink_to(log_file.name)
    except OSError:
        # Symlinks may not be supported on some systems
        pass
