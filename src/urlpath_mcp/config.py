"""Runtime configuration management.

Environment Variables:
    URLPATH_MCP_OS_FAMILY: OS conventions for drive letters: auto, windows, posix (default: auto)
    URLPATH_MCP_MAX_INPUT_LENGTH: Maximum length of a tool input string (default: 65536)
    URLPATH_MCP_LOG_LEVEL: Logging level (default: INFO)
    URLPATH_MCP_LOG_MODE: Logging mode: stderr, file, both (default: stderr)
    URLPATH_MCP_LOG_FILE: Log file path (optional, for file/both modes)
    URLPATH_MCP_ENABLE_HEALTH_CHECK: Enable health_check tool (default: true)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast


@dataclass
class Config:
    """Runtime configuration for urlpath-mcp."""

    os_family: Literal["auto", "windows", "posix"]  # Drive-letter conventions
    max_input_length: int  # Longest accepted tool input (characters)
    log_level: str  # Logging level: DEBUG, INFO, WARNING, ERROR
    log_mode: Literal["stderr", "file", "both"]  # Logging mode
    log_file: Path | None  # Log file path (for file/both modes)
    enable_health_check: bool  # Enable health_check tool


_config: Config | None = None


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Validates all configuration values and returns a Config instance with
    defaults applied.

    Returns:
        Config instance with validated values

    Raises:
        ValueError: If configuration values are invalid
    """
    # Parse OS family
    os_family_str = os.getenv("URLPATH_MCP_OS_FAMILY", "auto").lower()
    valid_families = {"auto", "windows", "posix"}
    if os_family_str not in valid_families:
        raise ValueError(
            f"URLPATH_MCP_OS_FAMILY must be one of {valid_families}, got: {os_family_str}"
        )
    os_family = cast(Literal["auto", "windows", "posix"], os_family_str)

    # Parse max input length
    max_input_length_str = os.getenv("URLPATH_MCP_MAX_INPUT_LENGTH", "65536")
    try:
        max_input_length = int(max_input_length_str)
    except ValueError as e:
        raise ValueError(
            f"URLPATH_MCP_MAX_INPUT_LENGTH must be an integer, got: {max_input_length_str}"
        ) from e
    if max_input_length <= 0:
        raise ValueError(
            f"URLPATH_MCP_MAX_INPUT_LENGTH must be positive, got: {max_input_length}"
        )

    # Parse log level
    log_level = os.getenv("URLPATH_MCP_LOG_LEVEL", "INFO").upper()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        raise ValueError(
            f"URLPATH_MCP_LOG_LEVEL must be one of {valid_levels}, got: {log_level}"
        )

    # Parse log mode
    log_mode_str = os.getenv("URLPATH_MCP_LOG_MODE", "stderr").lower()
    valid_modes = {"stderr", "file", "both"}
    if log_mode_str not in valid_modes:
        raise ValueError(
            f"URLPATH_MCP_LOG_MODE must be one of {valid_modes}, got: {log_mode_str}"
        )
    log_mode = cast(Literal["stderr", "file", "both"], log_mode_str)

    # Parse log file
    log_file = None
    if log_file_str := os.getenv("URLPATH_MCP_LOG_FILE"):
        log_file = Path(log_file_str).resolve()

    enable_health_check = os.getenv("URLPATH_MCP_ENABLE_HEALTH_CHECK", "true").lower() == "true"

    return Config(
        os_family=os_family,
        max_input_length=max_input_length,
        log_level=log_level,
        log_mode=log_mode,
        log_file=log_file,
        enable_health_check=enable_health_check,
    )


def get_config() -> Config:
    """
    Get singleton config instance.

    Loads configuration on first call and caches the result.

    Returns:
        Config instance (loads on first call)
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Reset cached config (for testing only).

    This clears the singleton config instance, forcing load_config() to be
    called again on the next get_config() call.
    """
    global _config
    _config = None
