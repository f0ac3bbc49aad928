"""FastMCP server for urlpath-mcp.

NOTE: Do NOT initialize logging here at import time.
Logging is initialized in __main__.py to avoid import side effects.

Tools:
- decode_path: Percent-decode a URL path and query
- encode_path: Percent-encode a path, keeping "/" and scheme/drive colons
- normalize_url_path: Turn any classpath element path into a canonical URL
- health_check: Server health, configuration and metrics
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP


def create_mcp_server() -> FastMCP:
    """Create and initialize the MCP server instance.

    Initializes logging only if nothing has configured it yet, so creating
    the server more than once (e.g., in tests) doesn't duplicate handlers.

    Returns:
        FastMCP server instance
    """
    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        from .config import get_config
        from .logging_config import setup_logging

        config = get_config()
        setup_logging(config)

    return FastMCP("urlpath-mcp")


# Create server instance
mcp = create_mcp_server()


@mcp.tool()
async def decode_path(value: str) -> dict[str, Any]:
    """
    Decode a percent-encoded URL path back into text.

    Malformed or truncated escapes such as "100%" are kept as-is. A "+" is
    decoded as a space only after the first "?".

    Args:
        value: Encoded path, optionally with a "?query" suffix

    Returns:
        Dictionary with status field indicating success or error.
        Success includes result (the decoded string).
        Error includes error_code and message.
    """
    from .tools.decode import decode_path as decode_path_impl

    return await decode_path_impl(value)


@mcp.tool()
async def encode_path(value: str, os_family: str | None = None) -> dict[str, Any]:
    """
    Percent-encode a path so it can be used inside a URL.

    "/" is never escaped. ":" is kept only in a leading scheme prefix
    (jrt:, file:, jar:file:, jar:, http:, https:) and, for Windows, in a
    drive letter right after it.

    Args:
        value: Raw path string
        os_family: "windows" or "posix". Defaults to the server's OS family.

    Returns:
        Dictionary with status field indicating success or error.
        Success includes result and the os_family used.
        Error includes error_code and message.

    Example:
        "jar:file:/my lib.jar!/a.class" -> "jar:file:/my%20lib.jar!/a.class"
    """
    from .tools.encode import encode_path as encode_path_impl

    return await encode_path_impl(value, os_family)


@mcp.tool()
async def normalize_url_path(value: str, os_family: str | None = None) -> dict[str, Any]:
    """
    Normalize a filesystem path or URL into a canonical, encoded URL string.

    Produces jrt:, http(s)://, file:/ or jar:file:/...!/... URLs. Nested
    archive entries may be separated by "!", "!/" or "/!".

    Args:
        value: Path or URL to normalize
        os_family: "windows" or "posix". Defaults to the server's OS family.

    Returns:
        Dictionary with status field indicating success or error.
        Success includes result and the os_family used.
        Error includes error_code and message.

    Example:
        "/libs/app.jar!/com/x/Y.class" -> "jar:file:/libs/app.jar!/com/x/Y.class"
        "C:/libs/app.jar" (windows) -> "file:/C:/libs/app.jar"
    """
    from .tools.normalize import normalize_url_path as normalize_url_path_impl

    return await normalize_url_path_impl(value, os_family)


@mcp.tool()
async def health_check() -> dict[str, Any]:
    """
    Check server health, configuration and per-operation metrics.

    Returns:
        Dictionary with status field ("healthy", "degraded" or "error").
    """
    from .config import get_config
    from .tools.health_check import health_check as health_check_impl

    config = get_config()
    if not config.enable_health_check:
        return {
            "status": "error",
            "error_code": "disabled",
            "message": "Health check tool is disabled. Set URLPATH_MCP_ENABLE_HEALTH_CHECK=true to enable.",
        }

    return await health_check_impl()
