"""Decode tool implementation.

Provides the decode_path MCP tool, which percent-decodes a URL path and its
optional query string.
"""

from typing import Any

from ..codec import decode_path as decode_path_impl
from .runner import run_codec_tool


async def decode_path(value: str) -> dict[str, Any]:
    """
    Percent-decode a URL path.

    Args:
        value: Encoded path, optionally followed by "?query"

    Returns:
        Success:
            {"status": "success", "result": "/a b/c"}

        Error:
            {
                "status": "error",
                "error_code": "validation_error" | "execution_error",
                "message": "Human-readable error message"
            }

    Example:
        >>> result = await decode_path("/a%20b?x=1+2")
        >>> result["result"]
        '/a b?x=1 2'
    """
    return await run_codec_tool(
        "decode",
        value,
        lambda text, _context: decode_path_impl(text),
        context_aware=False,
    )
