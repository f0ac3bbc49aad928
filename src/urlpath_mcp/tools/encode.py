"""Encode tool implementation."""

from typing import Any

from ..codec import encode_path as encode_path_impl
from .runner import run_codec_tool


async def encode_path(value: str, os_family: str | None = None) -> dict[str, Any]:
    """
    Percent-encode a path for use inside a URL.

    Args:
        value: Raw path string
        os_family: "windows" or "posix"; defaults to the configured OS family

    Returns:
        Success:
            {"status": "success", "result": "file:/a%20b", "os_family": "posix"}

        Error:
            {"status": "error", "error_code": "validation_error", "message": "..."}
    """
    return await run_codec_tool("encode", value, encode_path_impl, os_family=os_family)
