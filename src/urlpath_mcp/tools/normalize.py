"""Normalize tool implementation.

Provides the normalize_url_path MCP tool, which turns filesystem paths,
partially qualified URLs and nested-archive paths into one canonical,
encoded URL string.
"""

from typing import Any

from ..codec import normalize_url_path as normalize_url_path_impl
from .runner import run_codec_tool


async def normalize_url_path(value: str, os_family: str | None = None) -> dict[str, Any]:
    """
    Normalize a path or URL into an encoded URL string.

    Args:
        value: Filesystem path, "file:"/"jar:"/"jrt:"/"http(s):" URL, or a
               nested-archive path using "!" separators
        os_family: "windows" or "posix"; defaults to the configured OS family

    Returns:
        Success:
            {
                "status": "success",
                "result": "jar:file:/a/b.jar!/c/d.class",
                "os_family": "posix"
            }

        Error:
            {
                "status": "error",
                "error_code": "validation_error" | "execution_error",
                "message": "Human-readable error message"
            }
    """
    return await run_codec_tool(
        "normalize", value, normalize_url_path_impl, os_family=os_family
    )
