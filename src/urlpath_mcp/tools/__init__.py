"""MCP tool implementations."""

from .decode import decode_path
from .encode import encode_path
from .health_check import health_check
from .normalize import normalize_url_path

__all__ = [
    "decode_path",
    "encode_path",
    "health_check",
    "normalize_url_path",
]
