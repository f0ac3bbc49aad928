"""URL path encoding, decoding and normalization."""

from .context import (
    OsFamily,
    PathContext,
    detect_os_family,
    get_default_context,
    reset_default_context,
)
from .decoder import EscapedByte, LiteralText, decode_path, scan_escape
from .encoder import encode_path
from .normalizer import normalize_url_path
from .safe_chars import SAFE_BYTES, SCHEME_PREFIXES, is_safe_byte

__all__ = [
    "SAFE_BYTES",
    "SCHEME_PREFIXES",
    "EscapedByte",
    "LiteralText",
    "OsFamily",
    "PathContext",
    "decode_path",
    "detect_os_family",
    "encode_path",
    "get_default_context",
    "is_safe_byte",
    "normalize_url_path",
    "reset_default_context",
    "scan_escape",
]
