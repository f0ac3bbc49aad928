"""Percent-encoding of URL paths."""

from .context import PathContext, get_default_context
from .safe_chars import HEX_DIGITS, SAFE_BYTES, scheme_prefix_length

_COLON = ord(":")


def colon_prefix_length(value: str, context: PathContext) -> int:
    """Compute how many leading bytes of value may keep a literal ":".

    The region covers a recognized scheme prefix and, on Windows, a drive
    letter right after it (optionally preceded by one "/").

    Args:
        value: Raw path string
        context: OS context deciding whether drive letters are recognized

    Returns:
        Length of the colon-safe region in UTF-8 bytes

    Example:
        >>> colon_prefix_length("file:/C:/x", PathContext.windows())
        8
        >>> colon_prefix_length("file:/C:/x", PathContext.posix())
        5
    """
    prefix_len = scheme_prefix_length(value)
    if context.is_windows:
        index = prefix_len
        if index < len(value) and value[index] == "/":
            index += 1
        if index < len(value) - 1 and value[index].isalpha() and value[index + 1] == ":":
            prefix_len = index + 2
    # Byte positions differ from character positions for non-ASCII drive letters
    return len(value[:prefix_len].encode("utf-8", "surrogatepass"))


def encode_path(value: str, context: PathContext | None = None) -> str:
    """Percent-encode a path so it can be embedded in a URL.

    "/" and the other safe characters are left alone. ":" is left alone only
    inside the scheme prefix and Windows drive region; every other byte is
    written as "%" plus two lowercase hex digits.

    Args:
        value: Raw path string
        context: OS context; defaults to the process-wide context

    Returns:
        Encoded string

    Example:
        >>> encode_path("jar:file:/a b.jar!/c.class", PathContext.posix())
        'jar:file:/a%20b.jar!/c.class'
    """
    if context is None:
        context = get_default_context()

    valid_colon_len = colon_prefix_length(value, context)
    encoded: list[str] = []
    for position, byte in enumerate(value.encode("utf-8", "surrogatepass")):
        if SAFE_BYTES[byte] or (byte == _COLON and position < valid_colon_len):
            encoded.append(chr(byte))
        else:
            encoded.append("%" + HEX_DIGITS[byte >> 4] + HEX_DIGITS[byte & 0x0F])
    return "".join(encoded)
