"""Byte-level character classes for URL path encoding.

The tables here are built once at import time and are immutable afterwards,
so they can be read from any number of threads or tasks without locking.
"""

import string

# Characters that may appear unescaped in an encoded path. "/" is kept from the
# segment rules, while ":", "@", "&" and "=" are escaped.
SAFE_CHARACTERS = string.ascii_letters + string.digits + "$-_.+!*'(),/"

SAFE_BYTES: tuple[bool, ...] = tuple(chr(b) in SAFE_CHARACTERS for b in range(256))

HEX_DIGITS = "0123456789abcdef"

# Tried in order, first match wins: "jar:file:" must come before "jar:".
SCHEME_PREFIXES: tuple[str, ...] = ("jrt:", "file:", "jar:file:", "jar:", "http:", "https:")


def is_safe_byte(value: int) -> bool:
    """Check whether a byte value may appear unescaped in an encoded path.

    Args:
        value: Byte value in the range 0-255

    Returns:
        True if the byte is in the safe set, False otherwise (including for
        values outside 0-255)
    """
    return 0 <= value < 256 and SAFE_BYTES[value]


def hex_digit_value(char: str) -> int | None:
    """Return the value of a single hexadecimal digit, or None if it is not one."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    return None


def scheme_prefix_length(value: str) -> int:
    """Return the length of the first scheme prefix that value starts with.

    Args:
        value: Raw path or URL string

    Returns:
        Length of the matching entry of SCHEME_PREFIXES, or 0 if none matches

    Example:
        >>> scheme_prefix_length("jar:file:/a.jar")
        9
        >>> scheme_prefix_length("/usr/lib")
        0
    """
    for scheme in SCHEME_PREFIXES:
        if value.startswith(scheme):
            return len(scheme)
    return 0
