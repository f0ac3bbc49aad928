"""Percent-decoding of URL paths and query strings.

Unlike urllib.parse.unquote, decoding here never fails and never guesses:
malformed or truncated escapes are kept as literal text, and "+" only means
a space inside the query part.
"""

from dataclasses import dataclass

from .safe_chars import hex_digit_value


@dataclass(frozen=True)
class EscapedByte:
    """A well-formed %XX escape, decoded to its byte value."""

    value: int


@dataclass(frozen=True)
class LiteralText:
    """Characters that did not form a valid escape and are kept verbatim."""

    text: str


EscapeResult = EscapedByte | LiteralText


def scan_escape(text: str, index: int) -> tuple[EscapeResult, int]:
    """Scan a single percent-escape starting at text[index].

    Looks ahead at most two characters past the "%".

    Args:
        text: String being decoded
        index: Position of a "%" character in text

    Returns:
        Tuple of (result, next_index). result is EscapedByte when "%" is
        followed by two hex digits. Otherwise it is LiteralText: the rest of
        the string when fewer than two characters follow the "%", or the "%"
        plus the two characters that followed it.

    Example:
        >>> scan_escape("a%2Fb", 1)
        (EscapedByte(value=47), 4)
        >>> scan_escape("a%4", 1)
        (LiteralText(text='%4'), 3)
    """
    if index + 2 >= len(text):
        return LiteralText(text[index:]), len(text)

    high = hex_digit_value(text[index + 1])
    low = hex_digit_value(text[index + 2])
    if high is None or low is None:
        return LiteralText(text[index : index + 3]), index + 3
    return EscapedByte((high << 4) | low), index + 3


def _utf8(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def unescape_into(text: str, buffer: bytearray, *, is_query: bool) -> None:
    """Append the unescaped bytes of text to buffer.

    Args:
        text: Path or query segment to unescape
        buffer: Destination for the decoded bytes
        is_query: If True, "+" is decoded as a space
    """
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "%":
            result, index = scan_escape(text, index)
            if isinstance(result, EscapedByte):
                buffer.append(result.value)
            else:
                buffer.extend(_utf8(result.text))
            continue

        if is_query and char == "+":
            buffer.append(0x20)
        elif ord(char) <= 0x7F:
            buffer.append(ord(char))
        else:
            buffer.extend(_utf8(char))
        index += 1


def decode_path(value: str) -> str:
    """Decode a percent-encoded path, with an optional "?query" suffix.

    The path part and the query part (which keeps its leading "?") are
    unescaped separately; only the query part treats "+" as a space. The
    combined bytes are then read as UTF-8.

    Args:
        value: Encoded path string

    Returns:
        Decoded text. Never raises: malformed escapes are passed through and
        invalid UTF-8 sequences become U+FFFD.

    Example:
        >>> decode_path("/a%20b/c+d?x=1+2")
        '/a b/c+d?x=1 2'
    """
    path_part, separator, query = value.partition("?")
    buffer = bytearray()
    unescape_into(path_part, buffer, is_query=False)
    unescape_into(separator + query, buffer, is_query=True)
    return buffer.decode("utf-8", errors="replace")
