"""Unit tests for safe-character tables."""

import string

import pytest

from urlpath_mcp.codec.safe_chars import (
    SAFE_BYTES,
    SCHEME_PREFIXES,
    hex_digit_value,
    is_safe_byte,
    scheme_prefix_length,
)


class TestSafeBytes:
    """Tests for the SAFE_BYTES table."""

    def test_table_covers_all_bytes(self):
        """Test SAFE_BYTES has one entry per byte value."""
        assert len(SAFE_BYTES) == 256

    def test_table_is_immutable(self):
        """Test SAFE_BYTES cannot be modified."""
        with pytest.raises(TypeError):
            SAFE_BYTES[0] = True  # type: ignore[index]

    def test_safe_set_contents(self):
        """Test exactly letters, digits and $-_.+!*'(),/ are safe."""
        expected = set(string.ascii_letters + string.digits + "$-_.+!*'(),/")
        actual = {chr(b) for b in range(256) if SAFE_BYTES[b]}
        assert actual == expected

    @pytest.mark.parametrize("char", [":", "@", "&", "=", "?", "#", "%", " ", "~", "\\"])
    def test_reserved_characters_unsafe(self, char: str):
        """Test reserved characters are not in the safe set."""
        assert not is_safe_byte(ord(char))

    def test_high_bytes_unsafe(self):
        """Test no byte >= 0x80 is safe."""
        assert not any(SAFE_BYTES[0x80:])

    def test_is_safe_byte_out_of_range(self):
        """Test is_safe_byte() rejects values outside 0-255."""
        assert not is_safe_byte(-1)
        assert not is_safe_byte(256)


class TestHexDigitValue:
    """Tests for hex_digit_value() function."""

    def test_hex_digits(self):
        """Test hex_digit_value() accepts both cases."""
        assert [hex_digit_value(c) for c in "09afAF"] == [0, 9, 10, 15, 10, 15]

    @pytest.mark.parametrize("char", ["g", "G", "%", " ", "é", "+"])
    def test_non_hex_digits(self, char: str):
        """Test hex_digit_value() returns None for other characters."""
        assert hex_digit_value(char) is None


class TestSchemePrefixLength:
    """Tests for scheme_prefix_length() function."""

    def test_scheme_order(self):
        """Test "jar:file:" is tried before "jar:"."""
        assert SCHEME_PREFIXES.index("jar:file:") < SCHEME_PREFIXES.index("jar:")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("jrt:/x", 4),
            ("file:/x", 5),
            ("jar:file:/x", 9),
            ("jar:http:/x", 4),
            ("http:/x", 5),
            ("https:/x", 6),
            ("ftp:/x", 0),
            ("JAR:/x", 0),
        ],
    )
    def test_scheme_prefix_length(self, value: str, expected: int):
        """Test scheme_prefix_length() returns the first match's length."""
        assert scheme_prefix_length(value) == expected
