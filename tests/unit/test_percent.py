"""tests/unit/test_percent.py

Unit tests for reqtarget.utils.percent module.
"""

import string

import pytest

from reqtarget.utils.percent import percent_decode


class TestPercentDecode:
    """Tests for percent_decode() in the default mode."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("first%20name", "first name"),
            ("a%3Db", "a=b"),
            ("Smith%26Co", "Smith&Co"),
            ("what%3F", "what?"),
            ("test%40example.com", "test@example.com"),
            ("Jos%C3%A9", "José"),
            ("%F0%9F%98%80", "😀"),
            ("%2b", "+"),
        ],
    )
    def test_decodes_escapes(self, raw, expected):
        """Test that %XX escapes and UTF-8 byte runs are decoded."""
        assert percent_decode(raw) == expected

    def test_plain_text_unchanged(self):
        """Test that text without escapes is returned as is."""
        assert percent_decode("hello") == "hello"
        assert percent_decode("") == ""

    def test_plus_is_literal(self):
        """Test that '+' is not treated as a space by default."""
        assert percent_decode("John+Doe") == "John+Doe"

    @pytest.mark.parametrize("raw", ["%", "%4", "%zz", "100%", "%%", "a%g1b"])
    def test_malformed_escape_passes_through(self, raw):
        """Test that malformed escapes are kept as literal text."""
        assert percent_decode(raw) == raw

    def test_malformed_escape_next_to_valid_one(self):
        """Test that a valid escape still decodes beside a malformed one."""
        assert percent_decode("%zz%20") == "%zz "

    def test_invalid_utf8_becomes_replacement_character(self):
        """Test that bytes that are not valid UTF-8 decode to U+FFFD."""
        assert percent_decode("%FF") == "\ufffd"
        assert percent_decode("a%C3b") == "a\ufffdb"

    @pytest.mark.parametrize("char", string.ascii_letters + string.digits + "-._~")
    def test_unreserved_round_trip(self, char):
        """Test that an encoded unreserved character decodes to itself."""
        assert percent_decode(f"%{ord(char):02X}") == char
        assert percent_decode(f"%{ord(char):02x}") == char


class TestPercentDecodePlusAsSpace:
    """Tests for percent_decode() in HTML form mode."""

    def test_plus_becomes_space(self):
        """Test that '+' decodes to a space."""
        assert percent_decode("John+Doe", plus_as_space=True) == "John Doe"

    def test_encoded_plus_stays_plus(self):
        """Test that %2B still decodes to a literal '+'."""
        assert percent_decode("1%2B1", plus_as_space=True) == "1+1"

    def test_plain_text_unchanged(self):
        """Test that text without escapes or '+' is returned as is."""
        assert percent_decode("hello", plus_as_space=True) == "hello"
