"""Tests for text decoding utilities."""

from ime_history.utils import REPLACEMENT_CHARACTER, decode_utf16le

LONE_HIGH = b"\x00\xd8"
LONE_LOW = b"\x00\xdc"


class TestDecodeUtf16le:
    """Tests for decode_utf16le."""

    def test_valid_text(self):
        assert decode_utf16le("日本語".encode("utf-16-le")) == ("日本語", 0)

    def test_empty(self):
        assert decode_utf16le(b"") == ("", 0)

    def test_surrogate_pair(self):
        assert decode_utf16le("𠮷野家".encode("utf-16-le")) == ("𠮷野家", 0)

    def test_lone_high_surrogate_in_middle(self):
        data = "A".encode("utf-16-le") + LONE_HIGH + "B".encode("utf-16-le")
        assert decode_utf16le(data) == ("A" + REPLACEMENT_CHARACTER + "B", 1)

    def test_lone_low_surrogate_at_start(self):
        data = LONE_LOW + "あ".encode("utf-16-le")
        assert decode_utf16le(data) == (REPLACEMENT_CHARACTER + "あ", 1)

    def test_trailing_high_surrogate(self):
        data = "かな".encode("utf-16-le") + LONE_HIGH
        assert decode_utf16le(data) == ("かな" + REPLACEMENT_CHARACTER, 1)

    def test_one_replacement_per_malformed_unit(self):
        data = LONE_LOW + LONE_LOW + "x".encode("utf-16-le") + LONE_LOW
        text, replaced = decode_utf16le(data)
        assert text == REPLACEMENT_CHARACTER * 2 + "x" + REPLACEMENT_CHARACTER
        assert replaced == 3

    def test_literal_replacement_character_not_counted(self):
        """A U+FFFD present in the data is text, not a repair."""
        assert decode_utf16le(REPLACEMENT_CHARACTER.encode("utf-16-le")) == (
            REPLACEMENT_CHARACTER,
            0,
        )
