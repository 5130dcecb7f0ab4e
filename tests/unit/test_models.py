"""Tests for data model classes."""

from datetime import datetime, timezone

from ime_history.models import (
    DecodeResult,
    FileHeader,
    HistoryLine,
    SentenceRecord,
    SubstitutionEntry,
    TextDecodeWarning,
)


def _le(value: int, size: int) -> bytes:
    return value.to_bytes(size, "little")


class TestFileHeader:
    """Tests for FileHeader."""

    def test_size(self):
        assert FileHeader.SIZE == 32

    def test_field_offsets(self):
        raw = bytearray(32)
        raw[0:8] = _le(0x0102030405060708, 8)
        raw[8:12] = _le(4096, 4)
        raw[12:16] = _le(7, 4)
        raw[16:20] = _le(12345, 4)
        raw[20:24] = _le(0x20, 4)
        raw[24:28] = _le(99, 4)
        raw[28:32] = _le(2048, 4)

        header = FileHeader.from_bytes(bytes(raw))

        assert header.timestamp == 0x0102030405060708
        assert header.allocated_size == 4096
        assert header.flags == 7
        assert header.entry_count == 12345
        assert header.constant == 0x20
        assert header.unknown1 == 99
        assert header.used_size == 2048


class TestSentenceRecord:
    """Tests for SentenceRecord."""

    def test_size(self):
        assert SentenceRecord.SIZE == 16

    def test_field_offsets(self):
        raw = bytearray(16)
        raw[0:8] = _le(132000000000000000, 8)
        raw[8:10] = _le(0x1234, 2)
        raw[10:12] = _le(0x10, 2)
        raw[12] = 0x01
        raw[13] = 255
        raw[14:16] = _le(0, 2)

        record = SentenceRecord.from_bytes(bytes(raw))

        assert record.timestamp == 132000000000000000
        assert record.sub_block_size == 0x1234
        assert record.constant_word == 0x10
        assert record.constant_byte == 0x01
        assert record.sub_entry_count == 255
        assert record.constant_tail == 0


class TestSubstitutionEntry:
    """Tests for SubstitutionEntry."""

    def test_prefix_size(self):
        assert SubstitutionEntry.PREFIX_SIZE == 8

    def test_prefix_field_offsets(self):
        raw = _le(0x0028, 2) + bytes([5, 3]) + _le(0xDEADBEEF, 4)
        entry = SubstitutionEntry.from_bytes(raw)

        assert entry.struct_size == 0x28
        assert entry.result_len == 5
        assert entry.input_len == 3
        assert entry.flags == 0xDEADBEEF
        assert entry.input_text == ""
        assert entry.result_text == ""

    def test_block_sizes_are_twice_the_unit_counts(self):
        entry = SubstitutionEntry(struct_size=0, result_len=5, input_len=3, flags=0)
        assert entry.input_size == 6
        assert entry.result_size == 10

    def test_selects_input_when_no_result(self):
        entry = SubstitutionEntry(0, result_len=0, input_len=2, flags=0, input_text="かな")
        assert entry.selected_text == "かな"

    def test_selects_result_over_input(self):
        entry = SubstitutionEntry(
            0, result_len=2, input_len=2, flags=0, input_text="かな", result_text="仮名"
        )
        assert entry.selected_text == "仮名"

    def test_nothing_selected_when_both_empty(self):
        assert SubstitutionEntry(0, 0, 0, 0).selected_text == ""


class TestTextDecodeWarning:
    """Tests for TextDecodeWarning."""

    def test_str(self):
        warning = TextDecodeWarning(offset=72, field="result", replaced=2)
        assert str(warning) == "Malformed UTF-16 in result text at offset 72 (2 code unit(s) replaced)"


class TestDecodeResult:
    """Tests for DecodeResult."""

    def _header(self, entry_count=1):
        return FileHeader(0, 0, 0, entry_count, 0x20, 0, 0)

    def test_defaults(self):
        result = DecodeResult(header=self._header())
        assert result.lines == []
        assert result.warnings == []
        assert result.substitutions_read == 0
        assert not result.has_warnings

    def test_has_warnings(self):
        result = DecodeResult(
            header=self._header(),
            warnings=[TextDecodeWarning(offset=0, field="input", replaced=1)],
        )
        assert result.has_warnings

    def test_str(self):
        line = HistoryLine(timestamp=datetime(2020, 1, 1, tzinfo=timezone.utc), text="a")
        result = DecodeResult(header=self._header(3), lines=[line], substitutions_read=4)
        assert str(result) == "DecodeResult(entries=3, substitutions=4, lines=1, warnings=0)"
