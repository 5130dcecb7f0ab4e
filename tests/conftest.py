"""Pytest configuration and shared fixtures."""

import struct

import pytest

from ime_history.config import IMEHistoryConfig
from ime_history.presenters import NullPresenter, NullProgressCallback

# 2019-04-17 18:40:00 UTC
SAMPLE_FILETIME = 132000000000000000


@pytest.fixture
def test_config():
    """Provide a test configuration with a fixed line terminator and UTC timestamps."""
    return IMEHistoryConfig(line_terminator="\n", use_local_time=False)


@pytest.fixture
def sample_filetime():
    """Provide a FILETIME value for 2019-04-17 18:40:00 UTC."""
    return SAMPLE_FILETIME


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_progress():
    """Provide a null progress callback for testing."""
    return NullProgressCallback()


@pytest.fixture
def make_header():
    """Factory fixture for building raw 32-byte file headers."""

    def _make(
        entry_count=0,
        timestamp=SAMPLE_FILETIME,
        allocated_size=0x10000,
        flags=0,
        constant=0x20,
        unknown1=0,
        used_size=0,
    ):
        return struct.pack(
            "<QIIIIII",
            timestamp,
            allocated_size,
            flags,
            entry_count,
            constant,
            unknown1,
            used_size,
        )

    return _make


@pytest.fixture
def make_record():
    """Factory fixture for building raw 16-byte sentence records."""

    def _make(sub_entry_count=0, timestamp=SAMPLE_FILETIME, sub_block_size=0):
        return struct.pack("<QHHBBH", timestamp, sub_block_size, 0x10, 0x01, sub_entry_count, 0)

    return _make


@pytest.fixture
def make_substitution():
    """Factory fixture for building raw substitution entries.

    Text arguments are encoded as UTF-16LE; pass ``input_bytes`` or
    ``result_bytes`` to supply raw (possibly malformed) blocks instead.
    """

    def _make(input_text="", result_text="", flags=0, input_bytes=None, result_bytes=None):
        raw_input = input_text.encode("utf-16-le") if input_bytes is None else input_bytes
        raw_result = result_text.encode("utf-16-le") if result_bytes is None else result_bytes
        prefix = struct.pack(
            "<HBBI",
            8 + len(raw_input) + len(raw_result),
            len(raw_result) // 2,
            len(raw_input) // 2,
            flags,
        )
        return prefix + raw_input + raw_result

    return _make


@pytest.fixture
def make_history(make_header, make_record, make_substitution):
    """Factory fixture for building a complete history file.

    Takes a list of ``(timestamp, [(input_text, result_text), ...])`` tuples,
    one per sentence record.
    """

    def _make(records):
        data = bytearray(make_header(entry_count=len(records)))
        for timestamp, substitutions in records:
            data += make_record(sub_entry_count=len(substitutions), timestamp=timestamp)
            for input_text, result_text in substitutions:
                data += make_substitution(input_text, result_text)
        return bytes(data)

    return _make


class RecordingProgress:
    """A real ProgressCallback implementation that records all calls for assertion."""

    def __init__(self):
        self.starts = []
        self.progresses = []
        self.completes = 0

    def on_start(self, total: int, description: str) -> None:
        self.starts.append((total, description))

    def on_progress(self, current: int, item_description: str) -> None:
        self.progresses.append((current, item_description))

    def on_complete(self) -> None:
        self.completes += 1


@pytest.fixture
def recording_progress():
    """Provide a progress callback that records all calls for assertion."""
    return RecordingProgress()


@pytest.fixture
def sample_history_file(tmp_path, make_history):
    """Create a small history file on disk with two sentence records."""
    history_file = tmp_path / "JpnIHDS.dat"
    history_file.write_bytes(
        make_history(
            [
                (SAMPLE_FILETIME, [("にほんご", "日本語"), ("です", "")]),
                (SAMPLE_FILETIME + 36_000_000_000, [("", "")]),
            ]
        )
    )
    return history_file
