"""Binary decoding exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import IMEHistoryException

if TYPE_CHECKING:
    from ime_history.models import HistoryLine


class DecodeError(IMEHistoryException):
    """Base class for faults that abort a decode run.

    Attributes:
        offset: Byte offset at which the failing read started
        partial_lines: History lines completed before the fault
    """

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset
        self.partial_lines: list[HistoryLine] = []


class TruncatedInputError(DecodeError):
    """Raised when fewer bytes remain than a fixed or declared length requires."""

    def __init__(self, structure: str, offset: int, needed: int, available: int):
        self.structure = structure
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input at offset {offset} while reading {structure}: "
            f"needed {needed} bytes, {available} available",
            offset,
        )


class TimestampRangeError(DecodeError):
    """Raised when a FILETIME value cannot be represented as a datetime."""

    def __init__(self, ticks: int, offset: int):
        self.ticks = ticks
        super().__init__(
            f"Timestamp out of range at offset {offset}: FILETIME {ticks:#x}",
            offset,
        )
