"""Custom exceptions for IME History."""

from .base import IMEHistoryException
from .decode import DecodeError, TimestampRangeError, TruncatedInputError
from .file import HistoryFileNotFoundError

__all__ = [
    "IMEHistoryException",
    "HistoryFileNotFoundError",
    "DecodeError",
    "TruncatedInputError",
    "TimestampRangeError",
]
