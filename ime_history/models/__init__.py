"""Data models for IME History."""

from .history import DecodeResult, HistoryLine, TextDecodeWarning
from .records import FileHeader, SentenceRecord, SubstitutionEntry

__all__ = [
    "FileHeader",
    "SentenceRecord",
    "SubstitutionEntry",
    "HistoryLine",
    "TextDecodeWarning",
    "DecodeResult",
]
