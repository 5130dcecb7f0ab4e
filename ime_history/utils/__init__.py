"""Utility functions for IME History."""

from .byte_cursor import ByteCursor
from .filetime import FILETIME_EPOCH, filetime_to_datetime
from .paths import default_history_path, resolve_history_path
from .text_utils import REPLACEMENT_CHARACTER, decode_utf16le

__all__ = [
    "ByteCursor",
    "FILETIME_EPOCH",
    "filetime_to_datetime",
    "default_history_path",
    "resolve_history_path",
    "REPLACEMENT_CHARACTER",
    "decode_utf16le",
]
