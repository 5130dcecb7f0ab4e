"""History file location exceptions."""

from pathlib import Path

from .base import IMEHistoryException


class HistoryFileNotFoundError(IMEHistoryException):
    """Raised when the history file to decode does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File does not exist: {path}")
