"""Data models for recovered history and decode results."""

from dataclasses import dataclass, field
from datetime import datetime

from .records import FileHeader


@dataclass(frozen=True)
class HistoryLine:
    """A single recovered history line."""

    timestamp: datetime
    text: str


@dataclass(frozen=True)
class TextDecodeWarning:
    """A malformed UTF-16 text block that was decoded with replacement characters."""

    offset: int  # Byte offset of the text block
    field: str  # "input" or "result"
    replaced: int  # Number of U+FFFD characters substituted

    def __str__(self) -> str:
        return (
            f"Malformed UTF-16 in {self.field} text at offset {self.offset} "
            f"({self.replaced} code unit(s) replaced)"
        )


@dataclass
class DecodeResult:
    """Result of decoding a complete history file."""

    header: FileHeader
    lines: list[HistoryLine] = field(default_factory=list)
    warnings: list[TextDecodeWarning] = field(default_factory=list)
    substitutions_read: int = 0
    bytes_consumed: int = 0

    @property
    def has_warnings(self) -> bool:
        """Check if any text block needed replacement characters."""
        return len(self.warnings) > 0

    def __str__(self) -> str:
        return (
            f"DecodeResult(entries={self.header.entry_count}, "
            f"substitutions={self.substitutions_read}, lines={len(self.lines)}, "
            f"warnings={len(self.warnings)})"
        )
