"""Service for walking sentence records and their substitution entries."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime

from ime_history.config import IMEHistoryConfig
from ime_history.exceptions import TimestampRangeError
from ime_history.interfaces import ProgressCallback
from ime_history.models import FileHeader, SentenceRecord, SubstitutionEntry, TextDecodeWarning
from ime_history.utils import ByteCursor, filetime_to_datetime

from .substitution_decoder import SubstitutionDecoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedSubstitution:
    """A substitution entry together with the sentence record it belongs to."""

    record_index: int
    timestamp: datetime
    entry: SubstitutionEntry
    warnings: list[TextDecodeWarning] = field(default_factory=list)


class RecordWalker:
    """Iterate the sentence records that follow the file header."""

    def __init__(
        self,
        config: IMEHistoryConfig,
        decoder: SubstitutionDecoder | None = None,
    ):
        """Initialize the record walker.

        Args:
            config: Configuration (time zone handling)
            decoder: Substitution decoder (default: a new SubstitutionDecoder)
        """
        self.config = config
        self.decoder = decoder or SubstitutionDecoder()

    def walk(
        self,
        cursor: ByteCursor,
        header: FileHeader,
        progress_callback: ProgressCallback | None = None,
    ) -> Iterator[DecodedSubstitution]:
        """Decode ``header.entry_count`` sentence records lazily.

        Each record consumes exactly 16 bytes followed by exactly
        ``sub_entry_count`` substitution entries, so the cursor ends each
        iteration at the start of the next record.

        Args:
            cursor: Cursor positioned just after the file header
            header: The decoded file header
            progress_callback: Optional callback reporting one step per record

        Yields:
            One DecodedSubstitution per substitution entry, in file order

        Raises:
            TruncatedInputError: If a record or entry is cut short
            TimestampRangeError: If a record timestamp cannot be converted
        """
        if progress_callback:
            progress_callback.on_start(header.entry_count, "Decoding sentence records")

        for index in range(header.entry_count):
            record_offset = cursor.offset
            record = SentenceRecord.from_bytes(
                cursor.read(SentenceRecord.SIZE, f"sentence record {index}")
            )
            timestamp = self._convert_timestamp(record.timestamp, record_offset)

            for _ in range(record.sub_entry_count):
                entry, warnings = self.decoder.decode(cursor)
                yield DecodedSubstitution(
                    record_index=index,
                    timestamp=timestamp,
                    entry=entry,
                    warnings=warnings,
                )

            if progress_callback:
                progress_callback.on_progress(
                    index + 1, f"{record.sub_entry_count} substitution(s) at offset {record_offset}"
                )

        if progress_callback:
            progress_callback.on_complete()

    def _convert_timestamp(self, ticks: int, offset: int) -> datetime:
        """Convert a record FILETIME, raising TimestampRangeError when unrepresentable."""
        try:
            return filetime_to_datetime(ticks, local=self.config.use_local_time)
        except (OverflowError, OSError, ValueError) as e:
            raise TimestampRangeError(ticks, offset) from e
