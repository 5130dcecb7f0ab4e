"""Orchestrator for decoding a complete history file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from ime_history.config import IMEHistoryConfig
from ime_history.exceptions import DecodeError, HistoryFileNotFoundError
from ime_history.interfaces import ProgressCallback
from ime_history.models import DecodeResult, HistoryLine
from ime_history.services import HeaderReader, RecordWalker
from ime_history.utils import ByteCursor

logger = logging.getLogger(__name__)

HistorySource = bytes | bytearray | memoryview | BinaryIO


class HistoryDecoder:
    """Orchestrate header, record and substitution decoding over one byte source.

    Each call creates its own cursor, so a single decoder can be reused for
    independent sources.
    """

    def __init__(
        self,
        config: IMEHistoryConfig,
        header_reader: HeaderReader | None = None,
        record_walker: RecordWalker | None = None,
    ):
        """Initialize the history decoder.

        Args:
            config: Configuration
            header_reader: Header reader (default: a new HeaderReader)
            record_walker: Record walker (default: a new RecordWalker for config)
        """
        self.config = config
        self.header_reader = header_reader or HeaderReader()
        self.record_walker = record_walker or RecordWalker(config)

    def decode(
        self,
        source: HistorySource,
        progress_callback: ProgressCallback | None = None,
    ) -> DecodeResult:
        """Decode a complete history in one blocking call.

        Args:
            source: Raw bytes or a readable binary stream
            progress_callback: Optional callback reporting one step per record

        Returns:
            DecodeResult with every non-empty history line in file order

        Raises:
            TruncatedInputError: If the data ends early; ``partial_lines``
                holds the lines completed before the fault
            TimestampRangeError: If a record timestamp cannot be converted
        """
        cursor = ByteCursor(source)
        header = self.header_reader.read(cursor)
        result = DecodeResult(header=header)

        for _ in self._collect(cursor, result, progress_callback):
            pass

        result.bytes_consumed = cursor.offset
        logger.info(
            f"Decoded {header.entry_count} records, {result.substitutions_read} substitutions, "
            f"{len(result.lines)} lines"
        )
        return result

    def decode_file(
        self,
        history_path: Path,
        progress_callback: ProgressCallback | None = None,
    ) -> DecodeResult:
        """Decode a history file from disk.

        Args:
            history_path: Path to JpnIHDS.dat
            progress_callback: Optional callback reporting one step per record

        Returns:
            DecodeResult for the file

        Raises:
            HistoryFileNotFoundError: If the file does not exist
            DecodeError: If the file cannot be decoded
        """
        if not history_path.is_file():
            raise HistoryFileNotFoundError(history_path)

        logger.debug(f"Reading history file {history_path}")
        with open(history_path, "rb") as f:
            return self.decode(f, progress_callback)

    def iter_lines(self, source: HistorySource) -> Iterator[HistoryLine]:
        """Decode lazily, yielding each history line as soon as it is complete.

        A fault is raised at the point it occurs, after every earlier line
        has been yielded.

        Args:
            source: Raw bytes or a readable binary stream

        Yields:
            HistoryLine objects in file order
        """
        cursor = ByteCursor(source)
        header = self.header_reader.read(cursor)
        yield from self._collect(cursor, DecodeResult(header=header))

    def _collect(
        self,
        cursor: ByteCursor,
        result: DecodeResult,
        progress_callback: ProgressCallback | None = None,
    ) -> Iterator[HistoryLine]:
        """Walk the records, accumulating into ``result`` and yielding new lines."""
        try:
            for decoded in self.record_walker.walk(cursor, result.header, progress_callback):
                result.substitutions_read += 1
                result.warnings.extend(decoded.warnings)

                text = decoded.entry.selected_text
                if not text:
                    continue

                line = HistoryLine(timestamp=decoded.timestamp, text=text)
                result.lines.append(line)
                yield line
        except DecodeError as e:
            e.partial_lines = list(result.lines)
            logger.debug(f"Decode stopped after {len(result.lines)} lines: {e}")
            raise
