"""Service for decoding substitution entries and their text blocks."""

import logging
from dataclasses import replace

from ime_history.models import SubstitutionEntry, TextDecodeWarning
from ime_history.utils import ByteCursor, decode_utf16le

logger = logging.getLogger(__name__)


class SubstitutionDecoder:
    """Decode one substitution entry per call (stateless service)."""

    def decode(self, cursor: ByteCursor) -> tuple[SubstitutionEntry, list[TextDecodeWarning]]:
        """Consume a substitution entry: the 8-byte prefix, then input, then result text.

        Args:
            cursor: Cursor positioned at the start of the entry

        Returns:
            Tuple of (entry with both texts decoded, text decode warnings)

        Raises:
            TruncatedInputError: If the prefix or either text block is cut short
        """
        entry = SubstitutionEntry.from_bytes(
            cursor.read(SubstitutionEntry.PREFIX_SIZE, "substitution entry")
        )

        warnings: list[TextDecodeWarning] = []
        input_text = self._read_text(cursor, entry.input_size, "input", warnings)
        result_text = self._read_text(cursor, entry.result_size, "result", warnings)

        return replace(entry, input_text=input_text, result_text=result_text), warnings

    @staticmethod
    def _read_text(
        cursor: ByteCursor,
        size: int,
        field: str,
        warnings: list[TextDecodeWarning],
    ) -> str:
        """Read and decode one UTF-16LE text block.

        Args:
            cursor: Cursor positioned at the text block
            size: Block size in bytes
            field: "input" or "result"
            warnings: List to append a warning to if the block is malformed

        Returns:
            Decoded text, with U+FFFD for each malformed code unit
        """
        offset = cursor.offset
        text, replaced = decode_utf16le(cursor.read(size, f"{field} text"))
        if replaced:
            warning = TextDecodeWarning(offset=offset, field=field, replaced=replaced)
            logger.warning(str(warning))
            warnings.append(warning)
        return text
