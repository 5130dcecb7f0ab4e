"""Service for decoding the fixed file header."""

import logging

from ime_history.models import FileHeader
from ime_history.utils import ByteCursor

logger = logging.getLogger(__name__)


class HeaderReader:
    """Decode the 32-byte file header (stateless service)."""

    def read(self, cursor: ByteCursor) -> FileHeader:
        """Consume the file header at the cursor.

        The entry count is trusted as-is; it is not cross-checked against
        the allocated or used sizes.

        Args:
            cursor: Cursor positioned at the start of the file

        Returns:
            The decoded FileHeader

        Raises:
            TruncatedInputError: If fewer than 32 bytes remain
        """
        header = FileHeader.from_bytes(cursor.read(FileHeader.SIZE, "file header"))
        logger.debug(
            f"Header: {header.entry_count} entries, "
            f"used {header.used_size}/{header.allocated_size} bytes"
        )
        return header
