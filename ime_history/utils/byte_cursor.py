"""Forward-only byte cursor over an in-memory buffer or a binary stream."""

import io
from typing import BinaryIO

from ime_history.exceptions import TruncatedInputError


class ByteCursor:
    """Sequential reader that tracks its absolute offset.

    Every read is all-or-nothing: a read that cannot be satisfied in full
    raises TruncatedInputError naming the structure being decoded.
    """

    def __init__(self, source: bytes | bytearray | memoryview | BinaryIO):
        """Initialize the cursor.

        Args:
            source: Raw bytes, or a readable binary stream positioned at the
                start of the data
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self.offset = 0

    def read(self, size: int, structure: str) -> bytes:
        """Consume exactly ``size`` bytes.

        Args:
            size: Number of bytes to consume
            structure: Name of the structure being read (for error reporting)

        Returns:
            The bytes read

        Raises:
            TruncatedInputError: If fewer than ``size`` bytes remain
        """
        if size == 0:
            return b""

        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

        data = b"".join(chunks)
        if len(data) < size:
            raise TruncatedInputError(structure, self.offset, size, len(data))

        self.offset += size
        return data
