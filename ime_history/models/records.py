"""Data models for the fixed-layout structures of JpnIHDS.dat.

All structures are little-endian. Offsets below are authoritative and the
``struct`` formats use the ``<`` prefix so no alignment padding is inserted.

FileHeader (32 bytes)::

    Offset  Size    Field
    ------  ----    -----
    0       8       timestamp (FILETIME)
    8       4       allocated_size
    12      4       flags
    16      4       entry_count
    20      4       constant (0x20)
    24      4       unknown1
    28      4       used_size

SentenceRecord (16 bytes)::

    0       8       timestamp (FILETIME)
    8       2       sub_block_size
    10      2       constant (0x10)
    12      1       constant (0x01)
    13      1       sub_entry_count
    14      2       constant (0x00)

SubstitutionEntry prefix (8 bytes), followed by input_len*2 bytes of
UTF-16LE input text and result_len*2 bytes of UTF-16LE result text::

    0       2       struct_size
    2       1       result_len
    3       1       input_len
    4       4       flags
"""

import struct
from dataclasses import dataclass
from typing import ClassVar

_HEADER = struct.Struct("<QIIIIII")
_SENTENCE = struct.Struct("<QHHBBH")
_SUBSTITUTION = struct.Struct("<HBBI")


@dataclass(frozen=True)
class FileHeader:
    """Fixed 32-byte file header."""

    SIZE: ClassVar[int] = _HEADER.size

    timestamp: int
    allocated_size: int
    flags: int
    entry_count: int
    constant: int
    unknown1: int
    used_size: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "FileHeader":
        """Decode a header from exactly ``SIZE`` bytes."""
        return cls(*_HEADER.unpack(data))


@dataclass(frozen=True)
class SentenceRecord:
    """Fixed 16-byte sentence record prefix.

    A sentence record groups the substitutions of one input session under
    a single timestamp.
    """

    SIZE: ClassVar[int] = _SENTENCE.size

    timestamp: int
    sub_block_size: int
    constant_word: int
    constant_byte: int
    sub_entry_count: int
    constant_tail: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SentenceRecord":
        """Decode a sentence record from exactly ``SIZE`` bytes."""
        return cls(*_SENTENCE.unpack(data))


@dataclass(frozen=True)
class SubstitutionEntry:
    """One conversion event: the 8-byte prefix plus its decoded text blocks.

    ``input_len`` and ``result_len`` count UTF-16 code units, not bytes.
    """

    PREFIX_SIZE: ClassVar[int] = _SUBSTITUTION.size

    struct_size: int
    result_len: int
    input_len: int
    flags: int
    input_text: str = ""
    result_text: str = ""

    @classmethod
    def from_bytes(cls, data: bytes) -> "SubstitutionEntry":
        """Decode the prefix from exactly ``PREFIX_SIZE`` bytes (texts left empty)."""
        return cls(*_SUBSTITUTION.unpack(data))

    @property
    def input_size(self) -> int:
        """Size in bytes of the input text block."""
        return self.input_len * 2

    @property
    def result_size(self) -> int:
        """Size in bytes of the result text block."""
        return self.result_len * 2

    @property
    def selected_text(self) -> str:
        """Text to report: the committed result, or the raw input when there is none."""
        if self.result_len == 0:
            return self.input_text
        return self.result_text
