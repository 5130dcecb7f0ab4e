"""Text decoding utilities."""

REPLACEMENT_CHARACTER = "\ufffd"


def decode_utf16le(data: bytes) -> tuple[str, int]:
    """Decode UTF-16LE bytes, replacing malformed code units.

    Each code unit the codec rejects (lone or reversed surrogates) becomes
    one U+FFFD so the rest of the block survives.

    Args:
        data: Raw UTF-16LE bytes

    Returns:
        Tuple of (decoded text, number of code units replaced)
    """
    parts = []
    replaced = 0
    pos = 0
    while True:
        try:
            parts.append(data[pos:].decode("utf-16-le"))
            break
        except UnicodeDecodeError as e:
            parts.append(data[pos : pos + e.start].decode("utf-16-le"))
            units = max(1, (e.end - e.start) // 2)
            parts.append(REPLACEMENT_CHARACTER * units)
            replaced += units
            pos += e.end
    return "".join(parts), replaced
