"""byte sequence helpers

Every function returns new ``bytes`` objects and never touches its input.
Degenerate sizes fall back instead of raising.
"""


def concat(sequences):
    """Concatenate byte sequences in order"""
    return b"".join(bytes(one_sequence) for one_sequence in sequences)


def take(data: bytes, size: int):
    """Split data into (first size bytes, remainder)"""
    data = bytes(data)
    if size > len(data):
        return data, b""
    if size > 0:
        return data[:size], data[size:]
    return b"", data


def split_fixed(data: bytes, size: int):
    """Split data into size-byte parts, the last one may be shorter"""
    data = bytes(data)
    if size > len(data) or size <= 0:
        return [data]
    return [data[i : i + size] for i in range(0, len(data), size)]


def split_list(items, count: int):
    """Split a list into lists of at most count items"""
    if count > len(items) or count <= 0:
        return [list(items)]
    return [list(items[i : i + count]) for i in range(0, len(items), count)]


def u32_from_bytes(data: bytes) -> int:
    """Read a big-endian unsigned 32 bits integer"""
    return int.from_bytes(data[0:4], byteorder="big")


def u32_to_bytes(value: int) -> bytes:
    """Write a big-endian unsigned 32 bits integer"""
    return (value & 0xFFFFFFFF).to_bytes(4, byteorder="big")


def to_hex(data: bytes):
    """Render each byte as two hex digits"""
    return [f"{byte:02x}" for byte in data]


def to_ascii(data: bytes) -> str:
    """Render bytes one char per byte"""
    return "".join(chr(byte) for byte in data)
