"""PNG chunk framing: length | type | data | crc"""

from typing import NamedTuple, Tuple

from .byteview import concat, take, to_hex, u32_from_bytes, u32_to_bytes
from .crc import crc32
from .errors import FormatError

ERROR_CODE = {
    "WRONG_LENGTH": "Wrong length",
    "WRONG_CRC": "Wrong CRC",
    "WRONG_TYPE": "Wrong type",
}

CHUNKS_TYPES = {
    b"IHDR": "Image header",
    b"PLTE": "Palette",
    b"IDAT": "Image data",
    b"IEND": "Image trailer",
    b"eXIf": "Exif data",
    b"cHRM": "Primary chromaticities",
    b"gAMA": "Image gamma",
    b"iCCP": "Embedded ICC profile",
    b"sBIT": "Significant bits",
    b"sRGB": "Standard RGB color space",
    b"bKGD": "Background color",
    b"hIST": "Image histogram",
    b"tRNS": "Transparency",
    b"pHYs": "Physical pixel dimensions",
    b"sPLT": "Suggested palette",
    b"tIME": "Image last-modification time",
    b"iTXt": "International textual data",
    b"tEXt": "Textual data",
    b"zTXt": "Compressed textual data",
}

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# length + type before the data, crc after
CHUNK_OVERHEAD = 12


class Chunk(NamedTuple):
    """One chunk as it was read from a stream

    ``length`` is the declared length, ``crc`` the stored 4 bytes trailer,
    ``computed_crc`` the trailer recomputed from type and data when the chunk
    was built and ``raw`` the bytes the chunk was sliced from.
    Build chunks with :func:`extract_chunk` or :func:`create_chunk` so that
    ``computed_crc`` matches ``data``.
    """

    length: int
    chunk_type: bytes
    data: bytes
    crc: bytes
    errors: Tuple[str, ...] = ()
    raw: bytes = b""
    computed_crc: bytes = b""

    @property
    def type_name(self) -> str:
        return try_dec(self.chunk_type)

    def fresh_crc(self) -> bytes:
        """CRC trailer matching type and data"""
        if self.computed_crc:
            return self.computed_crc
        return u32_to_bytes(compute_chunk_crc(self.chunk_type, self.data))

    @property
    def is_crc_valid(self) -> bool:
        return self.crc == self.fresh_crc()


def try_dec(chunk_type: bytes) -> str:
    """Decode a chunk type, ???? when it is not made of ASCII letters"""
    if is_valid_type(chunk_type):
        return chunk_type.decode("ascii")
    return "????"


def is_valid_type(chunk_type: bytes) -> bool:
    """A chunk type is four ASCII letters"""
    return len(chunk_type) == 4 and all(
        0x41 <= c <= 0x5A or 0x61 <= c <= 0x7A for c in chunk_type
    )


def describe_chunk_type(chunk_type: bytes) -> str:
    """Human name of a chunk type"""
    return CHUNKS_TYPES.get(bytes(chunk_type), "Unknown")


def compute_chunk_crc(chunk_type: bytes, data: bytes) -> int:
    """CRC of a chunk, computed over its type and data"""
    return crc32(concat([chunk_type, data]))


def extract_chunk(stream: bytes, strict=True):
    """Read one chunk from the start of stream

    Returns ``(chunk, remainder)``. When the declared length runs past the end
    of the stream, strict mode raises :class:`FormatError`, otherwise the chunk
    takes what is left and gets a "Wrong length" error.
    """
    stream = bytes(stream)
    errors = []
    length = u32_from_bytes(stream[0:4])
    chunk_type = stream[4:8]
    total = length + CHUNK_OVERHEAD
    if total > len(stream):
        if strict:
            raise FormatError(
                f"Chunk {try_dec(chunk_type)} declares {length} bytes of data"
                f" but only {max(len(stream) - CHUNK_OVERHEAD, 0)} are available"
            )
        errors.append(ERROR_CODE["WRONG_LENGTH"])
    raw, rest = take(stream, total)
    _, body = take(raw, 8)
    data, crc = take(body, length)
    computed_crc = u32_to_bytes(compute_chunk_crc(chunk_type, data))
    if not is_valid_type(chunk_type):
        errors.append(ERROR_CODE["WRONG_TYPE"])
    if crc != computed_crc:
        errors.append(ERROR_CODE["WRONG_CRC"])
    chunk = Chunk(length, chunk_type, data, crc, tuple(errors), raw, computed_crc)
    return chunk, rest


def iter_chunks(stream: bytes, strict=True):
    """Yield chunks until the stream is exhausted"""
    rest = bytes(stream)
    while len(rest) > 0:
        chunk, rest = extract_chunk(rest, strict=strict)
        yield chunk


def extract_chunks(stream: bytes, strict=True):
    """Read every chunk of a stream (the part after the signature)"""
    return list(iter_chunks(stream, strict=strict))


def serialize_chunk(chunk: Chunk) -> bytes:
    """Binary form of a chunk, length and crc are derived from type and data

    The stored trailer is never written back.
    """
    return concat(
        [
            u32_to_bytes(len(chunk.data)),
            chunk.chunk_type,
            chunk.data,
            chunk.fresh_crc(),
        ]
    )


def create_chunk(chunk_type: bytes, data: bytes) -> Chunk:
    """Create a chunk with a fresh crc"""
    data = bytes(data)
    crc = u32_to_bytes(compute_chunk_crc(chunk_type, data))
    raw = concat([u32_to_bytes(len(data)), chunk_type, data, crc])
    return Chunk(len(data), chunk_type, data, crc, (), raw, crc)


def create_idat_chunk(data: bytes) -> Chunk:
    """Create an IDAT chunk"""
    return create_chunk(b"IDAT", data)


def create_iend_chunk() -> Chunk:
    """Create an IEND chunk"""
    return create_chunk(b"IEND", b"")


def get_by_type(chunks, chunk_type=b"IDAT"):
    """Get all chunks of a specific type"""
    return [one_chunk for one_chunk in chunks if one_chunk.chunk_type == chunk_type]


def remove_chunk_by_type(chunks, filter_type):
    """Remove chunks by type"""
    return [one_chunk for one_chunk in chunks if one_chunk.chunk_type != filter_type]


def format_chunk(chunk: Chunk, index=0, width=1) -> str:
    """One line summary of a chunk"""
    data_display = chunk.data[:5] + b"..." if len(chunk.data) > 10 else chunk.data
    errors = f" Errors: {list(chunk.errors)}" if chunk.errors else ""
    return (
        f"Chunk {index:2d}: Length={chunk.length:{width}d}, Type={chunk.type_name},"
        f" CRC={''.join(to_hex(chunk.crc))} ({chunk.is_crc_valid}), data={data_display}"
        f"{errors}"
    )
