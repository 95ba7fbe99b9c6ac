import struct
import zlib

import pytest

SIGNATURE = b"\x89PNG\r\n\x1a\n"


def raw_chunk(chunk_type, data, crc=None):
    """Binary chunk, with a correct crc unless one is given"""
    if crc is None:
        crc = zlib.crc32(chunk_type + data).to_bytes(4, "big")
    return struct.pack(">I", len(data)) + chunk_type + data + crc


def ihdr_data(width, height, bit_depth=8, color_type=2, interlace=0):
    return struct.pack(
        ">IIBBBBB", width, height, bit_depth, color_type, 0, 0, interlace
    )


def scanlines_for(width, height, samples=3, filter_byte=0):
    """Rows whose pixel bytes encode the row index"""
    return [
        bytes([filter_byte] + [(row * 7 + i) % 256 for i in range(width * samples)])
        for row in range(height)
    ]


def make_png(
    width=4,
    height=4,
    bit_depth=8,
    color_type=2,
    interlace=0,
    scanlines=None,
    top=(),
    bottom=(),
    idat_parts=1,
):
    """A PNG made of IHDR, top chunks, IDAT chunks, bottom chunks and IEND"""
    if scanlines is None:
        scanlines = scanlines_for(width, height)
    compressed = zlib.compress(b"".join(scanlines))
    size = -(-len(compressed) // idat_parts)
    idats = [
        raw_chunk(b"IDAT", compressed[i : i + size])
        for i in range(0, len(compressed), size)
    ]
    return (
        SIGNATURE
        + raw_chunk(b"IHDR", ihdr_data(width, height, bit_depth, color_type, interlace))
        + b"".join(top)
        + b"".join(idats)
        + b"".join(bottom)
        + raw_chunk(b"IEND", b"")
    )


@pytest.fixture
def small_png():
    """4x4 truecolor image, 13 bytes scanlines"""
    return make_png()


@pytest.fixture
def tall_png():
    """5x10 image with ancillary chunks around the image data"""
    return make_png(
        width=5,
        height=10,
        top=[raw_chunk(b"gAMA", struct.pack(">I", 45455))],
        bottom=[raw_chunk(b"tEXt", b"Comment\x00split me")],
        idat_parts=3,
    )
