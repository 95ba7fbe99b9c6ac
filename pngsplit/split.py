"""Split a PNG into several PNGs of at most N rows each"""

import logging
from typing import List, NamedTuple

from .byteview import concat, split_list, take
from .chunk import (
    PNG_SIGNATURE,
    Chunk,
    create_idat_chunk,
    extract_chunks,
    get_by_type,
    remove_chunk_by_type,
    serialize_chunk,
)
from .codec import compress_image_data, decompress_image_data, run_codec
from .errors import (
    CompressionError,
    DecompressionError,
    FormatError,
    UnsupportedInterlace,
)
from .ihdr import ImageHeader, find_ihdr, parse_ihdr, validate_header
from .scanline import extract_scanlines, validate_scanlines

logger = logging.getLogger("pngsplit")

DEFAULT_MAX_ROWS = 4096


class ChunkGroups(NamedTuple):
    """Chunks before, of and after the IDAT run"""

    top: List[Chunk]
    data: List[Chunk]
    bottom: List[Chunk]


def partition_chunks(chunks) -> ChunkGroups:
    """Group chunks around the single contiguous run of IDAT chunks"""
    chunks = list(chunks)
    index = 0
    top = []
    while index < len(chunks) and chunks[index].chunk_type != b"IDAT":
        top.append(chunks[index])
        index += 1
    data = []
    while index < len(chunks) and chunks[index].chunk_type == b"IDAT":
        data.append(chunks[index])
        index += 1
    bottom = chunks[index:]
    if any(one_chunk.chunk_type == b"IDAT" for one_chunk in bottom):
        raise FormatError("IDAT chunks are not contiguous")
    return ChunkGroups(top, data, bottom)


def assemble_png(signature: bytes, chunks) -> bytes:
    """Write a signature and chunks, every crc recomputed"""
    return concat([signature] + [serialize_chunk(one_chunk) for one_chunk in chunks])


def build_band(
    header: ImageHeader, band, groups: ChunkGroups, compress=compress_image_data
) -> bytes:
    """One output file holding the scanlines of band"""
    raw = concat(band)
    compressed = run_codec(compress, raw, CompressionError)
    logger.debug(
        "Band of %d rows: %d -> %d bytes", len(band), len(raw), len(compressed)
    )
    new_ihdr = header.with_height(len(band)).to_chunk()
    top_without_ihdr = remove_chunk_by_type(groups.top, b"IHDR")
    return assemble_png(
        PNG_SIGNATURE,
        [new_ihdr] + top_without_ihdr + [create_idat_chunk(compressed)] + groups.bottom,
    )


def split_png(
    png_bytes: bytes,
    max_rows_per_file=DEFAULT_MAX_ROWS,
    compress=compress_image_data,
    decompress=decompress_image_data,
):
    """Split a PNG into files of at most max_rows_per_file rows

    Each output is a complete PNG: a new IHDR with the band height, the other
    chunks before the image data, one new IDAT and the chunks after it.
    ``max_rows_per_file <= 0`` gives a single output.
    """
    signature, rest = take(png_bytes, len(PNG_SIGNATURE))
    if signature != PNG_SIGNATURE:
        raise FormatError("File is not a PNG")
    chunks = extract_chunks(rest)
    logger.info("Read %d chunks", len(chunks))
    bad_crc = [
        one_chunk.type_name for one_chunk in chunks if not one_chunk.is_crc_valid
    ]
    if bad_crc:
        logger.warning("Wrong CRC on chunks %s, recomputing", bad_crc)

    groups = partition_chunks(chunks)
    ihdr_count = len(get_by_type(chunks, b"IHDR"))
    if ihdr_count > 1:
        raise FormatError(f"Expected one IHDR chunk, found {ihdr_count}")
    if get_by_type(groups.bottom, b"IHDR"):
        raise FormatError("IHDR chunk comes after the image data")
    header = parse_ihdr(find_ihdr(groups.top))
    layout = header.layout()
    validate_header(*header)
    if header.is_interlaced:
        raise UnsupportedInterlace(header.interlace_method)

    compressed_bytes = concat(one_chunk.data for one_chunk in groups.data)
    logger.info(
        "Decompressing %d bytes from %d IDAT chunks",
        len(compressed_bytes),
        len(groups.data),
    )
    decompressed_bytes = run_codec(decompress, compressed_bytes, DecompressionError)

    scanlines = extract_scanlines(decompressed_bytes, layout.stride)
    validate_scanlines(scanlines, layout.row_bytes)
    if len(scanlines) != header.height:
        logger.warning(
            "IHDR height is %d but %d scanlines were decoded",
            header.height,
            len(scanlines),
        )

    bands = split_list(scanlines, max_rows_per_file)
    logger.info("Creating %d PNGs", len(bands))
    png_out_buffers = []
    for band in bands:
        png_out_buffers.append(build_band(header, band, groups, compress=compress))
    return png_out_buffers
