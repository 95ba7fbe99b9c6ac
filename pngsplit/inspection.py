"""Read-only report on the structure of a PNG file"""

import logging
from typing import Any, NamedTuple

from .byteview import concat, take, to_hex
from .chunk import PNG_SIGNATURE, describe_chunk_type, iter_chunks
from .codec import decompress_image_data, run_codec
from .errors import DecompressionError, MissingHeader
from .ihdr import COLOR_TYPES, INTERLACE_METHODS, parse_ihdr
from .scanline import extract_scanlines

logger = logging.getLogger("pngsplit")


class ReportLine(NamedTuple):
    """One line of an inspection report, an empty label separates sections"""

    label: str = ""
    value: Any = None

    def __str__(self):
        if self.value is None:
            return self.label
        return f"{self.label}: {self.value}"


BLANK = ReportLine()


def _hex(data: bytes) -> str:
    return " ".join(to_hex(data))


def inspect_png(png_bytes: bytes, decompress=decompress_image_data):
    """Yield report lines describing a PNG file

    Every chunk is listed with its stored and recomputed CRC; a mismatch is
    reported, never raised. The IDAT data is decompressed and cut into
    scanlines to count them.
    """
    signature, rest = take(png_bytes, len(PNG_SIGNATURE))
    yield ReportLine("Signature", _hex(signature))
    yield ReportLine("Signature valid", signature == PNG_SIGNATURE)
    yield BLANK

    idat_datas = []
    total_idat_size = 0
    ihdr = None
    count = 0
    for index, chunk in enumerate(iter_chunks(rest, strict=False)):
        count += 1
        if chunk.chunk_type == b"IDAT":
            idat_datas.append(chunk.data)
            total_idat_size += chunk.length
        if chunk.chunk_type == b"IHDR" and ihdr is None:
            ihdr = chunk
        yield ReportLine("Chunk", index)
        yield ReportLine("Size", chunk.length)
        yield ReportLine("Type", chunk.type_name)
        yield ReportLine("Description", describe_chunk_type(chunk.chunk_type))
        yield ReportLine("CRC", _hex(chunk.crc))
        yield ReportLine("Computed CRC", _hex(chunk.computed_crc))
        yield ReportLine("CRC valid", chunk.is_crc_valid)
        if chunk.errors:
            yield ReportLine("Errors", ", ".join(chunk.errors))
        yield BLANK

    yield ReportLine("Total Chunks", count)
    yield ReportLine("Total IDAT Chunks", len(idat_datas))
    yield ReportLine("Total IDAT Compressed Size", total_idat_size)

    compressed_bytes = concat(idat_datas)
    yield ReportLine("Compressed Data Size", len(compressed_bytes))
    logger.debug("Decompressing %d bytes of image data", len(compressed_bytes))
    decompressed_bytes = run_codec(decompress, compressed_bytes, DecompressionError)
    yield ReportLine("Decompressed Data Size", len(decompressed_bytes))
    yield BLANK

    if ihdr is None:
        raise MissingHeader()
    header = parse_ihdr(ihdr)
    yield ReportLine("Width", header.width)
    yield ReportLine("Height", header.height)
    yield ReportLine("BitDepth", header.bit_depth)
    color_name = COLOR_TYPES.get(header.color_type, "Unknown")
    yield ReportLine("ColorType", f"{header.color_type} ({color_name})")
    yield ReportLine("CompressionMethod", header.compression_method)
    yield ReportLine("FilterMethod", header.filter_method)
    interlace_name = INTERLACE_METHODS.get(header.interlace_method, "Unknown")
    yield ReportLine("InterlaceMethod", f"{header.interlace_method} ({interlace_name})")
    yield BLANK

    if header.is_interlaced:
        yield ReportLine("Scanlines", "interlaced image, not extracted")
        return

    layout = header.layout()
    yield ReportLine("Scanline Size", layout.stride)
    scanlines = extract_scanlines(decompressed_bytes, layout.stride)
    yield ReportLine("Scanlines Extracted", len(scanlines))
    yield ReportLine("Scanlines Expected", header.height)


def inspect_report(png_bytes: bytes, decompress=decompress_image_data):
    """Whole report as a list of strings"""
    return [str(line) for line in inspect_png(png_bytes, decompress=decompress)]
