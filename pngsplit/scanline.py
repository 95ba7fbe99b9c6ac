"""Scanline geometry and checks"""

from fractions import Fraction
from typing import NamedTuple

from .byteview import split_fixed
from .errors import InvalidScanline, UnsupportedColorType

SAMPLES_PER_PIXEL = {
    0: 1,  # Grayscale
    2: 3,  # Truecolor (RGB)
    3: 1,  # Indexed-color, one palette index per pixel
    4: 2,  # Grayscale with alpha
    6: 4,  # Truecolor with alpha (RGBA)
}

FILTER_TYPES = {
    0: "None",
    1: "Sub",
    2: "Up",
    3: "Average",
    4: "Paeth",
}


def samples_per_pixel(color_type: int) -> int:
    """Number of samples in one pixel of a color type"""
    try:
        return SAMPLES_PER_PIXEL[color_type]
    except KeyError:
        raise UnsupportedColorType(color_type) from None


def bytes_per_pixel(bit_depth: int, color_type: int) -> Fraction:
    """Bytes per pixel, below one for sub-byte depths"""
    return Fraction(bit_depth * samples_per_pixel(color_type), 8)


def row_bytes(width: int, bit_depth: int, color_type: int) -> int:
    """Pixel bytes in one scanline, without the filter byte"""
    bits = width * bit_depth * samples_per_pixel(color_type)
    # sub-byte rows are padded to a whole byte
    return (bits + 7) // 8


def scanline_size(width: int, bit_depth: int, color_type: int) -> int:
    """Scanline size in bytes, filter byte included"""
    return 1 + row_bytes(width, bit_depth, color_type)


class ScanlineLayout(NamedTuple):
    width: int
    bytes_per_pixel: Fraction
    stride: int

    @property
    def row_bytes(self) -> int:
        return self.stride - 1

    @classmethod
    def from_fields(cls, width, bit_depth, color_type):
        return cls(
            width,
            bytes_per_pixel(bit_depth, color_type),
            scanline_size(width, bit_depth, color_type),
        )

    @classmethod
    def from_header(cls, header):
        return cls.from_fields(header.width, header.bit_depth, header.color_type)


def extract_scanlines(data: bytes, stride: int):
    """Cut decompressed image data into scanlines"""
    return split_fixed(data, stride)


def scanline_problem(scanline: bytes, expected_row_bytes: int):
    """Describe what is wrong with a scanline, None when it is fine"""
    if len(scanline) == 0:
        return "empty scanline"
    if scanline[0] not in FILTER_TYPES:
        return f"invalid filter byte {scanline[0]}"
    if len(scanline) - 1 != expected_row_bytes:
        return (
            f"incorrect data length: expected {expected_row_bytes},"
            f" got {len(scanline) - 1}"
        )
    return None


def validate_scanlines(scanlines, expected_row_bytes: int):
    """Check every scanline, then raise InvalidScanline listing all failures"""
    problems = []
    for index, scanline in enumerate(scanlines):
        reason = scanline_problem(scanline, expected_row_bytes)
        if reason is not None:
            problems.append((index, reason))
    if problems:
        raise InvalidScanline(problems)

