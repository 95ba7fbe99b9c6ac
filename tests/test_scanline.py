from fractions import Fraction

import pytest

from pngsplit import (
    InvalidScanline,
    ScanlineLayout,
    UnsupportedColorType,
    bytes_per_pixel,
    extract_scanlines,
    samples_per_pixel,
    scanline_size,
    validate_scanlines,
)


def test_samples_per_pixel():
    assert [samples_per_pixel(c) for c in (0, 2, 3, 4, 6)] == [1, 3, 1, 2, 4]


@pytest.mark.parametrize("color_type", [1, 5, 7, 255])
def test_unsupported_color_type(color_type):
    with pytest.raises(UnsupportedColorType):
        samples_per_pixel(color_type)
    with pytest.raises(UnsupportedColorType):
        scanline_size(4, 8, color_type)


def test_scanline_size():
    assert scanline_size(4, 8, 2) == 13
    assert scanline_size(1, 8, 0) == 2
    assert scanline_size(10, 16, 6) == 81
    assert scanline_size(8, 1, 0) == 2
    # sub-byte rows are padded
    assert scanline_size(3, 1, 0) == 2
    assert scanline_size(5, 4, 3) == 4


def test_bytes_per_pixel():
    assert bytes_per_pixel(8, 2) == 3
    assert bytes_per_pixel(16, 4) == 4
    assert bytes_per_pixel(2, 0) == Fraction(1, 4)


def test_layout():
    layout = ScanlineLayout.from_fields(4, 8, 6)
    assert layout.stride == 17
    assert layout.row_bytes == 16
    assert layout.bytes_per_pixel == 4


def test_extract_scanlines():
    data = bytes(26)
    assert extract_scanlines(data, 13) == [bytes(13), bytes(13)]


def test_validate_scanlines_ok():
    validate_scanlines([b"\x00abc", b"\x04def"], 3)


def test_filter_byte_five():
    with pytest.raises(InvalidScanline) as exc_info:
        validate_scanlines([b"\x00abc", b"\x05abc"], 3)
    assert exc_info.value.problems == [(1, "invalid filter byte 5")]


def test_validation_is_exhaustive():
    scanlines = [b"\x09abc", b"\x00abc", b"\x00ab", b""]
    with pytest.raises(InvalidScanline) as exc_info:
        validate_scanlines(scanlines, 3)
    assert [index for index, _ in exc_info.value.problems] == [0, 2, 3]
