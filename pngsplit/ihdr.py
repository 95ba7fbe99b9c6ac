"""IHDR chunk: the 13 bytes image header"""

from typing import NamedTuple

from .byteview import concat, u32_from_bytes, u32_to_bytes
from .chunk import Chunk, create_chunk
from .errors import FormatError, MissingHeader, ValidationError
from .scanline import ScanlineLayout

IHDR_LENGTH = 13

BIT_DEPTHS = (1, 2, 4, 8, 16)

COLOR_TYPES = {
    0: "Grayscale",
    2: "Truecolor",
    3: "Indexed-color",
    4: "Grayscale with alpha",
    6: "Truecolor with alpha",
}

INTERLACE_METHODS = {
    0: "No interlace",
    1: "Adam7",
}


class ImageHeader(NamedTuple):
    width: int
    height: int
    bit_depth: int
    color_type: int
    compression_method: int = 0
    filter_method: int = 0
    interlace_method: int = 0

    @property
    def is_interlaced(self) -> bool:
        return self.interlace_method == 1

    def with_height(self, height: int) -> "ImageHeader":
        """Same header, another height"""
        return self._replace(height=height)

    def layout(self):
        """Scanline layout for this header"""
        return ScanlineLayout.from_header(self)

    def to_chunk(self) -> Chunk:
        return create_ihdr_chunk(*self)


def parse_ihdr(chunk: Chunk) -> ImageHeader:
    """Decode IHDR chunk data

    Field values are not checked here, :func:`create_ihdr_chunk` and the
    scanline geometry do that.
    """
    data = chunk.data
    if len(data) != IHDR_LENGTH:
        raise FormatError(
            f"Invalid IHDR chunk length: expected {IHDR_LENGTH} bytes, got {len(data)}"
        )
    return ImageHeader(
        width=u32_from_bytes(data[0:4]),
        height=u32_from_bytes(data[4:8]),
        bit_depth=data[8],
        color_type=data[9],
        compression_method=data[10],
        filter_method=data[11],
        interlace_method=data[12],
    )


def find_ihdr(chunks) -> Chunk:
    """First IHDR chunk of a list of chunks"""
    for one_chunk in chunks:
        if one_chunk.chunk_type == b"IHDR":
            return one_chunk
    raise MissingHeader()


def validate_header(
    width,
    height,
    bit_depth,
    color_type,
    compression_method=0,
    filter_method=0,
    interlace_method=0,
):
    """Raise ValidationError when a field is outside its legal values"""
    for name, value in (("width", width), ("height", height)):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValidationError(f"Invalid {name}: {value} does not fit in 32 bits.")
    if bit_depth not in BIT_DEPTHS:
        raise ValidationError(
            f"Invalid bit depth {bit_depth}. Must be one of 1, 2, 4, 8, or 16."
        )
    if color_type not in COLOR_TYPES:
        raise ValidationError(
            f"Invalid color type {color_type}. Must be one of 0, 2, 3, 4, or 6."
        )
    if compression_method != 0:
        raise ValidationError(
            f"Invalid compression method {compression_method}."
            " Only method 0 is supported."
        )
    if filter_method != 0:
        raise ValidationError(
            f"Invalid filter method {filter_method}. Only method 0 is supported."
        )
    if interlace_method not in INTERLACE_METHODS:
        raise ValidationError(
            f"Invalid interlace method {interlace_method}."
            " Must be either 0 (no interlace) or 1 (Adam7)."
        )


def create_ihdr_chunk(
    width,
    height,
    bit_depth=8,
    color_type=6,
    compression_method=0,
    filter_method=0,
    interlace_method=0,
) -> Chunk:
    """Create an IHDR chunk"""
    validate_header(
        width,
        height,
        bit_depth,
        color_type,
        compression_method,
        filter_method,
        interlace_method,
    )
    data = concat(
        [
            u32_to_bytes(width),
            u32_to_bytes(height),
            bytes(
                [
                    bit_depth,
                    color_type,
                    compression_method,
                    filter_method,
                    interlace_method,
                ]
            ),
        ]
    )
    return create_chunk(b"IHDR", data)
