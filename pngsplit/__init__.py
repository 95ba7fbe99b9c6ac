"""main module"""

from .byteview import (
    concat,  # noqa: F401
    take,  # noqa: F401
    split_fixed,  # noqa: F401
    split_list,  # noqa: F401
    u32_from_bytes,  # noqa: F401
    u32_to_bytes,  # noqa: F401
    to_hex,  # noqa: F401
    to_ascii,  # noqa: F401
)
from .crc import crc32  # noqa: F401
from .errors import (
    PngSplitError,  # noqa: F401
    FormatError,  # noqa: F401
    MissingHeader,  # noqa: F401
    ValidationError,  # noqa: F401
    UnsupportedColorType,  # noqa: F401
    UnsupportedInterlace,  # noqa: F401
    InvalidScanline,  # noqa: F401
    CodecError,  # noqa: F401
    DecompressionError,  # noqa: F401
    CompressionError,  # noqa: F401
)
from .chunk import (
    PNG_SIGNATURE,  # noqa: F401
    Chunk,  # noqa: F401
    compute_chunk_crc,  # noqa: F401
    extract_chunk,  # noqa: F401
    extract_chunks,  # noqa: F401
    iter_chunks,  # noqa: F401
    serialize_chunk,  # noqa: F401
    create_chunk,  # noqa: F401
    create_idat_chunk,  # noqa: F401
    create_iend_chunk,  # noqa: F401
    get_by_type,  # noqa: F401
    remove_chunk_by_type,  # noqa: F401
)
from .ihdr import (
    ImageHeader,  # noqa: F401
    parse_ihdr,  # noqa: F401
    find_ihdr,  # noqa: F401
    create_ihdr_chunk,  # noqa: F401
)
from .scanline import (
    ScanlineLayout,  # noqa: F401
    samples_per_pixel,  # noqa: F401
    bytes_per_pixel,  # noqa: F401
    scanline_size,  # noqa: F401
    extract_scanlines,  # noqa: F401
    validate_scanlines,  # noqa: F401
)
from .codec import compress_image_data, decompress_image_data  # noqa: F401
from .inspection import inspect_png, inspect_report, ReportLine  # noqa: F401
from .split import split_png, partition_chunks, DEFAULT_MAX_ROWS  # noqa: F401
from .files import read_png_bytes, write_split_files, split_file  # noqa: F401
from .cli import (
    cli_main,  # noqa: F401
    CLI,  # noqa: F401
)
