"""zlib wrappers for IDAT data"""

import zlib

from .errors import CodecError, CompressionError, DecompressionError

DEFAULT_COMPRESSION_LEVEL = 6


def decompress_image_data(data: bytes) -> bytes:
    """Decompress the concatenated IDAT data"""
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise DecompressionError(f"Error decompressing IDAT data: {e}") from e


def compress_image_data(data: bytes, level=DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """Compress raw scanlines into IDAT data"""
    try:
        return zlib.compress(data, level)
    except zlib.error as e:
        raise CompressionError(f"Error compressing IDAT data: {e}") from e


def run_codec(codec, data: bytes, error_class=CodecError) -> bytes:
    """Call a compress/decompress callable, failures become error_class"""
    try:
        return bytes(codec(data))
    except CodecError:
        raise
    except Exception as e:
        raise error_class(f"{type(e).__name__}: {e}") from e
