"""pngsplit exceptions"""


class PngSplitError(Exception):
    """Base class of every error raised by pngsplit"""


class FormatError(PngSplitError, ValueError):
    """Structurally invalid PNG data"""


class MissingHeader(FormatError):
    """No IHDR chunk in the file"""

    def __init__(self, message="No IHDR chunk found"):
        super().__init__(message)


class ValidationError(PngSplitError, ValueError):
    """An IHDR field is outside its legal values"""


class UnsupportedColorType(PngSplitError, ValueError):
    """Color type is not one of the five PNG color types"""

    def __init__(self, color_type):
        super().__init__(f"Unsupported color type: {color_type}")
        self.color_type = color_type


class UnsupportedInterlace(PngSplitError, NotImplementedError):
    """Interlaced (Adam7) images can not be split by rows"""

    def __init__(self, interlace_method):
        super().__init__(f"Unsupported interlace method: {interlace_method}")
        self.interlace_method = interlace_method


class InvalidScanline(PngSplitError, ValueError):
    """One or more scanlines have a bad filter byte or length

    ``problems`` is a list of ``(row_index, reason)``.
    """

    def __init__(self, problems):
        self.problems = list(problems)
        shown = "; ".join(
            f"scanline {index}: {reason}" for index, reason in self.problems[:5]
        )
        more = len(self.problems) - 5
        if more > 0:
            shown += f" (and {more} more)"
        super().__init__(f"Invalid scanlines: {shown}")


class CodecError(PngSplitError):
    """The compressor or decompressor failed"""


class DecompressionError(CodecError):
    """Image data could not be decompressed"""


class CompressionError(CodecError):
    """Image data could not be compressed"""
