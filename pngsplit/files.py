"""Reading and writing PNG files on disk"""

import logging
from os.path import basename, join

from .inspection import inspect_png
from .split import DEFAULT_MAX_ROWS, split_png

logger = logging.getLogger("pngsplit")


def read_png_bytes(filename) -> bytes:
    """Read a whole file"""
    with open(filename, "rb") as fp:
        data = fp.read()
    logger.info("Reading %s (%d bytes)", filename, len(data))
    return data


def split_filename(filename, index, output_dir=None) -> str:
    """Name of the index-th split output, <filename>__splitNN.png"""
    name = f"{filename}__split{index:02d}.png"
    if output_dir is not None:
        name = join(output_dir, basename(name))
    return name


def write_split_files(filename, outputs, output_dir=None):
    """Write split outputs next to filename (or in output_dir)"""
    paths = []
    for index, png_bytes in enumerate(outputs):
        path = split_filename(filename, index, output_dir)
        logger.info("----> Writing %s", path)
        with open(path, "wb") as fp:
            fp.write(png_bytes)
        paths.append(path)
    return paths


def split_file(filename, max_rows_per_file=DEFAULT_MAX_ROWS, output_dir=None):
    """Split a PNG file, returns the written paths"""
    outputs = split_png(read_png_bytes(filename), max_rows_per_file)
    return write_split_files(filename, outputs, output_dir)


def inspect_file(filename):
    """Report lines for a PNG file"""
    return inspect_png(read_png_bytes(filename))
