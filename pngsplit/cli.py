# /bin/env python3

import logging
from os.path import join, expanduser
import cmd2
from .chunk import extract_chunks, format_chunk, PNG_SIGNATURE
from .byteview import take
from .errors import PngSplitError
from .files import read_png_bytes, write_split_files
from .ihdr import parse_ihdr, COLOR_TYPES, INTERLACE_METHODS
from .inspection import inspect_png
from .split import split_png, DEFAULT_MAX_ROWS

PATH_HISTORY = join(expanduser("~"), ".pngsplit_history.dat")


class CLI(cmd2.Cmd):
    """pngsplit CLI"""

    def __init__(self):
        super().__init__(
            persistent_history_file=PATH_HISTORY,
        )
        self.prompt = "pngsplit> "
        self.filename = None
        self.png_bytes = None
        self.chunks = []

    def has_file(self):
        """Tell the user when no file is loaded"""
        if self.png_bytes is None:
            print("No file loaded, use read_file first")
            return False
        return True

    read_file_parser = cmd2.Cmd2ArgumentParser()
    read_file_parser.add_argument("filename", help="Path to the file")

    @cmd2.with_argparser(read_file_parser)
    def do_read_file(self, args):
        """Read a PNG file"""
        try:
            png_bytes = read_png_bytes(args.filename)
        except OSError as e:
            print(f"Error: {e}")
            return
        _, rest = take(png_bytes, len(PNG_SIGNATURE))
        self.filename = args.filename
        self.png_bytes = png_bytes
        self.chunks = extract_chunks(rest, strict=False)
        print(f"Read {len(png_bytes)} bytes, {len(self.chunks)} chunks")

    complete_read_file = cmd2.Cmd.path_complete  # complete file path

    def do_show_chunks(self, _args):
        """Show the chunks"""
        if not self.chunks:
            print("No chunks to show")
            return
        width = max(len(f"{one_chunk.length}") for one_chunk in self.chunks)
        for index, one_chunk in enumerate(self.chunks):
            print(format_chunk(one_chunk, index, width))

    def do_show_ihdr(self, _args):
        """Show the IHDR chunk"""
        indexes = [
            i
            for i, one_chunk in enumerate(self.chunks)
            if one_chunk.chunk_type == b"IHDR"
        ]
        if not indexes:
            print("No IHDR chunk")
        for index in indexes:
            print(f"IHDR chunk (index {index}):")
            try:
                header = parse_ihdr(self.chunks[index])
            except PngSplitError as e:
                print(f"Error: {e}")
                continue
            print("Width:", header.width)
            print("Height:", header.height)
            print("Bit depth:", header.bit_depth)
            print(
                "Color type:",
                header.color_type,
                f"({COLOR_TYPES.get(header.color_type, 'Unknown')})",
            )
            print("Compression method:", header.compression_method)
            print("Filter method:", header.filter_method)
            print(
                "Interlace method:",
                header.interlace_method,
                f"({INTERLACE_METHODS.get(header.interlace_method, 'Unknown')})",
            )

    def do_inspect(self, _args):
        """Inspect the loaded PNG file"""
        if not self.has_file():
            return
        try:
            for line in inspect_png(self.png_bytes):
                print(line)
        except PngSplitError as e:
            print(f"Error: {e}")

    split_parser = cmd2.Cmd2ArgumentParser()
    split_parser.add_argument(
        "max_rows",
        type=int,
        nargs="?",
        default=DEFAULT_MAX_ROWS,
        help="Maximum rows per output file",
    )
    split_parser.add_argument("-o", "--output-dir", help="Directory of the outputs")

    @cmd2.with_argparser(split_parser)
    def do_split(self, args):
        """Split the loaded PNG file into files of at most max_rows rows"""
        if not self.has_file():
            return
        try:
            outputs = split_png(self.png_bytes, args.max_rows)
            paths = write_split_files(self.filename, outputs, args.output_dir)
        except (PngSplitError, OSError) as e:
            print(f"Error: {e}")
            return
        for path in paths:
            print(path)

    def do_exit(self, _args):
        """Exit the program"""
        return True


def cli_main():
    import sys

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    c = CLI()
    sys.exit(c.cmdloop())


if __name__ == "__main__":
    cli_main()
