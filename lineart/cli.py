#
# This file is part of LineArt.
#
# Copyright (c) 2021-2024 LineArt Developers
# SPDX-License-Identifier: BSD-2-Clause

"""LineArt command line

Converts ASCII line-art diagrams in text files into Unicode box-drawing
characters and prints the result to stdout. Files are processed in order;
the first file that cannot be read stops the run.
"""

import argparse
import logging
import sys
from pathlib import Path

from lineart import __version__
from lineart.convert import convert_grid
from lineart.glyphs import ENCODING
from lineart.grid import Grid


class FileProcessor:
    """Reads files and converts their line-art.

    Errors from opening or reading a file are not caught here: they
    propagate to the caller, which decides how to report them.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

        # Set up logging
        log_level = logging.INFO if verbose else logging.WARNING
        logging.basicConfig(
            level=log_level,
            format='%(levelname)s: %(message)s'
        )
        self.logger = logging.getLogger(__name__)

    def process_file(self, file_path: str) -> str:
        """Process a single file.

        Args:
            file_path: Path to the file to process

        Returns:
            The converted content

        Raises:
            FileNotFoundError: If file doesn't exist
            PermissionError: If file cannot be read
            IsADirectoryError: If path is a directory
            OSError: Any other open or read failure
        """
        path = Path(file_path)

        with open(path, 'rb') as f:
            data = f.read()

        grid = Grid.from_bytes(data)
        original = grid.serialize()
        converted = convert_grid(grid).serialize()

        if original != converted:
            self.logger.info(f"Converted: {file_path}")
        else:
            self.logger.debug(f"No changes: {file_path}")

        return converted


def write_output(text: str) -> None:
    """Write converted text to stdout as UTF-8, whatever the locale."""
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode(ENCODING))
    sys.stdout.buffer.flush()


def main(argv=None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog='lineart',
        description='Convert ASCII line-art (- | + *) into Unicode box-drawing characters',
        epilog='Example: %(prog)s diagram.txt > diagram.out',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'paths',
        nargs='*',
        help='Files to convert'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    processor = FileProcessor(verbose=args.verbose)

    for path_str in args.paths:
        try:
            converted = processor.process_file(path_str)
        except OSError as exc:
            # Stop at the first unreadable file
            print(f"Error: {path_str}: {exc.strerror or exc}", file=sys.stderr)
            return 1

        write_output(converted)

    return 0


if __name__ == '__main__':
    sys.exit(main())
