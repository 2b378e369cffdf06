#!/usr/bin/env python3

import argparse
import os
import sys

from index_reader import split_index_size
from params import entry_size


def print_index_file_info(filename: str) -> None:
    size = os.path.getsize(filename)
    num_entries, trailing_bytes = split_index_size(size)
    if trailing_bytes:
        print(
            f"Warning: File size {size} is not a multiple of {entry_size} bytes. "
            "File may be corrupted."
        )
    print(num_entries)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the number of entries in a line index")
    parser.add_argument("index_file", help="Binary index file")

    args = parser.parse_args(argv)

    try:
        print_index_file_info(args.index_file)
    except FileNotFoundError:
        print(f"File not found: {args.index_file}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
