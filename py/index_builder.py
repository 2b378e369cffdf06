#!/usr/bin/env python3
"""
Build a fixed-width binary lookup index over a text file of "<key> <value...>" lines.

Each non-blank line containing a space becomes one 56-byte entry (see index_entry.py)
holding the line's key and its byte range in the data file. Entries are written in data
file order; the index is not sorted by key.
"""

import os
import sys
import tempfile
import time
from dataclasses import dataclass
from typing import BinaryIO, Generator

from tabulate import tabulate
from tqdm import tqdm

from errors import DestinationIOError, IndexBuildError, SourceIOError, UsageError
from index_entry import encode_entry
from line_scanner import SourceLine, scan_lines
from params import entry_size, key_size, progress_update_bytes, temp_suffix
from record_parser import parse_record


@dataclass
class BuildStats:
    lines_scanned: int = 0
    entries_written: int = 0
    lines_skipped: int = 0
    keys_truncated: int = 0
    empty_keys: int = 0
    bytes_scanned: int = 0


def _read_lines(source: BinaryIO, data_file_path: str) -> Generator[SourceLine, None, None]:
    try:
        yield from scan_lines(source)
    except OSError as e:
        raise SourceIOError(f"Failed to read {data_file_path}: {e}", data_file_path) from e


def write_entries(
    source: BinaryIO,
    index_file: BinaryIO,
    data_file_path: str,
    show_progress: bool = False,
) -> BuildStats:
    """
    Scan the data file and append one index entry per valid line to index_file.

    Args:
        source: Data file opened in binary mode, positioned at its start
        index_file: Binary stream the entries are appended to
        data_file_path: Path of the data file, for progress and error messages
        show_progress: Whether to show a progress bar on stdout

    Returns:
        Counts of scanned, written and skipped lines
    """
    stats = BuildStats()
    total_bytes = None
    if show_progress:
        try:
            total_bytes = os.fstat(source.fileno()).st_size
        except OSError as e:
            raise SourceIOError(f"Failed to stat {data_file_path}: {e}", data_file_path) from e
    pending_bytes = 0

    with tqdm(
        total=total_bytes,
        desc=f"Indexing {os.path.basename(data_file_path)}",
        unit="B",
        unit_scale=True,
        file=sys.stdout,
        disable=not show_progress,
    ) as pbar:
        for line in _read_lines(source, data_file_path):
            stats.lines_scanned += 1
            stats.bytes_scanned += line.byte_length
            pending_bytes += line.byte_length
            if pending_bytes >= progress_update_bytes:
                pbar.update(pending_bytes)
                pending_bytes = 0

            record = parse_record(line)
            if record is None:
                stats.lines_skipped += 1
                continue

            if len(record.key) > key_size:
                stats.keys_truncated += 1
            elif not record.key:
                stats.empty_keys += 1

            index_file.write(encode_entry(record.key, record.offset, record.length))
            stats.entries_written += 1

        pbar.update(pending_bytes)

    return stats


def build_index(
    data_file_path: str, index_file_path: str, show_progress: bool = False
) -> BuildStats:
    """
    Build the index for data_file_path and publish it at index_file_path.

    Entries are written to a temporary file next to the index file, which is renamed
    into place only once the whole data file has been indexed. On failure the temporary
    file is removed and an existing index file is left untouched.

    Args:
        data_file_path: Path to the input text file
        index_file_path: Path where the binary index will be written
        show_progress: Whether to show a progress bar on stdout

    Returns:
        Statistics of the build

    Raises:
        SourceIOError: If the data file cannot be opened or read
        DestinationIOError: If the index file cannot be written or published
    """
    try:
        source = open(data_file_path, "rb")
    except OSError as e:
        raise SourceIOError(f"Cannot open data file {data_file_path}: {e}", data_file_path) from e

    with source:
        index_dir = os.path.dirname(os.path.abspath(index_file_path))
        try:
            fd, temp_path = tempfile.mkstemp(
                dir=index_dir, prefix=os.path.basename(index_file_path) + ".", suffix=temp_suffix
            )
        except OSError as e:
            raise DestinationIOError(
                f"Cannot create index file in {index_dir}: {e}", index_file_path
            ) from e

        try:
            with os.fdopen(fd, "wb") as index_file:
                stats = write_entries(source, index_file, data_file_path, show_progress)
            # mkstemp creates files readable by the owner only
            os.chmod(temp_path, _default_file_mode())
            os.replace(temp_path, index_file_path)
        except OSError as e:
            _remove_quietly(temp_path)
            raise DestinationIOError(
                f"Failed to write index file {index_file_path}: {e}", index_file_path
            ) from e
        except BaseException:
            _remove_quietly(temp_path)
            raise

    return stats


def _default_file_mode() -> int:
    """Mode a plain open(path, "wb") would create under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def parse_args(argv: list[str]) -> tuple[str, str]:
    if len(argv) != 2:
        raise UsageError(f"Expected 2 arguments, got {len(argv)}")
    return argv[0], argv[1]


def print_usage() -> None:
    print(f"Usage: {os.path.basename(sys.argv[0])} <data-file> <index-file>", file=sys.stderr)
    print("  data-file:  Input text file with key-value pairs", file=sys.stderr)
    print("  index-file: Output binary index file", file=sys.stderr)


def print_stats(stats: BuildStats, index_file_path: str) -> None:
    index_size = os.path.getsize(index_file_path)
    print(f"Created {index_size // entry_size:,} index entries ({index_size:,} bytes)")
    table_data = [
        ["Lines scanned", f"{stats.lines_scanned:,}"],
        ["Bytes scanned", f"{stats.bytes_scanned:,}"],
        ["Entries written", f"{stats.entries_written:,}"],
        ["Lines skipped", f"{stats.lines_skipped:,}"],
        [f"Keys truncated to {key_size} bytes", f"{stats.keys_truncated:,}"],
        ["Empty keys", f"{stats.empty_keys:,}"],
    ]
    print(tabulate(table_data, headers=["Statistic", "Count"], tablefmt="simple"))


def main(argv: list[str] | None = None) -> int:
    try:
        data_file, index_file = parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError:
        print_usage()
        return 1

    print(f"Building index from {data_file} to {index_file}...")
    start_time = time.time()
    try:
        stats = build_index(data_file, index_file, show_progress=True)
    except IndexBuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    elapsed_ms = (time.time() - start_time) * 1000

    print(f"Index built successfully in {elapsed_ms:.0f} ms!")
    print_stats(stats, index_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
