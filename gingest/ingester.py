"""Scanning of a local directory tree into file records and statistics."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial

from gingest.notebook import NotebookError, parse_notebook
from gingest.types import FileInfo, Stats
from gingest.utils import (
    is_binary_file,
    is_jupyter_notebook,
    read_file_content,
    should_include_file,
)

BINARY_PLACEHOLDER = "[Binary File]"
_MB = 1024 * 1024


@dataclass
class _Result:
    info: FileInfo
    binary: bool = False
    skipped: bool = False
    content_bytes: int = 0


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8", errors="surrogatepass"))


def _walk(
    directory: str,
    prefix: str,
    includes: Sequence[str] | None,
    excludes: Sequence[str] | None,
    stats: Stats,
) -> Iterator[tuple[str, str]]:
    """Yield (relative path, absolute path) for every accepted file, in name order."""
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        relative = f"{prefix}{entry.name}"
        if entry.is_dir(follow_symlinks=False):
            stats.num_dirs_processed += 1
            if should_include_file(relative, includes, excludes):
                yield from _walk(entry.path, f"{relative}/", includes, excludes, stats)
        elif should_include_file(relative, includes, excludes):
            yield relative, os.path.abspath(entry.path)


def _process_file(relative: str, path: str, max_file_size: int) -> _Result:
    try:
        size = os.stat(path).st_size
    except OSError as exc:
        return _Result(FileInfo(relative, path, error=exc))

    if max_file_size > 0 and size > max_file_size:
        content = (
            "[File content skipped: Exceeds max size "
            f"({size / _MB:.1f} MB > {max_file_size / _MB:.1f} MB)]"
        )
        return _Result(FileInfo(relative, path, content), skipped=True)

    if is_jupyter_notebook(path):
        try:
            content = parse_notebook(path)
        except NotebookError as exc:
            return _Result(FileInfo(relative, path, error=exc))
        return _Result(FileInfo(relative, path, content), content_bytes=_byte_len(content))

    try:
        binary = is_binary_file(path)
    except (OSError, EOFError) as exc:
        return _Result(FileInfo(relative, path, error=exc))
    if binary:
        return _Result(FileInfo(relative, path, BINARY_PLACEHOLDER, is_binary=True), binary=True)

    try:
        content = read_file_content(path)
    except OSError as exc:
        return _Result(FileInfo(relative, path, error=exc))
    return _Result(FileInfo(relative, path, content), content_bytes=_byte_len(content))


def process_local_directory(
    root_dir: str | os.PathLike[str],
    max_file_size: int = 0,
    include_patterns: Sequence[str] | None = None,
    exclude_patterns: Sequence[str] | None = None,
) -> tuple[list[FileInfo], Stats]:
    """Scan root_dir and return its files and the statistics of the scan.

    A max_file_size of zero or less means no size limit. Files that fail to
    read are returned with their error set rather than raising.
    """
    root = os.fspath(root_dir)
    stats = Stats(source=root)
    found = list(_walk(root, "", include_patterns, exclude_patterns, stats))

    worker = partial(_process_file, max_file_size=max_file_size)
    with ThreadPoolExecutor() as pool:
        results = list(pool.map(lambda item: worker(*item), found))

    for result in results:
        stats.num_files_processed += 1
        stats.num_binary_files += result.binary
        stats.num_skipped_files += result.skipped
        stats.total_content_bytes += result.content_bytes

    stats.all_paths = [relative for relative, _ in found]
    return [result.info for result in results], stats