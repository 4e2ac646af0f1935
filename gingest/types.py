"""Records shared by the scanning, digest and command-line code."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FileInfo:
    """One file found while scanning a source tree."""

    relative_path: str
    absolute_path: str
    content: str = ""
    is_binary: bool = False
    error: Exception | None = None


@dataclass
class Stats:
    """Counters gathered while scanning a source tree."""

    num_files_processed: int = 0
    num_dirs_processed: int = 0
    num_binary_files: int = 0
    num_skipped_files: int = 0
    total_content_bytes: int = 0
    source: str = ""
    branch: str = ""
    all_paths: list[str] = field(default_factory=list)