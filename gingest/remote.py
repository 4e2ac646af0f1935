"""Cloning of remote Git repositories for scanning."""

from __future__ import annotations

import subprocess
import tempfile
from collections.abc import Sequence

from gingest.ingester import process_local_directory
from gingest.types import FileInfo, Stats


class GitCloneError(RuntimeError):
    """Raised when a repository cannot be cloned."""


def _clone(git_url: str, target_branch: str, destination: str) -> None:
    args = ["git", "clone", "--depth", "1"]
    if target_branch:
        args += ["-b", target_branch, "--single-branch"]
    args += [git_url, destination]

    try:
        completed = subprocess.run(
            args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=False
        )
    except OSError as exc:
        raise GitCloneError(f"git clone failed: {exc}") from exc

    if completed.returncode != 0:
        output = (completed.stdout or b"").decode("utf-8", errors="replace")
        raise GitCloneError(
            f"git clone failed: exit status {completed.returncode}\nOutput: {output}"
        )


def process_remote_repo(
    git_url: str,
    target_branch: str = "",
    max_file_size: int = 0,
    include_patterns: Sequence[str] | None = None,
    exclude_patterns: Sequence[str] | None = None,
) -> tuple[list[FileInfo], Stats]:
    """Shallow-clone a repository into a temporary directory and scan it.

    The clone is removed before returning; the statistics name the URL and
    branch as their source.
    """
    with tempfile.TemporaryDirectory(
        prefix="gingest-clone-", ignore_cleanup_errors=True
    ) as temp_dir:
        _clone(git_url, target_branch, temp_dir)
        files, stats = process_local_directory(
            temp_dir, max_file_size, include_patterns, exclude_patterns
        )

    stats.source = git_url
    stats.branch = target_branch
    return files, stats