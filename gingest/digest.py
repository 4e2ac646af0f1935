"""Writing of the Markdown digest file."""

from __future__ import annotations

import os
from collections.abc import Iterable

from gingest.types import FileInfo, Stats
from gingest.utils import generate_summary_string, generate_tree_string, is_readme_file

FILE_SEPARATOR = "================================================"


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def write_digest(
    output_file_path: str | os.PathLike[str],
    files_data: Iterable[FileInfo],
    stats: Stats,
) -> None:
    """Write the summary, directory tree and file contents to a Markdown file.

    README files come first, then the rest, each group sorted by path.
    Files that failed to read are left out.
    """
    files = list(files_data)
    readable = [info for info in files if info.error is None]
    readmes = sorted(
        (info for info in readable if is_readme_file(_base(info.relative_path))),
        key=lambda info: info.relative_path,
    )
    others = sorted(
        (info for info in readable if not is_readme_file(_base(info.relative_path))),
        key=lambda info: info.relative_path,
    )

    with open(output_file_path, "w", encoding="utf-8", newline="") as out:
        out.write(generate_summary_string(stats))

        if stats.all_paths:
            root_name = _base(stats.source)
            if root_name in (".", ""):
                root_name = "project"
            out.write("## Directory Structure\n\n```\n")
            out.write(generate_tree_string(stats.all_paths, root_name, files))
            out.write("```\n\n---\n\n")

        for info in (*readmes, *others):
            out.write(f"{FILE_SEPARATOR}\nFILE: {info.relative_path}\n{FILE_SEPARATOR}\n")
            out.write(info.content)
            out.write("\n\n")