"""File inspection, pattern filtering and text formatting helpers."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime
from functools import lru_cache
from pathlib import Path

from gingest.types import FileInfo, Stats

_BINARY_PROBE_SIZE = 1024
_SKIPPED_MARKER = "[File content skipped:"


def read_file_content(file_path: str | Path) -> str:
    """Return the file's text; undecodable bytes become replacement characters."""
    return Path(file_path).read_bytes().decode("utf-8", errors="replace")


def is_binary_file(file_path: str | Path) -> bool:
    """Report whether the first 1024 bytes contain a NUL byte.

    Raises EOFError for an empty file, since there is nothing to inspect.
    """
    with open(file_path, "rb") as handle:
        chunk = handle.read(_BINARY_PROBE_SIZE)
    if not chunk:
        raise EOFError("EOF")
    return b"\x00" in chunk


def is_readme_file(file_name: str) -> bool:
    """Return True for names starting with 'readme', in any case."""
    return file_name.lower().startswith("readme")


def is_jupyter_notebook(file_path: str | Path) -> bool:
    """Return True for paths ending in .ipynb, in any case."""
    return str(file_path).lower().endswith(".ipynb")


def generate_summary_string(stats: Stats) -> str:
    """Format processing statistics as a Markdown summary."""
    lines = ["# Codebase Digest Summary\n\n", f"**Source:** {stats.source}\n"]
    if stats.branch:
        lines.append(f"**Branch:** {stats.branch}\n")
    lines.append(f"**Generated:** {datetime.now():%Y-%m-%d %H:%M:%S}\n\n")
    lines.append("## Statistics\n\n")
    lines.append(f"- **Total Files:** {stats.num_files_processed}\n")
    lines.append(f"- **Directories:** {stats.num_dirs_processed}\n")
    lines.append(f"- **Binary Files:** {stats.num_binary_files}\n")
    lines.append(f"- **Skipped Files:** {stats.num_skipped_files}\n")
    lines.append(f"- **Total Content Size:** {stats.total_content_bytes / 1024:.2f} KB\n\n")
    lines.append("---\n\n")
    return "".join(lines)


def parse_patterns(patterns_string: str) -> list[str]:
    """Split a comma-separated pattern list, dropping blank entries."""
    return [p.strip() for p in patterns_string.split(",") if p.strip()]


# --- shell-style matching where '*' and '?' never cross '/' ---------------

def _class_char(pattern: str, i: int) -> tuple[str, int] | None:
    if i >= len(pattern) or pattern[i] in "-]":
        return None
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            return None
    return pattern[i], i + 1


def _parse_class(pattern: str, i: int) -> tuple[str, int] | None:
    negate = i < len(pattern) and pattern[i] == "^"
    if negate:
        i += 1
    parts: list[str] = []
    count = 0
    while True:
        if i < len(pattern) and pattern[i] == "]" and count > 0:
            i += 1
            break
        low = _class_char(pattern, i)
        if low is None:
            return None
        lo, i = low
        hi = lo
        if i < len(pattern) and pattern[i] == "-":
            high = _class_char(pattern, i + 1)
            if high is None:
                return None
            hi, i = high
        count += 1
        if lo == hi:
            parts.append(re.escape(lo))
        elif lo < hi:
            parts.append(f"{re.escape(lo)}-{re.escape(hi)}")
    if not parts:
        return ("." if negate else "(?!)"), i
    return f"[{'^' if negate else ''}{''.join(parts)}]", i


@lru_cache(maxsize=1024)
def _compile(pattern: str) -> re.Pattern[str] | None:
    """Translate a glob into a regex, or None if the glob is malformed."""
    out: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "*":
            out.append("[^/]*")
            i += 1
        elif char == "?":
            out.append("[^/]")
            i += 1
        elif char == "\\":
            if i + 1 >= len(pattern):
                return None
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif char == "[":
            parsed = _parse_class(pattern, i + 1)
            if parsed is None:
                return None
            piece, i = parsed
            out.append(piece)
        else:
            out.append(re.escape(char))
            i += 1
    return re.compile("".join(out), re.DOTALL)


def _match(pattern: str, name: str) -> bool:
    compiled = _compile(pattern)
    return compiled is not None and compiled.fullmatch(name) is not None


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _dir(path: str) -> str:
    return posixpath.normpath(path[: path.rfind("/") + 1])


def _parent_names(path: str) -> Iterator[str]:
    directory = _dir(path)
    while directory not in (".", "/"):
        yield _base(directory)
        directory = _dir(directory)


def _matches_any(patterns: Iterable[str], relative_path: str, file_name: str) -> bool:
    return any(_match(p, relative_path) or _match(p, file_name) for p in patterns)


def should_include_file(
    relative_path: str,
    include_patterns: Sequence[str] | None,
    exclude_patterns: Sequence[str] | None,
) -> bool:
    """Decide whether a slash-separated relative path passes the filters.

    An exclusion hit on the path or file name can be overridden by an include
    pattern; an exclusion hit on a parent directory cannot. When include
    patterns are given, a file that was not excluded must match one of them.
    """
    includes = list(include_patterns or ())
    file_name = _base(relative_path)

    for pattern in exclude_patterns or ():
        if _match(pattern, relative_path) or _match(pattern, file_name):
            return bool(includes) and _matches_any(includes, relative_path, file_name)
        if any(_match(pattern, parent) for parent in _parent_names(relative_path)):
            return False

    if includes:
        return _matches_any(includes, relative_path, file_name)
    return True


def generate_tree_string(
    paths: Iterable[str], root_name: str, files_data: Iterable[FileInfo]
) -> str:
    """Draw the slash-separated paths as a text tree under root_name."""
    split = [p.split("/") for p in sorted(paths)]
    if not split:
        return ""

    info_by_path = {info.relative_path: info for info in files_data}
    seen_dirs: set[str] = set()
    lines = [f"{root_name}/"]

    for i, parts in enumerate(split):
        later = split[i + 1:]

        for level, name in enumerate(parts[:-1]):
            current = "/".join(parts[: level + 1])
            if current in seen_dirs:
                continue
            seen_dirs.add(current)
            has_more = any(
                len(other) > level + 1 and "/".join(other[: level + 1]).startswith(current)
                for other in later
            )
            branch = "├── " if has_more else "└── "
            lines.append(f"{'│   ' * level}{branch}{name}/")

        directory = "/".join(parts[:-1])
        has_sibling = any("/".join(other[:-1]) == directory for other in later)

        suffix = ""
        info = info_by_path.get("/".join(parts))
        if info is not None:
            if info.is_binary:
                suffix = " (Binary)"
            elif _SKIPPED_MARKER in info.content:
                suffix = " (Skipped - Too Large)"

        branch = "├── " if has_sibling else "└── "
        lines.append(f"{'│   ' * (len(parts) - 1)}{branch}{parts[-1]}{suffix}")

    return "\n".join(lines) + "\n"