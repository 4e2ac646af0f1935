"""Extraction of text from Jupyter notebook files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_TEXT_CELL_TYPES = frozenset({"code", "markdown", "raw"})


class NotebookError(Exception):
    """Raised when a notebook cannot be read or decoded."""


def _check_str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise NotebookError(f"failed to parse notebook JSON: {what} must be a string")
    return value


def _cells(data: Any) -> list[tuple[str, list[str]]]:
    """Validate the decoded document and return (cell_type, source) pairs."""
    if data is None:
        return []
    if not isinstance(data, dict):
        raise NotebookError("failed to parse notebook JSON: document must be an object")
    raw_cells = data.get("cells")
    if raw_cells is None:
        return []
    if not isinstance(raw_cells, list):
        raise NotebookError("failed to parse notebook JSON: cells must be an array")

    cells = []
    for raw in raw_cells:
        if raw is None:
            cells.append(("", []))
            continue
        if not isinstance(raw, dict):
            raise NotebookError("failed to parse notebook JSON: cell must be an object")
        cell_type = _check_str(raw.get("cell_type"), "cell_type")
        source = raw.get("source")
        if source is None:
            lines = []
        elif isinstance(source, list):
            lines = [_check_str(line, "source line") for line in source]
        else:
            raise NotebookError("failed to parse notebook JSON: source must be an array")
        cells.append((cell_type, lines))
    return cells


def parse_notebook(file_path: str | Path) -> str:
    """Read a notebook and return its code, markdown and raw cells as text."""
    try:
        data = Path(file_path).read_bytes()
    except OSError as exc:
        raise NotebookError(f"failed to read notebook file: {exc}") from exc

    try:
        document = json.loads(data)
    except ValueError as exc:
        raise NotebookError(f"failed to parse notebook JSON: {exc}") from exc

    parts = ["# Jupyter Notebook Content\n\n"]
    for number, (cell_type, lines) in enumerate(_cells(document), start=1):
        if cell_type not in _TEXT_CELL_TYPES:
            continue
        parts.append(f"## Cell {number} ({cell_type})\n\n")
        if lines:
            text = "".join(lines)
            parts.append(text)
            if not text.endswith("\n"):
                parts.append("\n")
            parts.append("\n")
    return "".join(parts)