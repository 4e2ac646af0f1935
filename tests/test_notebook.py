import json

import pytest

from gingest.notebook import NotebookError, parse_notebook

SAMPLE = """{
 "cells": [
  {
   "cell_type": "markdown",
   "metadata": {},
   "source": [
    "# Test Notebook\\n",
    "\\n",
    "This is a test."
   ]
  },
  {
   "cell_type": "code",
   "execution_count": null,
   "metadata": {},
   "source": [
    "print('Hello, World!')\\n",
    "x = 42"
   ]
  },
  {
   "cell_type": "raw",
   "metadata": {},
   "source": [
    "Raw cell content"
   ]
  }
 ],
 "metadata": {
  "kernelspec": {
   "display_name": "Python 3",
   "language": "python",
   "name": "python3"
  }
 },
 "nbformat": 4,
 "nbformat_minor": 4
}"""


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_notebook(tmp_path):
    content = parse_notebook(_write(tmp_path, "test.ipynb", SAMPLE))
    for expected in [
        "# Jupyter Notebook Content",
        "## Cell 1 (markdown)",
        "# Test Notebook",
        "## Cell 2 (code)",
        "print('Hello, World!')",
        "## Cell 3 (raw)",
        "Raw cell content",
    ]:
        assert expected in content


def test_parse_notebook_invalid_json(tmp_path):
    path = _write(tmp_path, "invalid.ipynb", '{"cells": [invalid json}')
    with pytest.raises(NotebookError, match="failed to parse notebook JSON"):
        parse_notebook(path)


def test_parse_notebook_nonexistent_file(tmp_path):
    with pytest.raises(NotebookError, match="failed to read notebook file"):
        parse_notebook(tmp_path / "nonexistent.ipynb")


def test_exact_output_for_single_cell(tmp_path):
    doc = {"cells": [{"cell_type": "markdown", "source": ["# T"]}]}
    path = _write(tmp_path, "one.ipynb", json.dumps(doc))
    assert parse_notebook(path) == "# Jupyter Notebook Content\n\n## Cell 1 (markdown)\n\n# T\n\n"


def test_empty_source_writes_header_only(tmp_path):
    doc = {"cells": [{"cell_type": "code", "source": []}]}
    path = _write(tmp_path, "empty.ipynb", json.dumps(doc))
    assert parse_notebook(path) == "# Jupyter Notebook Content\n\n## Cell 1 (code)\n\n"


def test_other_cell_types_skipped_but_counted(tmp_path):
    doc = {
        "cells": [
            {"cell_type": "heading", "source": ["ignored"]},
            {"cell_type": "code", "source": ["x = 1\n"]},
        ]
    }
    content = parse_notebook(_write(tmp_path, "mixed.ipynb", json.dumps(doc)))
    assert "ignored" not in content
    assert "## Cell 2 (code)\n\nx = 1\n\n" in content
    assert "Cell 1" not in content


def test_string_source_is_rejected(tmp_path):
    doc = {"cells": [{"cell_type": "code", "source": "x = 1"}]}
    path = _write(tmp_path, "str.ipynb", json.dumps(doc))
    with pytest.raises(NotebookError, match="failed to parse notebook JSON"):
        parse_notebook(path)


def test_notebook_without_cells(tmp_path):
    path = _write(tmp_path, "none.ipynb", json.dumps({"metadata": {}}))
    assert parse_notebook(path) == "# Jupyter Notebook Content\n\n"