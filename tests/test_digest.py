import pytest

from gingest.digest import write_digest
from gingest.ingester import process_local_directory
from gingest.types import FileInfo, Stats

SEP = "================================================"


def _read(path):
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _info(path, content):
    return FileInfo(relative_path=path, absolute_path="/abs/" + path, content=content)


def test_summary_comes_first(tmp_path):
    out = tmp_path / "digest.md"
    write_digest(out, [_info("a.txt", "hello")], Stats(source="src"))

    text = _read(out)
    assert text.startswith("# Codebase Digest Summary\n\n**Source:** src\n")
    assert "## Statistics" in text


def test_file_block_layout(tmp_path):
    out = tmp_path / "digest.md"
    write_digest(out, [_info("a.txt", "hello")], Stats(source="src"))

    text = _read(out)
    assert text.endswith(f"{SEP}\nFILE: a.txt\n{SEP}\nhello\n\n")


def test_readme_first_then_sorted(tmp_path):
    out = tmp_path / "digest.md"
    files = [_info("z.txt", "z"), _info("b.txt", "b"), _info("README.md", "r")]
    write_digest(out, files, Stats(source="src"))

    text = _read(out)
    readme = text.index("FILE: README.md")
    b_pos = text.index("FILE: b.txt")
    z_pos = text.index("FILE: z.txt")
    assert readme < b_pos < z_pos


def test_files_with_errors_are_omitted(tmp_path):
    out = tmp_path / "digest.md"
    broken = FileInfo("broken.txt", "/abs/broken.txt", error=OSError("boom"))
    write_digest(out, [broken, _info("ok.txt", "fine")], Stats(source="src"))

    text = _read(out)
    assert "FILE: broken.txt" not in text
    assert "FILE: ok.txt" in text


def test_tree_section_uses_source_base_name(tmp_path):
    out = tmp_path / "digest.md"
    stats = Stats(source=str(tmp_path / "proj"), all_paths=["a.txt"])
    write_digest(out, [_info("a.txt", "hello")], stats)

    text = _read(out)
    assert "## Directory Structure\n\n```\nproj/\n" in text
    assert text.index("## Directory Structure") < text.index("FILE: a.txt")


def test_tree_root_defaults_to_project(tmp_path):
    out = tmp_path / "digest.md"
    stats = Stats(source=".", all_paths=["a.txt"])
    write_digest(out, [_info("a.txt", "hello")], stats)

    assert "```\nproject/\n" in _read(out)


def test_no_tree_without_paths(tmp_path):
    out = tmp_path / "digest.md"
    write_digest(out, [_info("a.txt", "hello")], Stats(source="src"))

    assert "## Directory Structure" not in _read(out)


def test_unwritable_output_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_digest(tmp_path / "missing" / "digest.md", [], Stats())


def test_digest_of_scanned_directory(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    (source / "test.txt").write_text("Hello, World!\nThis is a test file.", encoding="utf-8")
    (source / "README.md").write_text("# Test Project\n", encoding="utf-8")
    (source / "binary.bin").write_bytes(bytes([0x00, 0x01, 0x02, 0x03, 0xFF, 0xFE, 0xFD]))
    (source / "subdir").mkdir()
    (source / "subdir" / "nested.txt").write_text("Nested file content", encoding="utf-8")

    files, stats = process_local_directory(source)
    out = tmp_path / "digest.md"
    write_digest(out, files, stats)

    text = _read(out)
    assert "## Directory Structure" in text
    assert "Hello, World!" in text
    assert "FILE: binary.bin" in text
    assert "[Binary File]" in text
    assert "FILE: subdir/nested.txt" in text
    assert text.index("FILE: README.md") < text.index("FILE: test.txt")