import os

from fmtpatch import SequenceDiffer, format_tree
from fmtpatch.tree import iter_source_files


def _layout(root):
    (root / ".gitignore").write_text("generated/\n")
    (root / "dirty.txt").write_text("x  \n")
    (root / "clean.txt").write_text("ok\n")
    (root / "skip.md").write_text("y  \n")
    (root / "generated").mkdir()
    (root / "generated" / "out.txt").write_text("z  \n")
    (root / "sub").mkdir()
    (root / "sub" / "nested.txt").write_text("n\t\n")


def test_iter_source_files_respects_gitignore_and_suffixes(tmp_path):
    _layout(tmp_path)
    found = [
        os.path.relpath(p, str(tmp_path)).replace(os.sep, "/")
        for p in iter_source_files(str(tmp_path), [".txt"])
    ]
    assert found == ["clean.txt", "dirty.txt", "sub/nested.txt"]


def test_format_tree_saves_changed_files(tmp_path, strip_formatter):
    _layout(tmp_path)
    summary = format_tree(str(tmp_path), strip_formatter, suffixes=[".txt"], differ=SequenceDiffer())

    assert sorted(summary.formatted) == ["dirty.txt", "sub/nested.txt"]
    assert summary.unchanged == ["clean.txt"]
    assert summary.failed == []
    assert (tmp_path / "dirty.txt").read_text() == "x\n"
    assert (tmp_path / "sub" / "nested.txt").read_text() == "n\n"
    assert (tmp_path / "generated" / "out.txt").read_text() == "z  \n"
    assert (tmp_path / "skip.md").read_text() == "y  \n"


def test_format_tree_dry_run_leaves_disk_alone(tmp_path, strip_formatter):
    _layout(tmp_path)
    summary = format_tree(str(tmp_path), strip_formatter, suffixes=[".txt"], differ=SequenceDiffer(), dry_run=True)
    assert "dirty.txt" in summary.formatted
    assert (tmp_path / "dirty.txt").read_text() == "x  \n"


def test_format_tree_records_failures_and_continues(tmp_path, broken_formatter):
    _layout(tmp_path)
    summary = format_tree(str(tmp_path), broken_formatter, suffixes=[".txt"])
    assert sorted(summary.failed) == ["clean.txt", "dirty.txt", "sub/nested.txt"]
    assert "exited with status 2" in summary.errors["dirty.txt"]
    assert summary.formatted == []


def test_format_tree_undecodable_formatter_output_is_recorded_per_file(tmp_path, garbage_formatter):
    (tmp_path / "a.go").write_text("package a\n")
    (tmp_path / "b.go").write_text("package b\n")
    summary = format_tree(str(tmp_path), garbage_formatter, suffixes=[".go"], differ=SequenceDiffer())

    assert summary.failed == ["a.go", "b.go"]
    assert "Cannot read reformatted text" in summary.errors["b.go"]
    assert (tmp_path / "a.go").read_text() == "package a\n"
