import os

from fmtpatch.utils.gitignore import get_gitignore, is_ignored


def test_nearest_gitignore_is_found_from_subdirectory(tmp_path):
    (tmp_path / ".gitignore").write_text("build/\n*.gen.go\n")
    sub = tmp_path / "pkg" / "inner"
    sub.mkdir(parents=True)

    spec = get_gitignore(str(sub))
    assert spec.match_file("build/")
    assert spec.match_file("pkg/x.gen.go")
    assert not spec.match_file("pkg/x.go")


def test_git_directory_always_ignored(tmp_path):
    spec = get_gitignore(str(tmp_path))
    (tmp_path / ".git").mkdir()
    assert is_ignored(spec, str(tmp_path), os.path.join(str(tmp_path), ".git"))


def test_is_ignored_matches_directory_patterns(tmp_path):
    (tmp_path / ".gitignore").write_text("vendor/\n")
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendored.go").write_text("")
    spec = get_gitignore(str(tmp_path))
    assert is_ignored(spec, str(tmp_path), str(tmp_path / "vendor"))
    assert not is_ignored(spec, str(tmp_path), str(tmp_path / "vendored.go"))
