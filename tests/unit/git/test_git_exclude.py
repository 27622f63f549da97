"""Tests for GitExclude and git directory discovery."""

from pathlib import Path

import pytest

from projectkit.errors import GitExcludeError, GitRepositoryNotFoundError, ProjectkitError
from projectkit.git import GitExclude, find_git_dir


def test_exclude_into_empty_file(project_root: Path) -> None:
    """Test that a pattern is written with a trailing newline."""
    exclude_file = project_root / ".git" / "info" / "exclude"
    exclude_file.write_text("", encoding="utf-8")
    exclude = GitExclude(project_root / ".git")

    exclude.exclude(".ai")

    assert exclude_file.read_text(encoding="utf-8") == ".ai\n"
    assert exclude.is_excluded(".ai")


def test_exclude_is_idempotent(project_root: Path) -> None:
    """Test that adding a present pattern does not duplicate it."""
    exclude = GitExclude(project_root / ".git")

    exclude.exclude("CLAUDE.md")
    exclude.exclude("CLAUDE.md")

    assert exclude.path.read_text(encoding="utf-8") == "CLAUDE.md\n"


def test_exclude_appends_after_missing_newline(project_root: Path) -> None:
    """Test that existing content without a final newline is kept intact."""
    exclude = GitExclude(project_root / ".git")
    exclude.path.write_text("# local\n*.log", encoding="utf-8")

    exclude.exclude(".claude")

    assert exclude.path.read_text(encoding="utf-8") == "# local\n*.log\n.claude\n"


def test_exclude_creates_missing_file(tmp_path: Path) -> None:
    """Test that info/exclude is created when absent."""
    git_dir = tmp_path / ".git"
    git_dir.mkdir()
    exclude = GitExclude(git_dir)

    assert not exclude.is_excluded(".ai")
    exclude.exclude(".ai")

    assert (git_dir / "info" / "exclude").read_text(encoding="utf-8") == ".ai\n"


def test_trailing_whitespace_still_matches(project_root: Path) -> None:
    """Test that a pattern written with trailing blanks counts as present."""
    exclude = GitExclude(project_root / ".git")
    exclude.path.write_text(".ai  \n", encoding="utf-8")

    exclude.exclude(".ai")

    assert exclude.path.read_text(encoding="utf-8") == ".ai  \n"


def test_unexclude_removes_every_matching_line(project_root: Path) -> None:
    """Test that all copies of a pattern are removed and the rest is kept."""
    exclude = GitExclude(project_root / ".git")
    exclude.path.write_text("a\n.ai\nb\n.ai\n", encoding="utf-8")

    exclude.unexclude(".ai")

    assert exclude.path.read_text(encoding="utf-8") == "a\nb\n"
    assert not exclude.is_excluded(".ai")


def test_unexclude_absent_pattern_leaves_file_untouched(project_root: Path) -> None:
    """Test that removing a missing pattern does not rewrite the file."""
    exclude = GitExclude(project_root / ".git")
    exclude.path.write_text("a\nb", encoding="utf-8")
    before = exclude.path.stat().st_mtime_ns

    exclude.unexclude(".ai")

    assert exclude.path.read_text(encoding="utf-8") == "a\nb"
    assert exclude.path.stat().st_mtime_ns == before


def test_unexclude_without_file_is_a_no_op(tmp_path: Path) -> None:
    """Test that a missing exclude file is not created by unexclude."""
    exclude = GitExclude(tmp_path / ".git")

    exclude.unexclude(".ai")

    assert not exclude.path.exists()


def test_exclude_preserves_non_utf8_lines(project_root: Path) -> None:
    """Test that bytes which are not UTF-8 are kept when a pattern is added."""
    exclude_file = project_root / ".git" / "info" / "exclude"
    exclude_file.write_bytes(b"caf\xe9/\n")
    exclude = GitExclude(project_root / ".git")

    exclude.exclude(".claude")

    assert exclude_file.read_bytes() == b"caf\xe9/\n.claude\n"
    assert exclude.is_excluded(".claude")


def test_unexclude_preserves_non_utf8_lines(project_root: Path) -> None:
    """Test that removing a pattern keeps neighbouring lines byte for byte."""
    exclude_file = project_root / ".git" / "info" / "exclude"
    exclude_file.write_bytes(b"caf\xe9/\nCLAUDE.md\n\xff\xfe\n")
    exclude = GitExclude(project_root / ".git")

    exclude.unexclude("CLAUDE.md")

    assert exclude_file.read_bytes() == b"caf\xe9/\n\xff\xfe\n"


def test_unreadable_exclude_file_raises_git_exclude_error(project_root: Path) -> None:
    """Test that an OSError is reported with the exclude file path."""
    exclude_file = project_root / ".git" / "info" / "exclude"
    exclude_file.mkdir()
    exclude = GitExclude(project_root / ".git")

    with pytest.raises(GitExcludeError) as exc_info:
        exclude.exclude(".ai")

    assert exc_info.value.path == exclude_file
    assert isinstance(exc_info.value, ProjectkitError)


def test_find_git_dir_walks_up(project_root: Path) -> None:
    """Test discovery of .git from a nested directory."""
    nested = project_root / "src" / "pkg"
    nested.mkdir(parents=True)

    assert find_git_dir(nested) == (project_root / ".git").resolve()


def test_find_git_dir_fails_outside_a_repository(tmp_path: Path) -> None:
    """Test discovery with no .git on the way up."""
    with pytest.raises(GitRepositoryNotFoundError):
        find_git_dir(tmp_path)
