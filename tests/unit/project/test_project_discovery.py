"""Tests for find_project_root."""

from pathlib import Path

import pytest

from projectkit.errors import ProjectRootNotFoundError
from projectkit.project.discovery import find_project_root


def test_finds_directory_with_git(tmp_path: Path) -> None:
    """Test that a .git directory marks the project root."""
    root = tmp_path / "home" / "work" / "repo"
    (root / ".git").mkdir(parents=True)
    nested = root / "src" / "pkg"
    nested.mkdir(parents=True)

    assert find_project_root(nested, tmp_path / "home") == root.resolve()


def test_finds_directory_with_config_file(tmp_path: Path) -> None:
    """Test that a config file marks the project root."""
    root = tmp_path / "home" / "work"
    root.mkdir(parents=True)
    (root / ".projectkit.yaml").write_text("agents: []\n", encoding="utf-8")

    assert find_project_root(root, tmp_path / "home") == root.resolve()


def test_home_directory_is_never_a_root(tmp_path: Path) -> None:
    """Test that the user config in home does not make home a project."""
    home = tmp_path / "home"
    nested = home / "scratch"
    nested.mkdir(parents=True)
    (home / ".projectkit.yaml").write_text("agents: []\n", encoding="utf-8")
    (tmp_path / ".git").mkdir()

    with pytest.raises(ProjectRootNotFoundError):
        find_project_root(nested, home)
