"""Project root discovery."""

from pathlib import Path

from projectkit.errors import ProjectRootNotFoundError

CONFIG_FILE_NAME = ".projectkit.yaml"


def find_project_root(start: Path, home: Path) -> Path:
    """Walk up from ``start`` to the first directory with ``.git`` or a config file.

    The home directory is never a project root: its config file holds user
    defaults, so the walk stops there.

    Raises:
        ProjectRootNotFoundError: Home or the filesystem root was reached first
    """
    cur = start.resolve()
    resolved_home = home.resolve()
    for parent in [cur, *cur.parents]:
        if parent == resolved_home:
            break
        if (parent / ".git").is_dir() or (parent / CONFIG_FILE_NAME).exists():
            return parent
    raise ProjectRootNotFoundError(start)
