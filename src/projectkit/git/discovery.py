"""Git repository discovery."""

from pathlib import Path

from projectkit.errors import GitRepositoryNotFoundError


def find_git_dir(start: Path) -> Path:
    """Walk up from ``start`` to the nearest ``.git`` directory and return it.

    Raises:
        GitRepositoryNotFoundError: The filesystem root was reached first
    """
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        git_path = parent / ".git"
        if git_path.is_dir():
            return git_path
    raise GitRepositoryNotFoundError(start)
