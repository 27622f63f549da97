"""Git helpers: repository discovery and exclude-file management."""

from projectkit.git.discovery import find_git_dir
from projectkit.git.exclude import GitExclude

__all__ = ["GitExclude", "find_git_dir"]
