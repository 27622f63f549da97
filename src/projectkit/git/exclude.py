"""Manage patterns in a repository's ``info/exclude`` file.

The exclude file works like a ``.gitignore`` that is never committed, which
makes it a good place for paths generated per checkout. All operations
treat the file as a set of lines: adding is idempotent and removing a
missing pattern changes nothing.
"""

import logging
from pathlib import Path

from projectkit.errors import GitExcludeError

logger = logging.getLogger(__name__)

EXCLUDE_FILE = Path("info") / "exclude"

# Bytes that are not UTF-8 survive a read/write round trip as surrogates.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _matches(line: str, pattern: str) -> bool:
    return line.rstrip(" \t") == pattern


class GitExclude:
    """Set-like access to ``<git_dir>/info/exclude``."""

    def __init__(self, git_dir: Path) -> None:
        self.path = git_dir / EXCLUDE_FILE

    def _read(self) -> str | None:
        try:
            if not self.path.exists():
                return None
            return self.path.read_text(encoding=_ENCODING, errors=_ERRORS)
        except OSError as err:
            raise GitExcludeError(self.path, str(err)) from err

    def _write(self, content: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding=_ENCODING, errors=_ERRORS)
        except OSError as err:
            raise GitExcludeError(self.path, str(err)) from err

    def _read_lines(self) -> list[str] | None:
        content = self._read()
        if content is None:
            return None
        return content.split("\n")

    def is_excluded(self, pattern: str) -> bool:
        lines = self._read_lines()
        if lines is None:
            return False
        return any(_matches(line, pattern) for line in lines)

    def exclude(self, pattern: str) -> None:
        """Append ``pattern`` unless it is already present."""
        content = self._read() or ""
        if any(_matches(line, pattern) for line in content.split("\n")):
            return

        if content and not content.endswith("\n"):
            content += "\n"

        self._write(content + pattern + "\n")
        logger.debug("Added %s to %s", pattern, self.path)

    def unexclude(self, pattern: str) -> None:
        """Remove every line equal to ``pattern``; leave the file alone otherwise."""
        lines = self._read_lines()
        if lines is None:
            return

        kept = [line for line in lines if not _matches(line, pattern)]
        if len(kept) == len(lines):
            return

        self._write("\n".join(kept))
        logger.debug("Removed %s from %s", pattern, self.path)
