"""Generic loading pipeline shared by every artifact category.

A loader walks the top level of one source directory, keeps the entries it
recognizes, turns each into a validated artifact and returns them in
directory order. Any failure aborts the whole source; an empty result is an
error.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from projectkit.errors import NoArtifactsFoundError, ReadFailedError
from projectkit.io.documents import load_yaml_document

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yaml", ".yml")


class ArtifactLoader(ABC, Generic[T]):
    """Strategy-driven loader: subclasses pick entries and load them."""

    kind: ClassVar[str]

    def load(self, root: Path) -> list[T]:
        """Load every artifact found directly under ``root``.

        Raises:
            NoArtifactsFoundError: Nothing under ``root`` was recognized
            LoadError: Reading, parsing or validating an entry failed
        """
        entries = [entry for entry in self._list_entries(root) if self.accepts(entry)]
        artifacts = [self.load_entry(entry) for entry in entries]
        if not artifacts:
            raise NoArtifactsFoundError(self.kind, root)

        logger.debug("Loaded %d %s from %s", len(artifacts), self.kind, root)
        return artifacts

    @abstractmethod
    def accepts(self, entry: Path) -> bool:
        """Return True if ``entry`` holds an artifact of this category."""
        ...

    @abstractmethod
    def load_entry(self, entry: Path) -> T:
        """Load one accepted entry into a validated artifact."""
        ...

    def _list_entries(self, root: Path) -> list[Path]:
        try:
            return sorted(root.iterdir(), key=lambda entry: entry.name)
        except OSError as err:
            raise ReadFailedError(root, str(err)) from err


class YamlArtifactLoader(ArtifactLoader[M]):
    """Loads one artifact per ``.yaml``/``.yml`` file."""

    model: ClassVar[type[BaseModel]]

    def accepts(self, entry: Path) -> bool:
        if entry.is_dir():
            return False
        return entry.suffix in YAML_EXTENSIONS

    def load_entry(self, entry: Path) -> M:
        return load_yaml_document(self.model, entry)  # type: ignore[return-value]
