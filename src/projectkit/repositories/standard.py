"""Documentation standard repository."""

from abc import ABC, abstractmethod
from pathlib import Path

from projectkit.models.standard import Standard
from projectkit.repositories.locking import ReadWriteLock
from projectkit.repositories.store import JsonDocumentStore


class StandardRepository(ABC):
    @abstractmethod
    def add_standard(self, standard: Standard) -> None:
        """Store ``standard`` as a new document; ids are not checked for duplicates."""
        ...

    @abstractmethod
    def get_all(self) -> list[Standard]:
        """Return every stored standard sorted by name."""
        ...

    @abstractmethod
    def remove_all(self) -> None: ...


class FilesystemStandardRepository(StandardRepository):
    def __init__(self, directory: Path) -> None:
        self._store = JsonDocumentStore(directory, Standard)
        self._lock = ReadWriteLock()

    def add_standard(self, standard: Standard) -> None:
        with self._lock.write():
            self._store.write(self._store.new_path(), standard)

    def get_all(self) -> list[Standard]:
        with self._lock.read():
            standards = [standard for _, standard in self._store.read_all()]
        return sorted(standards, key=lambda standard: standard.metadata.name)

    def remove_all(self) -> None:
        with self._lock.write():
            self._store.remove_all()
