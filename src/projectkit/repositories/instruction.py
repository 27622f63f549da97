"""Instruction repository: one record per category, rules merged on add."""

from abc import ABC, abstractmethod
from pathlib import Path

from projectkit.models.instruction import Instructions
from projectkit.repositories.locking import ReadWriteLock
from projectkit.repositories.store import JsonDocumentStore


class InstructionRepository(ABC):
    @abstractmethod
    def add_instructions(self, instructions: Instructions) -> None:
        """Store ``instructions``, appending its rules to an existing category if present."""
        ...

    @abstractmethod
    def get_all(self) -> list[Instructions]:
        """Return every stored category. Order is not defined."""
        ...

    @abstractmethod
    def remove_all(self) -> None: ...


class FilesystemInstructionRepository(InstructionRepository):
    def __init__(self, directory: Path) -> None:
        self._store = JsonDocumentStore(directory, Instructions)
        self._lock = ReadWriteLock()

    def add_instructions(self, instructions: Instructions) -> None:
        with self._lock.write():
            for path, existing in self._store.read_all():
                if existing.category != instructions.category:
                    continue
                merged = existing.model_copy(
                    update={"rules": [*existing.rules, *instructions.rules]}
                )
                self._store.write(path, merged)
                return

            self._store.write(self._store.new_path(), instructions)

    def get_all(self) -> list[Instructions]:
        with self._lock.read():
            return [instructions for _, instructions in self._store.read_all()]

    def remove_all(self) -> None:
        with self._lock.write():
            self._store.remove_all()
