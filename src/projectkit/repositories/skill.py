"""Skill repository. Skills are not deduplicated by name."""

from abc import ABC, abstractmethod
from pathlib import Path

from projectkit.errors import SkillNotFoundError
from projectkit.models.skill import Skill
from projectkit.repositories.locking import ReadWriteLock
from projectkit.repositories.store import JsonDocumentStore


class SkillRepository(ABC):
    @abstractmethod
    def add_skill(self, skill: Skill) -> None: ...

    @abstractmethod
    def get_all(self) -> list[Skill]:
        """Return every stored skill. Order is not defined."""
        ...

    @abstractmethod
    def get_skill_by_name(self, name: str) -> Skill:
        """Return the first stored skill called ``name``.

        Raises:
            SkillNotFoundError: No stored skill has that name
        """
        ...

    @abstractmethod
    def remove_all(self) -> None: ...


class FilesystemSkillRepository(SkillRepository):
    def __init__(self, directory: Path) -> None:
        self._store = JsonDocumentStore(directory, Skill)
        self._lock = ReadWriteLock()

    def add_skill(self, skill: Skill) -> None:
        with self._lock.write():
            self._store.write(self._store.new_path(), skill)

    def get_all(self) -> list[Skill]:
        with self._lock.read():
            return [skill for _, skill in self._store.read_all()]

    def get_skill_by_name(self, name: str) -> Skill:
        with self._lock.read():
            for _, skill in self._store.read_all():
                if skill.metadata.name == name:
                    return skill
        raise SkillNotFoundError(name)

    def remove_all(self) -> None:
        with self._lock.write():
            self._store.remove_all()
