"""One-JSON-file-per-document storage used by every repository.

Documents are written atomically (temp file then rename) with two-space
indentation and a trailing newline. Only ``*.json`` files count as
documents; sub-directories and other files are ignored.
"""

import contextlib
import uuid
from typing import Generic, TypeVar
from pathlib import Path

from pydantic import BaseModel, ValidationError

from projectkit.errors import CorruptDocumentError, StorageError
from projectkit.io.documents import describe_validation_error

M = TypeVar("M", bound=BaseModel)

DOCUMENT_SUFFIX = ".json"


class JsonDocumentStore(Generic[M]):
    """Reads and writes ``model`` documents under ``directory``.

    The store does no locking of its own; repositories wrap calls in their
    ReadWriteLock.
    """

    def __init__(self, directory: Path, model: type[M]) -> None:
        self.directory = directory
        self._model = model

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}{DOCUMENT_SUFFIX}"

    def new_path(self) -> Path:
        return self.path_for(str(uuid.uuid4()))

    def list_paths(self) -> list[Path]:
        if not self.directory.exists():
            return []
        try:
            entries = sorted(self.directory.iterdir(), key=lambda entry: entry.name)
        except OSError as err:
            raise StorageError(self.directory, str(err)) from err
        return [entry for entry in entries if entry.suffix == DOCUMENT_SUFFIX and entry.is_file()]

    def read(self, path: Path) -> M:
        try:
            content = path.read_bytes()
        except OSError as err:
            raise StorageError(path, str(err)) from err
        try:
            return self._model.model_validate_json(content)
        except ValidationError as err:
            raise CorruptDocumentError(path, describe_validation_error(err)) from err

    def read_all(self) -> list[tuple[Path, M]]:
        return [(path, self.read(path)) for path in self.list_paths()]

    def write(self, path: Path, document: M) -> None:
        temp_path = path.with_suffix(".json.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as f:
                f.write(document.model_dump_json(indent=2))
                f.write("\n")
            temp_path.replace(path)
        except OSError as err:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise StorageError(path, str(err)) from err

    def remove_all(self) -> int:
        """Delete every stored document and return how many were removed."""
        paths = self.list_paths()
        for path in paths:
            try:
                path.unlink()
            except OSError as err:
                raise StorageError(path, str(err)) from err
        return len(paths)
