"""Validate a single standard file without storing it."""

from pathlib import Path

from projectkit.io.documents import load_yaml_document
from projectkit.models.standard import Standard


class ValidateDocStandardAction:
    def __init__(self, path: Path) -> None:
        self._path = path

    def run(self) -> Standard:
        """Return the parsed standard.

        Raises:
            ReadFailedError: The file could not be read
            ParseFailedError: The file is not valid YAML
            ValidationFailedError: The standard breaks a field constraint
        """
        return load_yaml_document(Standard, self._path)
