"""Read, parse and validate single YAML documents."""

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from projectkit.errors import ParseFailedError, ReadFailedError, ValidationFailedError

M = TypeVar("M", bound=BaseModel)


def describe_validation_error(err: ValidationError) -> str:
    """Flatten a pydantic error into ``loc: message`` pairs on one line."""
    parts = []
    for error in err.errors():
        location = ".".join(str(item) for item in error["loc"])
        if location:
            parts.append(f"{location}: {error['msg']}")
        else:
            parts.append(error["msg"])
    return "; ".join(parts)


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ReadFailedError(path, str(err)) from err


def read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as err:
        raise ReadFailedError(path, str(err)) from err


def parse_yaml(path: Path, content: str) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as err:
        raise ParseFailedError(path, str(err)) from err


def validate_document(model: type[M], data: Any, path: Path) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as err:
        raise ValidationFailedError(path, describe_validation_error(err)) from err


def load_yaml_document(model: type[M], path: Path) -> M:
    """Read ``path`` and return it as a validated ``model``.

    Raises:
        ReadFailedError: The file could not be read
        ParseFailedError: The file is not valid YAML
        ValidationFailedError: The document does not satisfy ``model``
    """
    data = parse_yaml(path, read_text(path))
    return validate_document(model, data, path)
