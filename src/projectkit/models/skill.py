"""Skill models."""

from typing import Annotated

from pydantic import Field, StringConstraints

from projectkit.models.base import DocumentModel
from projectkit.models.fields import NonEmptyStr

DEFAULT_CONTENT_TYPE = "application/octet-stream"

SCRIPT_CONTENT_TYPES: dict[str, str] = {
    ".sh": "application/x-sh",
    ".bash": "application/x-sh",
    ".zsh": "application/x-sh",
    ".ksh": "application/x-sh",
    ".csh": "application/x-csh",
    ".fish": "application/x-fish",
    ".py": "text/x-python",
    ".rb": "text/x-ruby",
    ".pl": "text/x-perl",
    ".lua": "text/x-lua",
    ".js": "text/javascript",
    ".awk": "text/x-awk",
    ".sed": "text/x-sed",
    ".tcl": "application/x-tcl",
}


def content_type_for(file_name: str) -> str:
    """Map a script file name to its content type by extension."""
    _, dot, extension = file_name.rpartition(".")
    if not dot:
        return DEFAULT_CONTENT_TYPE
    return SCRIPT_CONTENT_TYPES.get(f".{extension.lower()}", DEFAULT_CONTENT_TYPE)


class SkillMetadata(DocumentModel):
    name: NonEmptyStr
    description: Annotated[str, StringConstraints(min_length=1, max_length=256)]


class Script(DocumentModel):
    content_type: str
    content: bytes


class Skill(DocumentModel):
    """A named skill: instructions text plus optional helper scripts."""

    metadata: SkillMetadata
    instructions: NonEmptyStr
    scripts: dict[str, Script] = Field(default_factory=dict)
