"""Coding-assistant instructions grouped by category."""

from pydantic import Field

from projectkit.models.base import DocumentModel
from projectkit.models.fields import NonEmptyStr


class Instructions(DocumentModel):
    """Ordered rules for one category, e.g. ``user-communication``."""

    category: NonEmptyStr
    rules: list[str] = Field(min_length=1)
