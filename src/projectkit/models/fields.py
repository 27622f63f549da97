"""Reusable constrained field types."""

import re
from typing import Annotated
from urllib.parse import urlsplit

from pydantic import AfterValidator, StringConstraints

SEMVER_PATTERN = (
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
KEBAB_CASE_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
NAME_FORMAT_PATTERN = r"^[a-zA-Z0-9\s\-]+$"
ISO_639_1_PATTERN = r"^[a-z]{2}$"
IDENTIFIER_PATTERN = r"^[a-zA-Z0-9-]+$"

IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)


def is_valid_identifier(value: str) -> bool:
    """Check a workflow or execution id: letters, digits and dashes only."""
    return IDENTIFIER_RE.fullmatch(value) is not None


def _validate_url(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme or not (parts.netloc or parts.path):
        msg = f"Invalid URL: {value!r}"
        raise ValueError(msg)
    return value


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
SemVer = Annotated[str, StringConstraints(pattern=SEMVER_PATTERN)]
Identifier = Annotated[str, StringConstraints(pattern=IDENTIFIER_PATTERN)]
KebabId = Annotated[
    str, StringConstraints(pattern=KEBAB_CASE_PATTERN, min_length=1, max_length=100)
]
Tag = Annotated[str, StringConstraints(pattern=KEBAB_CASE_PATTERN, min_length=1, max_length=50)]
DisplayName = Annotated[
    str, StringConstraints(pattern=NAME_FORMAT_PATTERN, min_length=1, max_length=200)
]
LanguageCode = Annotated[str, StringConstraints(pattern=ISO_639_1_PATTERN)]
Prose = Annotated[str, StringConstraints(min_length=10, max_length=500)]
Url = Annotated[str, AfterValidator(_validate_url)]
