"""Documentation standard models.

A standard describes one engineering convention: why it exists, the rules
that make it up, and good/bad examples. Field constraints mirror the
authoring guide for standard YAML files.
"""

from typing import Annotated, Literal

from pydantic import Field, StringConstraints

from projectkit.models.base import DocumentModel
from projectkit.models.fields import (
    DisplayName,
    KebabId,
    LanguageCode,
    NonEmptyStr,
    Prose,
    SemVer,
    Tag,
    Url,
)

RequirementLevel = Literal["must", "should", "may", "recommended", "optional"]

ScopeTarget = Annotated[str, StringConstraints(min_length=1, max_length=100)]


class Scope(DocumentModel):
    languages: list[LanguageCode] = Field(min_length=1)
    applies_to: list[ScopeTarget] = Field(default_factory=list)
    not_applicable_to: list[ScopeTarget] = Field(default_factory=list)


class Relations(DocumentModel):
    standard: list[Url] = Field(default_factory=list)


class StandardMetadata(DocumentModel):
    id: KebabId
    name: DisplayName
    version: SemVer
    tags: list[Tag] = Field(min_length=1)
    scope: Scope
    related: Relations = Field(default_factory=Relations, alias="relations")


class Specification(DocumentModel):
    purpose: Prose
    goals: list[Prose] = Field(min_length=1)
    non_goals: list[Prose] = Field(default_factory=list)


class FieldDefinition(DocumentModel):
    field_name: DisplayName


class TermDefinition(DocumentModel):
    abbreviation: Annotated[str, StringConstraints(min_length=1, max_length=50)]
    term: DisplayName
    meaning: Prose


class Definitions(DocumentModel):
    fields: list[FieldDefinition] = Field(default_factory=list)
    terms: list[TermDefinition] = Field(default_factory=list)


class VerificationMethod(DocumentModel):
    type: Prose
    hint: Prose


class RequirementException(DocumentModel):
    when: Prose


class RequirementRule(DocumentModel):
    level: RequirementLevel
    statement: Prose
    rationale: Prose
    exceptions: list[RequirementException] = Field(default_factory=list)
    verification_method: list[VerificationMethod] = Field(default_factory=list)


class Requirements(DocumentModel):
    rules: list[RequirementRule] = Field(min_length=1)


class GoldenPathFile(DocumentModel):
    path: Annotated[str, StringConstraints(min_length=1, max_length=500)]
    snippet: NonEmptyStr


class GoldenPathExample(DocumentModel):
    name: DisplayName
    when: list[Prose] = Field(default_factory=list)
    steps: list[Prose] = Field(min_length=1)
    examples: list[GoldenPathFile] = Field(default_factory=list)


class GoldenPath(DocumentModel):
    steps: list[Prose] = Field(min_length=1)
    examples: list[GoldenPathExample] = Field(default_factory=list)


class Reference(DocumentModel):
    title: Annotated[str, StringConstraints(min_length=1, max_length=200)]
    type: Annotated[str, StringConstraints(min_length=1, max_length=50)]
    uri: Url


class Example(DocumentModel):
    title: Annotated[str, StringConstraints(min_length=1, max_length=200)]
    language: Annotated[str, StringConstraints(min_length=2, max_length=10)]
    snippet: NonEmptyStr
    reason: Prose


class Examples(DocumentModel):
    good: list[Example] = Field(min_length=1)
    bad: list[Example] = Field(default_factory=list)


class Standard(DocumentModel):
    metadata: StandardMetadata
    specification: Specification
    definitions: Definitions | None = None
    requirements: Requirements
    golden_path: GoldenPath | None = None
    examples: Examples
    references: list[Reference] = Field(default_factory=list)
