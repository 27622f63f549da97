"""Project configuration models (``.projectkit.yaml``)."""

from typing import Any

from pydantic import Field

from projectkit.models.base import DocumentModel
from projectkit.models.fields import NonEmptyStr


class SourceConfig(DocumentModel):
    uri: NonEmptyStr


class CategoryConfig(DocumentModel):
    """Source list for one artifact category."""

    sources: list[SourceConfig] = Field(min_length=1)


class AiConfig(DocumentModel):
    instruction: CategoryConfig | None = None
    skill: CategoryConfig | None = None
    workflow: CategoryConfig | None = None
    mcp: CategoryConfig | None = None


class RenderConfig(DocumentModel):
    destination: NonEmptyStr
    format: NonEmptyStr


class StandardConfig(DocumentModel):
    sources: list[SourceConfig] = Field(default_factory=list)
    render: list[RenderConfig] = Field(default_factory=list)


class DocConfig(DocumentModel):
    standard: StandardConfig | None = None


class AgentConfig(DocumentModel):
    kind: NonEmptyStr
    options: dict[str, Any] | None = None


class RulebookConfig(DocumentModel):
    sources: list[SourceConfig] = Field(min_length=1)


class ProjectConfig(DocumentModel):
    """Top-level project configuration."""

    agents: list[AgentConfig] = Field(default_factory=list)
    rulebook: RulebookConfig | None = None
    ai: AiConfig | None = None
    doc: DocConfig | None = None
