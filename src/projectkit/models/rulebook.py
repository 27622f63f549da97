"""Rulebook descriptor and the bundle a rulebook loads into."""

from dataclasses import dataclass, field

from projectkit.models.base import DocumentModel
from projectkit.models.config import AiConfig, DocConfig
from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.models.skill import Skill
from projectkit.models.standard import Standard
from projectkit.models.workflow import Workflow

RULEBOOK_FILE_NAME = "rulebook.yaml"


class RulebookMetadata(DocumentModel):
    """Contents of ``rulebook.yaml``; same shape as the project ``ai``/``doc`` sections."""

    ai: AiConfig | None = None
    doc: DocConfig | None = None


@dataclass(frozen=True)
class AiRulebook:
    instructions: list[Instructions] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    workflows: list[Workflow] = field(default_factory=list)
    mcp_servers: list[McpServer] = field(default_factory=list)


@dataclass(frozen=True)
class DocRulebook:
    standards: list[Standard] = field(default_factory=list)


@dataclass(frozen=True)
class Rulebook:
    """Everything one rulebook contributes; never persisted as a unit."""

    ai: AiRulebook = field(default_factory=AiRulebook)
    doc: DocRulebook = field(default_factory=DocRulebook)
