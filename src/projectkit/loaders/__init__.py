"""Loaders turning source directories into validated artifacts."""

from projectkit.loaders.base import ArtifactLoader, YamlArtifactLoader
from projectkit.loaders.categories import (
    InstructionLoader,
    McpServerLoader,
    StandardLoader,
    WorkflowLoader,
)
from projectkit.loaders.rulebook import RulebookLoader, resolve_rulebook_uri
from projectkit.loaders.skill import SkillLoader

__all__ = [
    "ArtifactLoader",
    "InstructionLoader",
    "McpServerLoader",
    "RulebookLoader",
    "SkillLoader",
    "StandardLoader",
    "WorkflowLoader",
    "YamlArtifactLoader",
    "resolve_rulebook_uri",
]
