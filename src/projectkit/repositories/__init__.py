"""Filesystem-backed artifact repositories."""

from dataclasses import dataclass
from pathlib import Path

from projectkit.repositories.instruction import (
    FilesystemInstructionRepository,
    InstructionRepository,
)
from projectkit.repositories.mcp import FilesystemMcpServerRepository, McpServerRepository
from projectkit.repositories.skill import FilesystemSkillRepository, SkillRepository
from projectkit.repositories.standard import FilesystemStandardRepository, StandardRepository
from projectkit.repositories.workflow import FilesystemWorkflowRepository, WorkflowRepository

REPOSITORY_DIR = Path(".projectkit") / "repository"


@dataclass(frozen=True)
class Repositories:
    """The full set of artifact repositories for one project."""

    instructions: InstructionRepository
    skills: SkillRepository
    workflows: WorkflowRepository
    mcp_servers: McpServerRepository
    standards: StandardRepository


def create_filesystem_repositories(project_root: Path) -> Repositories:
    """Create repositories under ``<project_root>/.projectkit/repository``."""
    base = project_root / REPOSITORY_DIR
    return Repositories(
        instructions=FilesystemInstructionRepository(base / "ai" / "instruction"),
        skills=FilesystemSkillRepository(base / "ai" / "skill"),
        workflows=FilesystemWorkflowRepository(base / "ai" / "workflow"),
        mcp_servers=FilesystemMcpServerRepository(base / "ai" / "mcp"),
        standards=FilesystemStandardRepository(base / "doc" / "standard"),
    )


__all__ = [
    "FilesystemInstructionRepository",
    "FilesystemMcpServerRepository",
    "FilesystemSkillRepository",
    "FilesystemStandardRepository",
    "FilesystemWorkflowRepository",
    "InstructionRepository",
    "McpServerRepository",
    "REPOSITORY_DIR",
    "Repositories",
    "SkillRepository",
    "StandardRepository",
    "WorkflowRepository",
    "create_filesystem_repositories",
]
