"""Ingest configured sources and rulebooks into the repositories."""

import logging
from dataclasses import dataclass, field

from projectkit.actions.loading import load_category, load_from_sources, load_rulebooks
from projectkit.errors import error_context
from projectkit.loaders.categories import (
    InstructionLoader,
    McpServerLoader,
    StandardLoader,
    WorkflowLoader,
)
from projectkit.loaders.skill import SkillLoader
from projectkit.models.config import ProjectConfig
from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.models.skill import Skill
from projectkit.models.standard import Standard
from projectkit.models.workflow import Workflow
from projectkit.repositories import Repositories
from projectkit.sources.abc import SourceResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestedArtifacts:
    standards: list[Standard] = field(default_factory=list)
    instructions: list[Instructions] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    workflows: list[Workflow] = field(default_factory=list)
    mcp_servers: list[McpServer] = field(default_factory=list)


class UpdateAction:
    """Replace repository contents with everything the config points at.

    All sources are loaded before any repository is touched, so a bad
    source leaves the store as it was. Repositories are then rewritten one
    after another; a storage failure part-way leaves earlier ones updated.
    """

    def __init__(
        self,
        config: ProjectConfig,
        resolver: SourceResolver,
        repositories: Repositories,
    ) -> None:
        self._config = config
        self._resolver = resolver
        self._repositories = repositories

    def run(self) -> IngestedArtifacts:
        artifacts = self._collect()
        self._store(artifacts)
        return artifacts

    def _collect(self) -> IngestedArtifacts:
        ai = self._config.ai
        standard_config = self._config.doc.standard if self._config.doc else None

        with error_context("load artifacts from config"):
            artifacts = IngestedArtifacts(
                standards=load_from_sources(
                    self._resolver,
                    standard_config.sources if standard_config else [],
                    StandardLoader(),
                ),
                instructions=load_category(
                    self._resolver, ai.instruction if ai else None, InstructionLoader()
                ),
                skills=load_category(self._resolver, ai.skill if ai else None, SkillLoader()),
                workflows=load_category(
                    self._resolver, ai.workflow if ai else None, WorkflowLoader()
                ),
                mcp_servers=load_category(
                    self._resolver, ai.mcp if ai else None, McpServerLoader()
                ),
            )

        for rulebook in load_rulebooks(self._resolver, self._config.rulebook):
            artifacts.standards.extend(rulebook.doc.standards)
            artifacts.instructions.extend(rulebook.ai.instructions)
            artifacts.skills.extend(rulebook.ai.skills)
            artifacts.workflows.extend(rulebook.ai.workflows)
            artifacts.mcp_servers.extend(rulebook.ai.mcp_servers)

        return artifacts

    def _store(self, artifacts: IngestedArtifacts) -> None:
        repositories = self._repositories

        with error_context("store standards"):
            repositories.standards.remove_all()
            for standard in artifacts.standards:
                repositories.standards.add_standard(standard)
        logger.info("Stored %d standards", len(artifacts.standards))

        with error_context("store instructions"):
            repositories.instructions.remove_all()
            for instructions in artifacts.instructions:
                repositories.instructions.add_instructions(instructions)
        logger.info("Stored %d instruction sets", len(artifacts.instructions))

        with error_context("store skills"):
            repositories.skills.remove_all()
            for skill in artifacts.skills:
                repositories.skills.add_skill(skill)
        logger.info("Stored %d skills", len(artifacts.skills))

        with error_context("store workflows"):
            repositories.workflows.remove_all_workflows()
            for workflow in artifacts.workflows:
                repositories.workflows.add_workflow(workflow)
        logger.info("Stored %d workflows", len(artifacts.workflows))

        with error_context("store mcp servers"):
            repositories.mcp_servers.remove_all()
            for server in artifacts.mcp_servers:
                repositories.mcp_servers.add_mcp_server(server)
        logger.info("Stored %d MCP servers", len(artifacts.mcp_servers))
