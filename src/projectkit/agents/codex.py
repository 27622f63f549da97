"""Codex agent. Codex reads ``AGENTS.md`` and has no project MCP file."""

import logging
from pathlib import Path
from typing import Any

from projectkit.agents.abc import Agent, AgentProvider
from projectkit.agents.options import CodexOptions
from projectkit.agents.rendering import (
    rebuild_skill_tree,
    render_instructions_document,
    write_text,
)
from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.repositories.skill import SkillRepository

logger = logging.getLogger(__name__)

CODEX_KIND = "codex"
CODEX_INSTRUCTIONS_TITLE = "Codex Agent Instructions"


class CodexAgent(Agent):
    def __init__(self, root: Path, options: CodexOptions) -> None:
        self._root = root
        self._options = options

    @property
    def kind(self) -> str:
        return CODEX_KIND

    @property
    def skills_dir(self) -> Path:
        return self._root / self._options.project_settings_dir_name / self._options.skills_dir_name

    def render_instructions(self, instructions: list[Instructions]) -> None:
        path = self._root / self._options.instructions_file_name
        write_text(path, render_instructions_document(CODEX_INSTRUCTIONS_TITLE, instructions))
        logger.debug("Rendered %d instruction categories to %s", len(instructions), path)

    def rebuild_skills(self, skills: SkillRepository) -> None:
        stored = skills.get_all()
        rebuild_skill_tree(self.skills_dir, stored)
        logger.debug("Rendered %d skills to %s", len(stored), self.skills_dir)

    def render_mcp_servers(self, servers: list[McpServer]) -> None:
        return None

    def git_ignore_patterns(self) -> list[str]:
        return [
            self._options.instructions_file_name,
            self._options.project_settings_dir_name,
        ]


class CodexAgentProvider(AgentProvider):
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def kind(self) -> str:
        return CODEX_KIND

    def new_agent(self, options: dict[str, Any] | None) -> CodexAgent:
        return CodexAgent(self._root, CodexOptions.from_config(CODEX_KIND, options))
