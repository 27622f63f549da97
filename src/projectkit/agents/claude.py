"""Claude Code agent.

Generated files, relative to the project root::

    CLAUDE.md              instructions
    .claude/skills/<name>/ one directory per skill
    .mcp.json              MCP servers
"""

import json
import logging
from pathlib import Path
from typing import Any

from projectkit.agents.abc import Agent, AgentProvider
from projectkit.agents.options import ClaudeOptions
from projectkit.agents.rendering import (
    rebuild_skill_tree,
    render_instructions_document,
    write_text,
)
from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.repositories.skill import SkillRepository

logger = logging.getLogger(__name__)

CLAUDE_KIND = "claude"
CLAUDE_INSTRUCTIONS_TITLE = "Claude Code Instructions"


def render_mcp_document(servers: list[McpServer]) -> str:
    """Serialize servers into the ``.mcp.json`` format, keyed and sorted by name."""
    entries: dict[str, dict[str, Any]] = {}
    for server in sorted(servers, key=lambda server: server.name):
        entry: dict[str, Any] = {"type": "stdio", "command": server.stdio.executable_path}
        if server.stdio.arguments:
            entry["args"] = list(server.stdio.arguments)
        if server.stdio.environment_variables:
            entry["env"] = dict(sorted(server.stdio.environment_variables.items()))
        entries[server.name] = entry

    return json.dumps({"mcpServers": entries}, indent=2, ensure_ascii=False) + "\n"


class ClaudeAgent(Agent):
    def __init__(self, root: Path, options: ClaudeOptions) -> None:
        self._root = root
        self._options = options

    @property
    def kind(self) -> str:
        return CLAUDE_KIND

    @property
    def skills_dir(self) -> Path:
        return self._root / self._options.project_settings_dir_name / self._options.skills_dir_name

    def render_instructions(self, instructions: list[Instructions]) -> None:
        path = self._root / self._options.instructions_file_name
        write_text(path, render_instructions_document(CLAUDE_INSTRUCTIONS_TITLE, instructions))
        logger.debug("Rendered %d instruction categories to %s", len(instructions), path)

    def rebuild_skills(self, skills: SkillRepository) -> None:
        stored = skills.get_all()
        rebuild_skill_tree(self.skills_dir, stored)
        logger.debug("Rendered %d skills to %s", len(stored), self.skills_dir)

    def render_mcp_servers(self, servers: list[McpServer]) -> None:
        path = self._root / self._options.mcp_file_name
        write_text(path, render_mcp_document(servers))
        logger.debug("Rendered %d MCP servers to %s", len(servers), path)

    def git_ignore_patterns(self) -> list[str]:
        return [
            self._options.instructions_file_name,
            self._options.project_settings_dir_name,
            self._options.mcp_file_name,
        ]


class ClaudeAgentProvider(AgentProvider):
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def kind(self) -> str:
        return CLAUDE_KIND

    def new_agent(self, options: dict[str, Any] | None) -> ClaudeAgent:
        return ClaudeAgent(self._root, ClaudeOptions.from_config(CLAUDE_KIND, options))
