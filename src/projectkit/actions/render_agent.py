"""Render stored artifacts for every configured coding agent."""

import logging

from projectkit.actions.loading import load_agents
from projectkit.agents.registry import AgentRegistry
from projectkit.errors import error_context
from projectkit.git.exclude import GitExclude
from projectkit.models.config import AgentConfig
from projectkit.repositories import Repositories

logger = logging.getLogger(__name__)


class RenderAgentAction:
    def __init__(
        self,
        agent_configs: list[AgentConfig],
        registry: AgentRegistry,
        repositories: Repositories,
        git_exclude: GitExclude,
    ) -> None:
        self._agent_configs = agent_configs
        self._registry = registry
        self._repositories = repositories
        self._git_exclude = git_exclude

    def run(self) -> None:
        agents = load_agents(self._registry, self._agent_configs)
        if not agents:
            logger.warning("No agents configured, nothing to render")
            return

        instructions = self._repositories.instructions.get_all()
        servers = self._repositories.mcp_servers.get_all()

        for agent in agents:
            with error_context(f"render {agent.kind} agent"):
                agent.render_instructions(instructions)
                agent.rebuild_skills(self._repositories.skills)
                agent.render_mcp_servers(servers)

                for pattern in agent.git_ignore_patterns():
                    if self._git_exclude.is_excluded(pattern):
                        continue
                    self._git_exclude.exclude(pattern)
                    logger.debug("Excluded %s from git", pattern)

            logger.info("Rendered agent %s", agent.kind)
