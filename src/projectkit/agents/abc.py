"""Abstract interfaces for coding-agent providers."""

from abc import ABC, abstractmethod
from typing import Any

from projectkit.models.instruction import Instructions
from projectkit.models.mcp import McpServer
from projectkit.repositories.skill import SkillRepository


class Agent(ABC):
    """Renders stored artifacts into one coding agent's native files."""

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @abstractmethod
    def render_instructions(self, instructions: list[Instructions]) -> None:
        """Write all categories into the agent's instructions file, replacing it."""
        ...

    @abstractmethod
    def rebuild_skills(self, skills: SkillRepository) -> None:
        """Delete the agent's skills directory and render every stored skill into it."""
        ...

    @abstractmethod
    def render_mcp_servers(self, servers: list[McpServer]) -> None:
        """Write the agent's MCP config; agents without MCP support do nothing."""
        ...

    @abstractmethod
    def git_ignore_patterns(self) -> list[str]:
        """Return the paths this agent generates, relative to the project root."""
        ...


class AgentProvider(ABC):
    """Builds agents of one kind from their config options."""

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @abstractmethod
    def new_agent(self, options: dict[str, Any] | None) -> Agent:
        """Create an agent, applying defaults for any option not given.

        Raises:
            InvalidAgentOptionsError: The options do not fit this provider
        """
        ...
