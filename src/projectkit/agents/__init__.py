"""Coding-agent providers and their registry."""

from pathlib import Path

from projectkit.agents.abc import Agent, AgentProvider
from projectkit.agents.claude import ClaudeAgent, ClaudeAgentProvider
from projectkit.agents.codex import CodexAgent, CodexAgentProvider
from projectkit.agents.registry import AgentRegistry


def create_default_registry(root: Path) -> AgentRegistry:
    """Registry with every built-in provider, rendering under ``root``."""
    return AgentRegistry([ClaudeAgentProvider(root), CodexAgentProvider(root)])


__all__ = [
    "Agent",
    "AgentProvider",
    "AgentRegistry",
    "ClaudeAgent",
    "ClaudeAgentProvider",
    "CodexAgent",
    "CodexAgentProvider",
    "create_default_registry",
]
