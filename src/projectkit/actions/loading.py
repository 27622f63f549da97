"""Helpers that load artifacts and agents named in the project config."""

import logging
from typing import TypeVar

from projectkit.agents.abc import Agent
from projectkit.agents.registry import AgentRegistry
from projectkit.errors import error_context
from projectkit.loaders.base import ArtifactLoader
from projectkit.loaders.rulebook import RulebookLoader
from projectkit.models.config import AgentConfig, CategoryConfig, RulebookConfig, SourceConfig
from projectkit.models.rulebook import Rulebook
from projectkit.sources.abc import SourceResolver

T = TypeVar("T")

logger = logging.getLogger(__name__)


def load_from_sources(
    resolver: SourceResolver, sources: list[SourceConfig], loader: ArtifactLoader[T]
) -> list[T]:
    """Load every source in order; the first failure aborts the whole load."""
    loaded: list[T] = []
    for source in sources:
        with error_context(f"load {loader.kind} from {source.uri}"):
            loaded.extend(loader.load(resolver.resolve(source.uri)))
    return loaded


def load_category(
    resolver: SourceResolver, section: CategoryConfig | None, loader: ArtifactLoader[T]
) -> list[T]:
    if section is None:
        return []
    return load_from_sources(resolver, section.sources, loader)


def load_rulebooks(resolver: SourceResolver, config: RulebookConfig | None) -> list[Rulebook]:
    if config is None:
        return []

    rulebooks: list[Rulebook] = []
    for source in config.sources:
        with error_context(f"load rulebook from {source.uri}"):
            rulebooks.append(RulebookLoader(resolver.resolve(source.uri)).load())
        logger.debug("Loaded rulebook %s", source.uri)
    return rulebooks


def load_agents(registry: AgentRegistry, configs: list[AgentConfig]) -> list[Agent]:
    agents: list[Agent] = []
    for config in configs:
        with error_context(f"create agent {config.kind}"):
            agents.append(registry.get_by_kind(config.kind).new_agent(config.options))
    return agents
