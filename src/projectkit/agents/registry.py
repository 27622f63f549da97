"""Kind-keyed registry of agent providers."""

from projectkit.agents.abc import AgentProvider
from projectkit.errors import ProviderAlreadyRegisteredError, ProviderNotRegisteredError


class AgentRegistry:
    def __init__(self, providers: list[AgentProvider] | None = None) -> None:
        self._providers: dict[str, AgentProvider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: AgentProvider) -> None:
        """Register ``provider``; the first provider for a kind wins."""
        if provider.kind in self._providers:
            raise ProviderAlreadyRegisteredError(provider.kind)
        self._providers[provider.kind] = provider

    def get_by_kind(self, kind: str) -> AgentProvider:
        provider = self._providers.get(kind)
        if provider is None:
            raise ProviderNotRegisteredError(kind)
        return provider

    def get_all_kinds(self) -> list[str]:
        return list(self._providers)
