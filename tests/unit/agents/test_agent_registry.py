"""Tests for AgentRegistry and instruction headings."""

from pathlib import Path

import pytest

from projectkit.agents import create_default_registry
from projectkit.agents.registry import AgentRegistry
from projectkit.agents.rendering import category_heading
from projectkit.errors import ProviderAlreadyRegisteredError, ProviderNotRegisteredError
from tests.fakes.agent import FakeAgentProvider


def test_register_and_lookup() -> None:
    """Test that providers are found by kind in registration order."""
    registry = AgentRegistry()
    first = FakeAgentProvider("first")
    registry.register(first)
    registry.register(FakeAgentProvider("second"))

    assert registry.get_by_kind("first") is first
    assert registry.get_all_kinds() == ["first", "second"]


def test_duplicate_kind_keeps_the_first_provider() -> None:
    """Test that a second provider for a kind is rejected."""
    first = FakeAgentProvider("claude")
    registry = AgentRegistry([first])

    with pytest.raises(ProviderAlreadyRegisteredError):
        registry.register(FakeAgentProvider("claude"))

    assert registry.get_by_kind("claude") is first


def test_unknown_kind() -> None:
    """Test lookup of a kind nobody registered."""
    with pytest.raises(ProviderNotRegisteredError):
        AgentRegistry().get_by_kind("cursor")


def test_default_registry_has_builtin_agents(tmp_path: Path) -> None:
    """Test the built-in provider kinds."""
    assert create_default_registry(tmp_path).get_all_kinds() == ["claude", "codex"]


@pytest.mark.parametrize(
    ("category", "heading"),
    [
        ("user-communication", "User Communication"),
        ("userCommunication", "User Communication"),
        ("code_style", "Code Style"),
        ("testing", "Testing"),
        ("HTTPClients", "Http Clients"),
        ("python3-style", "Python 3 Style"),
        ("v2Api", "V 2 Api"),
        ("HTTP2Server", "Http 2 Server"),
    ],
)
def test_category_heading(category: str, heading: str) -> None:
    """Test that category tokens become Title Case headings."""
    assert category_heading(category) == heading
