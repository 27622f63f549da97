"""Tests for the driver registry and scheme resolver."""

from pathlib import Path

import pytest

from projectkit.errors import (
    DriverAlreadyRegisteredError,
    DriverNotRegisteredError,
    SchemeNotFoundError,
)
from projectkit.sources.abc import SourceDriver
from projectkit.sources.resolver import (
    DriverRegistry,
    SchemeSourceResolver,
    create_default_resolver,
)


class StaticDriver(SourceDriver):
    def __init__(self, schemes: tuple[str, ...], path: Path) -> None:
        self._schemes = schemes
        self._path = path
        self.resolved: list[str] = []

    def supported_schemes(self) -> tuple[str, ...]:
        return self._schemes

    def resolve(self, uri: str) -> Path:
        self.resolved.append(uri)
        return self._path


def test_resolver_dispatches_by_scheme(tmp_path: Path) -> None:
    """Test that a URI is handed to the driver registered for its scheme."""
    git_driver = StaticDriver(("git",), tmp_path / "git")
    http_driver = StaticDriver(("http", "https"), tmp_path / "http")
    registry = DriverRegistry()
    registry.register(git_driver)
    registry.register(http_driver)

    resolver = SchemeSourceResolver(registry)

    assert resolver.resolve("https://example.com/rules") == tmp_path / "http"
    assert http_driver.resolved == ["https://example.com/rules"]
    assert git_driver.resolved == []


def test_resolver_rejects_uri_without_scheme() -> None:
    """Test that a bare path is not resolvable."""
    resolver = SchemeSourceResolver(DriverRegistry())

    with pytest.raises(SchemeNotFoundError):
        resolver.resolve("rules/instructions")


def test_resolver_fails_for_unknown_scheme() -> None:
    """Test that a scheme without a driver fails with not registered."""
    resolver = SchemeSourceResolver(DriverRegistry())

    with pytest.raises(DriverNotRegisteredError) as exc_info:
        resolver.resolve("s3://bucket/rules")

    assert exc_info.value.scheme == "s3"


def test_register_overlapping_schemes_registers_nothing(tmp_path: Path) -> None:
    """Test that a driver overlapping an existing scheme is rejected atomically."""
    registry = DriverRegistry()
    registry.register(StaticDriver(("https",), tmp_path))

    with pytest.raises(DriverAlreadyRegisteredError):
        registry.register(StaticDriver(("ftp", "https"), tmp_path))

    assert registry.schemes() == ["https"]
    with pytest.raises(DriverNotRegisteredError):
        registry.get("ftp")


def test_default_resolver_understands_local_and_file(tmp_path: Path) -> None:
    """Test that the built-in resolver serves both local schemes."""
    (tmp_path / "rules").mkdir()
    resolver = create_default_resolver(tmp_path)

    assert resolver.resolve("local://rules") == tmp_path / "rules"
    assert resolver.resolve(f"file://{tmp_path / 'rules'}") == tmp_path / "rules"
