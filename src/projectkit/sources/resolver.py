"""Scheme-keyed driver registry and the resolver built on it."""

from pathlib import Path

from projectkit.errors import (
    DriverAlreadyRegisteredError,
    DriverNotRegisteredError,
    SchemeNotFoundError,
)
from projectkit.sources.abc import SourceDriver, SourceResolver
from projectkit.sources.local import LocalSourceDriver

SCHEME_SEPARATOR = "://"


class DriverRegistry:
    """Holds one driver per scheme."""

    def __init__(self) -> None:
        self._drivers: dict[str, SourceDriver] = {}

    def register(self, driver: SourceDriver) -> None:
        """Register ``driver`` for all of its schemes.

        Nothing is registered if any of the schemes is already taken.
        """
        schemes = driver.supported_schemes()
        for scheme in schemes:
            if scheme in self._drivers:
                raise DriverAlreadyRegisteredError(scheme)

        for scheme in schemes:
            self._drivers[scheme] = driver

    def get(self, scheme: str) -> SourceDriver:
        driver = self._drivers.get(scheme)
        if driver is None:
            raise DriverNotRegisteredError(scheme)
        return driver

    def schemes(self) -> list[str]:
        return sorted(self._drivers)


class SchemeSourceResolver(SourceResolver):
    """Dispatches a URI to the driver registered for its scheme."""

    def __init__(self, registry: DriverRegistry) -> None:
        self._registry = registry

    def resolve(self, uri: str) -> Path:
        scheme, separator, _ = uri.partition(SCHEME_SEPARATOR)
        if not separator or not scheme:
            raise SchemeNotFoundError(uri)
        return self._registry.get(scheme).resolve(uri)


def create_default_resolver(base_dir: Path | None = None) -> SchemeSourceResolver:
    """Build a resolver that understands every built-in scheme."""
    registry = DriverRegistry()
    registry.register(LocalSourceDriver(base_dir))
    return SchemeSourceResolver(registry)
