"""Source resolution: turn URIs into readable directories."""

from projectkit.sources.abc import SourceDriver, SourceResolver
from projectkit.sources.local import LocalSourceDriver
from projectkit.sources.resolver import (
    DriverRegistry,
    SchemeSourceResolver,
    create_default_resolver,
)

__all__ = [
    "DriverRegistry",
    "LocalSourceDriver",
    "SchemeSourceResolver",
    "SourceDriver",
    "SourceResolver",
    "create_default_resolver",
]
