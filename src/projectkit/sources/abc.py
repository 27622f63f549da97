"""Abstract interfaces for source resolution."""

from abc import ABC, abstractmethod
from pathlib import Path


class SourceDriver(ABC):
    """Serves one or more URI schemes by mapping them to local directories."""

    @abstractmethod
    def supported_schemes(self) -> tuple[str, ...]:
        """Return the schemes this driver handles, without ``://``."""
        ...

    @abstractmethod
    def resolve(self, uri: str) -> Path:
        """Return the directory a URI points at.

        The returned directory is treated as read-only by every caller.

        Raises:
            SourceResolutionError: If the URI cannot be resolved
        """
        ...


class SourceResolver(ABC):
    """Maps a scheme-qualified URI to a readable directory tree."""

    @abstractmethod
    def resolve(self, uri: str) -> Path:
        """Resolve ``uri`` into the root of a readable directory tree."""
        ...
