"""Renderer interface for documentation standards."""

from abc import ABC, abstractmethod

from projectkit.models.standard import Standard


class StandardRenderer(ABC):
    """Turns one standard into a document of a fixed format."""

    @abstractmethod
    def render(self, standard: Standard) -> str: ...

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension including the leading dot, e.g. ``.md``."""
        ...
