"""Renderers that turn stored standards into documents."""

from projectkit.standards.abc import StandardRenderer
from projectkit.standards.markdown import MarkdownStandardRenderer


def create_default_renderers() -> dict[str, StandardRenderer]:
    """Renderers keyed by the ``format`` name used in render config."""
    return {"markdown": MarkdownStandardRenderer()}


__all__ = ["MarkdownStandardRenderer", "StandardRenderer", "create_default_renderers"]
