"""Load AI-tooling rulebooks into a local store and render them for coding agents."""

from projectkit.version import __version__

__all__ = ["__version__"]
