"""Render stored documentation standards into configured destinations."""

import logging
from pathlib import Path

from projectkit.errors import StorageError, UnsupportedFormatError, error_context
from projectkit.models.config import RenderConfig
from projectkit.models.standard import Standard
from projectkit.repositories.standard import StandardRepository
from projectkit.standards.abc import StandardRenderer

logger = logging.getLogger(__name__)


class RenderDocStandardAction:
    """Write one file per standard into each render destination.

    Before writing, files in the destination that carry the renderer's
    extension are deleted so removed standards do not linger. Only the top
    level is cleaned; sub-directories and other files are kept.
    """

    def __init__(
        self,
        render_configs: list[RenderConfig],
        standards: StandardRepository,
        renderers: dict[str, StandardRenderer],
        project_root: Path,
    ) -> None:
        self._render_configs = render_configs
        self._standards = standards
        self._renderers = renderers
        self._project_root = project_root

    def run(self) -> None:
        standards = self._standards.get_all()
        logger.info("Loaded %d standards from repository", len(standards))

        for render_config in self._render_configs:
            with error_context(f"render standards to {render_config.destination}"):
                self._render_to(render_config, standards)

    def _render_to(self, render_config: RenderConfig, standards: list[Standard]) -> None:
        renderer = self._renderers.get(render_config.format)
        if renderer is None:
            raise UnsupportedFormatError(render_config.format)

        destination = self._project_root / render_config.destination
        self._clean(destination, renderer.file_extension)

        for standard in standards:
            path = destination / f"{standard.metadata.id}{renderer.file_extension}"
            content = renderer.render(standard)
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as err:
                raise StorageError(path, str(err)) from err
            logger.debug("Rendered standard %s to %s", standard.metadata.id, path)

        logger.info("Rendered %d standards to %s", len(standards), destination)

    def _clean(self, destination: Path, extension: str) -> None:
        try:
            if not destination.exists():
                destination.mkdir(parents=True)
                return

            for entry in destination.iterdir():
                if entry.is_dir():
                    continue
                if entry.suffix == extension:
                    entry.unlink()
                    logger.debug("Removed stale %s", entry)
        except OSError as err:
            raise StorageError(destination, str(err)) from err
