"""Driver for sources that already live on the local filesystem."""

import logging
from pathlib import Path

from projectkit.errors import EmptyPathError, SourceNotFoundError, UnsupportedSchemeError
from projectkit.sources.abc import SourceDriver

logger = logging.getLogger(__name__)

LOCAL_SCHEMES = ("local", "file")


class LocalSourceDriver(SourceDriver):
    """Resolves ``local://`` and ``file://`` URIs to directories.

    Relative paths are taken from ``base_dir`` (the working directory by
    default).
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    def supported_schemes(self) -> tuple[str, ...]:
        return LOCAL_SCHEMES

    def resolve(self, uri: str) -> Path:
        raw_path = self._strip_scheme(uri)
        if not raw_path:
            raise EmptyPathError(uri)

        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            base_dir = self._base_dir if self._base_dir is not None else Path.cwd()
            path = base_dir / path

        if not path.is_dir():
            raise SourceNotFoundError(path)

        logger.debug("Resolved local source %s to %s", uri, path)
        return path

    def _strip_scheme(self, uri: str) -> str:
        for scheme in LOCAL_SCHEMES:
            prefix = f"{scheme}://"
            if uri.startswith(prefix):
                return uri.removeprefix(prefix)
        raise UnsupportedSchemeError(uri)
