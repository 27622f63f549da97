"""Loader for rulebooks: one descriptor fanning out to category sources."""

import logging
from pathlib import Path
from typing import TypeVar

from projectkit.errors import (
    EmptyPathError,
    MissingMetadataFileError,
    PathEscapesRootError,
    UnsupportedSchemeError,
    error_context,
)
from projectkit.io.documents import load_yaml_document
from projectkit.loaders.base import ArtifactLoader
from projectkit.loaders.categories import (
    InstructionLoader,
    McpServerLoader,
    StandardLoader,
    WorkflowLoader,
)
from projectkit.loaders.skill import SkillLoader
from projectkit.models.config import SourceConfig
from projectkit.models.rulebook import (
    RULEBOOK_FILE_NAME,
    AiRulebook,
    DocRulebook,
    Rulebook,
    RulebookMetadata,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

RULEBOOK_SCHEME_PREFIX = "rulebook://"


def resolve_rulebook_uri(root: Path, uri: str) -> Path:
    """Map ``rulebook://<sub-path>`` onto a directory inside ``root``."""
    if not uri.startswith(RULEBOOK_SCHEME_PREFIX):
        raise UnsupportedSchemeError(uri)

    sub_path = uri.removeprefix(RULEBOOK_SCHEME_PREFIX)
    if not sub_path:
        raise EmptyPathError(uri)

    resolved = (root / sub_path).resolve()
    if not resolved.is_relative_to(root.resolve()):
        raise PathEscapesRootError(uri, root)
    return resolved


class RulebookLoader:
    """Loads a whole rulebook rooted at one directory.

    Every declared source is loaded with the matching category loader and
    results of the same kind are concatenated in declaration order.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def load(self) -> Rulebook:
        metadata = self._load_metadata()

        ai = AiRulebook()
        if metadata.ai is not None:
            ai_config = metadata.ai
            ai = AiRulebook(
                instructions=self._load_sources(
                    ai_config.instruction.sources if ai_config.instruction else [],
                    InstructionLoader(),
                ),
                skills=self._load_sources(
                    ai_config.skill.sources if ai_config.skill else [], SkillLoader()
                ),
                workflows=self._load_sources(
                    ai_config.workflow.sources if ai_config.workflow else [], WorkflowLoader()
                ),
                mcp_servers=self._load_sources(
                    ai_config.mcp.sources if ai_config.mcp else [], McpServerLoader()
                ),
            )

        doc = DocRulebook()
        if metadata.doc is not None and metadata.doc.standard is not None:
            doc = DocRulebook(
                standards=self._load_sources(metadata.doc.standard.sources, StandardLoader())
            )

        return Rulebook(ai=ai, doc=doc)

    def _load_metadata(self) -> RulebookMetadata:
        descriptor = self._root / RULEBOOK_FILE_NAME
        if not descriptor.is_file():
            raise MissingMetadataFileError(descriptor)
        return load_yaml_document(RulebookMetadata, descriptor)

    def _load_sources(self, sources: list[SourceConfig], loader: ArtifactLoader[T]) -> list[T]:
        loaded: list[T] = []
        for source in sources:
            with error_context(f"load {loader.kind} from {source.uri}"):
                source_dir = resolve_rulebook_uri(self._root, source.uri)
                loaded.extend(loader.load(source_dir))
        if sources:
            logger.debug("Loaded %d %s from rulebook %s", len(loaded), loader.kind, self._root)
        return loaded
