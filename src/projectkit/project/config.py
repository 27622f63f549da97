"""Loading of ``.projectkit.yaml`` files.

Two files are considered, in order: the user's ``~/.projectkit.yaml`` and
the one in the working directory. Every file found is validated on its own,
then all of them are merged: list-valued settings (agents, sources, render
targets) are concatenated so the project file extends the user defaults.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import yaml
from pydantic import ValidationError

from projectkit.errors import ConfigLoadError, ConfigNotFoundError, ConfigValidationError
from projectkit.io.documents import describe_validation_error
from projectkit.models.config import (
    AgentConfig,
    AiConfig,
    CategoryConfig,
    DocConfig,
    ProjectConfig,
    RenderConfig,
    RulebookConfig,
    SourceConfig,
    StandardConfig,
)
from projectkit.project.discovery import CONFIG_FILE_NAME

logger = logging.getLogger(__name__)

AI_CATEGORIES = ("instruction", "skill", "workflow", "mcp")


class ConfigLoader(ABC):
    """Produces the effective project configuration."""

    @abstractmethod
    def load(self) -> ProjectConfig:
        """Load and merge configuration.

        Raises:
            ConfigNotFoundError: No configuration file exists
            ConfigLoadError: A file could not be read or parsed
            ConfigValidationError: A file does not match the schema
        """
        ...


class FilesystemConfigLoader(ConfigLoader):
    def __init__(self, cwd: Path, home: Path) -> None:
        self._cwd = cwd
        self._home = home

    def candidate_paths(self) -> list[Path]:
        candidates: list[Path] = []
        for directory in (self._home, self._cwd):
            path = (directory / CONFIG_FILE_NAME).absolute()
            if path not in candidates:
                candidates.append(path)
        return candidates

    def load(self) -> ProjectConfig:
        candidates = self.candidate_paths()
        paths = [path for path in candidates if path.exists()]
        if not paths:
            raise ConfigNotFoundError(candidates)

        configs = [self._load_file(path) for path in paths]
        logger.debug("Loaded config from %s", ", ".join(str(path) for path in paths))
        return merge_configs(configs)

    def _load_file(self, path: Path) -> ProjectConfig:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise ConfigLoadError(path, str(err)) from err

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise ConfigLoadError(path, str(err)) from err

        try:
            return ProjectConfig.model_validate(data or {})
        except ValidationError as err:
            raise ConfigValidationError(path, describe_validation_error(err)) from err


def merge_configs(configs: list[ProjectConfig]) -> ProjectConfig:
    """Concatenate every list-valued setting across ``configs`` in order."""
    agents: list[AgentConfig] = []
    rulebook_sources: list[SourceConfig] = []
    ai_sources: dict[str, list[SourceConfig]] = {category: [] for category in AI_CATEGORIES}
    standard_sources: list[SourceConfig] = []
    render_targets: list[RenderConfig] = []

    for config in configs:
        agents.extend(config.agents)
        if config.rulebook is not None:
            rulebook_sources.extend(config.rulebook.sources)
        if config.ai is not None:
            for category in AI_CATEGORIES:
                section: CategoryConfig | None = getattr(config.ai, category)
                if section is not None:
                    ai_sources[category].extend(section.sources)
        if config.doc is not None and config.doc.standard is not None:
            standard_sources.extend(config.doc.standard.sources)
            render_targets.extend(config.doc.standard.render)

    ai = AiConfig(
        **{
            category: CategoryConfig(sources=sources)
            for category, sources in ai_sources.items()
            if sources
        }
    )
    standard = None
    if standard_sources or render_targets:
        standard = StandardConfig(sources=standard_sources, render=render_targets)

    return ProjectConfig(
        agents=agents,
        rulebook=RulebookConfig(sources=rulebook_sources) if rulebook_sources else None,
        ai=ai,
        doc=DocConfig(standard=standard),
    )


class InMemoryConfigLoader(ConfigLoader):
    """Config loader returning a fixed configuration, for tests and embedding."""

    def __init__(self, config: ProjectConfig | None) -> None:
        self._config = config

    def load(self) -> ProjectConfig:
        if self._config is None:
            raise ConfigNotFoundError([])
        return self._config
