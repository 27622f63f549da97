"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest

from projectkit.errors import ConfigLoadError, ConfigNotFoundError, ConfigValidationError
from projectkit.models.config import ProjectConfig
from projectkit.project.config import FilesystemConfigLoader, InMemoryConfigLoader, merge_configs


def _write_config(directory: Path, content: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / ".projectkit.yaml").write_text(content, encoding="utf-8")


def test_missing_config_lists_where_it_looked(tmp_path: Path) -> None:
    """Test that both candidate locations are reported."""
    loader = FilesystemConfigLoader(cwd=tmp_path / "project", home=tmp_path / "home")

    with pytest.raises(ConfigNotFoundError) as exc_info:
        loader.load()

    assert exc_info.value.paths == [
        (tmp_path / "home" / ".projectkit.yaml").absolute(),
        (tmp_path / "project" / ".projectkit.yaml").absolute(),
    ]


def test_project_config_extends_home_config(tmp_path: Path) -> None:
    """Test that home settings come first and project settings are appended."""
    _write_config(
        tmp_path / "home",
        "agents:\n  - kind: claude\n"
        "ai:\n  instruction:\n    sources:\n      - uri: local:///shared/instructions\n",
    )
    _write_config(
        tmp_path / "project",
        "agents:\n  - kind: codex\n"
        "ai:\n  instruction:\n    sources:\n      - uri: local://instructions\n"
        "doc:\n  standard:\n    render:\n      - destination: docs\n        format: markdown\n",
    )
    loader = FilesystemConfigLoader(cwd=tmp_path / "project", home=tmp_path / "home")

    config = loader.load()

    assert [agent.kind for agent in config.agents] == ["claude", "codex"]
    assert config.ai is not None and config.ai.instruction is not None
    assert [source.uri for source in config.ai.instruction.sources] == [
        "local:///shared/instructions",
        "local://instructions",
    ]
    assert config.doc is not None and config.doc.standard is not None
    assert config.doc.standard.render[0].destination == "docs"


def test_same_directory_is_read_once(tmp_path: Path) -> None:
    """Test that running from home does not load the file twice."""
    _write_config(tmp_path, "agents:\n  - kind: claude\n")
    loader = FilesystemConfigLoader(cwd=tmp_path, home=tmp_path)

    assert [agent.kind for agent in loader.load().agents] == ["claude"]


def test_empty_file_is_an_empty_config(tmp_path: Path) -> None:
    """Test that an empty config file is valid."""
    _write_config(tmp_path, "")

    config = FilesystemConfigLoader(cwd=tmp_path, home=tmp_path / "home").load()

    assert config.agents == []
    assert config.rulebook is None


def test_malformed_yaml_is_a_load_error(tmp_path: Path) -> None:
    """Test that YAML syntax errors are reported with the file."""
    _write_config(tmp_path, "agents: [\n")

    with pytest.raises(ConfigLoadError):
        FilesystemConfigLoader(cwd=tmp_path, home=tmp_path / "home").load()


def test_schema_violation_is_a_validation_error(tmp_path: Path) -> None:
    """Test that a config with wrong shapes is rejected."""
    _write_config(tmp_path, "rulebook:\n  sources: []\n")

    with pytest.raises(ConfigValidationError) as exc_info:
        FilesystemConfigLoader(cwd=tmp_path, home=tmp_path / "home").load()

    assert "rulebook.sources" in str(exc_info.value)


def test_merge_concatenates_rulebooks_and_standards() -> None:
    """Test that every list-valued setting is concatenated in order."""
    first = ProjectConfig.model_validate(
        {
            "rulebook": {"sources": [{"uri": "local://one"}]},
            "doc": {"standard": {"sources": [{"uri": "local://std-a"}]}},
        }
    )
    second = ProjectConfig.model_validate(
        {
            "rulebook": {"sources": [{"uri": "local://two"}]},
            "doc": {"standard": {"sources": [{"uri": "local://std-b"}]}},
        }
    )

    merged = merge_configs([first, second])

    assert merged.rulebook is not None
    assert [source.uri for source in merged.rulebook.sources] == ["local://one", "local://two"]
    assert merged.doc is not None and merged.doc.standard is not None
    assert [source.uri for source in merged.doc.standard.sources] == [
        "local://std-a",
        "local://std-b",
    ]


def test_merge_of_nothing_is_empty() -> None:
    """Test that merging no settings gives empty sections, not missing ones."""
    merged = merge_configs([ProjectConfig()])

    assert merged.rulebook is None
    assert merged.ai is not None and merged.ai.skill is None
    assert merged.doc is not None and merged.doc.standard is None


def test_in_memory_loader() -> None:
    """Test the fixed-config loader in both states."""
    config = ProjectConfig()

    assert InMemoryConfigLoader(config).load() is config
    with pytest.raises(ConfigNotFoundError):
        InMemoryConfigLoader(None).load()
