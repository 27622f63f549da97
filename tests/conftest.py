"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from projectkit.repositories import Repositories, create_filesystem_repositories
from tests.fakes.repositories import create_in_memory_repositories


@pytest.fixture(autouse=True)
def reset_projectkit_logger() -> Iterator[None]:
    """Drop handlers the CLI attached so they do not leak between tests."""
    yield
    logger = logging.getLogger("projectkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project directory containing an empty git repository."""
    root = tmp_path / "project"
    (root / ".git" / "info").mkdir(parents=True)
    return root


@pytest.fixture
def filesystem_repositories(project_root: Path) -> Repositories:
    return create_filesystem_repositories(project_root)


@pytest.fixture
def memory_repositories() -> Repositories:
    return create_in_memory_repositories()
