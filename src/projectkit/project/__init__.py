"""Project discovery and configuration."""

from projectkit.project.config import (
    ConfigLoader,
    FilesystemConfigLoader,
    InMemoryConfigLoader,
    merge_configs,
)
from projectkit.project.discovery import CONFIG_FILE_NAME, find_project_root

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigLoader",
    "FilesystemConfigLoader",
    "InMemoryConfigLoader",
    "find_project_root",
    "merge_configs",
]
