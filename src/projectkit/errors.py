"""Exception taxonomy for projectkit.

Every failure the pipeline can report derives from ProjectkitError. The
concrete subclasses act as sentinels: callers branch on the type, while the
message carries the offending path and any underlying detail.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class ProjectkitError(Exception):
    """Base class for all projectkit errors."""


# Source resolution


class SourceResolutionError(ProjectkitError):
    """A source URI could not be turned into a readable directory."""


class SchemeNotFoundError(SourceResolutionError):
    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"uri scheme not found: {uri}")


class UnsupportedSchemeError(SourceResolutionError):
    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"unsupported scheme: {uri}")


class EmptyPathError(SourceResolutionError):
    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"empty path: {uri}")


class SourceNotFoundError(SourceResolutionError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"source directory does not exist: {path}")


class PathEscapesRootError(SourceResolutionError):
    def __init__(self, uri: str, root: Path) -> None:
        self.uri = uri
        self.root = root
        super().__init__(f"path escapes source root {root}: {uri}")


class DriverAlreadyRegisteredError(ProjectkitError):
    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"driver already registered for scheme: {scheme}")


class DriverNotRegisteredError(SourceResolutionError):
    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"driver not registered for scheme: {scheme}")


# Loading


class LoadError(ProjectkitError):
    """Loading artifacts from a source failed."""


class NoArtifactsFoundError(LoadError):
    def __init__(self, kind: str, root: Path) -> None:
        self.kind = kind
        self.root = root
        super().__init__(f"no artifacts found: no {kind} in {root}")


class ReadFailedError(LoadError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{path}: read failed: {detail}")


class ParseFailedError(LoadError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{path}: parse failed: {detail}")


class ValidationFailedError(LoadError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: validation failed: {detail}")


class MissingMetadataFileError(LoadError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"missing metadata file: {path}")


# Repositories


class RepositoryError(ProjectkitError):
    """A repository could not read or write its storage."""


class StorageError(RepositoryError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{path}: storage error: {detail}")


class CorruptDocumentError(RepositoryError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{path}: unreadable stored document: {detail}")


class InvalidWorkflowIdError(RepositoryError):
    def __init__(self, value: str, kind: str = "workflow") -> None:
        self.value = value
        super().__init__(f"{kind} id must be alphanumeric with dashes: {value!r}")


class WorkflowNotFoundError(RepositoryError):
    def __init__(self, workflow_id: str) -> None:
        self.workflow_id = workflow_id
        super().__init__(f"workflow not found: {workflow_id}")


class WorkflowAlreadyExistsError(RepositoryError):
    def __init__(self, workflow_id: str) -> None:
        self.workflow_id = workflow_id
        super().__init__(f"workflow already exists: {workflow_id}")


class ExecutionNotFoundError(RepositoryError):
    def __init__(self, execution_id: str) -> None:
        self.execution_id = execution_id
        super().__init__(f"execution not found: {execution_id}")


class ExecutionAlreadyExistsError(RepositoryError):
    def __init__(self, execution_id: str) -> None:
        self.execution_id = execution_id
        super().__init__(f"execution already exists: {execution_id}")


class SkillNotFoundError(RepositoryError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"skill not found: {name}")


# Agents


class ProviderAlreadyRegisteredError(ProjectkitError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"provider already registered: {kind}")


class ProviderNotRegisteredError(ProjectkitError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"provider not registered: {kind}")


class InvalidAgentOptionsError(ProjectkitError):
    def __init__(self, kind: str, detail: str) -> None:
        self.kind = kind
        super().__init__(f"invalid options for agent {kind}: {detail}")


class AgentRenderError(ProjectkitError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"failed to write {path}: {detail}")


# Rendering and git


class UnsupportedFormatError(ProjectkitError):
    def __init__(self, render_format: str) -> None:
        self.format = render_format
        super().__init__(f"unsupported render format: {render_format}")


class StandardRenderError(ProjectkitError):
    def __init__(self, standard_id: str, detail: str) -> None:
        self.standard_id = standard_id
        super().__init__(f"failed to render standard {standard_id}: {detail}")


class GitRepositoryNotFoundError(ProjectkitError):
    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"git repository not found from {start}")


class GitExcludeError(ProjectkitError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"failed to update {path}: {detail}")



# Project configuration


class ConfigError(ProjectkitError):
    """Project configuration could not be resolved."""


class ConfigNotFoundError(ConfigError):
    def __init__(self, paths: list[Path]) -> None:
        self.paths = paths
        joined = ", ".join(str(path) for path in paths)
        super().__init__(f"no config resolved, looked in: {joined}")


class ConfigLoadError(ConfigError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"config load failed: {path}: {detail}")


class ConfigValidationError(ConfigError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"config validation failed: {path}: {detail}")


class ProjectRootNotFoundError(ConfigError):
    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"project root not found from {start}")


@contextmanager
def error_context(step: str) -> Iterator[None]:
    """Attach a step description to any ProjectkitError raised inside the block.

    The exception keeps its type; the step is recorded as an exception note so
    the CLI can print the chain of steps that led to the failure.
    """
    try:
        yield
    except ProjectkitError as err:
        err.add_note(step)
        raise
