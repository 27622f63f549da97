"""Application context with dependency injection.

The ProjectkitContext holds every collaborator a command needs and is
created once at the CLI entry point by create_context(). Tests build one
with ProjectkitContext.for_test() and pass it as the click ``obj``.
"""

from dataclasses import dataclass
from pathlib import Path

from projectkit.agents import create_default_registry
from projectkit.agents.registry import AgentRegistry
from projectkit.errors import ProjectRootNotFoundError
from projectkit.models.config import ProjectConfig
from projectkit.project.config import ConfigLoader, FilesystemConfigLoader, InMemoryConfigLoader
from projectkit.project.discovery import find_project_root
from projectkit.repositories import Repositories, create_filesystem_repositories
from projectkit.sources.abc import SourceResolver
from projectkit.sources.resolver import create_default_resolver
from projectkit.standards import create_default_renderers
from projectkit.standards.abc import StandardRenderer


@dataclass(frozen=True)
class NoProjectSentinel:
    """Execution outside any project; commands that need one fail fast."""

    message: str = "Not inside a project (no .git or .projectkit.yaml found)"


@dataclass(frozen=True)
class ProjectContext:
    """Collaborators bound to one project root."""

    root: Path
    repositories: Repositories
    agent_registry: AgentRegistry


@dataclass(frozen=True)
class ProjectkitContext:
    """Immutable context holding all dependencies for projectkit commands.

    Attributes:
        cwd: Working directory the command was started from
        project: Project collaborators, or NoProjectSentinel outside a project
        config_loader: Source of the merged ``.projectkit.yaml`` configuration
        resolver: Turns source URIs into readable directories
        standard_renderers: Standard renderers keyed by format name
        debug: Re-raise errors with full tracebacks instead of short messages
    """

    cwd: Path
    project: ProjectContext | NoProjectSentinel
    config_loader: ConfigLoader
    resolver: SourceResolver
    standard_renderers: dict[str, StandardRenderer]
    debug: bool

    def require_project(self) -> ProjectContext:
        if isinstance(self.project, NoProjectSentinel):
            raise ProjectRootNotFoundError(self.cwd)
        return self.project

    @staticmethod
    def for_test(
        project_root: Path | None = None,
        config: ProjectConfig | None = None,
        config_loader: ConfigLoader | None = None,
        resolver: SourceResolver | None = None,
        repositories: Repositories | None = None,
        agent_registry: AgentRegistry | None = None,
        standard_renderers: dict[str, StandardRenderer] | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "ProjectkitContext":
        """Create a test context with sensible defaults for anything not given.

        Without ``project_root`` the context behaves as if run outside a
        project. Repositories and agents default to real filesystem
        implementations under ``project_root`` (typically ``tmp_path``).
        """
        resolved_cwd = cwd if cwd is not None else (project_root or Path("/fake/cwd"))

        project: ProjectContext | NoProjectSentinel = NoProjectSentinel()
        if project_root is not None:
            project = ProjectContext(
                root=project_root,
                repositories=(
                    repositories
                    if repositories is not None
                    else create_filesystem_repositories(project_root)
                ),
                agent_registry=(
                    agent_registry
                    if agent_registry is not None
                    else create_default_registry(project_root)
                ),
            )

        return ProjectkitContext(
            cwd=resolved_cwd,
            project=project,
            config_loader=(
                config_loader if config_loader is not None else InMemoryConfigLoader(config)
            ),
            resolver=resolver if resolver is not None else create_default_resolver(resolved_cwd),
            standard_renderers=(
                standard_renderers
                if standard_renderers is not None
                else create_default_renderers()
            ),
            debug=debug,
        )


def create_context(
    *, debug: bool, cwd: Path | None = None, home: Path | None = None
) -> ProjectkitContext:
    """Create the production context.

    Project discovery failing is not an error here; commands that need a
    project call ``require_project()``.
    """
    resolved_cwd = cwd if cwd is not None else Path.cwd()
    resolved_home = home if home is not None else Path.home()

    project: ProjectContext | NoProjectSentinel
    try:
        root = find_project_root(resolved_cwd, resolved_home)
    except ProjectRootNotFoundError:
        project = NoProjectSentinel()
    else:
        project = ProjectContext(
            root=root,
            repositories=create_filesystem_repositories(root),
            agent_registry=create_default_registry(root),
        )

    return ProjectkitContext(
        cwd=resolved_cwd,
        project=project,
        config_loader=FilesystemConfigLoader(cwd=resolved_cwd, home=resolved_home),
        resolver=create_default_resolver(resolved_cwd),
        standard_renderers=create_default_renderers(),
        debug=debug,
    )
