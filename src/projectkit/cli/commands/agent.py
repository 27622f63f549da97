import click

from projectkit.actions.render_agent import RenderAgentAction
from projectkit.context import ProjectkitContext
from projectkit.error_boundary import cli_error_boundary
from projectkit.git.discovery import find_git_dir
from projectkit.git.exclude import GitExclude
from projectkit.models.config import ProjectConfig


def run_render_agents(ctx: ProjectkitContext, config: ProjectConfig) -> None:
    project = ctx.require_project()
    git_exclude = GitExclude(find_git_dir(project.root))
    RenderAgentAction(
        config.agents, project.agent_registry, project.repositories, git_exclude
    ).run()


@click.group("agent")
def agent_group() -> None:
    """Coding-agent commands."""


@agent_group.command("render")
@click.pass_obj
@cli_error_boundary
def agent_render_cmd(ctx: ProjectkitContext) -> None:
    """Render stored artifacts for every configured agent."""
    run_render_agents(ctx, ctx.config_loader.load())
