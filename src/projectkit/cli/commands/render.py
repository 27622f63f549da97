import click

from projectkit.cli.commands.agent import run_render_agents
from projectkit.cli.commands.doc import run_render_standards
from projectkit.context import ProjectkitContext
from projectkit.error_boundary import cli_error_boundary


@click.command("render")
@click.pass_obj
@cli_error_boundary
def render_cmd(ctx: ProjectkitContext) -> None:
    """Render agents and documentation standards."""
    config = ctx.config_loader.load()
    run_render_agents(ctx, config)
    run_render_standards(ctx, config)
