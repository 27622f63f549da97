import click

from projectkit.actions.update import UpdateAction
from projectkit.context import ProjectkitContext
from projectkit.error_boundary import cli_error_boundary


@click.command("update")
@click.pass_obj
@cli_error_boundary
def update_cmd(ctx: ProjectkitContext) -> None:
    """Reload every configured source and rulebook into the local store."""
    project = ctx.require_project()
    config = ctx.config_loader.load()

    artifacts = UpdateAction(config, ctx.resolver, project.repositories).run()

    click.echo(
        f"Updated: {len(artifacts.instructions)} instruction sets, "
        f"{len(artifacts.skills)} skills, {len(artifacts.workflows)} workflows, "
        f"{len(artifacts.mcp_servers)} MCP servers, {len(artifacts.standards)} standards"
    )
