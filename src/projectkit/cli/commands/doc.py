from pathlib import Path

import click

from projectkit.actions.render_doc_standard import RenderDocStandardAction
from projectkit.actions.validate_doc_standard import ValidateDocStandardAction
from projectkit.context import ProjectkitContext
from projectkit.error_boundary import cli_error_boundary
from projectkit.models.config import ProjectConfig


def run_render_standards(ctx: ProjectkitContext, config: ProjectConfig) -> None:
    project = ctx.require_project()
    standard_config = config.doc.standard if config.doc else None
    render_configs = standard_config.render if standard_config else []
    RenderDocStandardAction(
        render_configs, project.repositories.standards, ctx.standard_renderers, project.root
    ).run()


@click.group("doc")
def doc_group() -> None:
    """Documentation commands."""


@doc_group.group("standard")
def standard_group() -> None:
    """Documentation standard commands."""


@standard_group.command("render")
@click.pass_obj
@cli_error_boundary
def standard_render_cmd(ctx: ProjectkitContext) -> None:
    """Render stored standards to every configured destination."""
    run_render_standards(ctx, ctx.config_loader.load())


@standard_group.command("validate")
@click.argument("path", type=click.Path(path_type=Path))
@cli_error_boundary
def standard_validate_cmd(path: Path) -> None:
    """Check that PATH is a valid standard document."""
    standard = ValidateDocStandardAction(path).run()
    click.echo(f"Valid: {standard.metadata.name} ({standard.metadata.id})")
