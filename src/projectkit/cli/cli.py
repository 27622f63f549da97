import click

from projectkit.cli.commands.agent import agent_group
from projectkit.cli.commands.doc import doc_group
from projectkit.cli.commands.render import render_cmd
from projectkit.cli.commands.update import update_cmd
from projectkit.context import create_context
from projectkit.log import LOG_FORMATS, LOG_LEVELS, configure_logging
from projectkit.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "-v",
    "--log-level",
    type=click.Choice(list(LOG_LEVELS)),
    default="info",
    show_default=True,
    help="Log level.",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    default="text",
    show_default=True,
    help="Log output format.",
)
@click.option("--quiet", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Show full stack traces for errors.")
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_format: str, quiet: bool, debug: bool) -> None:
    """Load AI-tooling rulebooks and render them for coding agents."""
    configure_logging(level=log_level, log_format=log_format, quiet=quiet)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(update_cmd)
cli.add_command(render_cmd)
cli.add_command(agent_group)
cli.add_command(doc_group)


def main() -> None:
    """CLI entry point used by the `projectkit` console script."""
    cli()
