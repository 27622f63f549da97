"""Tests for CLI error formatting and exit codes."""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from projectkit.context import ProjectkitContext
from projectkit.error_boundary import cli_error_boundary, format_error
from projectkit.errors import ConfigNotFoundError, NoArtifactsFoundError, error_context


def _failing_command(error: Exception) -> click.Command:
    @click.command()
    @click.pass_obj
    @cli_error_boundary
    def command(ctx: ProjectkitContext) -> None:
        raise error

    return command


def test_format_error_lists_steps_outermost_first() -> None:
    """Test that notes read from the outermost step inwards."""
    with pytest.raises(NoArtifactsFoundError) as exc_info:
        with error_context("load artifacts from config"):
            with error_context("load skills from local://skills"):
                raise NoArtifactsFoundError("skills", Path("/src/skills"))

    assert format_error(exc_info.value) == (
        "load artifacts from config: load skills from local://skills: "
        "no artifacts found: no skills in /src/skills"
    )


def test_projectkit_error_exits_255() -> None:
    """Test the generic failure exit code and message."""
    command = _failing_command(NoArtifactsFoundError("skills", Path("/src")))

    result = CliRunner().invoke(command, obj=ProjectkitContext.for_test())

    assert result.exit_code == 255
    assert "Error: no artifacts found: no skills in /src" in result.output


def test_missing_config_exits_1_with_hint() -> None:
    """Test that a missing config gets its own exit code."""
    command = _failing_command(ConfigNotFoundError([Path("/home/u/.projectkit.yaml")]))

    result = CliRunner().invoke(command, obj=ProjectkitContext.for_test())

    assert result.exit_code == 1
    assert "no config resolved" in result.output
    assert "Create a .projectkit.yaml" in result.output


def test_debug_reraises() -> None:
    """Test that debug mode keeps the original exception."""
    error = NoArtifactsFoundError("skills", Path("/src"))
    command = _failing_command(error)

    result = CliRunner().invoke(command, obj=ProjectkitContext.for_test(debug=True))

    assert result.exception is error


def test_unexpected_errors_are_not_caught() -> None:
    """Test that programming errors still surface as exceptions."""
    command = _failing_command(KeyError("boom"))

    result = CliRunner().invoke(command, obj=ProjectkitContext.for_test())

    assert isinstance(result.exception, KeyError)
