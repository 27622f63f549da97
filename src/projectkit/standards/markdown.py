"""Markdown rendering of documentation standards via Jinja2."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from projectkit.errors import StandardRenderError
from projectkit.models.standard import Standard
from projectkit.standards.abc import StandardRenderer

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _rstrip_newlines(value: str) -> str:
    return value.rstrip("\n")


class MarkdownStandardRenderer(StandardRenderer):
    """Renders a standard to GitHub-flavoured markdown."""

    template_name = "standard.md.j2"

    def __init__(self, template_dir: Path | None = None) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["rstrip_newlines"] = _rstrip_newlines

    @property
    def file_extension(self) -> str:
        return ".md"

    def render(self, standard: Standard) -> str:
        try:
            template = self.env.get_template(self.template_name)
            return template.render(**dict(standard))
        except TemplateError as err:
            raise StandardRenderError(standard.metadata.id, str(err)) from err
