"""MCP server definitions."""

from pydantic import Field

from projectkit.models.base import DocumentModel
from projectkit.models.fields import NonEmptyStr


class StdioServer(DocumentModel):
    executable_path: NonEmptyStr
    arguments: list[str] = Field(default_factory=list)
    environment_variables: dict[str, str] = Field(default_factory=dict)


class McpServer(DocumentModel):
    """An MCP server launched over stdio."""

    name: NonEmptyStr
    stdio: StdioServer
