"""Agent option models and their validation."""

from typing import Any, Self

from pydantic import ConfigDict, ValidationError

from projectkit.errors import InvalidAgentOptionsError
from projectkit.io.documents import describe_validation_error
from projectkit.models.base import DocumentModel
from projectkit.models.fields import NonEmptyStr


class AgentOptions(DocumentModel):
    """Options shared by every file-based agent.

    Unknown keys are rejected so a misspelled option does not silently fall
    back to its default.
    """

    model_config = ConfigDict(extra="forbid")

    instructions_file_name: NonEmptyStr
    project_settings_dir_name: NonEmptyStr
    skills_dir_name: NonEmptyStr = "skills"

    @classmethod
    def from_config(cls, kind: str, options: dict[str, Any] | None) -> Self:
        try:
            return cls.model_validate(options or {})
        except ValidationError as err:
            raise InvalidAgentOptionsError(kind, describe_validation_error(err)) from err


class ClaudeOptions(AgentOptions):
    instructions_file_name: NonEmptyStr = "CLAUDE.md"
    project_settings_dir_name: NonEmptyStr = ".claude"
    mcp_file_name: NonEmptyStr = ".mcp.json"


class CodexOptions(AgentOptions):
    instructions_file_name: NonEmptyStr = "AGENTS.md"
    project_settings_dir_name: NonEmptyStr = ".agents"
