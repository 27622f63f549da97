"""Workflow and execution models."""

from typing import Any

from pydantic import Field

from projectkit.models.base import DocumentModel
from projectkit.models.fields import Identifier, NonEmptyStr, SemVer


class WorkflowMetadata(DocumentModel):
    id: Identifier
    name: NonEmptyStr
    description: NonEmptyStr
    version: SemVer


class WorkflowStep(DocumentModel):
    id: NonEmptyStr
    name: NonEmptyStr
    description: NonEmptyStr
    instructions: list[str] = Field(min_length=1)


class Workflow(DocumentModel):
    """A versioned sequence of steps with an optional JSON-schema state."""

    metadata: WorkflowMetadata
    state: dict[str, dict[str, Any]] | None = None
    steps: list[WorkflowStep] = Field(min_length=1)


class Execution(DocumentModel):
    """A run of a workflow; ``workflow_id`` is a plain reference."""

    id: Identifier
    workflow_id: NonEmptyStr
    state_values: dict[str, Any]
    step_id: NonEmptyStr
