"""Workflow repository with its execution store.

Workflows and executions are stored under their own id (``<id>.json``), so
ids double as file names and must be letters, digits and dashes only.
Workflows can only be added or bulk-removed; executions can be added once and
then updated in place.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from projectkit.errors import (
    ExecutionAlreadyExistsError,
    ExecutionNotFoundError,
    InvalidWorkflowIdError,
    WorkflowAlreadyExistsError,
    WorkflowNotFoundError,
)
from projectkit.models.fields import is_valid_identifier
from projectkit.models.workflow import Execution, Workflow
from projectkit.repositories.locking import ReadWriteLock
from projectkit.repositories.store import JsonDocumentStore

WORKFLOWS_DIR = "workflows"
EXECUTIONS_DIR = "executions"


class WorkflowRepository(ABC):
    @abstractmethod
    def add_workflow(self, workflow: Workflow) -> None:
        """Store a new workflow.

        Raises:
            InvalidWorkflowIdError: The id is not letters, digits and dashes
            WorkflowAlreadyExistsError: A workflow with the same id is stored
        """
        ...

    @abstractmethod
    def get_all_workflows(self) -> list[Workflow]:
        """Return every stored workflow sorted by name."""
        ...

    @abstractmethod
    def get_workflow_by_id(self, workflow_id: str) -> Workflow: ...

    @abstractmethod
    def remove_all_workflows(self) -> None: ...

    @abstractmethod
    def add_execution(self, execution: Execution) -> None: ...

    @abstractmethod
    def update_execution(self, execution: Execution) -> None: ...

    @abstractmethod
    def get_execution_by_id(self, execution_id: str) -> Execution: ...


def _check_id(value: str, kind: str) -> None:
    if not is_valid_identifier(value):
        raise InvalidWorkflowIdError(value, kind)


class FilesystemWorkflowRepository(WorkflowRepository):
    def __init__(self, directory: Path) -> None:
        self._workflows = JsonDocumentStore(directory / WORKFLOWS_DIR, Workflow)
        self._executions = JsonDocumentStore(directory / EXECUTIONS_DIR, Execution)
        self._lock = ReadWriteLock()

    def add_workflow(self, workflow: Workflow) -> None:
        workflow_id = workflow.metadata.id
        _check_id(workflow_id, "workflow")

        with self._lock.write():
            path = self._workflows.path_for(workflow_id)
            if path.exists():
                raise WorkflowAlreadyExistsError(workflow_id)
            self._workflows.write(path, workflow)

    def get_all_workflows(self) -> list[Workflow]:
        with self._lock.read():
            workflows = [workflow for _, workflow in self._workflows.read_all()]
        return sorted(workflows, key=lambda workflow: workflow.metadata.name)

    def get_workflow_by_id(self, workflow_id: str) -> Workflow:
        _check_id(workflow_id, "workflow")

        with self._lock.read():
            path = self._workflows.path_for(workflow_id)
            if not path.is_file():
                raise WorkflowNotFoundError(workflow_id)
            return self._workflows.read(path)

    def remove_all_workflows(self) -> None:
        with self._lock.write():
            self._workflows.remove_all()

    def add_execution(self, execution: Execution) -> None:
        _check_id(execution.id, "execution")

        with self._lock.write():
            path = self._executions.path_for(execution.id)
            if path.exists():
                raise ExecutionAlreadyExistsError(execution.id)
            self._executions.write(path, execution)

    def update_execution(self, execution: Execution) -> None:
        _check_id(execution.id, "execution")

        with self._lock.write():
            path = self._executions.path_for(execution.id)
            if not path.is_file():
                raise ExecutionNotFoundError(execution.id)
            self._executions.write(path, execution)

    def get_execution_by_id(self, execution_id: str) -> Execution:
        _check_id(execution_id, "execution")

        with self._lock.read():
            path = self._executions.path_for(execution_id)
            if not path.is_file():
                raise ExecutionNotFoundError(execution_id)
            return self._executions.read(path)
