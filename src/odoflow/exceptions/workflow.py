from __future__ import annotations

from odoflow.exceptions.base import OdoflowError


class WorkflowError(OdoflowError):
    """Base exception for workflow orchestration problems."""

    pass


class WorkflowFailedError(WorkflowError):
    """A workflow operation failed.

    Carries only the normalized message; the underlying error type is not
    kept.

    Attributes:
        message: ``Failed to <operation> with error '<cause>'``.
        operation: Name of the failed operation, e.g. "create component".
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(message)


class DuplicateStepNameError(WorkflowError):
    """Two steps in one chain tried to record an answer under the same name.

    Attributes:
        message: Human-readable error message.
        step_name: The duplicated step name.
    """

    def __init__(self, step_name: str) -> None:
        self.step_name = step_name
        super().__init__(f"Step '{step_name}' already has an answer")


class InvalidResourceError(WorkflowError):
    """A supplied resource reference cannot be used.

    Raised for empty names or for a reference whose kind does not fit the
    hierarchy being resolved.

    Attributes:
        message: Human-readable error message.
        kind: Kind of the offending resource, if known.
    """

    def __init__(self, message: str, kind: str | None = None) -> None:
        self.kind = kind
        super().__init__(message)
