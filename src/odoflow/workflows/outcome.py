"""Tri-state result of a workflow invocation.

Every workflow operation produces exactly one of:

- ``Success(message)``: the operation completed.
- ``CANCELLED``: the user dismissed a required prompt. Not an error.
- ``Failed(operation, cause)``: something went wrong. The message always
  reads ``Failed to <operation> with error '<cause>'``.

``wrap_failure`` is the only place that builds a ``Failed``; the cause's
type is dropped and only its display text survives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from odoflow.exceptions import WorkflowFailedError

__all__ = [
    "CANCELLED",
    "Cancelled",
    "Failed",
    "Outcome",
    "Success",
    "unwrap",
    "wrap_failure",
]

FAILURE_TEMPLATE: Final = "Failed to {operation} with error '{cause}'"


@dataclass(frozen=True, slots=True)
class Success:
    """Workflow completed.

    Attributes:
        message: Human-readable summary, e.g. "Project 'x' successfully created".
    """

    message: str


@dataclass(frozen=True, slots=True)
class Cancelled:
    """Workflow abandoned at an interactive step."""

    def __bool__(self) -> bool:
        return False


CANCELLED: Final = Cancelled()


@dataclass(frozen=True, slots=True)
class Failed:
    """Workflow failed.

    Attributes:
        operation: Operation name, e.g. "delete component".
        cause: Display text of whatever went wrong.
    """

    operation: str
    cause: str

    @property
    def message(self) -> str:
        return FAILURE_TEMPLATE.format(operation=self.operation, cause=self.cause)


Outcome = Success | Cancelled | Failed


def wrap_failure(operation: str, cause: BaseException | str) -> Failed:
    """Normalize any failure into a ``Failed`` outcome.

    Args:
        operation: Operation name as it should read after "Failed to".
        cause: The exception (or plain error text) that ended the workflow.

    Returns:
        Failed outcome carrying ``str(cause)``.

    Example:
        >>> wrap_failure("create project", RuntimeError("quota exceeded")).message
        "Failed to create project with error 'quota exceeded'"
    """
    return Failed(operation=operation, cause=str(cause))


def unwrap(outcome: Outcome) -> str | None:
    """Convert an outcome to the plain-value calling convention.

    Returns:
        The success message, or None when the workflow was cancelled.

    Raises:
        WorkflowFailedError: With the normalized message, for ``Failed``.
    """
    if isinstance(outcome, Success):
        return outcome.message
    if isinstance(outcome, Failed):
        raise WorkflowFailedError(outcome.message, operation=outcome.operation)
    return None
