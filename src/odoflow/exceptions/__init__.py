"""odoflow exception hierarchy.

All exceptions can be imported from this package:
    from odoflow.exceptions import CommandFailedError, WorkflowFailedError
"""

from __future__ import annotations

from odoflow.exceptions.base import OdoflowError
from odoflow.exceptions.config import ConfigError
from odoflow.exceptions.git import CloneError, GitError
from odoflow.exceptions.runner import (
    CommandFailedError,
    RunnerError,
    WorkingDirectoryError,
)
from odoflow.exceptions.workflow import (
    DuplicateStepNameError,
    InvalidResourceError,
    WorkflowError,
    WorkflowFailedError,
)

__all__ = [
    # Base
    "OdoflowError",
    # Config
    "ConfigError",
    # Git
    "CloneError",
    "GitError",
    # Runner
    "CommandFailedError",
    "RunnerError",
    "WorkingDirectoryError",
    # Workflow
    "DuplicateStepNameError",
    "InvalidResourceError",
    "WorkflowError",
    "WorkflowFailedError",
]
