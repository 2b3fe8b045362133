from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from odoflow.exceptions.base import OdoflowError


class RunnerError(OdoflowError):
    """Base exception for command execution failures."""

    pass


class WorkingDirectoryError(RunnerError):
    """Working directory does not exist or is not accessible.

    Attributes:
        message: Human-readable error message.
        path: The path that was not found.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(message)


class CommandFailedError(RunnerError):
    """An external command finished with a non-zero exit status.

    The string form is the command's own error text, which is what ends up
    inside the normalized ``Failed to <operation> with error '<cause>'``
    message.

    Attributes:
        message: Error text reported by the command.
        command: The command line that failed.
        returncode: Exit status of the process.
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] | str | None = None,
        returncode: int | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)
