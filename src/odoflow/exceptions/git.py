from __future__ import annotations

from odoflow.exceptions.base import OdoflowError


class GitError(OdoflowError):
    """Exception for git operation failures.

    Attributes:
        message: Human-readable error message.
        operation: Git operation that failed (e.g., "clone").
        recoverable: True if retrying might succeed.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        recoverable: bool = False,
    ) -> None:
        self.operation = operation
        self.recoverable = recoverable
        super().__init__(message)


class CloneError(GitError):
    """Cloning a repository failed.

    Attributes:
        message: Human-readable error message.
        url: Repository URL that could not be cloned.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message, operation="clone", recoverable=True)
