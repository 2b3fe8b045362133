"""Data models for subprocess runners.

Frozen dataclasses with slots, like the rest of the runner layer.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CommandResult", "LaunchedCommand"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of executing a single command to completion.

    Attributes:
        returncode: Exit code from the command (0 = success).
        stdout: Standard output captured from the command.
        stderr: Standard error captured from the command.
        duration_ms: Execution time in milliseconds.
        timed_out: True if the command exceeded its timeout limit.
    """

    returncode: int
    stdout: str
    stderr: str
    duration_ms: int
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """True if command completed successfully (returncode 0, no timeout)."""
        return self.returncode == 0 and not self.timed_out

    @property
    def error_text(self) -> str:
        """Best available description of a failure.

        stderr when the command wrote any, otherwise stdout, otherwise a
        generic exit-status message.
        """
        text = self.stderr.strip() or self.stdout.strip()
        if text:
            return text
        if self.timed_out:
            return "Command timed out"
        return f"Command exited with status {self.returncode}"


@dataclass(frozen=True, slots=True)
class LaunchedCommand:
    """A command started attached to the user's terminal.

    Attributes:
        command_line: The command line as it was launched.
        pid: Process id of the launched process.
    """

    command_line: str
    pid: int
