"""Command runner for async subprocess execution.

This module provides the CommandRunner class, which runs external commands
either to completion with captured output (``run``) or attached to the
user's terminal without waiting (``launch``).
"""

from __future__ import annotations

import asyncio
import os
import time
from collections.abc import Sequence
from pathlib import Path

from odoflow.exceptions import WorkingDirectoryError
from odoflow.logging import get_logger
from odoflow.runners.models import CommandResult, LaunchedCommand

__all__ = ["CommandRunner"]

logger = get_logger(__name__)

TERMINATION_GRACE_PERIOD: float = 2.0

Command = Sequence[str] | str


def _display(command: Command) -> str:
    if isinstance(command, str):
        return command
    return " ".join(command)


class CommandRunner:
    """Execute commands with timeout and environment control.

    Commands given as a sequence are executed directly (no shell). A command
    given as a string is handed to the shell, which is needed for composite
    command lines joined with ``&&``.

    Attributes:
        cwd: Working directory for command execution.
        timeout: Default timeout in seconds (None for no timeout).

    Example:
        ```python
        runner = CommandRunner(timeout=60.0)
        result = await runner.run(["odo", "project", "list", "-o", "json"])
        if result.success:
            print(result.stdout)
        ```
    """

    def __init__(
        self,
        cwd: Path | None = None,
        timeout: float | None = 120.0,
        env: dict[str, str] | None = None,
    ) -> None:
        """Initialize the CommandRunner.

        Args:
            cwd: Working directory for commands. If None, uses current directory.
            timeout: Default timeout in seconds. Use None for no timeout.
            env: Additional environment variables to merge with os.environ.
        """
        self._cwd = cwd
        self._timeout = timeout
        self._extra_env = env or {}
        self._launched: list[asyncio.subprocess.Process] = []

    @property
    def cwd(self) -> Path | None:
        """Working directory for command execution."""
        return self._cwd

    @property
    def timeout(self) -> float | None:
        """Default timeout in seconds."""
        return self._timeout

    def _validate_cwd(self, cwd: Path | None) -> None:
        if cwd is not None and not cwd.is_dir():
            raise WorkingDirectoryError(
                f"Working directory does not exist: {cwd}",
                path=cwd,
            )

    def _build_env(self) -> dict[str, str]:
        env = os.environ.copy()
        env.update(self._extra_env)
        return env

    async def _spawn(
        self,
        command: Command,
        cwd: Path | None,
        *,
        capture: bool,
    ) -> asyncio.subprocess.Process:
        stream = asyncio.subprocess.PIPE if capture else None
        if isinstance(command, str):
            return await asyncio.create_subprocess_shell(
                command,
                stdout=stream,
                stderr=stream,
                cwd=cwd,
                env=self._build_env(),
            )
        return await asyncio.create_subprocess_exec(
            *command,
            stdout=stream,
            stderr=stream,
            cwd=cwd,
            env=self._build_env(),
        )

    async def run(
        self,
        command: Command,
        *,
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> CommandResult:
        """Execute a command to completion and capture its output.

        Args:
            command: Argument sequence, or a shell command line string.
            cwd: Override working directory for this command.
            timeout: Override timeout. Use 0 or negative for no timeout.

        Returns:
            CommandResult with returncode, stdout, stderr, duration_ms, timed_out.

        Raises:
            WorkingDirectoryError: If working directory does not exist.
        """
        effective_cwd = cwd if cwd is not None else self._cwd
        self._validate_cwd(effective_cwd)

        effective_timeout = timeout if timeout is not None else self._timeout
        if effective_timeout is not None and effective_timeout <= 0:
            effective_timeout = None

        start_time = time.monotonic()
        timed_out = False
        stdout_str = ""
        stderr_str = ""
        logger.debug("command_started", command=_display(command))

        try:
            process = await self._spawn(command, effective_cwd, capture=True)
            try:
                stdout_bytes, stderr_bytes = await asyncio.wait_for(
                    process.communicate(),
                    timeout=effective_timeout,
                )
                returncode = process.returncode or 0
                stdout_str = stdout_bytes.decode("utf-8", errors="replace")
                stderr_str = stderr_bytes.decode("utf-8", errors="replace")
            except TimeoutError:
                # SIGTERM first, SIGKILL after the grace period
                timed_out = True
                returncode = -1
                process.terminate()
                try:
                    await asyncio.wait_for(
                        process.wait(), timeout=TERMINATION_GRACE_PERIOD
                    )
                except TimeoutError:
                    process.kill()
                    await process.wait()
        except FileNotFoundError:
            returncode = 127
            stderr_str = f"Command not found: {_display(command).split()[0]}"
        except PermissionError:
            returncode = 126
            stderr_str = f"Permission denied: {_display(command).split()[0]}"

        duration_ms = int((time.monotonic() - start_time) * 1000)
        logger.debug(
            "command_finished",
            command=_display(command),
            returncode=returncode,
            duration_ms=duration_ms,
            timed_out=timed_out,
        )
        return CommandResult(
            returncode=returncode,
            stdout=stdout_str,
            stderr=stderr_str,
            duration_ms=duration_ms,
            timed_out=timed_out,
        )

    async def launch(
        self,
        command: Command,
        *,
        cwd: Path | None = None,
    ) -> LaunchedCommand:
        """Start a command attached to the current terminal and return at once.

        The process inherits stdin/stdout/stderr, so its output streams
        straight to the user. Call ``wait_for_launched`` before the event
        loop shuts down.

        Args:
            command: Argument sequence, or a shell command line string.
            cwd: Override working directory for this command.

        Returns:
            LaunchedCommand describing the started process.

        Raises:
            WorkingDirectoryError: If working directory does not exist.
        """
        effective_cwd = cwd if cwd is not None else self._cwd
        self._validate_cwd(effective_cwd)
        process = await self._spawn(command, effective_cwd, capture=False)
        self._launched.append(process)
        logger.debug("command_launched", command=_display(command), pid=process.pid)
        return LaunchedCommand(command_line=_display(command), pid=process.pid)

    async def wait_for_launched(self) -> list[int]:
        """Wait for every launched process and return their exit codes."""
        codes: list[int] = []
        while self._launched:
            process = self._launched.pop(0)
            codes.append(await process.wait())
        return codes

