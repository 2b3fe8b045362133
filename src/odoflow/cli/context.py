"""CLI context and utilities for odoflow.

Holds global options, exit codes and the bridge from Click's synchronous
commands to the async workflows.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, TypeVar

from odoflow.config import OdoflowConfig

__all__ = [
    "CLIContext",
    "ExitCode",
    "async_command",
]


class ExitCode(IntEnum):
    """Exit codes for the odoflow CLI.

    Cancelling an interactive workflow is not a failure and exits with
    SUCCESS.
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and configuration.

    Attributes:
        config: Loaded configuration.
        config_path: Config file given with --config, if any.
        verbosity: Count of -v flags.
        quiet: Suppress non-essential output.
    """

    config: OdoflowConfig
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False


F = TypeVar("F", bound=Callable[..., Any])


def async_command(f: F) -> F:
    """Run an async Click command with asyncio.run().

    Example:
        >>> @project.command("create")
        ... @click.pass_context
        ... @async_command
        ... async def create(ctx: click.Context) -> None:
        ...     ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return wrapper  # type: ignore[return-value]
