"""Terminal implementation of the ``Prompter`` protocol.

Pick lists are rendered with rich, input is read with click. An empty
answer, EOF or Ctrl-C at a prompt counts as dismissing it, which the
workflows treat as cancellation.
"""

from __future__ import annotations

import asyncio
import shlex
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, TypeVar

import click
from rich.console import Console
from rich.table import Table

from odoflow.logging import get_logger
from odoflow.odo.protocols import TextValidator

__all__ = ["ConsolePrompter"]

logger = get_logger(__name__)

T = TypeVar("T")


class ConsolePrompter:
    """Prompts on the controlling terminal.

    Args:
        console: Rich console used for pick lists and messages.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    async def _ask(self, text: str, param_type: click.ParamType | None = None) -> Any:
        # Read raw text first so an empty answer dismisses typed prompts too.
        def prompt() -> Any:
            while True:
                try:
                    raw = click.prompt(text, default="", show_default=False, err=True)
                except click.Abort:
                    return None
                if not raw.strip():
                    return None
                if param_type is None:
                    return raw
                try:
                    return param_type.convert(raw, None, None)
                except click.BadParameter as e:
                    click.echo(f"Error: {e.message}", err=True)

        return await asyncio.to_thread(prompt)

    async def pick(
        self,
        candidates: Sequence[T],
        placeholder: str,
        label: Callable[[T], str] = str,
    ) -> T | None:
        self._console.print(f"[bold]{placeholder}[/bold]")
        table = Table(show_header=False, box=None)
        for index, candidate in enumerate(candidates, start=1):
            table.add_row(f"[bold]{index}[/bold]", label(candidate))
        self._console.print(table)
        if not candidates:
            self._console.print("[dim]Nothing available[/dim]")
            await self._ask("Press Enter to go back")
            return None

        choice = await self._ask("Choice", click.IntRange(1, len(candidates)))
        if choice is None:
            return None
        return candidates[choice - 1]

    async def input_text(
        self,
        prompt: str,
        validator: TextValidator | None = None,
    ) -> str | None:
        while True:
            value = await self._ask(prompt)
            if value is None:
                return None
            error = validator(value) if validator else None
            if error is None:
                return str(value)
            self._console.print(f"[red]{error}[/red]")

    async def confirm(self, message: str, options: Sequence[str]) -> str | None:
        self._console.print(f"[yellow]{message}[/yellow]")
        return await self._ask(
            "/".join(options), click.Choice(list(options), case_sensitive=False)
        )

    async def pick_folder(self, prompt: str) -> Path | None:
        value = await self._ask(
            prompt, click.Path(exists=True, file_okay=False, path_type=Path)
        )
        return value.resolve() if value is not None else None

    async def pick_files(self, prompt: str) -> Sequence[Path] | None:
        while True:
            value = await self._ask(prompt)
            if value is None:
                return None
            try:
                parts = shlex.split(value)
            except ValueError:
                # An unbalanced quote may belong to the file name itself.
                parts = [value.strip()]
            paths = [Path(part) for part in parts]
            missing = [str(path) for path in paths if not path.is_file()]
            if not missing:
                return [path.resolve() for path in paths]
            self._console.print(f"[red]Not a file: {', '.join(missing)}[/red]")
