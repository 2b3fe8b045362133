"""Capability protocols the workflows depend on.

Workflows never talk to odo, the terminal or git directly. They receive
objects satisfying these protocols, which lets tests substitute in-memory
fakes without patching anything.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from odoflow.odo.models import CommandSpec, ResourceRef
    from odoflow.runners.models import CommandResult

__all__ = [
    "CommandExecutor",
    "ListingProvider",
    "Prompter",
    "RepositoryCloner",
    "TextValidator",
]

T = TypeVar("T")

#: Returns an error message for invalid input, or None when it is acceptable
TextValidator = Callable[[str], str | None]


@runtime_checkable
class ListingProvider(Protocol):
    """Live listings of odo resources.

    Every call reads fresh state; nothing is cached. Empty sequences are
    valid results.
    """

    async def get_projects(self) -> Sequence[ResourceRef]: ...

    async def get_applications(self, project: ResourceRef) -> Sequence[ResourceRef]: ...

    async def get_components(
        self, application: ResourceRef
    ) -> Sequence[ResourceRef]: ...

    async def get_services(self, application: ResourceRef) -> Sequence[ResourceRef]: ...

    async def get_component_types(self) -> Sequence[str]: ...

    async def get_component_type_versions(
        self, component_type: str
    ) -> Sequence[str]: ...


@runtime_checkable
class CommandExecutor(Protocol):
    """The three ways an assembled command can be run."""

    async def execute_silently(self, spec: CommandSpec) -> CommandResult:
        """Run to completion.

        Raises:
            CommandFailedError: If the command exits with a non-zero status.
        """
        ...

    async def execute_in_terminal(self, spec: CommandSpec) -> None:
        """Start attached to the user's terminal; returns once launched."""
        ...

    async def execute_with_progress(self, label: str, spec: CommandSpec) -> None:
        """Run to completion while showing ``label``.

        Raises:
            CommandFailedError: If the command exits with a non-zero status.
        """
        ...

    async def wait_for_terminals(self) -> list[int]:
        """Block until every terminal-attached command has exited."""
        ...


@runtime_checkable
class Prompter(Protocol):
    """Interactive prompts. Every method returns None when dismissed."""

    async def pick(
        self,
        candidates: Sequence[T],
        placeholder: str,
        label: Callable[[T], str] = str,
    ) -> T | None: ...

    async def input_text(
        self,
        prompt: str,
        validator: TextValidator | None = None,
    ) -> str | None: ...

    async def confirm(self, message: str, options: Sequence[str]) -> str | None: ...

    async def pick_folder(self, prompt: str) -> Path | None: ...

    async def pick_files(self, prompt: str) -> Sequence[Path] | None: ...


@runtime_checkable
class RepositoryCloner(Protocol):
    """Clones a git repository. Separate from odo entirely."""

    async def clone(self, url: str) -> Path: ...
