"""odo client: listings plus the three execution strategies.

``OdoClient`` is an explicitly constructed object handed to the workflows.
It satisfies both ``ListingProvider`` and ``CommandExecutor``.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from odoflow.exceptions import CommandFailedError
from odoflow.logging import get_logger
from odoflow.odo.commands import Commands
from odoflow.odo.models import CommandSpec, ResourceKind, ResourceRef
from odoflow.runners.command import CommandRunner
from odoflow.runners.models import CommandResult

__all__ = ["OdoClient", "parse_catalog", "parse_resource_names"]

logger = get_logger(__name__)


def parse_resource_names(payload: str) -> list[str]:
    """Extract resource names from ``odo ... -o json`` output.

    Accepts either a list object (``{"items": [...]}``) or a bare list, and
    reads ``metadata.name`` (falling back to ``name``) from each item.

    Args:
        payload: Raw JSON text.

    Returns:
        Names in the order odo listed them. Empty for empty output.

    Raises:
        CommandFailedError: If the text is not valid JSON.
    """
    if not payload.strip():
        return []
    try:
        data: Any = json.loads(payload)
    except json.JSONDecodeError as e:
        raise CommandFailedError(f"Unexpected odo output: {e}") from e
    items = (data.get("items") or []) if isinstance(data, dict) else data
    names: list[str] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = (item.get("metadata") or {}).get("name") or item.get("name")
        if name:
            names.append(str(name))
    return names


def parse_catalog(output: str) -> dict[str, list[str]]:
    """Parse ``odo catalog list components`` output.

    The output is a whitespace separated table with a NAME, PROJECT, TAGS
    header; tags are comma separated versions.

    Example:
        >>> parse_catalog("NAME PROJECT TAGS\\nnodejs openshift 8,latest\\n")
        {'nodejs': ['8', 'latest']}
    """
    catalog: dict[str, list[str]] = {}
    for line in output.splitlines():
        columns = line.split()
        if not columns or columns[0] == "NAME":
            continue
        tags = columns[2] if len(columns) > 2 else ""
        catalog[columns[0]] = [tag for tag in tags.split(",") if tag]
    return catalog


class OdoClient:
    """Runs odo commands and reads odo state.

    Attributes:
        commands: Command factory bound to the configured odo binary.

    Example:
        ```python
        client = OdoClient(CommandRunner(timeout=300.0))
        projects = await client.get_projects()
        await client.execute_silently(client.commands.create_project("demo"))
        ```
    """

    def __init__(
        self,
        runner: CommandRunner,
        commands: Commands | None = None,
        console: Console | None = None,
    ) -> None:
        self._runner = runner
        self.commands = commands or Commands()
        self._console = console or Console(stderr=True)

    # -- execution strategies ---------------------------------------------

    async def execute_silently(self, spec: CommandSpec) -> CommandResult:
        """Run ``spec`` to completion.

        Raises:
            CommandFailedError: If the command exits with a non-zero status.
        """
        result = await self._runner.run(spec.argv)
        if not result.success:
            logger.debug(
                "command_failed",
                operation=spec.operation,
                returncode=result.returncode,
            )
            raise CommandFailedError(
                result.error_text,
                command=spec.command_line,
                returncode=result.returncode,
            )
        return result

    async def execute_in_terminal(self, spec: CommandSpec) -> None:
        """Start ``spec`` attached to the terminal without waiting for it."""
        launched = await self._runner.launch(spec.argv)
        logger.info(
            "terminal_command_started", operation=spec.operation, pid=launched.pid
        )

    async def execute_with_progress(self, label: str, spec: CommandSpec) -> None:
        """Run ``spec`` to completion behind a spinner showing ``label``.

        Raises:
            CommandFailedError: If the command exits with a non-zero status.
        """
        with self._console.status(label):
            await self.execute_silently(spec)

    async def wait_for_terminals(self) -> list[int]:
        """Block until every terminal-attached command has exited."""
        return await self._runner.wait_for_launched()

    # -- listings -----------------------------------------------------------

    async def _names(self, spec: CommandSpec) -> list[str]:
        result = await self.execute_silently(spec)
        return parse_resource_names(result.stdout)

    async def get_projects(self) -> list[ResourceRef]:
        names = await self._names(self.commands.list_projects())
        return [ResourceRef.project(name) for name in names]

    async def get_applications(self, project: ResourceRef) -> list[ResourceRef]:
        names = await self._names(self.commands.list_applications(project))
        return [project.child(ResourceKind.APPLICATION, name) for name in names]

    async def get_components(self, application: ResourceRef) -> list[ResourceRef]:
        names = await self._names(self.commands.list_components(application))
        return [application.child(ResourceKind.COMPONENT, name) for name in names]

    async def get_services(self, application: ResourceRef) -> list[ResourceRef]:
        names = await self._names(self.commands.list_services(application))
        return [application.child(ResourceKind.SERVICE, name) for name in names]

    async def _catalog(self) -> dict[str, list[str]]:
        result = await self.execute_silently(self.commands.list_component_types())
        return parse_catalog(result.stdout)

    async def get_component_types(self) -> Sequence[str]:
        return list(await self._catalog())

    async def get_component_type_versions(self, component_type: str) -> Sequence[str]:
        return (await self._catalog()).get(component_type, [])
