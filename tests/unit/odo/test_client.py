"""Tests for OdoClient execution strategies and listing parsing."""

from __future__ import annotations

import io
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from odoflow.exceptions import CommandFailedError
from odoflow.odo.client import OdoClient, parse_catalog, parse_resource_names
from odoflow.odo.models import ResourceKind, ResourceRef
from odoflow.odo.protocols import CommandExecutor, ListingProvider
from odoflow.runners.models import CommandResult, LaunchedCommand


def result(stdout: str = "", stderr: str = "", returncode: int = 0) -> CommandResult:
    return CommandResult(returncode=returncode, stdout=stdout, stderr=stderr, duration_ms=5)


@pytest.fixture
def runner() -> MagicMock:
    runner = MagicMock()
    runner.run = AsyncMock(return_value=result())
    runner.launch = AsyncMock(return_value=LaunchedCommand(command_line="odo", pid=42))
    runner.wait_for_launched = AsyncMock(return_value=[0])
    return runner


@pytest.fixture
def client(runner: MagicMock) -> OdoClient:
    return OdoClient(runner, console=Console(file=io.StringIO()))


def test_satisfies_protocols(client: OdoClient) -> None:
    assert isinstance(client, ListingProvider)
    assert isinstance(client, CommandExecutor)


class TestExecution:
    @pytest.mark.asyncio
    async def test_silent_returns_result(self, client: OdoClient, runner: MagicMock) -> None:
        runner.run.return_value = result(stdout="ok")

        res = await client.execute_silently(client.commands.create_project("p"))

        assert res.stdout == "ok"
        runner.run.assert_awaited_once_with(["odo", "project", "create", "p"])

    @pytest.mark.asyncio
    async def test_silent_raises_with_stderr_text(
        self, client: OdoClient, runner: MagicMock
    ) -> None:
        runner.run.return_value = result(stderr="project exists\n", returncode=1)

        with pytest.raises(CommandFailedError) as exc_info:
            await client.execute_silently(client.commands.create_project("p"))

        assert str(exc_info.value) == "project exists"
        assert exc_info.value.returncode == 1
        assert exc_info.value.command == "odo project create p"

    @pytest.mark.asyncio
    async def test_shell_specs_run_as_strings(
        self, client: OdoClient, runner: MagicMock
    ) -> None:
        spec = client.commands.link_service(ResourceRef.path("p", "a", "c"), "s")

        await client.execute_silently(spec)

        runner.run.assert_awaited_once_with(spec.command_line)

    @pytest.mark.asyncio
    async def test_terminal_launches_without_waiting(
        self, client: OdoClient, runner: MagicMock
    ) -> None:
        await client.execute_in_terminal(
            client.commands.watch_component(ResourceRef.path("p", "a", "c"))
        )

        runner.launch.assert_awaited_once()
        runner.run.assert_not_awaited()
        assert await client.wait_for_terminals() == [0]

    @pytest.mark.asyncio
    async def test_progress_propagates_failures(
        self, client: OdoClient, runner: MagicMock
    ) -> None:
        runner.run.return_value = result(stdout="bad type", returncode=1)

        with pytest.raises(CommandFailedError, match="bad type"):
            await client.execute_with_progress("Creating", client.commands.create_project("p"))


class TestListings:
    @pytest.mark.asyncio
    async def test_projects(self, client: OdoClient, runner: MagicMock) -> None:
        runner.run.return_value = result(
            stdout=json.dumps({"kind": "List", "items": [{"metadata": {"name": "proj1"}}]})
        )

        assert await client.get_projects() == [ResourceRef.project("proj1")]

    @pytest.mark.asyncio
    async def test_components_are_scoped(self, client: OdoClient, runner: MagicMock) -> None:
        app = ResourceRef.path("proj1", "app1")
        runner.run.return_value = result(stdout=json.dumps([{"name": "comp1"}]))

        components = await client.get_components(app)

        assert components == [app.child(ResourceKind.COMPONENT, "comp1")]
        runner.run.assert_awaited_once_with(
            ["odo", "list", "--app", "app1", "--project", "proj1", "-o", "json"]
        )

    @pytest.mark.asyncio
    async def test_component_type_versions(
        self, client: OdoClient, runner: MagicMock
    ) -> None:
        runner.run.return_value = result(
            stdout="NAME     PROJECT    TAGS\nnodejs   openshift  8,10,latest\n"
        )

        assert await client.get_component_type_versions("nodejs") == ["8", "10", "latest"]
        assert await client.get_component_type_versions("ruby") == []


class TestParsing:
    def test_resource_names_empty_output(self) -> None:
        assert parse_resource_names("") == []
        assert parse_resource_names('{"items": null}') == []

    def test_resource_names_invalid_json(self) -> None:
        with pytest.raises(CommandFailedError):
            parse_resource_names("not json")

    def test_catalog_skips_header_and_blank_lines(self) -> None:
        output = "NAME PROJECT TAGS\n\npython openshift 2.7,3.6\nphp openshift\n"

        assert parse_catalog(output) == {"python": ["2.7", "3.6"], "php": []}
