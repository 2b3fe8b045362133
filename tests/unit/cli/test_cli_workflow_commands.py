"""Tests for the resource command groups, run against in-memory services."""

from __future__ import annotations

from unittest.mock import MagicMock

from click.testing import CliRunner

from odoflow.main import cli
from tests.fixtures.fakes import RecordingExecutor, ScriptedPrompter, command_failed


def test_project_create(
    cli_runner: CliRunner,
    wired: MagicMock,
    prompter: ScriptedPrompter,
    executor: RecordingExecutor,
) -> None:
    prompter.inputs.append("myproj")

    result = cli_runner.invoke(cli, ["project", "create"])

    assert result.exit_code == 0, result.output
    assert "Project 'myproj' successfully created" in result.output
    assert executor.executed == [("silent", "odo project create myproj")]
    wired.wait_for_terminals.assert_awaited_once()


def test_project_delete_by_name_skips_pick(
    cli_runner: CliRunner,
    wired: MagicMock,
    prompter: ScriptedPrompter,
    executor: RecordingExecutor,
) -> None:
    prompter.confirms.append("Yes")

    result = cli_runner.invoke(cli, ["project", "delete", "proj1"])

    assert result.exit_code == 0, result.output
    assert [kind for kind, _ in prompter.calls] == ["confirm"]
    assert executor.executed == [("silent", "odo project delete proj1 -f")]


def test_cancelled_workflow_exits_cleanly(
    cli_runner: CliRunner,
    wired: MagicMock,
    prompter: ScriptedPrompter,
    executor: RecordingExecutor,
) -> None:
    prompter.confirms.append("Cancel")

    result = cli_runner.invoke(cli, ["project", "delete", "proj1"])

    assert result.exit_code == 0
    assert "Cancelled." in result.output
    assert executor.executed == []


def test_failed_workflow_exits_non_zero(
    cli_runner: CliRunner,
    wired: MagicMock,
    prompter: ScriptedPrompter,
    executor: RecordingExecutor,
) -> None:
    prompter.inputs.append("myproj")
    executor.fail_with = command_failed("project already exists")

    result = cli_runner.invoke(cli, ["project", "create"])

    assert result.exit_code == 1
    assert (
        "Failed to create project with error 'project already exists'" in result.output
    )


def test_component_log_follow(
    cli_runner: CliRunner,
    wired: MagicMock,
    executor: RecordingExecutor,
) -> None:
    result = cli_runner.invoke(
        cli, ["component", "log", "comp1", "-f", "--project", "proj1", "--app", "app1"]
    )

    assert result.exit_code == 0, result.output
    assert executor.executed == [
        ("terminal", "odo log comp1 -f --app app1 --project proj1")
    ]


def test_service_delete_needs_scope(cli_runner: CliRunner, wired: MagicMock) -> None:
    result = cli_runner.invoke(cli, ["service", "delete", "svc1", "--app", "app1"])

    assert result.exit_code == 2
    assert "--project is required" in result.output


def test_app_create_in_given_project(
    cli_runner: CliRunner,
    wired: MagicMock,
    prompter: ScriptedPrompter,
    executor: RecordingExecutor,
) -> None:
    prompter.inputs.append("app2")

    result = cli_runner.invoke(cli, ["app", "create", "--project", "proj1"])

    assert result.exit_code == 0, result.output
    assert executor.executed == [("silent", "odo app create app2 --project proj1")]


def test_component_link_rejects_shell_metacharacters(
    cli_runner: CliRunner,
    wired: MagicMock,
    executor: RecordingExecutor,
) -> None:
    result = cli_runner.invoke(
        cli,
        ["component", "link", "comp1;touch pwned", "--project", "proj1", "--app", "app1"],
    )

    assert result.exit_code == 2
    assert executor.executed == []
