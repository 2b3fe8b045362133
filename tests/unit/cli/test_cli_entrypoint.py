"""Tests for the top-level odoflow command group."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from odoflow import __version__
from odoflow.main import cli


def test_help_lists_command_groups(cli_runner: CliRunner, isolated_cli: Path) -> None:
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 0
    for group in ("project", "app", "component", "service", "config"):
        assert group in result.output


def test_version(cli_runner: CliRunner, isolated_cli: Path) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_config_show_json(cli_runner: CliRunner, isolated_cli: Path) -> None:
    (isolated_cli / "odoflow.yaml").write_text("odo:\n  binary: my-odo\n")

    result = cli_runner.invoke(cli, ["config", "show", "--format", "json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["odo"]["binary"] == "my-odo"
    assert data["workflows"]["push_after_create"] is True


def test_explicit_config_file(cli_runner: CliRunner, isolated_cli: Path) -> None:
    path = isolated_cli / "other.yaml"
    path.write_text("verbosity: info\n")

    result = cli_runner.invoke(cli, ["-c", str(path), "config", "show"])

    assert result.exit_code == 0
    assert "verbosity: info" in result.output


def test_invalid_config_exits_with_field(
    cli_runner: CliRunner, isolated_cli: Path
) -> None:
    (isolated_cli / "odoflow.yaml").write_text("odo:\n  timeout_seconds: 0\n")

    result = cli_runner.invoke(cli, ["config", "show"])

    assert result.exit_code == 1
    assert "Error: Invalid configuration" in result.output
    assert "Field: odo.timeout_seconds" in result.output
