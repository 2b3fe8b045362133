"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from odoflow.exceptions import (
    CloneError,
    CommandFailedError,
    ConfigError,
    DuplicateStepNameError,
    GitError,
    InvalidResourceError,
    OdoflowError,
    RunnerError,
    WorkflowError,
    WorkflowFailedError,
    WorkingDirectoryError,
)


@pytest.mark.parametrize(
    "error",
    [
        ConfigError("bad"),
        CommandFailedError("bad"),
        WorkingDirectoryError("bad"),
        WorkflowFailedError("bad"),
        InvalidResourceError("bad"),
        CloneError("bad"),
    ],
)
def test_everything_derives_from_base(error: OdoflowError) -> None:
    assert isinstance(error, OdoflowError)
    assert error.message == "bad"
    assert str(error) == "bad"


def test_runner_errors() -> None:
    error = CommandFailedError("exists", command="odo project create p", returncode=1)

    assert isinstance(error, RunnerError)
    assert error.command == "odo project create p"
    assert error.returncode == 1


def test_duplicate_step_name_message() -> None:
    error = DuplicateStepNameError("name")

    assert isinstance(error, WorkflowError)
    assert error.step_name == "name"
    assert error.message == "Step 'name' already has an answer"


def test_clone_error_is_recoverable_git_error() -> None:
    error = CloneError("timeout", url="https://example.com/r.git")

    assert isinstance(error, GitError)
    assert error.operation == "clone"
    assert error.recoverable is True
