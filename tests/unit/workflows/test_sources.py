"""Tests for source-kind branch selection."""

from __future__ import annotations

from pathlib import Path

import pytest

from odoflow.odo.models import SourceKind
from odoflow.workflows.outcome import CANCELLED
from odoflow.workflows.sources import select_branch
from odoflow.workflows.steps import StepChain
from tests.fixtures.fakes import ScriptedPrompter


@pytest.mark.parametrize(
    ("kind", "flag"),
    [
        (SourceKind.WORKSPACE, "--local"),
        (SourceKind.GIT, "--git"),
        (SourceKind.BINARY, "--binary"),
    ],
)
def test_each_kind_has_its_own_flag(kind: SourceKind, flag: str) -> None:
    branch = select_branch(kind, ScriptedPrompter())

    assert branch.kind is kind
    assert branch.flag == flag
    assert [step.name for step in branch.steps] == ["source", "name"]


@pytest.mark.asyncio
async def test_workspace_branch_collects_folder_then_name() -> None:
    prompter = ScriptedPrompter(folders=[Path("/ws")], inputs=["comp1"])
    branch = select_branch(SourceKind.WORKSPACE, prompter)

    answer = await StepChain("test").run(branch.steps)

    assert branch.source_tokens(answer) == ("--local", "/ws")
    assert answer["name"] == "comp1"
    assert [call[0] for call in prompter.calls] == ["folder", "input"]


@pytest.mark.asyncio
async def test_git_branch_collects_url_then_name() -> None:
    url = "git@github.com:org/app.git"
    prompter = ScriptedPrompter(inputs=[url, "comp1"])
    branch = select_branch(SourceKind.GIT, prompter)

    answer = await StepChain("test").run(branch.steps)

    assert branch.source_tokens(answer) == ("--git", url)


@pytest.mark.asyncio
async def test_binary_branch_rejects_multiple_files() -> None:
    prompter = ScriptedPrompter(files=[[Path("a.jar"), Path("b.jar")]])
    branch = select_branch(SourceKind.BINARY, prompter)

    assert await StepChain("test").run(branch.steps) is CANCELLED
    assert [call[0] for call in prompter.calls] == ["files"]


def test_labels_match_pick_list_entries() -> None:
    assert [kind.label for kind in SourceKind] == [
        "Workspace Directory",
        "Git Repository",
        "Binary File",
    ]
