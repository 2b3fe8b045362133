"""Source-kind dispatch for component creation.

The first answer of the create-component workflow is a ``SourceKind``. It
selects one of three mutually exclusive branches, each adding its own
prompts and its own ``--local``/``--git``/``--binary`` command fragment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import assert_never

from odoflow.logging import get_logger
from odoflow.odo.models import SourceKind
from odoflow.odo.protocols import Prompter
from odoflow.workflows.steps import Step, WorkflowAnswer
from odoflow.workflows.validation import validate_git_url, validate_resource_name

__all__ = [
    "NAME_STEP",
    "SOURCE_STEP",
    "SourceBranch",
    "select_branch",
]

logger = get_logger(__name__)

#: Answer key of the branch-specific source (folder, URL or file)
SOURCE_STEP = "source"

#: Answer key of the component name
NAME_STEP = "name"


@dataclass(frozen=True, slots=True)
class SourceBranch:
    """Steps and command fragment contributed by one source kind.

    Attributes:
        kind: The source kind this branch handles.
        steps: Prompts the branch needs, in order.
        flag: Source flag placed after the component name.
    """

    kind: SourceKind
    steps: tuple[Step, ...]
    flag: str

    def source_tokens(self, answer: WorkflowAnswer) -> tuple[str, str]:
        """The ``<flag> <source>`` pair for the create command."""
        return (self.flag, str(answer[SOURCE_STEP]))


def _name_step(prompter: Prompter) -> Step:
    async def ask_name(_: WorkflowAnswer) -> str | None:
        return await prompter.input_text(
            "Provide Component name", validate_resource_name
        )

    return Step(NAME_STEP, ask_name)


def _workspace_steps(prompter: Prompter) -> tuple[Step, ...]:
    async def ask_folder(_: WorkflowAnswer) -> Path | None:
        return await prompter.pick_folder(
            "Select the folder to create the component from"
        )

    return (Step(SOURCE_STEP, ask_folder), _name_step(prompter))


def _git_steps(prompter: Prompter) -> tuple[Step, ...]:
    async def ask_repository(_: WorkflowAnswer) -> str | None:
        return await prompter.input_text("Git repository URI", validate_git_url)

    return (Step(SOURCE_STEP, ask_repository), _name_step(prompter))


def _binary_steps(prompter: Prompter) -> tuple[Step, ...]:
    async def ask_binary(_: WorkflowAnswer) -> Path | None:
        files = await prompter.pick_files("Select the binary file")
        if not files:
            return None
        if len(files) > 1:
            # Only one artifact can back a component.
            logger.info("binary_selection_rejected", selected=len(files))
            return None
        return files[0]

    return (Step(SOURCE_STEP, ask_binary), _name_step(prompter))


def select_branch(kind: SourceKind, prompter: Prompter) -> SourceBranch:
    """Return the branch for ``kind``.

    Args:
        kind: Source kind chosen by the user.
        prompter: Prompter the branch steps ask through.

    Returns:
        SourceBranch with the branch steps and its source flag.
    """
    if kind is SourceKind.WORKSPACE:
        return SourceBranch(kind, _workspace_steps(prompter), "--local")
    if kind is SourceKind.GIT:
        return SourceBranch(kind, _git_steps(prompter), "--git")
    if kind is SourceKind.BINARY:
        return SourceBranch(kind, _binary_steps(prompter), "--binary")
    assert_never(kind)
