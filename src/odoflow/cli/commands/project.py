"""``odoflow project`` commands."""

from __future__ import annotations

import click

from odoflow.cli.common import (
    cli_error_handler,
    context_ref,
    echo_outcome,
    run_workflow,
)
from odoflow.cli.context import async_command
from odoflow.workflows import ProjectWorkflows


@click.group()
def project() -> None:
    """Create and delete projects."""
    pass


@project.command("create")
@click.pass_context
@async_command
async def project_create(ctx: click.Context) -> None:
    """Create a project, asking for its name."""
    with cli_error_handler():
        outcome = await run_workflow(ctx, lambda s: ProjectWorkflows(s).create())
    echo_outcome(outcome)


@project.command("delete")
@click.argument("name", required=False)
@click.pass_context
@async_command
async def project_delete(ctx: click.Context, name: str | None) -> None:
    """Delete project NAME (picked from a list when omitted).

    Examples:
        odoflow project delete
        odoflow project delete myproj
    """
    with cli_error_handler():
        ref = context_ref(name)
        outcome = await run_workflow(ctx, lambda s: ProjectWorkflows(s).delete(ref))
    echo_outcome(outcome)
