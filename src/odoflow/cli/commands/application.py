"""``odoflow app`` commands."""

from __future__ import annotations

import click

from odoflow.cli.common import (
    cli_error_handler,
    context_ref,
    echo_outcome,
    run_workflow,
)
from odoflow.cli.context import async_command
from odoflow.workflows import ApplicationWorkflows


@click.group("app")
def application() -> None:
    """Create and delete applications."""
    pass


@application.command("create")
@click.option("--project", "project_name", default=None, help="Project to create in.")
@click.pass_context
@async_command
async def app_create(ctx: click.Context, project_name: str | None) -> None:
    """Create an application, asking for its name."""
    with cli_error_handler():
        ref = context_ref(project_name)
        outcome = await run_workflow(ctx, lambda s: ApplicationWorkflows(s).create(ref))
    echo_outcome(outcome)


@application.command("delete")
@click.argument("name", required=False)
@click.option("--project", "project_name", default=None, help="Owning project.")
@click.pass_context
@async_command
async def app_delete(
    ctx: click.Context, name: str | None, project_name: str | None
) -> None:
    """Delete application NAME (picked from a list when omitted)."""
    with cli_error_handler():
        ref = context_ref(project_name, name)
        outcome = await run_workflow(ctx, lambda s: ApplicationWorkflows(s).delete(ref))
    echo_outcome(outcome)
