"""``odoflow service`` commands."""

from __future__ import annotations

import click

from odoflow.cli.common import (
    cli_error_handler,
    context_ref,
    echo_outcome,
    run_workflow,
)
from odoflow.cli.context import async_command
from odoflow.workflows import ServiceWorkflows


@click.group()
def service() -> None:
    """Manage services attached to applications."""
    pass


@service.command("delete")
@click.argument("name", required=False)
@click.option("--project", "project_name", default=None, help="Owning project.")
@click.option("--app", "app_name", default=None, help="Owning application.")
@click.pass_context
@async_command
async def service_delete(
    ctx: click.Context,
    name: str | None,
    project_name: str | None,
    app_name: str | None,
) -> None:
    """Delete service NAME (picked from a list when omitted)."""
    with cli_error_handler():
        ref = context_ref(project_name, app_name, service=name)
        outcome = await run_workflow(ctx, lambda s: ServiceWorkflows(s).delete(ref))
    echo_outcome(outcome)
