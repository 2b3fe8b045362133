"""``odoflow component`` commands.

Every command accepts an optional component NAME plus --project/--app. Any
level left out is picked interactively.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import click

from odoflow.cli.common import (
    cli_error_handler,
    context_ref,
    echo_outcome,
    run_workflow,
)
from odoflow.cli.context import async_command
from odoflow.odo.models import ResourceRef
from odoflow.workflows import ComponentWorkflows, Outcome

Operation = Callable[[ComponentWorkflows, ResourceRef | None], Awaitable[Outcome]]


def _scope_options(f: Callable[..., object]) -> Callable[..., object]:
    f = click.option("--app", "app_name", default=None, help="Owning application.")(f)
    f = click.option(
        "--project", "project_name", default=None, help="Owning project."
    )(f)
    return f


async def _run(
    ctx: click.Context,
    operation: Operation,
    project_name: str | None,
    app_name: str | None,
    name: str | None = None,
) -> None:
    with cli_error_handler():
        ref = context_ref(project_name, app_name, name)
        outcome = await run_workflow(
            ctx, lambda s: operation(ComponentWorkflows(s), ref)
        )
    echo_outcome(outcome)


@click.group()
def component() -> None:
    """Create, delete, link and inspect components."""
    pass


@component.command("create")
@_scope_options
@click.pass_context
@async_command
async def component_create(
    ctx: click.Context, project_name: str | None, app_name: str | None
) -> None:
    """Create a component from a workspace folder, git repository or binary."""
    await _run(ctx, lambda w, ref: w.create(ref), project_name, app_name)


@component.command("delete")
@click.argument("name", required=False)
@_scope_options
@click.pass_context
@async_command
async def component_delete(
    ctx: click.Context, name: str | None, project_name: str | None, app_name: str | None
) -> None:
    """Delete component NAME."""
    await _run(ctx, lambda w, ref: w.delete(ref), project_name, app_name, name)


@component.command("link")
@click.argument("name", required=False)
@_scope_options
@click.pass_context
@async_command
async def component_link(
    ctx: click.Context, name: str | None, project_name: str | None, app_name: str | None
) -> None:
    """Link a service to component NAME."""
    await _run(ctx, lambda w, ref: w.link_service(ref), project_name, app_name, name)


@component.command("push")
@click.argument("name", required=False)
@_scope_options
@click.pass_context
@async_command
async def component_push(
    ctx: click.Context, name: str | None, project_name: str | None, app_name: str | None
) -> None:
    """Push component NAME in the terminal."""
    await _run(ctx, lambda w, ref: w.push(ref), project_name, app_name, name)


@component.command("describe")
@click.argument("name", required=False)
@_scope_options
@click.pass_context
@async_command
async def component_describe(
    ctx: click.Context, name: str | None, project_name: str | None, app_name: str | None
) -> None:
    """Describe component NAME."""
    await _run(ctx, lambda w, ref: w.describe(ref), project_name, app_name, name)


@component.command("log")
@click.argument("name", required=False)
@click.option("-f", "--follow", is_flag=True, help="Keep streaming new log lines.")
@_scope_options
@click.pass_context
@async_command
async def component_log(
    ctx: click.Context,
    name: str | None,
    follow: bool,
    project_name: str | None,
    app_name: str | None,
) -> None:
    """Show the log of component NAME."""
    if follow:
        await _run(ctx, lambda w, ref: w.follow_log(ref), project_name, app_name, name)
    else:
        await _run(ctx, lambda w, ref: w.log(ref), project_name, app_name, name)


@component.command("watch")
@click.argument("name", required=False)
@_scope_options
@click.pass_context
@async_command
async def component_watch(
    ctx: click.Context, name: str | None, project_name: str | None, app_name: str | None
) -> None:
    """Watch component NAME and push changes as they happen."""
    await _run(ctx, lambda w, ref: w.watch(ref), project_name, app_name, name)
