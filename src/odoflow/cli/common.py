from __future__ import annotations

import contextlib
from collections.abc import Awaitable, Callable, Generator

import click

from odoflow.cli.console import console, err_console
from odoflow.cli.context import CLIContext, ExitCode
from odoflow.cli.output import format_error, format_success
from odoflow.config import OdoflowConfig
from odoflow.exceptions import ConfigError, OdoflowError
from odoflow.git import GitCloner
from odoflow.logging import get_logger
from odoflow.odo import Commands, OdoClient, ResourceKind, ResourceRef
from odoflow.prompts import ConsolePrompter
from odoflow.runners import CommandRunner
from odoflow.workflows import Cancelled, Failed, Outcome, Success, WorkflowServices
from odoflow.workflows.validation import validate_resource_name

__all__ = [
    "build_client",
    "build_services",
    "cli_error_handler",
    "context_ref",
    "echo_outcome",
    "get_cli_context",
    "run_workflow",
]


@contextlib.contextmanager
def cli_error_handler() -> Generator[None, None, None]:
    """Map exceptions escaping a command to messages and exit codes.

    - KeyboardInterrupt: exit 130
    - ConfigError: message plus offending field, exit 1
    - OdoflowError: message, exit 1
    - anything else: logged with traceback, exit 1
    """
    logger = get_logger(__name__)

    try:
        yield
    except click.ClickException:
        raise
    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user.", err=True)
        raise SystemExit(ExitCode.INTERRUPTED) from None
    except ConfigError as e:
        details = [f"Field: {e.field}"] if e.field else None
        click.echo(format_error(e.message, details=details), err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except OdoflowError as e:
        click.echo(format_error(e.message), err=True)
        raise SystemExit(ExitCode.FAILURE) from e
    except Exception as e:
        logger.exception("Unexpected error in command")
        click.echo(f"Error: {e!s}", err=True)
        raise SystemExit(ExitCode.FAILURE) from e


def get_cli_context(ctx: click.Context) -> CLIContext:
    cli_ctx = ctx.obj.get("cli_ctx") if ctx.obj else None
    if cli_ctx is None:
        return CLIContext(config=OdoflowConfig())
    return cli_ctx


def context_ref(
    project: str | None,
    application: str | None = None,
    component: str | None = None,
    service: str | None = None,
) -> ResourceRef | None:
    """Turn --project/--app/--component/--service options into a partial ref.

    Raises:
        click.UsageError: If a lower level is given without the ones above it,
            or a name is not a valid resource name.
    """
    for value in (project, application, component, service):
        if value is not None:
            error = validate_resource_name(value)
            if error is not None:
                raise click.BadParameter(f"{error}: {value!r}")
    if project is None:
        if application or component or service:
            raise click.UsageError(
                "--project is required when --app, a component or a service is given"
            )
        return None
    if application is None:
        if component or service:
            raise click.UsageError(
                "--app is required when a component or service is given"
            )
        return ResourceRef.project(project)
    ref = ResourceRef.project(project).child(ResourceKind.APPLICATION, application)
    if component is not None:
        return ref.child(ResourceKind.COMPONENT, component)
    if service is not None:
        return ref.child(ResourceKind.SERVICE, service)
    return ref


def build_client(config: OdoflowConfig) -> OdoClient:
    runner = CommandRunner(cwd=config.odo.cwd, timeout=config.odo.timeout_seconds)
    return OdoClient(runner, Commands(config.odo.binary), console=err_console)


def build_services(config: OdoflowConfig, client: OdoClient) -> WorkflowServices:
    return WorkflowServices(
        listings=client,
        executor=client,
        prompter=ConsolePrompter(err_console),
        commands=client.commands,
        cloner=GitCloner(
            config.workflows.clone_directory,
            retries=config.workflows.clone_retries,
        ),
        push_after_create=config.workflows.push_after_create,
    )


async def run_workflow(
    ctx: click.Context,
    invoke: Callable[[WorkflowServices], Awaitable[Outcome]],
) -> Outcome:
    """Build the services, run one workflow, and wait for terminal commands.

    Args:
        ctx: Click context carrying the CLIContext.
        invoke: Calls the workflow operation with the services.
    """
    config = get_cli_context(ctx).config
    client = build_client(config)
    outcome = await invoke(build_services(config, client))
    await client.wait_for_terminals()
    return outcome


def echo_outcome(outcome: Outcome) -> None:
    """Print an outcome and exit non-zero for failures."""
    if isinstance(outcome, Success):
        console.print(format_success(outcome.message), highlight=False)
    elif isinstance(outcome, Cancelled):
        click.echo("Cancelled.", err=True)
    elif isinstance(outcome, Failed):
        click.echo(format_error(outcome.message), err=True)
        raise SystemExit(ExitCode.FAILURE)
