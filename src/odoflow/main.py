"""CLI entry point for odoflow.

Defines the Click group and wires in the command groups.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from odoflow.logging import configure_logging, resolve_log_level

# ODOFLOW_* settings may come from a .env file; load it before config is read.
load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

from odoflow import __version__  # noqa: E402
from odoflow.cli.commands.application import application  # noqa: E402
from odoflow.cli.commands.component import component  # noqa: E402
from odoflow.cli.commands.config import config  # noqa: E402
from odoflow.cli.commands.project import project  # noqa: E402
from odoflow.cli.commands.service import service  # noqa: E402
from odoflow.cli.context import CLIContext  # noqa: E402
from odoflow.cli.output import format_error  # noqa: E402
from odoflow.config import load_config  # noqa: E402
from odoflow.exceptions import ConfigError  # noqa: E402


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="odoflow")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="Path to config file (overrides ./odoflow.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only report errors.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    verbose: int,
    quiet: bool,
) -> None:
    """odoflow - interactive workflows for odo projects, applications and components."""
    ctx.ensure_object(dict)

    config_path = Path(config_file) if config_file else None
    try:
        loaded = load_config(config_path)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details or None), err=True)
        ctx.exit(1)
        return

    ctx.obj["cli_ctx"] = CLIContext(
        config=loaded,
        config_path=config_path,
        verbosity=verbose,
        quiet=quiet,
    )
    configure_logging(level=resolve_log_level(verbose, quiet, loaded.verbosity))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(project)
cli.add_command(application)
cli.add_command(component)
cli.add_command(service)
cli.add_command(config)

if __name__ == "__main__":
    cli()
