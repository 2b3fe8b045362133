from __future__ import annotations

import json

import click
import yaml

from odoflow.cli.common import get_cli_context
from odoflow.config import get_user_config_path


@click.group()
def config() -> None:
    """Inspect odoflow configuration."""
    pass


@config.command("show")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format (yaml or json).",
)
@click.pass_context
def config_show(ctx: click.Context, fmt: str) -> None:
    """Display the merged configuration.

    Examples:
        odoflow config show
        odoflow config show --format json
    """
    # JSON mode turns Path values into strings for both formats.
    config_dict = get_cli_context(ctx).config.model_dump(mode="json")
    if fmt == "json":
        click.echo(json.dumps(config_dict, indent=2))
    else:
        click.echo(
            yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False)
        )


@config.command("path")
def config_path() -> None:
    """Print the location of the user configuration file."""
    click.echo(str(get_user_config_path()))
