"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from SearchSieve.cli.commands import OUTPUT_FORMATS, ExtractCommand, ParamsCommand, PredicatesCommand
from SearchSieve.cli.runner import CommandRunner
from SearchSieve.config import load_config

_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="json",
    show_default=True,
    help="Output format.",
)


@click.group(help="SearchSieve: turn flat search keys into filter conditions.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    ctx.obj = load_config(config_path)


@cli.command("extract")
@click.argument("key")
@click.argument("values", nargs=-1, required=True)
@_format_option
@click.pass_context
def extract_cmd(ctx: click.Context, key: str, values: tuple[str, ...], output_format: str) -> None:
    """Extract the condition for KEY with one or more VALUES."""
    cfg = ctx.obj
    command = ExtractCommand(config=cfg, key=key, values=values, output_format=output_format)
    click.echo(CommandRunner(cfg).run(command, command_name=ctx.command.name))


@cli.command("params")
@click.argument("params_path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@_format_option
@click.pass_context
def params_cmd(ctx: click.Context, params_path: Path, output_format: str) -> None:
    """Extract conditions from a YAML mapping of search keys to values."""
    cfg = ctx.obj
    command = ParamsCommand(config=cfg, params_path=params_path, output_format=output_format)
    click.echo(CommandRunner(cfg).run(command, command_name=ctx.command.name))


@cli.command("predicates")
@click.pass_context
def predicates_cmd(ctx: click.Context) -> None:
    """List active predicate names and aliases, longest first."""
    cfg = ctx.obj
    click.echo(CommandRunner(cfg).run(PredicatesCommand(config=cfg), command_name=ctx.command.name))
