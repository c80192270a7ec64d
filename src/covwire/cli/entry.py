"""Definition of the command line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich import box
from rich.console import Console
from rich.table import Table

from covwire import __version__, logger
from covwire.cli.errors import EXIT_CONFIG, EXIT_OK
from covwire.core import LOG_FORMAT, ResolvedOptions, find_pyproject, load_raw_options, normalize
from covwire.errors import ConfigError
from covwire.reports import build_report_set


def _configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _resolve_options(pyproject: Path | None) -> ResolvedOptions:
    path = pyproject or find_pyproject(Path.cwd())
    if path is None:
        logger.info("No pyproject.toml found; using defaults")
    try:
        raw = load_raw_options(path)
    except ConfigError as e:
        click.echo(f"ERROR: {e}", err=True)
        raise click.exceptions.Exit(EXIT_CONFIG) from e
    return normalize(raw)


pyproject_option = click.option(
    "--pyproject",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    help="Read [tool.covwire] from this file instead of searching upwards",
)


# --------------------------------------------------------------------------- #
# CLI - root command group                                                    #
# --------------------------------------------------------------------------- #
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-q", "--quiet", is_flag=True, help="Suppress INFO logs, emit only errors")
@click.option("-v", "--verbose", is_flag=True, help="Emit diagnostic logging")
def cli(*, quiet: bool, verbose: bool) -> None:
    """Covwire - inspect the coverage reports a pytest run will write."""
    _configure_runtime(quiet=quiet, verbose=verbose)


# --------------------------------------------------------------------------- #
# Sub-command: version                                                        #
# --------------------------------------------------------------------------- #
@cli.command()
def version() -> None:
    """Print the version and exit."""
    click.echo(__version__)


# --------------------------------------------------------------------------- #
# Sub-command: config                                                         #
# --------------------------------------------------------------------------- #
@cli.command(name="config")
@pyproject_option
@click.option("--json", "as_json", is_flag=True, help="Print the resolved options as JSON")
def show_config(*, pyproject: Path | None, as_json: bool) -> None:
    """Print the options after defaults are applied."""
    options = _resolve_options(pyproject)
    data = options.to_dict()
    if as_json:
        click.echo(json.dumps(data, indent=2, sort_keys=True, default=str))
        return

    table = Table(title="covwire options", box=box.SIMPLE_HEAVY, header_style="bold")
    table.add_column("Option", style="cyan")
    table.add_column("Value")
    for key in sorted(data):
        table.add_row(key, json.dumps(data[key], default=str))
    Console().print(table)


# --------------------------------------------------------------------------- #
# Sub-command: formats                                                        #
# --------------------------------------------------------------------------- #
@cli.command()
@pyproject_option
@click.pass_context
def formats(ctx: click.Context, *, pyproject: Path | None) -> None:
    """List the reports a run would write, with their targets."""
    options = _resolve_options(pyproject)
    for fmt in build_report_set(options.format, options):
        click.echo(f"{fmt}\t{options.output_for(fmt) or '<default>'}")
    ctx.exit(EXIT_OK)
