"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from ..logging_config import setup_logging, verbosity_from_flags
from . import app
from ._common import console


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        hidden=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Radial XOR-distance heat map of a complete binary tree.

    [bold cyan]Examples:[/bold cyan]

      xorheat render --depth 5 --select 0b0110

      xorheat distance 0b000 0b111

      xorheat sectors --depth 6

      xorheat serve --depth 4
    """
    ctx.ensure_object(dict)
    ctx.obj.update({"config": config, "verbose": verbose, "quiet": quiet})

    if version:
        from .. import __version__

        console.print(f"[bold cyan]xorheat[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    setup_logging(
        verbosity_from_flags(verbose, quiet), log_file=str(log_file) if log_file else None
    )

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)
