"""Shared CLI helpers."""

from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ..config import VizConfig, load_config
from ..exceptions import XorHeatError

console = Console()


def fail(exc: Exception) -> NoReturn:
    """Print ``exc`` in red and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    raise typer.Exit(1)


def resolve_config(ctx: typer.Context, **overrides: Any) -> VizConfig:
    """Build config from the global options stored by the main callback."""
    obj = ctx.ensure_object(dict)
    try:
        return load_config(
            config_file=obj.get("config"),
            verbose=obj.get("verbose", False),
            quiet=obj.get("quiet", False),
            **overrides,
        )
    except XorHeatError as exc:
        fail(exc)
