"""CLI entry point; registers all subcommands."""

import typer

from ._common import console

app = typer.Typer(
    name="xorheat",
    help="xorheat - Radial XOR-distance heat map of a complete binary tree",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .render import render as _render  # noqa: F401, E402
from .distance import distance as _distance  # noqa: F401, E402
from .sectors import sectors as _sectors  # noqa: F401, E402
from .serve import serve as _serve  # noqa: F401, E402
