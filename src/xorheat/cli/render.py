"""``xorheat render``: compute a scene and print, dump or draw it."""

import json
import math
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import XorHeatError
from ..heatmap import Scene, build_scene
from ..render import render_svg
from ..server.serializers import scene_to_dict
from ..state import InteractionState
from ..tree import build_tree, find_node
from . import app
from ._common import console, fail, resolve_config


def _sector_table(scene: Scene) -> Table:
    table = Table(
        title=f"depth {scene.depth}  selected {scene.header.selected_bits or '-'}",
        show_lines=False,
    )
    table.add_column("Leaf", style="bold")
    table.add_column("Start°", justify="right")
    table.add_column("End°", justify="right")
    table.add_column("Distance", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Heat")
    table.add_column("In radius", justify="center")

    for sector in scene.sectors:
        table.add_row(
            sector.id,
            f"{math.degrees(sector.start_angle):.2f}",
            f"{math.degrees(sector.end_angle):.2f}",
            sector.distance,
            str(sector.value),
            f"[{sector.heat_color}]██[/] {sector.heat_color}",
            "[yellow]●[/yellow]" if sector.in_radius else "",
        )
    return table


@app.command()
def render(
    ctx: typer.Context,
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Tree depth (1-16)"),
    select: Optional[str] = typer.Option(None, "--select", "-s", help="Leaf id to select"),
    hover: Optional[str] = typer.Option(None, "--hover", help="Node id to hover"),
    radius: Optional[int] = typer.Option(None, "--radius", "-r", help="In-radius exponent"),
    width: Optional[float] = typer.Option(None, "--width", help="Viewport width"),
    height: Optional[float] = typer.Option(None, "--height", help="Viewport height"),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output the full scene as JSON",
    ),
    svg: Optional[Path] = typer.Option(
        None,
        "--svg",
        help="Write the scene as an SVG file",
        dir_okay=False,
        writable=True,
    ),
):
    """
    Build the heat map for one interaction state.

    [bold cyan]Examples:[/bold cyan]

      xorheat render --depth 4 --select 0b010

      xorheat render --depth 6 --select 0b00000 --radius 2 --svg heat.svg

      xorheat render --depth 3 --json
    """
    config = resolve_config(ctx, depth=depth, radius=radius, width=width, height=height)
    state = InteractionState(depth=config.depth, radius=config.radius)
    viewport = config.viewport

    try:
        root = build_tree(state.depth, viewport.width, viewport.height, config.ring_fraction)
        if select:
            if not state.select(find_node(root, select)):
                console.print(f"[yellow]{select} is not a leaf at depth {state.depth}[/yellow]")
        if hover:
            state.hover(find_node(root, hover))
    except XorHeatError as exc:
        fail(exc)

    scene = build_scene(state.snapshot, viewport, config.scene_options)

    if svg is not None:
        svg.write_text(render_svg(scene), encoding="utf-8")
        console.print(f"[green]Wrote[/green] {svg}")
        return

    if json_output:
        print(json.dumps(scene_to_dict(scene), indent=2))
        return

    if not scene.sectors:
        console.print(f"[dim]Depth {scene.depth} has no heat sectors.[/dim]")
        return
    console.print(_sector_table(scene))
