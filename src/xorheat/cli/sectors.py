"""``xorheat sectors``: per-leaf sector angles and a seam check."""

import math
from typing import Optional

import typer
from rich.table import Table

from ..geometry import resolve_sectors, sector_gaps
from ..heatmap.scene import leaf_slice
from ..tree import build_tree, descendants
from . import app
from ._common import console, resolve_config


@app.command()
def sectors(
    ctx: typer.Context,
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Tree depth (1-16)"),
):
    """
    Show the angular sector of every leaf and check the ring is seamless.

    Exits with status 1 if neighbouring sectors do not meet.
    """
    config = resolve_config(ctx, depth=depth)
    viewport = config.viewport
    root = build_tree(config.depth, viewport.width, viewport.height, config.ring_fraction)
    leaf_nodes = leaf_slice(descendants(root), config.depth)
    resolved = resolve_sectors(leaf_nodes, viewport.center)

    if not resolved:
        console.print(f"[dim]Depth {config.depth} has no heat sectors.[/dim]")
        return

    table = Table(title=f"Sectors at depth {config.depth}")
    table.add_column("Leaf", style="bold")
    table.add_column("Node°", justify="right")
    table.add_column("Left°", justify="right")
    table.add_column("Right°", justify="right")
    table.add_column("Sweep°", justify="right")
    table.add_column("Bounds")
    for leaf in leaf_nodes:
        angles = resolved[leaf.id]
        table.add_row(
            leaf.id,
            f"{math.degrees(angles.node_angle):.3f}",
            f"{math.degrees(angles.left_boundary):.3f}",
            f"{math.degrees(angles.right_boundary):.3f}",
            f"{math.degrees(angles.sweep):.3f}",
            f"{angles.left_ancestor or '-'} / {angles.right_ancestor or '-'}",
        )
    console.print(table)

    ordered = [resolved[leaf.id] for leaf in leaf_nodes]
    gaps = sector_gaps(ordered)
    if gaps:
        for index, gap in gaps:
            console.print(
                f"[red]Seam after {leaf_nodes[index].id}:[/red] {math.degrees(gap):+.6f}°"
            )
        raise typer.Exit(1)
    console.print(f"[green]{len(ordered)} sectors, seamless[/green]")
