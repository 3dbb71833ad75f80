"""``xorheat distance``: XOR distance between two leaf ids."""

import json

import typer

from ..geometry import distance as xor_distance
from ..geometry import distance_value
from . import app
from ._common import console


@app.command()
def distance(
    first: str = typer.Argument(..., help="First leaf id, e.g. 0b000"),
    second: str = typer.Argument(..., help="Second leaf id, e.g. 0b111"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Print the XOR distance of two leaf ids in hex and decimal.

    Malformed or mismatched ids give the zero distance.
    """
    hex_distance = xor_distance(first, second)
    value = distance_value(hex_distance)
    if json_output:
        print(json.dumps({"first": first, "second": second, "distance": hex_distance, "value": value}))
        return
    console.print(f"[bold]{hex_distance}[/bold] ({value})", highlight=False)
