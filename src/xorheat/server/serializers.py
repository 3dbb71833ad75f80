"""Scene serialization for the JSON API.

Every descriptor is a dataclass, so the work here is flattening the few
non-dataclass pieces (points, derived ring radii) into plain JSON types.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from ..heatmap import RingDimensions, Scene
from ..state import StateSnapshot


def dimensions_to_dict(dimensions: RingDimensions) -> dict[str, float]:
    """Stored band sizes plus every derived radius the drawing layer needs."""
    data = dataclasses.asdict(dimensions)
    data.update(
        {
            "node_inner_radius": dimensions.node_inner_radius,
            "node_outer_radius": dimensions.node_outer_radius,
            "heat_outer_radius": dimensions.heat_outer_radius,
            "highlight_outer_radius": dimensions.highlight_outer_radius,
            "guide_length": dimensions.guide_length,
        }
    )
    return data


def state_to_dict(snapshot: StateSnapshot) -> dict[str, Any]:
    return {
        "depth": snapshot.depth,
        "selected": snapshot.selected,
        "hovered": snapshot.hovered_id,
        "radius": snapshot.radius,
    }


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """JSON-ready dict of ``scene``; list order is the drawing order."""
    return {
        "viewport": {"width": scene.viewport.width, "height": scene.viewport.height},
        "center": {"x": scene.center.x, "y": scene.center.y},
        "depth": scene.depth,
        "radius": scene.radius,
        "dimensions": dimensions_to_dict(scene.dimensions),
        "header": dataclasses.asdict(scene.header),
        "edges": [dataclasses.asdict(edge) for edge in scene.edges],
        "nodes": [dataclasses.asdict(node) for node in scene.nodes],
        "guides": [dataclasses.asdict(guide) for guide in scene.guides],
        "sectors": [dataclasses.asdict(sector) for sector in scene.sectors],
        "angles": {
            leaf_id: dataclasses.asdict(angles) for leaf_id, angles in scene.angles.items()
        },
        "tooltip": dataclasses.asdict(scene.tooltip) if scene.tooltip else None,
    }
