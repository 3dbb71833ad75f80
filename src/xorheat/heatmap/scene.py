"""Assemble a full drawable scene from interaction state and viewport.

The scene is recomputed wholesale on every call; the only cached piece is the
tree itself (see :func:`xorheat.tree.build_tree`). Layering order for the
drawing layer is edges, nodes, guides, sectors.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from ..geometry.angles import Point
from ..geometry.distance import node_label
from ..geometry.sectors import SectorAngles, resolve_sectors
from ..state import StateSnapshot
from ..tree import DEFAULT_RING_FRACTION, build_tree, descendants, links
from ..tree.models import TreeNode
from .colors import ColorFunction, default_color_scale, node_fill
from .models import (
    Edge,
    GuideLine,
    Header,
    LeafRenderDescriptor,
    NodeMarker,
    RingDimensions,
    Tooltip,
)
from .projector import guide_lines, project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Drawing area snapshot supplied by the host window."""

    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class SceneOptions:
    ring_fraction: float = DEFAULT_RING_FRACTION
    arc_width: float = 20.0
    node_width: float = 16.0
    heat_inner_radius: float = 16.0


@dataclass
class Scene:
    viewport: Viewport
    center: Point
    depth: int
    radius: int
    dimensions: RingDimensions
    header: Header
    edges: list[Edge] = field(default_factory=list)
    nodes: list[NodeMarker] = field(default_factory=list)
    guides: list[GuideLine] = field(default_factory=list)
    sectors: list[LeafRenderDescriptor] = field(default_factory=list)
    angles: dict[str, SectorAngles] = field(default_factory=dict)
    tooltip: Optional[Tooltip] = None


def leaf_slice(nodes: list[TreeNode], depth: int) -> list[TreeNode]:
    """Leaves out of a breadth-first node list."""
    return nodes[2 ** (depth - 1) - 1 : 2**depth - 1]


def tooltip_placement(node_id: str) -> str:
    return "top" if node_id.startswith("0b0") else "bottom"


def build_scene(
    snapshot: StateSnapshot,
    viewport: Viewport,
    options: SceneOptions = SceneOptions(),
    color_of: ColorFunction = default_color_scale,
) -> Scene:
    """Compute every descriptor for ``snapshot`` drawn into ``viewport``."""
    depth = snapshot.depth
    root = build_tree(depth, viewport.width, viewport.height, options.ring_fraction)
    nodes = descendants(root)
    leaf_nodes = leaf_slice(nodes, depth)
    center = viewport.center

    last = nodes[-1]
    dimensions = RingDimensions(
        leaf_distance=math.hypot(center.x - last.x, center.y - last.y),
        arc_width=options.arc_width,
        node_width=options.node_width,
        heat_inner_radius=options.heat_inner_radius,
    )

    angles = resolve_sectors(leaf_nodes, center)
    sectors = project(
        leaf_nodes,
        snapshot.selected,
        angles,
        center,
        depth,
        radius=snapshot.radius,
        hovered_id=snapshot.hovered_id,
        color_of=color_of,
    )
    guides = guide_lines(nodes, center, dimensions) if len(nodes) > 3 else []

    edges = [
        Edge(parent.id, child.id, parent.x, parent.y, child.x, child.y)
        for parent, child in links(root)
    ]
    markers = [
        NodeMarker(
            id=node.id,
            x=node.x,
            y=node.y,
            depth=node.depth,
            fill=node_fill(node.id),
            is_leaf=node.is_leaf,
            selected=node.id == snapshot.selected,
            hovered=node.id == snapshot.hovered_id,
        )
        for node in nodes
    ]

    bits, node_id = node_label(snapshot.selected)
    tooltip = None
    if snapshot.hovered is not None:
        hover = snapshot.hovered
        tooltip = Tooltip(hover.id, hover.x, hover.y, tooltip_placement(hover.id))

    logger.debug(
        "Scene depth=%d: %d edges, %d nodes, %d guides, %d sectors",
        depth,
        len(edges),
        len(markers),
        len(guides),
        len(sectors),
    )
    return Scene(
        viewport=viewport,
        center=center,
        depth=depth,
        radius=snapshot.radius,
        dimensions=dimensions,
        header=Header(depth=depth, selected_bits=bits, selected_node_id=node_id),
        edges=edges,
        nodes=markers,
        guides=guides,
        sectors=sectors,
        angles=angles,
        tooltip=tooltip,
    )
