"""Render descriptors handed to the drawing layer."""

from __future__ import annotations

from dataclasses import dataclass

# Gap between the node ring and the heat band, and between the heat band and
# the highlight band.
BAND_GAP = 16.0


@dataclass(frozen=True)
class RingDimensions:
    """Radii of the concentric bands drawn around the leaf ring."""

    leaf_distance: float
    arc_width: float = 20.0
    node_width: float = 16.0
    heat_inner_radius: float = 16.0

    @property
    def node_inner_radius(self) -> float:
        return self.leaf_distance - self.node_width

    @property
    def node_outer_radius(self) -> float:
        return self.leaf_distance + self.node_width

    @property
    def heat_outer_radius(self) -> float:
        return self.leaf_distance + BAND_GAP + self.arc_width

    @property
    def highlight_outer_radius(self) -> float:
        return self.heat_outer_radius + BAND_GAP

    @property
    def guide_length(self) -> float:
        return self.leaf_distance + self.arc_width + BAND_GAP


@dataclass(frozen=True)
class LeafRenderDescriptor:
    """Everything needed to draw one leaf's heat sector and label."""

    id: str
    start_angle: float
    end_angle: float
    label_end_angle: float
    distance: str
    value: int
    heat_color: str
    node_color: str
    in_radius: bool
    label: str
    font_size: float
    hovered: bool = False


@dataclass(frozen=True)
class GuideLine:
    """Radial line from an internal node out to the heat band."""

    id: str
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Edge:
    parent_id: str
    child_id: str
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class NodeMarker:
    id: str
    x: float
    y: float
    depth: int
    fill: str
    is_leaf: bool
    selected: bool = False
    hovered: bool = False


@dataclass(frozen=True)
class Header:
    """Readout of the current depth and selection."""

    depth: int
    selected_bits: str
    selected_node_id: str


@dataclass(frozen=True)
class Tooltip:
    id: str
    x: float
    y: float
    placement: str
