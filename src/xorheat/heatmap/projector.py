"""Project leaves, selection and sectors onto heat-map descriptors."""

from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from ..geometry.angles import HALF_TURN, Point
from ..geometry.distance import distance, distance_value
from ..geometry.sectors import SectorAngles
from ..tree.models import TreeNode
from .colors import ColorFunction, default_color_scale, node_fill
from .models import GuideLine, LeafRenderDescriptor, RingDimensions

logger = logging.getLogger(__name__)

SELECTED_PAIR_DISTANCE = "0x00"
UNSELECTED_PAIR_DISTANCE = "0x01"


def distance_domain(depth: int) -> tuple[float, float]:
    """Colour domain for a tree of ``depth`` levels: ``[0, 2**(depth-1) - 1]``."""
    return 0.0, float(2 ** (depth - 1) - 1)


def radius_threshold(radius: int) -> int:
    return 2**radius - 1


def format_label(value: int, hovered: bool = False) -> str:
    """Sector label: bare decimal when hovered, otherwise bracketed and padded.

    Example:
        >>> format_label(7)
        '|__7__'
        >>> format_label(123)
        '|_123_'
    """
    text = str(value)
    if hovered:
        return text
    lead = "_" if len(text) == 1 else ""
    trail = "_" if len(text) < 3 else ""
    return f"|_{lead}{text}{trail}_"


def label_font_size(depth: int, hovered: bool = False) -> float:
    """Label size in rem; shrinks as the ring gets crowded."""
    if hovered or depth < 4:
        return 7.0
    return 8 / ((depth - 3) * 2)


def project(
    leaves: Sequence[TreeNode],
    selected_id: str,
    sectors: Mapping[str, SectorAngles],
    center: Point,
    depth: int,
    radius: int = 0,
    hovered_id: str = "",
    color_of: ColorFunction = default_color_scale,
) -> list[LeafRenderDescriptor]:
    """Build one descriptor per leaf that has a sector.

    With exactly two leaves the distance is synthetic: zero for the selected
    leaf and one for the other.
    """
    domain = distance_domain(depth)
    threshold = radius_threshold(radius)
    two_leaves = len(leaves) == 2

    descriptors = []
    for leaf in leaves:
        sector = sectors.get(leaf.id)
        if sector is None:
            continue
        if two_leaves:
            dist = SELECTED_PAIR_DISTANCE if selected_id == leaf.id else UNSELECTED_PAIR_DISTANCE
        else:
            dist = distance(selected_id, leaf.id)
        value = distance_value(dist)
        hovered = leaf.id == hovered_id
        descriptors.append(
            LeafRenderDescriptor(
                id=leaf.id,
                start_angle=sector.left_boundary,
                end_angle=sector.right_boundary,
                label_end_angle=sector.right_boundary + (HALF_TURN if hovered else 0.0),
                distance=dist,
                value=value,
                heat_color=color_of(value, domain),
                node_color=node_fill(leaf.id),
                in_radius=value <= threshold,
                label=format_label(value, hovered),
                font_size=label_font_size(depth, hovered),
                hovered=hovered,
            )
        )
    logger.debug(
        "Projected %d leaves against selection %r (radius %d)",
        len(descriptors),
        selected_id,
        radius,
    )
    return descriptors


def guide_lines(
    nodes: Sequence[TreeNode], center: Point, dimensions: RingDimensions
) -> list[GuideLine]:
    """Radial guides from every internal, non-root node out past the heat band."""
    cx, cy = center
    guides = []
    for node in nodes:
        if node.depth == 0 or node.is_leaf:
            continue
        angle = math.atan2(node.y - cy, node.x - cx)
        guides.append(
            GuideLine(
                id=node.id,
                x1=node.x,
                y1=node.y,
                x2=cx + dimensions.guide_length * math.cos(angle),
                y2=cy + dimensions.guide_length * math.sin(angle),
            )
        )
    return guides
