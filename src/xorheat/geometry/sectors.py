"""Per-leaf heat sectors around the tree centre.

Each leaf owns the wedge between two ancestors: on one side its own parent,
on the other the parent of the first ancestor whose last path bit differs
from the leaf's (the "opposite-side" ancestor). Both boundaries are lowest
common ancestors of adjacent leaves, so neighbouring sectors share their
boundary angle and the ring has no gaps or overlaps. Boundaries that land on
the root are rebuilt from the correction tables in :mod:`.angles`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..tree.models import TreeNode
from .angles import (
    FULL_TURN,
    QUARTER_TURN,
    Point,
    coincides,
    correct_left_boundary,
    correct_right_boundary,
    polar_angle,
    unwind,
)

logger = logging.getLogger(__name__)

# Fixed quadrants for a tree with exactly two leaves (left, right).
TWO_LEAF_SECTORS = ((-QUARTER_TURN, 0.0), (0.0, QUARTER_TURN))


@dataclass(frozen=True)
class SectorAngles:
    """Angular extent of one leaf's heat sector."""

    node_angle: float
    left_boundary: float
    right_boundary: float
    left_ancestor: str = ""
    right_ancestor: str = ""
    same_side_ancestor: str = ""

    @property
    def sweep(self) -> float:
        return self.right_boundary - self.left_boundary


def opposite_side_ancestor(node: TreeNode) -> TreeNode:
    """Walk up from the parent while ancestors stay on the leaf's side."""
    side = node.side
    ancestor = node.parent or node
    while ancestor.parent is not None and ancestor.id.endswith(side):
        ancestor = ancestor.parent
    return ancestor


def same_side_ancestor(node: TreeNode) -> TreeNode:
    """Walk up from the parent while ancestors sit on the other side."""
    side = node.side
    ancestor = node.parent or node
    while ancestor.parent is not None and not ancestor.id.endswith(side):
        ancestor = ancestor.parent
    return ancestor


def boundary_ancestors(node: TreeNode) -> tuple[TreeNode, TreeNode]:
    """The ``(left, right)`` ancestors whose angles bound ``node``'s sector."""
    opposite = opposite_side_ancestor(node)
    far = opposite.parent or opposite
    parent = node.parent or node
    if node.side == "1":
        return parent, far
    return far, parent


def resolve_leaf(node: TreeNode, center: Point) -> SectorAngles:
    """Sector of a single leaf in a tree with more than two leaves."""
    cx, cy = center
    left_parent, right_parent = boundary_ancestors(node)

    node_angle = polar_angle(node.x, node.y, cx, cy)
    left_angle = polar_angle(left_parent.x, left_parent.y, cx, cy)
    right_angle = polar_angle(right_parent.x, right_parent.y, cx, cy)

    left_on_center = coincides(left_parent.x, left_parent.y, cx, cy)
    right_on_center = coincides(right_parent.x, right_parent.y, cx, cy)
    if left_on_center:
        left_angle = QUARTER_TURN
    if right_on_center:
        right_angle = QUARTER_TURN

    if left_on_center:
        left_angle = correct_left_boundary(node_angle, right_angle)
    if right_on_center:
        right_angle = correct_right_boundary(node_angle, left_angle)

    left_angle, right_angle = unwind(node_angle, left_angle, right_angle)
    return SectorAngles(
        node_angle=node_angle,
        left_boundary=left_angle,
        right_boundary=right_angle,
        left_ancestor=left_parent.id,
        right_ancestor=right_parent.id,
        same_side_ancestor=same_side_ancestor(node).id,
    )


def resolve_sectors(leaves: Sequence[TreeNode], center: Point) -> dict[str, SectorAngles]:
    """Map every leaf id to its sector.

    Two leaves get the fixed upper quadrants; a lone root gets no sector.
    """
    cx, cy = center
    if len(leaves) < 2:
        return {}
    if len(leaves) == 2:
        return {
            leaf.id: SectorAngles(
                node_angle=polar_angle(leaf.x, leaf.y, cx, cy),
                left_boundary=start,
                right_boundary=end,
            )
            for leaf, (start, end) in zip(leaves, TWO_LEAF_SECTORS)
        }

    sectors = {leaf.id: resolve_leaf(leaf, center) for leaf in leaves}
    logger.debug("Resolved %d leaf sectors around (%.1f, %.1f)", len(sectors), cx, cy)
    return sectors


def sector_gaps(
    ordered: Sequence[SectorAngles], tolerance: float = 1e-9
) -> list[tuple[int, float]]:
    """Mismatches between each sector's right edge and the next one's left edge.

    ``ordered`` follows the ring (leaf order), wrapping from the last sector
    back to the first. Edges are compared modulo a full turn. Returns
    ``(index, gap)`` pairs; an empty list means the ring is seamless.
    """
    gaps = []
    count = len(ordered)
    if count < 3:
        return gaps
    for index, sector in enumerate(ordered):
        following = ordered[(index + 1) % count]
        gap = math.remainder(following.left_boundary - sector.right_boundary, FULL_TURN)
        if abs(gap) > tolerance:
            gaps.append((index, gap))
    return gaps
