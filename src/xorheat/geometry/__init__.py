"""Leaf geometry: XOR distance, polar angles and heat sectors."""

from .angles import (
    FULL_TURN,
    HALF_TURN,
    QUARTER_TURN,
    BoundaryCase,
    Point,
    correct_left_boundary,
    correct_right_boundary,
    polar_angle,
    unwind,
)
from .distance import ZERO_DISTANCE, distance, distance_value, node_label
from .sectors import (
    TWO_LEAF_SECTORS,
    SectorAngles,
    boundary_ancestors,
    opposite_side_ancestor,
    resolve_leaf,
    resolve_sectors,
    same_side_ancestor,
    sector_gaps,
)

__all__ = [
    "distance",
    "distance_value",
    "node_label",
    "ZERO_DISTANCE",
    "Point",
    "polar_angle",
    "BoundaryCase",
    "correct_left_boundary",
    "correct_right_boundary",
    "unwind",
    "QUARTER_TURN",
    "HALF_TURN",
    "FULL_TURN",
    "SectorAngles",
    "TWO_LEAF_SECTORS",
    "resolve_sectors",
    "resolve_leaf",
    "boundary_ancestors",
    "opposite_side_ancestor",
    "same_side_ancestor",
    "sector_gaps",
]
