"""Polar angles and the boundary-correction table for heat sectors.

Angles follow the d3-shape arc convention: 0 at 12 o'clock, increasing
clockwise in screen coordinates, so ``angle = pi/2 + atan2(dy, dx)`` and
values fall in ``(-pi/2, 3*pi/2]``.

A leaf whose boundary ancestor is the root has no usable angle on that side
(the root sits on the centre). The substitute boundary is picked from a
four-row table keyed on the *other* boundary rounded to the nearest integer
(2, 0, -2 or anything else). Both tables are kept as explicit data so each
row can be audited and tested on its own.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, NamedTuple

QUARTER_TURN = math.pi / 2
HALF_TURN = math.pi
FULL_TURN = 2 * math.pi

_COINCIDENCE_TOLERANCE = 1e-9


class Point(NamedTuple):
    x: float
    y: float


def polar_angle(x: float, y: float, center_x: float, center_y: float) -> float:
    """Angle of ``(x, y)`` around the centre, clockwise from 12 o'clock."""
    return QUARTER_TURN + math.atan2(y - center_y, x - center_x)


def coincides(x: float, y: float, center_x: float, center_y: float) -> bool:
    """True when the point is the centre itself (its angle is undefined)."""
    return math.hypot(x - center_x, y - center_y) < _COINCIDENCE_TOLERANCE


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class BoundaryCase(Enum):
    """Row selector for the substitution tables."""

    NEAR_TWO = 2
    NEAR_ZERO = 0
    NEAR_MINUS_TWO = -2
    OTHER = None

    @classmethod
    def of(cls, other_boundary: float) -> BoundaryCase:
        rounded = round_half_up(other_boundary)
        for case in (cls.NEAR_TWO, cls.NEAR_ZERO, cls.NEAR_MINUS_TWO):
            if rounded == case.value:
                return case
        return cls.OTHER


Substitute = Callable[[float, float], float]

# (node_angle, right_boundary) -> left boundary
LEFT_SUBSTITUTES: dict[BoundaryCase, Substitute] = {
    BoundaryCase.NEAR_TWO: lambda node, right: QUARTER_TURN,
    BoundaryCase.NEAR_ZERO: lambda node, right: 0.0,
    BoundaryCase.NEAR_MINUS_TWO: lambda node, right: (
        -FULL_TURN + node - (right - (-FULL_TURN + node))
    ),
    BoundaryCase.OTHER: lambda node, right: node - (right - node),
}

# (node_angle, left_boundary) -> right boundary
RIGHT_SUBSTITUTES: dict[BoundaryCase, Substitute] = {
    BoundaryCase.NEAR_TWO: lambda node, left: node + (node - left),
    BoundaryCase.NEAR_ZERO: lambda node, left: 0.0,
    BoundaryCase.NEAR_MINUS_TWO: lambda node, left: -QUARTER_TURN,
    BoundaryCase.OTHER: lambda node, left: HALF_TURN,
}


def correct_left_boundary(node_angle: float, right_boundary: float) -> float:
    """Substitute for a left boundary whose ancestor sits on the centre."""
    return LEFT_SUBSTITUTES[BoundaryCase.of(right_boundary)](node_angle, right_boundary)


def correct_right_boundary(node_angle: float, left_boundary: float) -> float:
    """Substitute for a right boundary whose ancestor sits on the centre."""
    return RIGHT_SUBSTITUTES[BoundaryCase.of(left_boundary)](node_angle, left_boundary)


def unwind(
    node_angle: float, left_boundary: float, right_boundary: float
) -> tuple[float, float]:
    """Restore a clockwise sweep from left to right.

    A left boundary past the right one is moved back a full turn. A right
    boundary left at exactly half a turn is then mirrored around the node.
    """
    if left_boundary > right_boundary:
        left_boundary -= FULL_TURN
    if right_boundary == HALF_TURN:
        right_boundary = node_angle + (node_angle - left_boundary)
    return left_boundary, right_boundary
