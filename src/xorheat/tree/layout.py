"""Radial layout for complete binary trees.

The root sits at the viewport centre and each level is a concentric ring.
Leaves are spaced evenly, clockwise, around the full circle starting at
6 o'clock, so the left subtree fills the left half and the right subtree the
right half. Every internal node sits at the angular midpoint of its leaves,
which puts it exactly on the boundary between its two subtrees.

Angles use the clockwise-from-12-o'clock convention shared with the sector
resolver: ``angle = pi/2 + atan2(dy, dx)`` in screen coordinates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_RING_FRACTION = 0.75
RING_START = math.pi

# Four-leaf rings are tilted so neither root child lies on the horizontal axis.
FOUR_LEAF_TILT = math.pi / 16


@dataclass(frozen=True)
class RadialLayout:
    """Maps ``(level, leaf span)`` to planar coordinates for one tree depth."""

    depth: int
    center_x: float
    center_y: float
    leaf_radius: float
    start_angle: float = RING_START

    @classmethod
    def for_viewport(
        cls,
        depth: int,
        width: float,
        height: float,
        ring_fraction: float = DEFAULT_RING_FRACTION,
    ) -> RadialLayout:
        leaf_count = 2 ** (depth - 1)
        start = RING_START - FOUR_LEAF_TILT if leaf_count == 4 else RING_START
        return cls(
            depth=depth,
            center_x=width / 2,
            center_y=height / 2,
            leaf_radius=min(width, height) / 2 * ring_fraction,
            start_angle=start,
        )

    @property
    def leaf_count(self) -> int:
        return 2 ** (self.depth - 1)

    @property
    def step(self) -> float:
        """Angular spacing between neighbouring leaves."""
        return 2 * math.pi / self.leaf_count

    def angle_for(self, first_leaf: int, span: int) -> float:
        """Midpoint angle of the ``span`` leaves starting at ``first_leaf``."""
        return self.start_angle + (first_leaf + span / 2) * self.step

    def radius_for(self, level: int) -> float:
        if self.depth == 1:
            return 0.0
        return self.leaf_radius * level / (self.depth - 1)

    def position(self, level: int, angle: float) -> tuple[float, float]:
        radius = self.radius_for(level)
        if radius == 0.0:
            return self.center_x, self.center_y
        return (
            self.center_x + radius * math.sin(angle),
            self.center_y - radius * math.cos(angle),
        )
