"""Sequential colour scale for heat values.

The default ramp is ColorBrewer's 9-class "Reds", interpolated linearly in
RGB with numpy. Any callable with the ``color_of(value, domain)`` signature
can replace it.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

ColorFunction = Callable[[float, tuple[float, float]], str]

REDS = (
    "#fff5f0",
    "#fee0d2",
    "#fcbba1",
    "#fc9272",
    "#fb6a4a",
    "#ef3b2c",
    "#cb181d",
    "#a50f15",
    "#67000d",
)

NO_FILL = "none"


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


class SequentialColorScale:
    """Map a value in ``domain`` onto an evenly spaced colour ramp."""

    def __init__(self, ramp: Sequence[str] = REDS):
        if len(ramp) < 2:
            raise ValueError("A colour ramp needs at least two stops")
        self.ramp = tuple(ramp)
        self._stops = np.linspace(0.0, 1.0, len(ramp))
        self._channels = np.array([_hex_to_rgb(c) for c in ramp], dtype=float).T

    def __call__(self, value: float, domain: tuple[float, float]) -> str:
        low, high = domain
        if high == low:
            t = 0.0
        else:
            t = float(np.clip((value - low) / (high - low), 0.0, 1.0))
        r, g, b = (int(round(float(np.interp(t, self._stops, channel)))) for channel in self._channels)
        return f"#{r:02x}{g:02x}{b:02x}"


default_color_scale = SequentialColorScale()


def node_fill(node_id: str) -> str:
    """Binary fill for a node marker: left children green, right children blue."""
    return "green" if node_id.endswith("0") else "blue"
