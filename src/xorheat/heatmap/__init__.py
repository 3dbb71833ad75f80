"""Heat-map projection: colours, per-leaf descriptors and scene assembly."""

from .colors import REDS, SequentialColorScale, default_color_scale, node_fill
from .models import (
    Edge,
    GuideLine,
    Header,
    LeafRenderDescriptor,
    NodeMarker,
    RingDimensions,
    Tooltip,
)
from .projector import distance_domain, format_label, guide_lines, label_font_size, project
from .scene import Scene, SceneOptions, Viewport, build_scene

__all__ = [
    "SequentialColorScale",
    "default_color_scale",
    "node_fill",
    "REDS",
    "RingDimensions",
    "LeafRenderDescriptor",
    "GuideLine",
    "Edge",
    "NodeMarker",
    "Header",
    "Tooltip",
    "project",
    "guide_lines",
    "format_label",
    "label_font_size",
    "distance_domain",
    "Scene",
    "SceneOptions",
    "Viewport",
    "build_scene",
]
