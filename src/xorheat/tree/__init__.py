"""Complete binary tree: node model, radial layout, construction and traversal."""

from .builder import build_tree, descendants, find_node, leaves, links
from .layout import DEFAULT_RING_FRACTION, RadialLayout
from .models import ID_PREFIX, MAX_DEPTH, MIN_DEPTH, TreeNode, clamp_depth

__all__ = [
    "TreeNode",
    "RadialLayout",
    "build_tree",
    "descendants",
    "leaves",
    "links",
    "find_node",
    "clamp_depth",
    "ID_PREFIX",
    "MIN_DEPTH",
    "MAX_DEPTH",
    "DEFAULT_RING_FRACTION",
]
