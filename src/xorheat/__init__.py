"""
xorheat - Radial XOR-distance heat map of a complete binary tree

Lays out every node of a depth-d binary tree on concentric rings, and once a
leaf is selected shades each leaf's angular sector by its XOR distance from
the selection.
"""

__version__ = "0.1.0"

from .geometry import distance, resolve_sectors
from .heatmap import Scene, SceneOptions, Viewport, build_scene, project
from .state import InteractionState, StateSnapshot
from .tree import TreeNode, build_tree

__all__ = [
    "build_tree",  # Layered radial tree
    "TreeNode",
    "distance",
    "resolve_sectors",
    "project",
    "build_scene",  # Everything drawable for one state
    "Scene",
    "SceneOptions",
    "Viewport",
    "InteractionState",
    "StateSnapshot",
]
