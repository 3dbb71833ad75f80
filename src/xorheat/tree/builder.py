"""Complete binary tree construction and traversal.

``build_tree`` is a pure function of its arguments and memoised on them:
callers receive a shared snapshot and must treat it as read-only. A new depth
or viewport produces a brand-new tree; nothing is patched in place.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from functools import lru_cache
from typing import Iterator

from ..exceptions import DepthOutOfRangeError, UnknownNodeError
from .layout import DEFAULT_RING_FRACTION, RadialLayout
from .models import ID_PREFIX, MAX_DEPTH, MIN_DEPTH, TreeNode

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def build_tree(
    depth: int,
    width: float,
    height: float,
    ring_fraction: float = DEFAULT_RING_FRACTION,
) -> TreeNode:
    """Build a complete binary tree with ``depth`` levels and return its root.

    Args:
        depth: Number of levels, root included (1 = a lone root)
        width: Viewport width used by the layout
        height: Viewport height used by the layout
        ring_fraction: Leaf ring radius as a fraction of half the short side

    Raises:
        DepthOutOfRangeError: If depth is outside [MIN_DEPTH, MAX_DEPTH]
    """
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise DepthOutOfRangeError(depth, MIN_DEPTH, MAX_DEPTH)

    layout = RadialLayout.for_viewport(depth, width, height, ring_fraction)
    root = _grow(layout, ID_PREFIX, 0, 0, None)
    logger.debug(
        "Built tree depth=%d (%d nodes) for %sx%s viewport",
        depth,
        2**depth - 1,
        width,
        height,
    )
    return root


def _grow(
    layout: RadialLayout,
    node_id: str,
    level: int,
    first_leaf: int,
    parent: TreeNode | None,
) -> TreeNode:
    span = 2 ** (layout.depth - 1 - level)
    angle = layout.angle_for(first_leaf, span)
    x, y = layout.position(level, angle)
    node = TreeNode(
        id=node_id,
        depth=level,
        x=x,
        y=y,
        angle=angle % (2 * math.pi),
        parent=parent,
    )
    if level < layout.depth - 1:
        half = span // 2
        node.children = [
            _grow(layout, node_id + "0", level + 1, first_leaf, node),
            _grow(layout, node_id + "1", level + 1, first_leaf + half, node),
        ]
    return node


def descendants(root: TreeNode) -> list[TreeNode]:
    """All nodes in breadth-first order: root, then each level left to right."""
    ordered: list[TreeNode] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        ordered.append(node)
        queue.extend(node.children)
    return ordered


def leaves(root: TreeNode) -> list[TreeNode]:
    """Leaves in left-to-right (clockwise) order."""
    return [node for node in descendants(root) if node.is_leaf]


def links(root: TreeNode) -> Iterator[tuple[TreeNode, TreeNode]]:
    """Yield ``(parent, child)`` for every edge, breadth-first."""
    for node in descendants(root):
        for child in node.children:
            yield node, child


def find_node(root: TreeNode, node_id: str) -> TreeNode:
    """Follow ``node_id``'s path bits down from ``root``.

    Raises:
        UnknownNodeError: If the id is malformed or deeper than the tree
    """
    if not node_id.startswith(ID_PREFIX):
        raise UnknownNodeError(node_id)
    node = root
    for bit in node_id[len(ID_PREFIX):]:
        if bit not in "01" or node.is_leaf:
            raise UnknownNodeError(node_id)
        node = node.children[int(bit)]
    return node
