"""Tree node model shared by the builder, the sector resolver and the projector.

Ids are bit strings: the ``0b`` prefix followed by one bit per edge on the
path from the root (``0`` = left, ``1`` = right). The root's id is the bare
prefix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

ID_PREFIX = "0b"
MIN_DEPTH = 1
MAX_DEPTH = 16


def clamp_depth(depth: int) -> int:
    """Clamp a requested depth into ``[MIN_DEPTH, MAX_DEPTH]``."""
    return max(MIN_DEPTH, min(MAX_DEPTH, int(depth)))


@dataclass(eq=False)
class TreeNode:
    """One node of a complete binary tree.

    ``parent`` is a non-owning back reference; ``children`` is empty for a
    leaf and ``[left, right]`` otherwise. ``angle`` is the layout angle
    measured clockwise from 12 o'clock.
    """

    id: str
    depth: int
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    parent: Optional[TreeNode] = field(default=None, repr=False)
    children: list[TreeNode] = field(default_factory=list, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def payload(self) -> str:
        """Path bits after the id prefix."""
        return self.id[len(ID_PREFIX):]

    @property
    def side(self) -> Optional[str]:
        """Last path bit, or ``None`` for the root."""
        return self.payload[-1] if self.payload else None

    @property
    def left(self) -> Optional[TreeNode]:
        return self.children[0] if self.children else None

    @property
    def right(self) -> Optional[TreeNode]:
        return self.children[1] if self.children else None

    def ancestors(self) -> Iterator[TreeNode]:
        """Yield the parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent
