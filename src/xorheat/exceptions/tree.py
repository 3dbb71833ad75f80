"""Tree exceptions: depth preconditions and node lookups."""

from .base import XorHeatError


class TreeError(XorHeatError):
    """Base class for tree construction and lookup errors."""

    pass


class DepthOutOfRangeError(TreeError):
    """Raised when a tree is requested outside the supported depth range.

    Callers clamp depth before building, so this signals a programming error.
    """

    def __init__(self, depth: int, minimum: int, maximum: int):
        super().__init__(
            f"Tree depth {depth} outside [{minimum}, {maximum}]",
            details={"depth": str(depth), "min": str(minimum), "max": str(maximum)},
        )
        self.depth = depth


class UnknownNodeError(TreeError):
    """Raised when an id does not name a node of the current tree."""

    def __init__(self, node_id: str):
        super().__init__(f"No node with id {node_id!r}", details={"id": node_id})
        self.node_id = node_id
