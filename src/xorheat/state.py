"""Interaction state machine: depth, selected leaf, hovered node, radius.

One :class:`InteractionState` lives for a whole viewing session and is passed
explicitly to whatever drives it (CLI, server). It is mutated only through
the transition methods, each of which returns whether anything changed and
notifies subscribers with an immutable :class:`StateSnapshot`.

A selection only survives a depth change if it still names a leaf of the new
tree; otherwise it is cleared.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .tree.models import ID_PREFIX, TreeNode, clamp_depth

logger = logging.getLogger(__name__)

MIN_RADIUS = 0
MAX_RADIUS = 16


def clamp_radius(radius: int) -> int:
    return max(MIN_RADIUS, min(MAX_RADIUS, int(radius)))


def is_leaf_id(node_id: str, depth: int) -> bool:
    """True when ``node_id`` names a leaf of a tree with ``depth`` levels."""
    payload = node_id[len(ID_PREFIX):]
    return (
        node_id.startswith(ID_PREFIX)
        and len(payload) == depth - 1
        and set(payload) <= {"0", "1"}
    )


@dataclass(frozen=True)
class Hover:
    id: str
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class StateSnapshot:
    depth: int = 1
    selected: str = ""
    hovered: Optional[Hover] = None
    radius: int = 0

    @property
    def hovered_id(self) -> str:
        return self.hovered.id if self.hovered else ""


Listener = Callable[[StateSnapshot], Any]


class InteractionState:
    """Owns the session's :class:`StateSnapshot` and its transitions.

    Thread-safe: transitions run under a re-entrant lock; listeners are
    called with the new snapshot after the lock is released.
    """

    def __init__(self, depth: int = 1, radius: int = 0) -> None:
        self._lock = threading.RLock()
        self._snapshot = StateSnapshot(depth=clamp_depth(depth), radius=clamp_radius(radius))
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> StateSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def depth(self) -> int:
        return self.snapshot.depth

    @property
    def selected(self) -> str:
        return self.snapshot.selected

    @property
    def hovered(self) -> Optional[Hover]:
        return self.snapshot.hovered

    @property
    def radius(self) -> int:
        return self.snapshot.radius

    # ── Depth ───────────────────────────────────────────────────────────

    def increase_depth(self) -> bool:
        with self._lock:
            updated = self._move_depth(self._snapshot.depth + 1)
        return self._notify(updated)

    def decrease_depth(self) -> bool:
        with self._lock:
            updated = self._move_depth(self._snapshot.depth - 1)
        return self._notify(updated)

    def set_depth(self, depth: int) -> bool:
        """Move to ``clamp(depth, 1, 16)``; clears a selection the new tree lacks."""
        with self._lock:
            updated = self._move_depth(depth)
        return self._notify(updated)

    def _move_depth(self, depth: int) -> Optional[StateSnapshot]:
        current = self._snapshot
        new_depth = clamp_depth(depth)
        if new_depth == current.depth:
            return None
        selected = current.selected
        if selected and not is_leaf_id(selected, new_depth):
            logger.debug("Clearing selection %s at depth %d", selected, new_depth)
            selected = ""
        return self._replace(depth=new_depth, selected=selected, hovered=None)

    # ── Selection and hover ─────────────────────────────────────────────

    def select(self, node: TreeNode) -> bool:
        """Select ``node`` if it is a leaf at the current depth; else no-op."""
        with self._lock:
            if node.depth != self._snapshot.depth - 1:
                return False
            updated = self._replace(selected=node.id)
        return self._notify(updated)

    def clear_selection(self) -> bool:
        with self._lock:
            updated = self._replace(selected="")
        return self._notify(updated)

    def hover(self, node: TreeNode) -> bool:
        with self._lock:
            updated = self._replace(hovered=Hover(id=node.id, x=node.x, y=node.y))
        return self._notify(updated)

    def unhover(self) -> bool:
        with self._lock:
            updated = self._replace(hovered=None)
        return self._notify(updated)

    def set_radius(self, radius: int) -> bool:
        with self._lock:
            updated = self._replace(radius=clamp_radius(radius))
        return self._notify(updated)

    def reset(self) -> bool:
        with self._lock:
            updated = self._replace(depth=1, selected="", hovered=None, radius=0)
        return self._notify(updated)

    # ── Observers ───────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(snapshot)`` after every effective transition."""
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    def _replace(self, **changes: Any) -> Optional[StateSnapshot]:
        """Install the changed snapshot; caller holds the lock. None if unchanged."""
        updated = dataclasses.replace(self._snapshot, **changes)
        if updated == self._snapshot:
            return None
        self._snapshot = updated
        return updated

    def _notify(self, updated: Optional[StateSnapshot]) -> bool:
        """Notify listeners outside the lock; returns whether anything changed."""
        if updated is None:
            return False
        with self._lock:
            listeners = list(self._listeners)
        logger.debug("State -> %s", updated)
        for listener in listeners:
            try:
                listener(updated)
            except Exception as exc:
                logger.warning("State listener %r failed: %s", listener, exc)
        return True
