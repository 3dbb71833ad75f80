"""Thread-safe viewing session shared by the request handlers."""

from __future__ import annotations

import logging
import threading

from ..config import VizConfig
from ..heatmap import Scene, SceneOptions, Viewport, build_scene
from ..state import InteractionState
from ..tree import build_tree, find_node
from ..tree.models import TreeNode

logger = logging.getLogger(__name__)


class ViewerSession:
    """Pairs the :class:`InteractionState` with the browser's viewport.

    Starlette may run sync work on worker threads, so the viewport is kept
    under a lock; the interaction state guards itself.
    """

    def __init__(self, state: InteractionState, config: VizConfig) -> None:
        self.state = state
        self.options: SceneOptions = config.scene_options
        self._lock = threading.RLock()
        self._viewport = config.viewport

    @property
    def viewport(self) -> Viewport:
        with self._lock:
            return self._viewport

    def resize(self, width: float, height: float) -> bool:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        with self._lock:
            updated = Viewport(float(width), float(height))
            if updated == self._viewport:
                return False
            self._viewport = updated
        logger.debug("Viewport -> %sx%s", width, height)
        return True

    def node(self, node_id: str) -> TreeNode:
        """Look up ``node_id`` in the current tree.

        Raises:
            UnknownNodeError: If the id is not part of the tree
        """
        viewport = self.viewport
        root = build_tree(
            self.state.depth, viewport.width, viewport.height, self.options.ring_fraction
        )
        return find_node(root, node_id)

    def scene(self) -> Scene:
        return build_scene(self.state.snapshot, self.viewport, self.options)
