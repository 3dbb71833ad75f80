"""Default drawing collaborators."""

from .svg import arc_path, render_svg

__all__ = ["arc_path", "render_svg"]
