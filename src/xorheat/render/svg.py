"""SVG output for a :class:`~xorheat.heatmap.scene.Scene`.

``arc_path`` follows the d3-shape ``arc()`` conventions (0 at 12 o'clock,
clockwise, coordinates relative to the arc centre) so descriptors can be fed
to either this module or a browser-side d3 renderer unchanged.
"""

from __future__ import annotations

import math
from xml.sax.saxutils import escape, quoteattr

from ..heatmap.colors import NO_FILL
from ..heatmap.scene import Scene

_EPSILON = 1e-12
TAU = 2 * math.pi
NODE_MARKER_RADIUS = 4.0


def _num(value: float) -> str:
    text = f"{round(value, 3) + 0.0:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _point(radius: float, angle: float) -> str:
    return f"{_num(radius * math.sin(angle))},{_num(-radius * math.cos(angle))}"


def arc_path(inner_radius: float, outer_radius: float, start_angle: float, end_angle: float) -> str:
    """SVG path data for an annular sector; empty for a zero sweep."""
    inner, outer = sorted((max(inner_radius, 0.0), max(outer_radius, 0.0)))
    sweep = abs(end_angle - start_angle)
    if sweep < _EPSILON or outer < _EPSILON:
        return ""

    r1 = _num(outer)
    if sweep >= TAU - _EPSILON:
        path = f"M0,{_num(-outer)}A{r1},{r1},0,1,1,0,{r1}A{r1},{r1},0,1,1,0,{_num(-outer)}"
        if inner > _EPSILON:
            r0 = _num(inner)
            path += f"M0,{_num(-inner)}A{r0},{r0},0,1,0,0,{r0}A{r0},{r0},0,1,0,0,{_num(-inner)}"
        return path + "Z"

    clockwise = 1 if end_angle > start_angle else 0
    large = 1 if sweep > math.pi else 0
    path = (
        f"M{_point(outer, start_angle)}"
        f"A{r1},{r1},0,{large},{clockwise},{_point(outer, end_angle)}"
    )
    if inner > _EPSILON:
        r0 = _num(inner)
        path += (
            f"L{_point(inner, end_angle)}"
            f"A{r0},{r0},0,{large},{1 - clockwise},{_point(inner, start_angle)}"
        )
    else:
        path += "L0,0"
    return path + "Z"


def _arc_element(d: str, fill: str, opacity: float, node_id: str, extra: str = "") -> str:
    if not d:
        return ""
    return (
        f'<path d="{d}" fill={quoteattr(fill)} opacity="{opacity}" '
        f"data-id={quoteattr(node_id)}{extra}/>"
    )


def render_svg(scene: Scene) -> str:
    """Render ``scene`` as a standalone SVG document."""
    width, height = scene.viewport.width, scene.viewport.height
    cx, cy = scene.center
    dims = scene.dimensions
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(width)}" '
        f'height="{_num(height)}" viewBox="0 0 {_num(width)} {_num(height)}">'
    ]

    parts.append('<g class="edges" stroke="#999">')
    for edge in scene.edges:
        parts.append(
            f'<line x1="{_num(edge.x1)}" y1="{_num(edge.y1)}" '
            f'x2="{_num(edge.x2)}" y2="{_num(edge.y2)}"/>'
        )
    parts.append("</g>")

    parts.append('<g class="nodes">')
    for node in scene.nodes:
        classes = ["node"]
        if node.is_leaf:
            classes.append("leaf")
        if node.selected:
            classes.append("selected")
        if node.hovered:
            classes.append("hovered")
        parts.append(
            f'<circle cx="{_num(node.x)}" cy="{_num(node.y)}" r="{_num(NODE_MARKER_RADIUS)}" '
            f'fill="{node.fill}" class="{" ".join(classes)}" data-id={quoteattr(node.id)}/>'
        )
    parts.append("</g>")

    parts.append('<g class="guides" stroke="black">')
    for guide in scene.guides:
        parts.append(
            f'<line x1="{_num(guide.x1)}" y1="{_num(guide.y1)}" '
            f'x2="{_num(guide.x2)}" y2="{_num(guide.y2)}"/>'
        )
    parts.append("</g>")

    parts.append(f'<g class="sectors" transform="translate({_num(cx)},{_num(cy)})">')
    for sector in scene.sectors:
        start, end = sector.start_angle, sector.end_angle
        label_id = f"{sector.id}Arc"
        parts.append(
            _arc_element(
                arc_path(dims.heat_inner_radius, dims.heat_outer_radius, start, end),
                sector.heat_color,
                0.75,
                sector.id,
                ' class="heat"',
            )
        )
        parts.append(
            _arc_element(
                arc_path(dims.node_inner_radius, dims.node_outer_radius, start, end),
                sector.node_color,
                1,
                sector.id,
                ' class="band"',
            )
        )
        parts.append(
            _arc_element(
                arc_path(dims.node_outer_radius, dims.highlight_outer_radius, start, end),
                "yellow" if sector.in_radius else NO_FILL,
                1,
                sector.id,
                ' class="highlight"',
            )
        )
        label_arc = arc_path(
            dims.node_outer_radius, dims.highlight_outer_radius, start, sector.label_end_angle
        )
        parts.append(f'<path id={quoteattr(label_id)} d="{label_arc}" fill="none"/>')
        parts.append(
            f'<text><textPath href="#{escape(label_id)}" font-size="{_num(sector.font_size)}rem">'
            f"{escape(sector.label)}</textPath></text>"
        )
    parts.append("</g>")

    parts.append("</svg>")
    return "".join(part for part in parts if part)
