"""Starlette ASGI application for the live viewer."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route

from ..config import VizConfig
from ..exceptions import UnknownNodeError
from ..render import render_svg
from ..state import InteractionState
from .serializers import scene_to_dict, state_to_dict
from .session import ViewerSession

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_TEMPLATE_DIR = _PKG_DIR / "templates"

# Cache template HTML at import time
_TEMPLATE_HTML: Optional[str] = None


def _get_html() -> str:
    """Load the viewer HTML template (cached after first read)."""
    global _TEMPLATE_HTML  # noqa: PLW0603
    if _TEMPLATE_HTML is None:
        _TEMPLATE_HTML = (_TEMPLATE_DIR / "index.html").read_text()
    return _TEMPLATE_HTML


class _BadRequest(Exception):
    pass


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _payload(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise _BadRequest("Request body must be JSON")
    if not isinstance(body, dict):
        raise _BadRequest("Request body must be a JSON object")
    return body


def _int_field(body: dict[str, Any], key: str) -> int:
    value = body.get(key)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _BadRequest(f"'{key}' must be a number")
    if not math.isfinite(value):
        raise _BadRequest(f"'{key}' must be finite")
    return int(value)


def _id_field(body: dict[str, Any]) -> str:
    value = body.get("id")
    if not isinstance(value, str) or not value:
        raise _BadRequest("'id' must be a non-empty string")
    return value


def create_app(state: InteractionState, config: Optional[VizConfig] = None) -> Starlette:
    """Build the Starlette application wired to *state*.

    Args:
        state: The interaction state driven by the browser
        config: Initial viewport and band sizes (defaults if omitted)
    """
    session = ViewerSession(state, config or VizConfig())

    def _current(changed: bool) -> JSONResponse:
        data = scene_to_dict(session.scene())
        data["changed"] = changed
        data["state"] = state_to_dict(state.snapshot)
        return JSONResponse(data)

    async def homepage(request: Request) -> HTMLResponse:
        return HTMLResponse(_get_html())

    async def api_scene(request: Request) -> JSONResponse:
        return _current(False)

    async def api_svg(request: Request) -> Response:
        return Response(render_svg(session.scene()), media_type="image/svg+xml")

    async def api_depth(request: Request) -> JSONResponse:
        """POST {"delta": +/-1} or {"value": n}."""
        try:
            body = await _payload(request)
            if "delta" in body:
                delta = _int_field(body, "delta")
                if delta not in (-1, 1):
                    raise _BadRequest("'delta' must be 1 or -1")
                changed = state.increase_depth() if delta > 0 else state.decrease_depth()
            elif "value" in body:
                changed = state.set_depth(_int_field(body, "value"))
            else:
                raise _BadRequest("Expected 'delta' or 'value'")
        except _BadRequest as exc:
            return _error(str(exc), 400)
        return _current(changed)

    async def api_select(request: Request) -> JSONResponse:
        try:
            node = session.node(_id_field(await _payload(request)))
        except _BadRequest as exc:
            return _error(str(exc), 400)
        except UnknownNodeError as exc:
            return _error(str(exc), 404)
        return _current(state.select(node))

    async def api_hover(request: Request) -> JSONResponse:
        if request.method == "DELETE":
            return _current(state.unhover())
        try:
            node = session.node(_id_field(await _payload(request)))
        except _BadRequest as exc:
            return _error(str(exc), 400)
        except UnknownNodeError as exc:
            return _error(str(exc), 404)
        return _current(state.hover(node))

    async def api_radius(request: Request) -> JSONResponse:
        try:
            radius = _int_field(await _payload(request), "radius")
        except _BadRequest as exc:
            return _error(str(exc), 400)
        return _current(state.set_radius(radius))

    async def api_viewport(request: Request) -> JSONResponse:
        try:
            body = await _payload(request)
            width = _int_field(body, "width")
            height = _int_field(body, "height")
            changed = session.resize(width, height)
        except _BadRequest as exc:
            return _error(str(exc), 400)
        except ValueError as exc:
            return _error(str(exc), 400)
        return _current(changed)

    async def api_reset(request: Request) -> JSONResponse:
        return _current(state.reset())

    routes = [
        Route("/", homepage),
        Route("/api/scene", api_scene),
        Route("/api/svg", api_svg),
        Route("/api/depth", api_depth, methods=["POST"]),
        Route("/api/select", api_select, methods=["POST"]),
        Route("/api/hover", api_hover, methods=["POST", "DELETE"]),
        Route("/api/radius", api_radius, methods=["POST"]),
        Route("/api/viewport", api_viewport, methods=["POST"]),
        Route("/api/reset", api_reset, methods=["POST"]),
    ]

    logger.debug("Viewer app created at depth %d", state.depth)
    return Starlette(routes=routes)
