"""Tests for the live viewer's HTTP API."""

import pytest

pytest.importorskip("starlette")
pytest.importorskip("httpx")

from starlette.testclient import TestClient  # noqa: E402

from xorheat.config import VizConfig  # noqa: E402
from xorheat.server.app import create_app  # noqa: E402
from xorheat.state import InteractionState  # noqa: E402


@pytest.fixture
def state():
    return InteractionState(depth=4)


@pytest.fixture
def client(state):
    return TestClient(create_app(state, VizConfig(width=800.0, height=600.0)))


class TestReadEndpoints:
    """Page, scene and SVG."""

    def test_homepage(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "xorheat" in response.text

    def test_scene(self, client):
        data = client.get("/api/scene").json()
        assert data["depth"] == 4
        assert data["center"] == {"x": 400.0, "y": 300.0}
        assert len(data["sectors"]) == 8
        assert len(data["nodes"]) == 15
        assert data["state"] == {"depth": 4, "selected": "", "hovered": "", "radius": 0}
        assert data["changed"] is False

    def test_svg(self, client):
        response = client.get("/api/svg")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")


class TestDepth:
    """POST /api/depth."""

    def test_delta(self, client, state):
        data = client.post("/api/depth", json={"delta": 1}).json()
        assert data["changed"] is True
        assert data["depth"] == 5
        assert state.depth == 5

    def test_value_is_clamped(self, client, state):
        client.post("/api/depth", json={"value": 40})
        assert state.depth == 16

    @pytest.mark.parametrize("body", [{}, {"delta": 2}, {"value": "deep"}, {"delta": True}, [1]])
    def test_bad_payload(self, client, body):
        response = client.post("/api/depth", json=body)
        assert response.status_code == 400
        assert "error" in response.json()

    def test_non_json_body(self, client):
        response = client.post("/api/depth", content=b"not json")
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "path, raw",
        [
            ("/api/depth", b'{"value": Infinity}'),
            ("/api/depth", b'{"delta": NaN}'),
            ("/api/radius", b'{"radius": -Infinity}'),
            ("/api/viewport", b'{"width": Infinity, "height": 10}'),
            ("/api/viewport", b'{"width": 10, "height": NaN}'),
        ],
    )
    def test_non_finite_numbers_rejected(self, client, state, path, raw):
        response = client.post(path, content=raw, headers={"content-type": "application/json"})
        assert response.status_code == 400
        assert "finite" in response.json()["error"]
        assert state.depth == 4


class TestSelectAndHover:
    """Selection and hover by node id."""

    def test_select_leaf(self, client, state):
        data = client.post("/api/select", json={"id": "0b000"}).json()
        assert data["changed"] is True
        assert state.selected == "0b000"
        distances = {s["id"]: s["distance"] for s in data["sectors"]}
        assert distances["0b111"] == "0x07"
        assert data["header"] == {"depth": 4, "selected_bits": "000", "selected_node_id": "0x00"}

    def test_select_internal_node_is_noop(self, client, state):
        data = client.post("/api/select", json={"id": "0b01"}).json()
        assert data["changed"] is False
        assert state.selected == ""

    def test_unknown_id(self, client):
        response = client.post("/api/select", json={"id": "0b0000"})
        assert response.status_code == 404
        assert "0b0000" in response.json()["error"]

    def test_missing_id(self, client):
        assert client.post("/api/select", json={}).status_code == 400

    def test_hover_and_unhover(self, client, state):
        data = client.post("/api/hover", json={"id": "0b10"}).json()
        assert data["tooltip"]["id"] == "0b10"
        assert data["tooltip"]["placement"] == "bottom"
        assert state.hovered.id == "0b10"
        data = client.delete("/api/hover").json()
        assert data["tooltip"] is None
        assert state.hovered is None

    def test_hover_unknown_id(self, client):
        assert client.post("/api/hover", json={"id": "nope"}).status_code == 404


class TestRadiusViewportReset:
    """Radius, viewport and reset."""

    def test_radius(self, client, state):
        client.post("/api/select", json={"id": "0b000"})
        data = client.post("/api/radius", json={"radius": 1}).json()
        assert state.radius == 1
        assert sum(s["in_radius"] for s in data["sectors"]) == 2

    def test_radius_requires_number(self, client):
        assert client.post("/api/radius", json={"radius": "2"}).status_code == 400

    def test_viewport(self, client):
        data = client.post("/api/viewport", json={"width": 1000, "height": 500}).json()
        assert data["changed"] is True
        assert data["center"] == {"x": 500.0, "y": 250.0}
        assert data["viewport"] == {"width": 1000.0, "height": 500.0}

    @pytest.mark.parametrize("body", [{"width": 0, "height": 10}, {"width": 10}])
    def test_bad_viewport(self, client, body):
        assert client.post("/api/viewport", json=body).status_code == 400

    def test_reset(self, client, state):
        client.post("/api/select", json={"id": "0b000"})
        data = client.post("/api/reset").json()
        assert data["depth"] == 1
        assert state.selected == ""

    def test_wrong_method(self, client):
        assert client.get("/api/depth").status_code == 405
