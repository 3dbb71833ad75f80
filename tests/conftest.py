"""Shared test fixtures for xorheat."""

import os

import pytest

from xorheat.heatmap import Viewport
from xorheat.heatmap.scene import leaf_slice
from xorheat.state import InteractionState
from xorheat.tree import build_tree, descendants

WIDTH = 800.0
HEIGHT = 600.0


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def viewport():
    """Landscape 800x600 drawing area."""
    return Viewport(WIDTH, HEIGHT)


@pytest.fixture
def tree4():
    """Depth-4 tree (8 leaves) laid out in the default viewport."""
    return build_tree(4, WIDTH, HEIGHT)


@pytest.fixture
def leaves4(tree4):
    """Leaves of the depth-4 tree in ring order."""
    return leaf_slice(descendants(tree4), 4)


@pytest.fixture
def state():
    """Fresh interaction state at depth 4."""
    return InteractionState(depth=4)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty home and cwd and no XORHEAT_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    (tmp_path / "home").mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("XORHEAT_"):
            monkeypatch.delenv(key)
    return work
