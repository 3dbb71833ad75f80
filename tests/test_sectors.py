"""Tests for per-leaf heat sectors."""

import math

import pytest

from xorheat.geometry import (
    TWO_LEAF_SECTORS,
    boundary_ancestors,
    opposite_side_ancestor,
    resolve_sectors,
    same_side_ancestor,
    sector_gaps,
)
from xorheat.geometry.angles import FULL_TURN, QUARTER_TURN
from xorheat.heatmap import Viewport
from xorheat.heatmap.scene import leaf_slice
from xorheat.tree import MAX_DEPTH, build_tree, descendants, find_node

WIDTH, HEIGHT = 800.0, 600.0
CENTER = Viewport(WIDTH, HEIGHT).center


def _ring(depth, width=WIDTH, height=HEIGHT):
    leaf_nodes = leaf_slice(descendants(build_tree(depth, width, height)), depth)
    sectors = resolve_sectors(leaf_nodes, Viewport(width, height).center)
    return leaf_nodes, [sectors[leaf.id] for leaf in leaf_nodes]


class TestAncestorWalk:
    """Opposite-side and same-side ancestors."""

    def test_inner_right_child(self, tree4):
        leaf = find_node(tree4, "0b001")
        assert opposite_side_ancestor(leaf).id == "0b00"
        assert same_side_ancestor(leaf).id == "0b"
        assert [n.id for n in boundary_ancestors(leaf)] == ["0b00", "0b0"]

    def test_outermost_left_leaf_reaches_root(self, tree4):
        leaf = find_node(tree4, "0b000")
        assert opposite_side_ancestor(leaf).id == "0b"
        assert [n.id for n in boundary_ancestors(leaf)] == ["0b", "0b00"]

    def test_outermost_right_leaf_reaches_root(self, tree4):
        leaf = find_node(tree4, "0b111")
        assert [n.id for n in boundary_ancestors(leaf)] == ["0b11", "0b"]

    def test_boundaries_are_common_ancestors_of_neighbours(self, leaves4):
        # the right boundary of one leaf is the left boundary of the next
        pairs = [boundary_ancestors(leaf) for leaf in leaves4]
        for (_, right), (left, _) in zip(pairs, pairs[1:]):
            assert right is left


class TestContiguity:
    """Sectors tile the whole ring with no gaps or overlaps."""

    @pytest.mark.parametrize("depth", range(3, 11))
    def test_ring_is_seamless(self, depth):
        _, ordered = _ring(depth)
        assert sector_gaps(ordered) == []

    @pytest.mark.parametrize("depth", range(3, 11))
    def test_sweeps_positive_and_cover_one_turn(self, depth):
        _, ordered = _ring(depth)
        sweeps = [sector.sweep for sector in ordered]
        assert all(sweep > 0 for sweep in sweeps)
        assert math.fsum(sweeps) == pytest.approx(FULL_TURN)

    @pytest.mark.parametrize("depth", range(3, 8))
    def test_left_not_after_right(self, depth):
        _, ordered = _ring(depth)
        assert all(s.left_boundary <= s.right_boundary for s in ordered)

    @pytest.mark.parametrize("depth", range(3, 8))
    def test_node_inside_its_sector(self, depth):
        _, ordered = _ring(depth)
        for sector in ordered:
            offset = (sector.node_angle - sector.left_boundary) % FULL_TURN
            assert 0 < offset < sector.sweep

    @pytest.mark.parametrize("width, height", [(300.0, 900.0), (1024.0, 768.0), (50.0, 50.0)])
    def test_any_viewport(self, width, height):
        for depth in (3, 4, 6):
            _, ordered = _ring(depth, width, height)
            assert sector_gaps(ordered) == []

    @pytest.mark.slow
    @pytest.mark.parametrize("depth", range(11, MAX_DEPTH + 1))
    def test_deep_rings_are_seamless(self, depth):
        _, ordered = _ring(depth)
        assert sector_gaps(ordered, tolerance=1e-7) == []


class TestSmallTrees:
    """Two leaves use fixed quadrants; a lone root has no sectors."""

    def test_two_leaf_quadrants(self):
        leaf_nodes, ordered = _ring(2)
        assert [leaf.id for leaf in leaf_nodes] == ["0b0", "0b1"]
        assert (ordered[0].left_boundary, ordered[0].right_boundary) == (-QUARTER_TURN, 0.0)
        assert (ordered[1].left_boundary, ordered[1].right_boundary) == (0.0, QUARTER_TURN)
        assert TWO_LEAF_SECTORS == ((-QUARTER_TURN, 0.0), (0.0, QUARTER_TURN))

    def test_single_node_has_no_sectors(self):
        root = build_tree(1, WIDTH, HEIGHT)
        assert resolve_sectors([root], CENTER) == {}

    def test_empty_input(self):
        assert resolve_sectors([], CENTER) == {}

    def test_gap_check_ignores_tiny_rings(self):
        _, ordered = _ring(2)
        assert sector_gaps(ordered) == []


class TestDeterminism:
    """Pure function of leaves and centre."""

    def test_recompute_is_identical(self, leaves4):
        assert resolve_sectors(leaves4, CENTER) == resolve_sectors(leaves4, CENTER)

    def test_records_boundary_ancestors(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        assert sectors["0b001"].left_ancestor == "0b00"
        assert sectors["0b001"].right_ancestor == "0b0"
