"""Tests for heat-map projection of leaves onto render descriptors."""

import math

import pytest

from xorheat.geometry import resolve_sectors
from xorheat.heatmap import (
    RingDimensions,
    Viewport,
    distance_domain,
    format_label,
    guide_lines,
    label_font_size,
    project,
)
from xorheat.heatmap.projector import radius_threshold
from xorheat.heatmap.scene import leaf_slice
from xorheat.tree import build_tree, descendants

CENTER = Viewport(800.0, 600.0).center


def _recording_color():
    calls = []

    def color_of(value, domain):
        calls.append((value, domain))
        return f"c{value}"

    return color_of, calls


class TestLabels:
    """Decimal labels, bracketed and padded unless hovered."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, "|__0__"), (7, "|__7__"), (12, "|_12__"), (123, "|_123_"), (4095, "|_4095_")],
    )
    def test_format_label(self, value, expected):
        assert format_label(value) == expected

    def test_hovered_label_is_plain(self):
        assert format_label(42, hovered=True) == "42"

    @pytest.mark.parametrize(
        "depth, hovered, expected",
        [(2, False, 7.0), (3, False, 7.0), (4, False, 4.0), (5, False, 2.0), (7, False, 1.0), (9, True, 7.0)],
    )
    def test_font_size(self, depth, hovered, expected):
        assert label_font_size(depth, hovered) == pytest.approx(expected)


class TestDomainAndThreshold:
    """Colour domain and in-radius threshold."""

    @pytest.mark.parametrize("depth, high", [(1, 0.0), (2, 1.0), (4, 7.0), (16, 32767.0)])
    def test_distance_domain(self, depth, high):
        assert distance_domain(depth) == (0.0, high)

    @pytest.mark.parametrize("radius, threshold", [(0, 0), (1, 1), (3, 7), (16, 65535)])
    def test_radius_threshold(self, radius, threshold):
        assert radius_threshold(radius) == threshold


class TestProject:
    """One descriptor per leaf, driven by the selection."""

    def test_one_descriptor_per_leaf(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = project(leaves4, "0b000", sectors, CENTER, 4)
        assert [d.id for d in descriptors] == [leaf.id for leaf in leaves4]

    def test_distances_from_selection(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = {d.id: d for d in project(leaves4, "0b000", sectors, CENTER, 4)}
        assert descriptors["0b000"].distance == "0x00"
        assert descriptors["0b111"].distance == "0x07"
        assert descriptors["0b111"].value == 7
        assert descriptors["0b101"].label == "|__5__"

    def test_sector_angles_copied(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        for descriptor in project(leaves4, "0b010", sectors, CENTER, 4):
            assert descriptor.start_angle == sectors[descriptor.id].left_boundary
            assert descriptor.end_angle == sectors[descriptor.id].right_boundary
            assert descriptor.label_end_angle == descriptor.end_angle

    def test_color_function_receives_value_and_domain(self, leaves4):
        color_of, calls = _recording_color()
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = project(leaves4, "0b000", sectors, CENTER, 4, color_of=color_of)
        assert calls == [(i, (0.0, 7.0)) for i in range(8)]
        assert descriptors[3].heat_color == "c3"

    def test_node_color_by_parity(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        for descriptor in project(leaves4, "", sectors, CENTER, 4):
            expected = "green" if descriptor.id.endswith("0") else "blue"
            assert descriptor.node_color == expected

    def test_in_radius(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = project(leaves4, "0b000", sectors, CENTER, 4, radius=2)
        inside = {d.id for d in descriptors if d.in_radius}
        assert inside == {"0b000", "0b001", "0b010", "0b011"}

    def test_radius_zero_keeps_only_selection(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = project(leaves4, "0b110", sectors, CENTER, 4, radius=0)
        assert [d.id for d in descriptors if d.in_radius] == ["0b110"]

    def test_no_selection_is_all_zero(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = project(leaves4, "", sectors, CENTER, 4)
        assert {d.distance for d in descriptors} == {"0x00"}

    def test_hovered_leaf(self, leaves4):
        sectors = resolve_sectors(leaves4, CENTER)
        descriptors = {
            d.id: d for d in project(leaves4, "0b000", sectors, CENTER, 4, hovered_id="0b011")
        }
        hovered = descriptors["0b011"]
        assert hovered.hovered
        assert hovered.label == "3"
        assert hovered.font_size == 7.0
        assert hovered.label_end_angle == pytest.approx(hovered.end_angle + math.pi)
        assert not descriptors["0b010"].hovered

    def test_two_leaves_use_synthetic_distance(self):
        depth = 2
        leaf_nodes = leaf_slice(descendants(build_tree(depth, 800.0, 600.0)), depth)
        sectors = resolve_sectors(leaf_nodes, CENTER)
        descriptors = project(leaf_nodes, "0b1", sectors, CENTER, depth)
        assert [(d.id, d.distance) for d in descriptors] == [("0b0", "0x01"), ("0b1", "0x00")]

    def test_single_node_yields_nothing(self):
        root = build_tree(1, 800.0, 600.0)
        assert project([root], "", resolve_sectors([root], CENTER), CENTER, 1) == []


class TestGuideLines:
    """Radial guides for internal, non-root nodes."""

    def test_one_guide_per_internal_node(self, tree4):
        nodes = descendants(tree4)
        guides = guide_lines(nodes, CENTER, RingDimensions(leaf_distance=225.0))
        assert [g.id for g in guides] == ["0b0", "0b1", "0b00", "0b01", "0b10", "0b11"]

    def test_guides_run_out_to_guide_length(self, tree4):
        dims = RingDimensions(leaf_distance=225.0)
        for guide in guide_lines(descendants(tree4), CENTER, dims):
            end = math.hypot(guide.x2 - CENTER.x, guide.y2 - CENTER.y)
            assert end == pytest.approx(dims.guide_length)
            start_angle = math.atan2(guide.y1 - CENTER.y, guide.x1 - CENTER.x)
            end_angle = math.atan2(guide.y2 - CENTER.y, guide.x2 - CENTER.x)
            assert math.remainder(start_angle - end_angle, 2 * math.pi) == pytest.approx(
                0.0, abs=1e-9
            )


class TestRingDimensions:
    """Band radii around the leaf ring."""

    def test_defaults(self):
        dims = RingDimensions(leaf_distance=200.0)
        assert dims.node_inner_radius == 184.0
        assert dims.node_outer_radius == 216.0
        assert dims.heat_outer_radius == 236.0
        assert dims.highlight_outer_radius == 252.0
        assert dims.guide_length == 236.0
