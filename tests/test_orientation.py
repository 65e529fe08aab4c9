"""Tests for orientation transforms."""

import pytest

from kinlayout import calculate_layout
from kinlayout.layout.orientation import TRANSFORMS, transform_layout, transform_point
from kinlayout.models.layout_result import Orientation, Point


class TestTransformPoint:

    @pytest.mark.parametrize(
        "orientation,expected",
        [
            (Orientation.TOP_DOWN, (3, 7)),
            (Orientation.BOTTOM_UP, (3, -7)),
            (Orientation.LEFT_RIGHT, (7, 3)),
            (Orientation.RIGHT_LEFT, (-7, 3)),
        ],
    )
    def test_fixed_maps(self, orientation, expected):
        assert transform_point(Point(x=3, y=7), orientation).to_tuple() == expected

    def test_accepts_string_value(self):
        assert transform_point(Point(x=1, y=2), "left-right").to_tuple() == (2, 1)

    def test_table_covers_every_orientation(self):
        assert set(TRANSFORMS) == set(Orientation)


class TestTransformLayout:
    """Every point-bearing field goes through the same map."""

    @pytest.fixture
    def canonical(self, couple_with_two_children, spacing):
        return calculate_layout(couple_with_two_children, spacing, Orientation.TOP_DOWN)

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_all_points_transformed(self, canonical, orientation):
        transformed = transform_layout(canonical, orientation)
        transform = TRANSFORMS[orientation]

        assert transformed.orientation == orientation
        for before, after in zip(canonical.nodes, transformed.nodes):
            assert after.id == before.id
            assert (after.x, after.y) == transform(before.x, before.y)
        for before, after in zip(canonical.partnership_connections, transformed.partnership_connections):
            assert after.partnership_id == before.partnership_id
            assert after.midpoint.to_tuple() == transform(before.midpoint.x, before.midpoint.y)
        for before, after in zip(canonical.child_connections, transformed.child_connections):
            assert after.child_id == before.child_id
            assert after.drop_point.to_tuple() == transform(before.drop_point.x, before.drop_point.y)
            assert after.child_point.to_tuple() == transform(before.child_point.x, before.child_point.y)

    def test_engine_applies_orientation(self, couple_with_child, spacing):
        left_right = calculate_layout(couple_with_child, spacing, Orientation.LEFT_RIGHT)
        nodes = left_right.node_map()

        # Partners share the generation axis (x), children one gap to the right
        assert nodes["p1"].x == nodes["p2"].x == 0
        assert nodes["p2"].y - nodes["p1"].y == spacing.partners
        assert (nodes["c1"].x, nodes["c1"].y) == (100, 15)
        assert left_right.child_connections[0].drop_point.to_tuple() == (50, 15)

    def test_right_left_generations_advance_leftward(self, couple_with_child, spacing):
        result = calculate_layout(couple_with_child, spacing, Orientation.RIGHT_LEFT)
        assert result.node_map()["c1"].x == -spacing.generation
        assert result.partnership_connections[0].midpoint.to_tuple() == (0, 15)

    def test_bottom_up_negates_y_only(self, three_generations, spacing):
        top_down = calculate_layout(three_generations, spacing)
        bottom_up = calculate_layout(three_generations, spacing, Orientation.BOTTOM_UP)

        for before, after in zip(top_down.nodes, bottom_up.nodes):
            assert after.x == before.x
            assert after.y == -before.y

    def test_canonical_result_unchanged(self, canonical):
        before = canonical.to_dict()
        transform_layout(canonical, Orientation.RIGHT_LEFT)
        assert canonical.to_dict() == before
