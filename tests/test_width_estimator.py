"""Tests for subtree width estimation."""

import sys

import pytest

from kinlayout.layout.session import index_partnerships
from kinlayout.layout.width import children_width, estimate_subtree_width, partner_width
from kinlayout.models.family_graph import Partnership
from conftest import make_graph


def estimate(graph, person_id, spacing, processed=None, visited=None):
    return estimate_subtree_width(
        person_id,
        index_partnerships(graph),
        spacing,
        processed if processed is not None else set(),
        visited if visited is not None else set(),
    )


class TestWidthHelpers:

    def test_partner_width_two_parents(self, spacing):
        partnership = Partnership(id="u1", partner_ids=("a", "b"))
        assert partner_width(partnership, spacing) == 30

    def test_partner_width_single_parent(self, spacing):
        partnership = Partnership(id="u1", partner_ids=("a", None))
        assert partner_width(partnership, spacing) == 0

    @pytest.mark.parametrize(
        "widths,expected",
        [([], 0), ([0], 0), ([0, 0], 50), ([30, 0, 80], 210)],
    )
    def test_children_width(self, spacing, widths, expected):
        assert children_width(widths, spacing) == expected


class TestEstimateSubtreeWidth:

    def test_person_without_partnerships(self, single_person, spacing):
        assert estimate(single_person, "p1", spacing) == 0

    def test_childless_couple(self, spacing):
        graph = make_graph(["a", "b"], [("u1", "a", "b", [])])
        assert estimate(graph, "a", spacing) == 30

    def test_children_wider_than_partners(self, couple_with_two_children, spacing):
        assert estimate(couple_with_two_children, "p1", spacing) == 50

    def test_nested_generations(self, three_generations, spacing):
        assert estimate(three_generations, "gp1", spacing) == 30

    def test_multiple_partnerships_are_separated(self, three_partnerships, spacing):
        # three units of 30 plus two sibling gaps
        assert estimate(three_partnerships, "a", spacing) == 190

    def test_committed_partnerships_are_skipped(self, three_partnerships, spacing):
        assert estimate(three_partnerships, "a", spacing, processed={"u1", "u2"}) == 30

    def test_visited_person_contributes_nothing(self, couple_with_two_children, spacing):
        assert estimate(couple_with_two_children, "p1", spacing, visited={"p1"}) == 0

    def test_shared_descendant_counted_once(self, spacing):
        graph = make_graph(
            ["x", "y", "z", "s", "t", "g"],
            [
                ("u1", "x", "y", ["s"]),
                ("u2", "x", "z", ["s"]),
                ("u3", "s", "t", ["g"]),
            ],
        )
        # u1 measures s's own unit (30); u2 sees s again and falls back to the pair width
        assert estimate(graph, "x", spacing) == 110

    def test_does_not_touch_committed_state(self, extended_family, spacing):
        processed = {"u4"}
        placed = {"g1"}
        visited = set(placed)
        estimate(extended_family, "m", spacing, processed=processed, visited=visited)
        assert processed == {"u4"}
        assert placed == {"g1"}
        assert "m" in visited

    def test_repeated_calls_agree(self, extended_family, spacing):
        first = estimate(extended_family, "g1", spacing)
        second = estimate(extended_family, "g1", spacing)
        assert first == second == 100

    def test_visits_depth_first_left_to_right(self, extended_family, spacing):
        visited = set()
        estimate(extended_family, "m", spacing, visited=visited)
        assert visited == {"m", "x", "y", "gc"}

    def test_line_deeper_than_recursion_limit(self, spacing):
        depth = sys.getrecursionlimit() + 100
        people = [f"p{i}" for i in range(depth)]
        partnerships = [(f"u{i}", people[i], None, [people[i + 1]]) for i in range(depth - 2)]
        partnerships.append(("last", people[-2], "spouse", [people[-1]]))
        graph = make_graph(people + ["spouse"], partnerships)
        # Only the last partnership has two parents; its width bubbles up the line
        assert estimate(graph, "p0", spacing) == 30
