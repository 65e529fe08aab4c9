"""Tests for family graph and layout result models."""

import pytest
from pydantic import ValidationError

from kinlayout.models import (
    FamilyGraph,
    LayoutNode,
    LayoutResult,
    Orientation,
    Partnership,
    Person,
    SpacingConfig,
)


class TestFamilyGraph:
    """Test wire-format parsing and helpers."""

    def test_from_camel_case_dict(self):
        graph = FamilyGraph.from_dict({
            "people": [{"id": "p1", "data": {"name": "Alice"}}, {"id": "c1"}],
            "partnerships": [
                {"id": "u1", "partnerIds": ["p1", None], "childIds": ["c1"], "type": "marriage"}
            ],
            "rootPersonId": "p1",
        })

        assert graph.root_person_id == "p1"
        assert graph.people[0].data == {"name": "Alice"}
        assert graph.partnerships[0].partner_ids == ("p1", None)
        assert graph.partnerships[0].child_ids == ["c1"]

    def test_snake_case_names_accepted(self):
        partnership = Partnership(id="u1", partner_ids=("a", "b"), child_ids=["c"])
        assert partnership.parent_ids == ["a", "b"]
        assert partnership.has_two_parents

    def test_to_dict_round_trip_names(self):
        graph = FamilyGraph(
            people=[Person(id="p1")],
            partnerships=[Partnership(id="u1", partner_ids=("p1", None))],
        )
        data = graph.to_dict()
        assert data["partnerships"][0]["partnerIds"][0] == "p1"
        assert data["partnerships"][0]["childIds"] == []
        assert "rootPersonId" not in data
        assert FamilyGraph.from_dict(data) == graph

    def test_partner_slots_must_be_a_pair(self):
        with pytest.raises(ValidationError):
            Partnership(id="u1", partner_ids=("a", "b", "c"))

    def test_unknown_relationship_type(self):
        with pytest.raises(ValidationError):
            Partnership(id="u1", partner_ids=("a", None), type="feud")

    def test_partnerships_for(self, three_partnerships):
        assert [p.id for p in three_partnerships.partnerships_for("a")] == ["u1", "u2", "u3"]
        assert [p.id for p in three_partnerships.partnerships_for("c")] == ["u2"]
        assert three_partnerships.partnerships_for("k1") == []

    def test_payload_is_opaque(self):
        payload = object()
        assert Person(id="p1", data=payload).data is payload


class TestSpacingConfig:

    def test_defaults(self):
        spacing = SpacingConfig()
        assert (spacing.generation, spacing.siblings, spacing.partners) == (100, 50, 30)

    @pytest.mark.parametrize("field", ["generation", "siblings", "partners"])
    def test_gaps_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            SpacingConfig(**{field: 0})

    def test_frozen(self):
        spacing = SpacingConfig()
        with pytest.raises(ValidationError):
            spacing.generation = 10


class TestLayoutResult:

    def test_bounding_box(self):
        result = LayoutResult(
            nodes=[
                LayoutNode(id="a", x=-10, y=0),
                LayoutNode(id="b", x=40, y=200),
            ]
        )
        box = result.bounding_box()
        assert (box.min_x, box.max_x, box.min_y, box.max_y) == (-10, 40, 0, 200)
        assert box.width == 50
        assert box.height == 200
        assert box.center == (15, 100)

    def test_to_dict_uses_wire_names(self, couple_with_child):
        from kinlayout import calculate_layout

        data = calculate_layout(couple_with_child).to_dict()
        assert data["orientation"] == "top-down"
        assert data["partnershipConnections"][0]["partner1Id"] == "p1"
        assert data["childConnections"][0]["dropPoint"] == {"x": 15.0, "y": 50.0}

    def test_etag_is_content_hash(self):
        first = LayoutResult(nodes=[LayoutNode(id="a", x=0, y=0)])
        same = LayoutResult(nodes=[LayoutNode(id="a", x=0, y=0)])
        moved = LayoutResult(nodes=[LayoutNode(id="a", x=0, y=1)])

        assert len(first.compute_etag()) == 64
        assert first.compute_etag() == same.compute_etag()
        assert first.compute_etag() != moved.compute_etag()

    def test_orientation_values(self):
        assert [o.value for o in Orientation] == [
            "top-down", "bottom-up", "left-right", "right-left"
        ]
