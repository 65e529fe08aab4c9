"""Shared fixtures for kinlayout tests."""

from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

from kinlayout.models.family_graph import FamilyGraph, Partnership, Person
from kinlayout.models.layout_result import SpacingConfig

PartnershipSpec = Tuple[str, Optional[str], Optional[str], Sequence[str]]


def make_graph(
    people: Iterable[str],
    partnerships: Iterable[PartnershipSpec] = (),
    root_person_id: Optional[str] = None,
) -> FamilyGraph:
    """Build a FamilyGraph from ids and (id, partner1, partner2, children) tuples."""
    return FamilyGraph(
        people=[Person(id=pid, data={"name": pid.upper()}) for pid in people],
        partnerships=[
            Partnership(id=uid, partner_ids=(p1, p2), child_ids=list(children))
            for uid, p1, p2, children in partnerships
        ],
        root_person_id=root_person_id,
    )


@pytest.fixture
def spacing() -> SpacingConfig:
    return SpacingConfig(generation=100, siblings=50, partners=30)


@pytest.fixture
def single_person() -> FamilyGraph:
    return make_graph(["p1"])


@pytest.fixture
def couple_with_child() -> FamilyGraph:
    return make_graph(["p1", "p2", "c1"], [("u1", "p1", "p2", ["c1"])])


@pytest.fixture
def couple_with_two_children() -> FamilyGraph:
    return make_graph(["p1", "p2", "c1", "c2"], [("u1", "p1", "p2", ["c1", "c2"])])


@pytest.fixture
def three_generations() -> FamilyGraph:
    return make_graph(
        ["gp1", "gp2", "p1", "p2", "c1"],
        [
            ("u1", "gp1", "gp2", ["p1"]),
            ("u2", "p1", "p2", ["c1"]),
        ],
    )


@pytest.fixture
def three_partnerships() -> FamilyGraph:
    return make_graph(
        ["a", "b", "c", "d", "k1", "k2", "k3"],
        [
            ("u1", "a", "b", ["k1"]),
            ("u2", "a", "c", ["k2"]),
            ("u3", "a", "d", ["k3"]),
        ],
    )


@pytest.fixture
def extended_family() -> FamilyGraph:
    """Four generations with a single parent and a remarriage."""
    return make_graph(
        ["g1", "g2", "m", "f", "s", "x", "y", "z", "gc"],
        [
            ("u1", "g1", "g2", ["m", "s"]),
            ("u2", "m", "f", ["x", "y"]),
            ("u3", "s", None, ["z"]),
            ("u4", "x", None, ["gc"]),
        ],
    )


def node_xy(result, person_id: str) -> List[float]:
    node = result.node_map()[person_id]
    return [node.x, node.y]
