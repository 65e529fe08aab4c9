"""Per-call mutable state for one layout pass.

A LayoutSession owns everything the placement pass writes:
node positions, connection lists and the processed-people /
processed-partnership sets. One session is created per layout call and
discarded once the LayoutResult has been built.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from kinlayout.models.family_graph import FamilyGraph, Partnership
from kinlayout.models.layout_result import (
    ChildConnection,
    LayoutNode,
    PartnershipConnection,
    SpacingConfig,
)


def index_partnerships(graph: FamilyGraph) -> Dict[str, List[Partnership]]:
    """Map each person ID to the partnerships they are a parent in (input order)."""
    index: Dict[str, List[Partnership]] = {person.id: [] for person in graph.people}
    for partnership in graph.partnerships:
        for parent_id in dict.fromkeys(partnership.parent_ids):
            index.setdefault(parent_id, []).append(partnership)
    return index


@dataclass
class LayoutSession:
    """Mutable state shared by every step of the placement pass.

    Attributes:
        graph: The validated input graph (read only)
        spacing: Spacing in layout units
        partnerships_by_person: person ID -> partnerships they parent
        positions: person ID -> (x, y), first placement wins
        partnership_connections: Recorded partner lines
        child_connections: Recorded child lines
        placed_people: People that already have a position
        processed_partnerships: Partnerships already laid out
    """

    graph: FamilyGraph
    spacing: SpacingConfig
    partnerships_by_person: Dict[str, List[Partnership]] = field(default_factory=dict)
    positions: Dict[str, Tuple[float, float]] = field(default_factory=dict)
    partnership_connections: List[PartnershipConnection] = field(default_factory=list)
    child_connections: List[ChildConnection] = field(default_factory=list)
    placed_people: Set[str] = field(default_factory=set)
    processed_partnerships: Set[str] = field(default_factory=set)

    @classmethod
    def create(cls, graph: FamilyGraph, spacing: SpacingConfig) -> "LayoutSession":
        return cls(
            graph=graph,
            spacing=spacing,
            partnerships_by_person=index_partnerships(graph),
        )

    def partnerships_for(self, person_id: str) -> List[Partnership]:
        return self.partnerships_by_person.get(person_id, [])

    def is_placed(self, person_id: str) -> bool:
        return person_id in self.placed_people

    def place(self, person_id: str, x: float, y: float) -> None:
        """Record a position unless the person already has one."""
        if person_id in self.positions:
            return
        self.positions[person_id] = (x, y)
        self.placed_people.add(person_id)

    def build_nodes(self) -> List[LayoutNode]:
        """One node per person, in the graph's people order."""
        nodes = []
        for person in self.graph.people:
            assert person.id in self.positions, f"Person {person.id} was never placed"
            x, y = self.positions[person.id]
            nodes.append(LayoutNode(id=person.id, x=x, y=y))
        return nodes
