"""Structural and referential validation of family graphs.

The layout pass walks down through partnerships and children, so it is only
safe on a graph with unique ids, resolvable references and no ancestry
cycles. ``validate_family_graph`` runs before every layout and raises on the
first violation, in this order:

1. empty / duplicate person ids
2. empty / duplicate partnership ids, missing both parents,
   unknown parents, unknown children (partnership by partnership)
3. unknown rootPersonId
4. cycles in the parent relation

Nothing is mutated or dropped; this is a check, not a sanitizer.
"""

import logging
from collections import deque
from typing import Optional, Set

import networkx as nx

from kinlayout.models.family_graph import FamilyGraph
from kinlayout.validators.errors import (
    CircularReferenceError,
    DanglingReferenceError,
    DuplicateIdError,
    EmptyPartnershipError,
    MalformedDataError,
)

logger = logging.getLogger(__name__)


def _is_blank(value: str) -> bool:
    return not value or value.strip() == ""


def build_parent_map(graph: FamilyGraph) -> nx.DiGraph:
    """Build the parent relation as a directed graph.

    Every person is a node; every partnership adds an edge from each of its
    parents to each of its children. References to unknown people are skipped,
    so this is safe to call on unvalidated input.

    Args:
        graph: Family graph

    Returns:
        DiGraph with parent -> child edges
    """
    parent_map = nx.DiGraph()
    parent_map.add_nodes_from(graph.person_ids())

    for partnership in graph.partnerships:
        for child_id in partnership.child_ids:
            if child_id not in parent_map:
                continue
            for parent_id in partnership.parent_ids:
                if parent_id in parent_map:
                    parent_map.add_edge(parent_id, child_id, partnership=partnership.id)

    return parent_map


def detect_circular_references(graph: FamilyGraph, parent_map: Optional[nx.DiGraph] = None) -> None:
    """Raise if any person appears in their own ancestry.

    For each person (input order) a breadth-first walk follows parent edges;
    each ancestor is expanded at most once per walk.

    Raises:
        CircularReferenceError: Naming the first person found in a cycle
    """
    if parent_map is None:
        parent_map = build_parent_map(graph)

    for person_id in graph.person_ids():
        visited: Set[str] = set()
        queue = deque(parent_map.predecessors(person_id))

        while queue:
            ancestor_id = queue.popleft()

            if ancestor_id == person_id:
                raise CircularReferenceError(person_id)

            if ancestor_id not in visited:
                visited.add(ancestor_id)
                queue.extend(parent_map.predecessors(ancestor_id))


def validate_family_graph(graph: FamilyGraph) -> nx.DiGraph:
    """Validate a family graph and raise on the first defect.

    Args:
        graph: Family graph to validate

    Returns:
        The parent map built during validation

    Raises:
        MalformedDataError: Empty or blank person/partnership ID
        DuplicateIdError: Repeated person or partnership ID
        EmptyPartnershipError: Partnership with no parent
        DanglingReferenceError: Unknown parent, child or rootPersonId
        CircularReferenceError: A person is their own ancestor
    """
    person_ids: Set[str] = set()
    partnership_ids: Set[str] = set()

    for index, person in enumerate(graph.people):
        if _is_blank(person.id):
            raise MalformedDataError("Person", index)
        if person.id in person_ids:
            raise DuplicateIdError("Person", person.id)
        person_ids.add(person.id)

    for index, partnership in enumerate(graph.partnerships):
        if _is_blank(partnership.id):
            raise MalformedDataError("Partnership", index)
        if partnership.id in partnership_ids:
            raise DuplicateIdError("Partnership", partnership.id)
        partnership_ids.add(partnership.id)

        if not partnership.parent_ids:
            raise EmptyPartnershipError(partnership.id)

        for parent_id in partnership.parent_ids:
            if parent_id not in person_ids:
                raise DanglingReferenceError(parent_id, partnership.id, role="person")

        for child_id in partnership.child_ids:
            if child_id not in person_ids:
                raise DanglingReferenceError(child_id, partnership.id, role="child")

    if graph.root_person_id is not None and graph.root_person_id not in person_ids:
        raise DanglingReferenceError(graph.root_person_id)

    parent_map = build_parent_map(graph)
    detect_circular_references(graph, parent_map)

    logger.debug(
        f"Validated family graph: {len(person_ids)} people, "
        f"{len(partnership_ids)} partnerships"
    )
    return parent_map
