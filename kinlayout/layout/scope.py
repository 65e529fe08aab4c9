"""Depth-bounded scoping of a family graph before layout.

The layout engine always lays out the whole graph it is given. To show only
a neighbourhood of one person (N generations up, M generations down), prune
the input first with ``scope_graph`` and lay out the result.

Kept people:
    - the root person
    - ancestors up to ``ancestor_depth`` generations (None = all)
    - descendants up to ``descendant_depth`` generations (None = all)
    - partners of every person above

A partnership is kept only when all of its parents are kept, so the result
never references a dropped person; child lists are filtered to kept
people. Input order is preserved throughout.
"""

import logging
from typing import Optional, Set

import networkx as nx

from kinlayout.models.family_graph import FamilyGraph
from kinlayout.validators.errors import DanglingReferenceError
from kinlayout.validators.graph_validator import validate_family_graph

logger = logging.getLogger(__name__)


def _within(parent_map: nx.DiGraph, source: str, depth: Optional[int]) -> Set[str]:
    return set(nx.single_source_shortest_path_length(parent_map, source, cutoff=depth))


def scope_graph(
    graph: FamilyGraph,
    root_person_id: str,
    ancestor_depth: Optional[int] = None,
    descendant_depth: Optional[int] = None,
) -> FamilyGraph:
    """Prune a family graph to a depth-bounded neighbourhood of one person.

    Args:
        graph: Family graph (validated here)
        root_person_id: Person to centre the scope on
        ancestor_depth: Generations of ancestors to keep (None = unlimited)
        descendant_depth: Generations of descendants to keep (None = unlimited)

    Returns:
        New FamilyGraph with root_person_id set to the scope root

    Raises:
        FamilyGraphValidationError: If the input graph is invalid
        DanglingReferenceError: If root_person_id is not a known person
        ValueError: If a depth is negative
    """
    for label, depth in (("ancestor_depth", ancestor_depth), ("descendant_depth", descendant_depth)):
        if depth is not None and depth < 0:
            raise ValueError(f"{label} must be >= 0, got {depth}")

    parent_map = validate_family_graph(graph)
    if root_person_id not in parent_map:
        raise DanglingReferenceError(root_person_id)

    core = _within(parent_map.reverse(copy=False), root_person_id, ancestor_depth)
    core |= _within(parent_map, root_person_id, descendant_depth)

    kept = set(core)
    for partnership in graph.partnerships:
        if any(pid in core for pid in partnership.parent_ids):
            kept.update(partnership.parent_ids)

    partnerships = [
        partnership.model_copy(
            update={"child_ids": [cid for cid in partnership.child_ids if cid in kept]}
        )
        for partnership in graph.partnerships
        if all(pid in kept for pid in partnership.parent_ids)
    ]

    scoped = FamilyGraph(
        people=[person for person in graph.people if person.id in kept],
        partnerships=partnerships,
        root_person_id=root_person_id,
    )
    logger.debug(
        f"Scoped graph around {root_person_id}: {len(scoped.people)} of "
        f"{len(graph.people)} people, {len(partnerships)} of "
        f"{len(graph.partnerships)} partnerships"
    )
    return scoped
