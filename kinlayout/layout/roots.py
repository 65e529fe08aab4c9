"""Root selection for the top-level layout pass."""

import logging
from typing import List, Set

from kinlayout.models.family_graph import FamilyGraph

logger = logging.getLogger(__name__)


def find_root_people(graph: FamilyGraph) -> List[str]:
    """Find the people that seed the top-level layout pass.

    A root is a person no partnership lists as a child. Partners of a kept
    root are absorbed so a couple is laid out as one unit rather than two;
    ties are broken by input order.

    Args:
        graph: Validated family graph

    Returns:
        Root person IDs, left to right
    """
    children: Set[str] = set()
    for partnership in graph.partnerships:
        children.update(partnership.child_ids)

    roots: List[str] = []
    absorbed: Set[str] = set()

    for person in graph.people:
        if person.id in children or person.id in absorbed:
            continue
        roots.append(person.id)
        for partnership in graph.partnerships:
            first, second = partnership.partner_ids
            if first == person.id and second is not None:
                absorbed.add(second)
            elif second == person.id and first is not None:
                absorbed.add(first)

    if not roots and graph.people:
        # Only reachable on input that failed to validate.
        fallback = graph.people[0].id
        logger.warning(f"No root people found, falling back to first person: {fallback}")
        roots.append(fallback)

    return roots
