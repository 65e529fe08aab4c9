"""Subtree width estimation.

Widths are computed bottom-up before a partnership is placed so its
partners can be centred over their descendants in a single forward pass.
The estimate is advisory: it reads the committed partnership set but only
ever writes to its own ``visited`` set.

The walk is a post-order traversal driven by an explicit stack, so the
depth of a family line is bounded by memory rather than the interpreter's
recursion limit.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from kinlayout.models.family_graph import Partnership
from kinlayout.models.layout_result import SpacingConfig


def partner_width(partnership: Partnership, spacing: SpacingConfig) -> float:
    """Horizontal room the partner pair needs (zero for a lone parent)."""
    return spacing.partners if partnership.has_two_parents else 0.0


def children_width(widths: List[float], spacing: SpacingConfig) -> float:
    """Combined width of sibling subtrees including the gaps between them."""
    total = sum(widths)
    if len(widths) > 1:
        total += (len(widths) - 1) * spacing.siblings
    return total


@dataclass
class _WidthFrame:
    """One person's pending estimate: their uncommitted partnerships in order."""

    partnerships: List[Partnership]
    unit_index: int = 0
    child_widths: List[float] = field(default_factory=list)
    units_width: float = 0.0

    def next_child(self, spacing: SpacingConfig) -> Optional[str]:
        """Next child still to measure, closing finished units on the way."""
        while self.unit_index < len(self.partnerships):
            partnership = self.partnerships[self.unit_index]
            if len(self.child_widths) < len(partnership.child_ids):
                return partnership.child_ids[len(self.child_widths)]
            self.units_width += max(
                partner_width(partnership, spacing),
                children_width(self.child_widths, spacing),
            )
            self.child_widths = []
            self.unit_index += 1
        return None

    def width(self, spacing: SpacingConfig) -> float:
        if len(self.partnerships) > 1:
            return self.units_width + (len(self.partnerships) - 1) * spacing.siblings
        return self.units_width


def _open_frame(
    person_id: str,
    partnerships_by_person: Dict[str, List[Partnership]],
    processed_partnerships: Set[str],
    visited: Set[str],
) -> Optional[_WidthFrame]:
    if person_id in visited:
        return None
    visited.add(person_id)
    return _WidthFrame(
        partnerships=[
            p for p in partnerships_by_person.get(person_id, [])
            if p.id not in processed_partnerships
        ]
    )


def estimate_subtree_width(
    person_id: str,
    partnerships_by_person: Dict[str, List[Partnership]],
    spacing: SpacingConfig,
    processed_partnerships: Set[str],
    visited: Set[str],
) -> float:
    """Estimate the width a person's uncommitted partnerships and descendants need.

    People already in ``visited`` contribute nothing, which also stops
    double counting when half-siblings converge on a shared descendant.
    People are marked visited in depth-first order, children left to right.

    Args:
        person_id: Person whose subtree is measured
        partnerships_by_person: person ID -> partnerships they parent
        spacing: Spacing configuration
        processed_partnerships: Partnerships already committed (read only)
        visited: People already accounted for; updated in place

    Returns:
        Width in layout units (0 for a person with nothing left to lay out)
    """
    root = _open_frame(person_id, partnerships_by_person, processed_partnerships, visited)
    if root is None:
        return 0.0

    stack = [root]
    while True:
        frame = stack[-1]
        child_id = frame.next_child(spacing)
        if child_id is not None:
            child = _open_frame(child_id, partnerships_by_person, processed_partnerships, visited)
            if child is None:
                frame.child_widths.append(0.0)
            else:
                stack.append(child)
            continue

        stack.pop()
        width = frame.width(spacing)
        if not stack:
            return width
        stack[-1].child_widths.append(width)
