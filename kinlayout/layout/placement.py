"""Position assignment: the committing layout pass.

Each call places one person's family units (their partnerships and all
descendants) starting at an x offset and returns the width consumed.

Placement policy:
    - First placement wins. A person reached a second time (as a partner in
      another partnership, or as a shared descendant) keeps their position.
    - Partnerships are marked processed before their children are visited so
      shared children and shared partners never lay a partnership out twice.
    - Children keep the caller-supplied order, left to right.

The descent into children is driven by an explicit stack of frames, one per
person whose partnerships are being laid out, so long family lines do not
depend on the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from kinlayout.layout.session import LayoutSession
from kinlayout.layout.width import children_width, estimate_subtree_width, partner_width
from kinlayout.models.family_graph import Partnership
from kinlayout.models.layout_result import ChildConnection, PartnershipConnection, Point

logger = logging.getLogger(__name__)


def _child_widths(child_ids: List[str], session: LayoutSession) -> List[float]:
    return [
        estimate_subtree_width(
            child_id,
            session.partnerships_by_person,
            session.spacing,
            session.processed_partnerships,
            set(session.placed_people),
        )
        for child_id in child_ids
    ]


@dataclass
class _Unit:
    """A partnership whose parents are placed and whose children are pending."""

    partnership: Partnership
    width: float
    child_widths: List[float]
    child_x: float
    child_y: float
    drop_point: Point
    child_index: int = 0

    def next_child(self) -> Optional[str]:
        if self.child_index < len(self.partnership.child_ids):
            return self.partnership.child_ids[self.child_index]
        return None

    def finish_child(self, session: LayoutSession) -> None:
        """Record the line to the child just placed and move the cursor on."""
        child_id = self.partnership.child_ids[self.child_index]
        placed_x, placed_y = session.positions[child_id]
        session.child_connections.append(
            ChildConnection(
                partnership_id=self.partnership.id,
                child_id=child_id,
                drop_point=self.drop_point,
                child_point=Point(x=placed_x, y=placed_y),
            )
        )
        self.child_x += self.child_widths[self.child_index] + session.spacing.siblings
        self.child_index += 1


def _open_unit(partnership: Partnership, x: float, y: float, session: LayoutSession) -> _Unit:
    """Commit a partnership: size it, place its parents and record the partner line.

    Args:
        partnership: Unprocessed partnership
        x: Left edge of the unit
        y: Generation coordinate of the parents
        session: Shared mutable layout state

    Returns:
        The unit, ready to have its children placed left to right
    """
    spacing = session.spacing
    session.processed_partnerships.add(partnership.id)

    widths = _child_widths(partnership.child_ids, session)
    kids_width = children_width(widths, spacing)
    pair_width = partner_width(partnership, spacing)
    unit_width = max(pair_width, kids_width)

    unit_center = x + unit_width / 2
    parents = partnership.parent_ids
    if len(parents) == 2:
        parent_xs = [unit_center - pair_width / 2, unit_center + pair_width / 2]
    else:
        parent_xs = [unit_center]

    for parent_id, parent_x in zip(parents, parent_xs):
        session.place(parent_id, parent_x, y)

    midpoint_x = sum(parent_xs) / len(parent_xs)
    session.partnership_connections.append(
        PartnershipConnection(
            partnership_id=partnership.id,
            partner1_id=parents[0],
            partner2_id=parents[1] if len(parents) == 2 else None,
            midpoint=Point(x=midpoint_x, y=y),
        )
    )
    logger.debug(
        f"Placed partnership {partnership.id} at x={midpoint_x}, y={y} "
        f"(unit width {unit_width}, {len(partnership.child_ids)} children)"
    )

    return _Unit(
        partnership=partnership,
        width=unit_width,
        child_widths=widths,
        child_x=x + (unit_width - kids_width) / 2,
        child_y=y + spacing.generation,
        drop_point=Point(x=midpoint_x, y=y + spacing.generation / 2),
    )


@dataclass
class _FamilyFrame:
    """Partnerships laid out side by side from ``start_x`` on one generation."""

    partnerships: List[Partnership]
    start_x: float
    y: float
    current_x: float = 0.0
    total_width: float = 0.0
    partnership_index: int = 0
    unit: Optional[_Unit] = None

    def __post_init__(self):
        self.current_x = self.start_x

    def next_partnership(self, session: LayoutSession) -> Optional[Partnership]:
        while self.partnership_index < len(self.partnerships):
            partnership = self.partnerships[self.partnership_index]
            self.partnership_index += 1
            if partnership.id not in session.processed_partnerships:
                return partnership
        return None

    def close_unit(self, session: LayoutSession) -> None:
        self.current_x += self.unit.width + session.spacing.siblings
        self.total_width = self.current_x - self.start_x - session.spacing.siblings
        self.unit = None


def _open_person(person_id: str, x: float, y: float, session: LayoutSession) -> Optional[_FamilyFrame]:
    """Frame for a person's own partnerships, or None when nothing is left to lay out."""
    if session.is_placed(person_id):
        return None

    partnerships = session.partnerships_for(person_id)
    if not partnerships:
        session.place(person_id, x, y)
        return None

    return _FamilyFrame(partnerships=partnerships, start_x=x, y=y)


def _run(frame: _FamilyFrame, session: LayoutSession) -> float:
    """Lay out a frame and everything below it; returns the frame's width."""
    stack = [frame]
    while True:
        frame = stack[-1]

        if frame.unit is None:
            partnership = frame.next_partnership(session)
            if partnership is None:
                stack.pop()
                if not stack:
                    return max(0.0, frame.total_width)
                stack[-1].unit.finish_child(session)
                continue
            frame.unit = _open_unit(partnership, frame.current_x, frame.y, session)

        child_id = frame.unit.next_child()
        if child_id is None:
            frame.close_unit(session)
            continue

        child_frame = _open_person(child_id, frame.unit.child_x, frame.unit.child_y, session)
        if child_frame is None:
            frame.unit.finish_child(session)
        else:
            stack.append(child_frame)


def place_family_unit(person_id: str, start_x: float, y: float, session: LayoutSession) -> float:
    """Place a person, their partners and all their descendants.

    Args:
        person_id: Person to place
        start_x: Left edge of the space available to this person
        y: Generation coordinate
        session: Shared mutable layout state

    Returns:
        Width consumed (0 if the person was already placed or has no partnerships)
    """
    frame = _open_person(person_id, start_x, y, session)
    if frame is None:
        return 0.0
    return _run(frame, session)


def place_partnership(partnership: Partnership, start_x: float, y: float, session: LayoutSession) -> float:
    """Lay out a single unprocessed partnership and its descendants at ``start_x``.

    Parents that already have a position keep it.

    Returns:
        Width consumed (0 if the partnership was already processed)
    """
    return _run(_FamilyFrame(partnerships=[partnership], start_x=start_x, y=y), session)


def _sweep_partnerships(current_x: float, session: LayoutSession) -> float:
    """Lay out partnerships no root family line reached.

    A person first placed as someone's partner never lays out their own
    remaining partnerships. Each such partnership is placed at the running
    cursor on the generation of its first already-placed parent, so its
    children still sit one generation gap below. Partnerships whose parents
    are all still unplaced wait for a later pass.
    """
    while True:
        pending = [
            p for p in session.graph.partnerships
            if p.id not in session.processed_partnerships
        ]
        if not pending:
            return current_x

        progressed = False
        for partnership in pending:
            if partnership.id in session.processed_partnerships:
                continue
            anchor = next((pid for pid in partnership.parent_ids if session.is_placed(pid)), None)
            if anchor is None:
                continue

            y = session.positions[anchor][1]
            logger.debug(
                f"Placing partnership {partnership.id} outside of any root family line "
                f"(anchored on {anchor} at y={y})"
            )
            width = place_partnership(partnership, current_x, y, session)
            current_x += width + session.spacing.siblings
            progressed = True

        assert progressed, "Unprocessed partnerships left without any placed parent"


def layout_roots(roots: List[str], session: LayoutSession) -> float:
    """Place every root's family side by side, then any partnership left over.

    Returns:
        Final x cursor position
    """
    current_x = 0.0

    for root_id in roots:
        if session.is_placed(root_id):
            continue
        width = place_family_unit(root_id, current_x, 0.0, session)
        current_x += width + session.spacing.siblings

    return _sweep_partnerships(current_x, session)
