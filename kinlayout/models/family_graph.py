"""Family graph input models.

This module provides the Pydantic schemas for the caller-supplied graph:
- Person: an id plus an opaque payload the engine never inspects
- Partnership: one or two parents and an ordered list of children
- FamilyGraph: all people, all partnerships, optional root hint

Architecture Principle:
    Pydantic only checks field types here. Structural invariants (unique ids,
    resolvable references, at least one parent, no cycles) are enforced by
    kinlayout.validators.graph_validator so callers always get one of the
    documented error kinds.

Wire Format:
    Both the camelCase names used by rendering layers (partnerIds, childIds,
    rootPersonId) and the snake_case attribute names are accepted:
        {
            "people": [{"id": "p1", "data": {"name": "Alice"}}],
            "partnerships": [
                {"id": "u1", "partnerIds": ["p1", null], "childIds": []}
            ],
            "rootPersonId": "p1"
        }
"""

import logging
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Person(BaseModel):
    """A person node in the family graph.

    Attributes:
        id: Unique identifier
        data: Caller data, passed through to renderers untouched
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique person identifier")
    data: Any = Field(default=None, description="Opaque caller payload")


class Partnership(BaseModel):
    """A union of one or two parents from which children descend.

    Use ``(person_id, None)`` for single-parent units.

    Attributes:
        id: Unique identifier
        partner_ids: The two parent slots; the second may be None
        child_ids: Children in left-to-right order
        type: Optional relationship kind
        start_date: Optional start date (free text)
        end_date: Optional end date (free text)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Unique partnership identifier")
    partner_ids: Tuple[Optional[str], Optional[str]] = Field(
        ..., alias="partnerIds", description="Parent slots, second may be null"
    )
    child_ids: List[str] = Field(
        default_factory=list, alias="childIds", description="Children in display order"
    )
    type: Optional[Literal["marriage", "civil-union", "partnership", "other"]] = Field(
        default=None, description="Relationship kind"
    )
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")

    @property
    def parent_ids(self) -> List[str]:
        """Non-null parent ids in slot order."""
        return [pid for pid in self.partner_ids if pid is not None]

    @property
    def has_two_parents(self) -> bool:
        return len(self.parent_ids) == 2

    def involves(self, person_id: str) -> bool:
        """Whether the person is one of this partnership's parents."""
        return person_id in self.partner_ids


class FamilyGraph(BaseModel):
    """Complete family graph handed to the layout engine.

    Attributes:
        people: All people, in input order
        partnerships: All partnerships, in input order
        root_person_id: Optional re-rooting hint (validated, not used by layout)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    people: List[Person] = Field(default_factory=list)
    partnerships: List[Partnership] = Field(default_factory=list)
    root_person_id: Optional[str] = Field(default=None, alias="rootPersonId")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FamilyGraph":
        """Create FamilyGraph from a wire-format dictionary.

        Args:
            data: Dictionary with people, partnerships and optional rootPersonId

        Returns:
            FamilyGraph instance

        Raises:
            pydantic.ValidationError: If field types are wrong
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Export to the camelCase wire format (None fields dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def person_ids(self) -> List[str]:
        return [person.id for person in self.people]

    def partnerships_for(self, person_id: str) -> List[Partnership]:
        """Partnerships in which the person is a parent, in input order."""
        return [p for p in self.partnerships if p.involves(person_id)]
