"""Layout output models.

This module provides schemas for the engine's output:
- Point / LayoutNode: person coordinates
- PartnershipConnection: the partner line and its midpoint anchor
- ChildConnection: the elbow (drop point) and end (child point) of a child line
- LayoutResult: everything a renderer needs, plus the orientation used

Results are frozen. Renderers and interaction layers read coordinates but
never patch them; a different picture always comes from a new layout call.

The etag is computed from a canonical JSON representation so two identical
layouts always hash the same.
"""

import hashlib
import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Orientation(str, Enum):
    """Tree orientation. Top-down is canonical, the others are transforms of it."""

    TOP_DOWN = "top-down"
    BOTTOM_UP = "bottom-up"
    LEFT_RIGHT = "left-right"
    RIGHT_LEFT = "right-left"


class SpacingConfig(BaseModel):
    """Spacing between people in layout units.

    Attributes:
        generation: Distance between generations
        siblings: Distance between sibling subtrees and between family units
        partners: Distance between the two partners of a partnership
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    generation: float = Field(default=100.0, gt=0, description="Generation gap")
    siblings: float = Field(default=50.0, gt=0, description="Sibling gap")
    partners: float = Field(default=30.0, gt=0, description="Partner gap")


class Point(BaseModel):
    """A 2D point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class LayoutNode(BaseModel):
    """Position of one person."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Person ID")
    x: float
    y: float


class PartnershipConnection(BaseModel):
    """Connection between two partners (or a lone parent).

    Attributes:
        partnership_id: Partnership this line belongs to
        partner1_id: First parent
        partner2_id: Second parent, None for single-parent units
        midpoint: Anchor from which child drop lines originate
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    partnership_id: str = Field(..., alias="partnershipId")
    partner1_id: str = Field(..., alias="partner1Id")
    partner2_id: Optional[str] = Field(default=None, alias="partner2Id")
    midpoint: Point


class ChildConnection(BaseModel):
    """Connection from a partnership midpoint to one child.

    Attributes:
        partnership_id: Partnership the child descends from
        child_id: The child
        drop_point: Where the branch towards the child begins
        child_point: Where the line meets the child node
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    partnership_id: str = Field(..., alias="partnershipId")
    child_id: str = Field(..., alias="childId")
    drop_point: Point = Field(..., alias="dropPoint")
    child_point: Point = Field(..., alias="childPoint")


class BoundingBox(BaseModel):
    """Bounding box of all node positions.

    Attributes:
        min_x: Minimum x coordinate
        max_x: Maximum x coordinate
        min_y: Minimum y coordinate
        max_y: Maximum y coordinate
    """

    model_config = ConfigDict(frozen=True)

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return (
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2
        )


class LayoutResult(BaseModel):
    """Complete layout of a family graph.

    Attributes:
        nodes: One node per person, in the graph's people order
        partnership_connections: One per laid-out partnership, in placement order
        child_connections: One per laid-out parent-child link, in placement order
        orientation: Orientation the coordinates are expressed in
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nodes: List[LayoutNode] = Field(default_factory=list)
    partnership_connections: List[PartnershipConnection] = Field(
        default_factory=list, alias="partnershipConnections"
    )
    child_connections: List[ChildConnection] = Field(
        default_factory=list, alias="childConnections"
    )
    orientation: Orientation = Field(default=Orientation.TOP_DOWN)

    def node_map(self) -> Dict[str, LayoutNode]:
        """Nodes keyed by person ID."""
        return {node.id: node for node in self.nodes}

    def bounding_box(self) -> Optional[BoundingBox]:
        """Bounding box over node positions, None for an empty layout."""
        if not self.nodes:
            return None

        x_coords = [node.x for node in self.nodes]
        y_coords = [node.y for node in self.nodes]

        return BoundingBox(
            min_x=min(x_coords),
            max_x=max(x_coords),
            min_y=min(y_coords),
            max_y=max(y_coords)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export to the camelCase wire format."""
        return self.model_dump(mode="json", by_alias=True)

    def compute_etag(self) -> str:
        """Compute SHA-256 etag from canonical content.

        Returns:
            64-character hex string
        """
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
