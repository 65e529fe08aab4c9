"""Pydantic models for family graphs and their layouts.

Input models describe the partnership-centric graph; output models describe
the coordinates and connector geometry produced by the layout engine.
"""

from .family_graph import (
    Person,
    Partnership,
    FamilyGraph,
)
from .layout_result import (
    Orientation,
    SpacingConfig,
    Point,
    LayoutNode,
    PartnershipConnection,
    ChildConnection,
    BoundingBox,
    LayoutResult,
)

__all__ = [
    # Input graph
    "Person",
    "Partnership",
    "FamilyGraph",

    # Configuration
    "Orientation",
    "SpacingConfig",

    # Layout output
    "Point",
    "LayoutNode",
    "PartnershipConnection",
    "ChildConnection",
    "BoundingBox",
    "LayoutResult",
]
