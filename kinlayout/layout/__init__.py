"""Layout module for family graph positioning.

This module provides:
- Root selection, subtree width estimation and position assignment
- Orientation transforms of the canonical top-down layout
- Layout engine abstraction and the partnership layout engine
- Depth-bounded scoping of an input graph
"""

from kinlayout.layout.engines import (
    ENGINES,
    LayoutEngine,
    PartnershipLayoutEngine,
    calculate_layout,
    get_engine,
)
from kinlayout.layout.orientation import transform_layout, transform_point
from kinlayout.layout.roots import find_root_people
from kinlayout.layout.scope import scope_graph

__all__ = [
    "LayoutEngine",
    "PartnershipLayoutEngine",
    "calculate_layout",
    "ENGINES",
    "get_engine",
    "transform_layout",
    "transform_point",
    "find_root_people",
    "scope_graph",
]
