"""Deterministic layout engine for partnership-centric family trees.

Usage:
    from kinlayout import FamilyGraph, calculate_layout

    graph = FamilyGraph.from_dict(data)
    result = calculate_layout(graph, spacing={"generation": 120}, orientation="top-down")
"""

from kinlayout.layout import (
    ENGINES,
    LayoutEngine,
    PartnershipLayoutEngine,
    calculate_layout,
    find_root_people,
    get_engine,
    scope_graph,
    transform_layout,
)
from kinlayout.models import (
    ChildConnection,
    FamilyGraph,
    LayoutNode,
    LayoutResult,
    Orientation,
    Partnership,
    PartnershipConnection,
    Person,
    Point,
    SpacingConfig,
)
from kinlayout.validators import (
    CircularReferenceError,
    DanglingReferenceError,
    DuplicateIdError,
    EmptyPartnershipError,
    FamilyGraphValidationError,
    MalformedDataError,
    validate_family_graph,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "calculate_layout",
    "LayoutEngine",
    "PartnershipLayoutEngine",
    "ENGINES",
    "get_engine",
    "find_root_people",
    "transform_layout",
    "scope_graph",
    # Models
    "Person",
    "Partnership",
    "FamilyGraph",
    "Orientation",
    "SpacingConfig",
    "Point",
    "LayoutNode",
    "PartnershipConnection",
    "ChildConnection",
    "LayoutResult",
    # Validation
    "validate_family_graph",
    "FamilyGraphValidationError",
    "MalformedDataError",
    "DuplicateIdError",
    "EmptyPartnershipError",
    "DanglingReferenceError",
    "CircularReferenceError",
]
