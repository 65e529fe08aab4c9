"""Family graph validation."""

from .errors import (
    FamilyGraphValidationError,
    MalformedDataError,
    DuplicateIdError,
    EmptyPartnershipError,
    DanglingReferenceError,
    CircularReferenceError,
)
from .graph_validator import (
    build_parent_map,
    detect_circular_references,
    validate_family_graph,
)

__all__ = [
    # Errors
    "FamilyGraphValidationError",
    "MalformedDataError",
    "DuplicateIdError",
    "EmptyPartnershipError",
    "DanglingReferenceError",
    "CircularReferenceError",

    # Validation
    "build_parent_map",
    "detect_circular_references",
    "validate_family_graph",
]
