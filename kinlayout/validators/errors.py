"""Validation errors raised for malformed family graphs.

Every error is fatal for the current layout attempt. Messages are stable and
meant to be shown verbatim by calling UI layers.
"""

from typing import Optional


class FamilyGraphValidationError(ValueError):
    """Base class for all family graph validation failures."""


class MalformedDataError(FamilyGraphValidationError):
    """Raised when a person or partnership has an empty or blank ID."""

    def __init__(self, kind: str, index: int):
        self.kind = kind
        self.index = index
        super().__init__(f"{kind} has empty ID")


class DuplicateIdError(FamilyGraphValidationError):
    """Raised when two people, or two partnerships, share an ID."""

    def __init__(self, kind: str, duplicate_id: str):
        self.kind = kind
        self.duplicate_id = duplicate_id
        super().__init__(f"Duplicate {kind.lower()} ID: {duplicate_id}")


class EmptyPartnershipError(FamilyGraphValidationError):
    """Raised when a partnership has neither parent set."""

    def __init__(self, partnership_id: str):
        self.partnership_id = partnership_id
        super().__init__(f"Partnership {partnership_id} must have at least one partner")


class DanglingReferenceError(FamilyGraphValidationError):
    """Raised when a parent, child or root reference names an unknown person."""

    def __init__(self, missing_id: str, partnership_id: Optional[str] = None, role: str = "person"):
        self.missing_id = missing_id
        self.partnership_id = partnership_id
        self.role = role
        if partnership_id is None:
            message = f"rootPersonId references non-existent person: {missing_id}"
        else:
            message = f"Partnership {partnership_id} references non-existent {role}: {missing_id}"
        super().__init__(message)


class CircularReferenceError(FamilyGraphValidationError):
    """Raised when a person is reachable as their own ancestor."""

    def __init__(self, person_id: str):
        self.person_id = person_id
        super().__init__(f"Circular reference detected: {person_id} is their own ancestor")
