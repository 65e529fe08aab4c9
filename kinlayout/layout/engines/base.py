"""Base layout engine protocol.

Defines the interface that all layout engines must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from kinlayout.models.family_graph import FamilyGraph
from kinlayout.models.layout_result import LayoutResult, Orientation, SpacingConfig


class LayoutEngine(ABC):
    """Abstract base class for layout engines.

    Layout engines convert a family graph into positioned nodes
    and connector geometry.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name (e.g., 'partnership')."""
        ...

    @property
    @abstractmethod
    def supports_orientation(self) -> bool:
        """Whether engine honours orientations other than top-down."""
        ...

    @abstractmethod
    def layout(
        self,
        graph: Union[FamilyGraph, Dict[str, Any]],
        spacing: Optional[Union[SpacingConfig, Dict[str, float]]] = None,
        orientation: Optional[Union[Orientation, str]] = None,
    ) -> LayoutResult:
        """Compute layout for a family graph.

        Args:
            graph: Family graph (model or wire-format dict)
            spacing: Spacing config, partial overrides, or None for defaults
            orientation: Target orientation, None for the configured default

        Returns:
            LayoutResult with nodes and connections
        """
        ...
