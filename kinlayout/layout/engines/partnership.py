"""Partnership-centric layout engine.

Lays out family graphs where unions, not individuals, are the unit from
which descendants hang:

    validate -> find roots -> place family units -> apply orientation

Every call validates its input, builds a fresh LayoutSession and returns a
frozen LayoutResult. Nothing is cached between calls and the caller's graph
is never mutated, so identical inputs always give identical results.
"""

import logging
from typing import Any, Dict, Optional, Union

from kinlayout.config.settings import get_default_orientation, get_default_spacing
from kinlayout.layout.engines.base import LayoutEngine
from kinlayout.layout.orientation import transform_layout
from kinlayout.layout.placement import layout_roots
from kinlayout.layout.roots import find_root_people
from kinlayout.layout.session import LayoutSession
from kinlayout.models.family_graph import FamilyGraph
from kinlayout.models.layout_result import LayoutResult, Orientation, SpacingConfig
from kinlayout.validators.graph_validator import validate_family_graph

logger = logging.getLogger(__name__)


def _resolve_graph(graph: Union[FamilyGraph, Dict[str, Any]]) -> FamilyGraph:
    if isinstance(graph, FamilyGraph):
        return graph
    return FamilyGraph.model_validate(graph)


def _resolve_spacing(spacing: Optional[Union[SpacingConfig, Dict[str, float]]]) -> SpacingConfig:
    if isinstance(spacing, SpacingConfig):
        return spacing
    defaults = get_default_spacing()
    if not spacing:
        return defaults
    return SpacingConfig(**{**defaults.model_dump(), **spacing})


def _resolve_orientation(orientation: Optional[Union[Orientation, str]]) -> Orientation:
    if orientation is None:
        return get_default_orientation()
    try:
        return Orientation(orientation)
    except ValueError:
        available = ', '.join(o.value for o in Orientation)
        raise ValueError(
            f"Unknown orientation: '{orientation}'. Available orientations: {available}"
        )


class PartnershipLayoutEngine(LayoutEngine):
    """Deterministic layout engine for partnership-centric family graphs.

    Example:
        engine = PartnershipLayoutEngine()
        result = engine.layout(graph, spacing={"siblings": 80}, orientation="left-right")
        for node in result.nodes:
            draw_person(node.id, node.x, node.y)
    """

    @property
    def name(self) -> str:
        return "partnership"

    @property
    def supports_orientation(self) -> bool:
        return True

    def layout(
        self,
        graph: Union[FamilyGraph, Dict[str, Any]],
        spacing: Optional[Union[SpacingConfig, Dict[str, float]]] = None,
        orientation: Optional[Union[Orientation, str]] = None,
    ) -> LayoutResult:
        """Compute the layout of a family graph.

        Raises:
            FamilyGraphValidationError: If the graph fails validation
            ValueError: If spacing or orientation are invalid
        """
        family_graph = _resolve_graph(graph)
        resolved_spacing = _resolve_spacing(spacing)
        resolved_orientation = _resolve_orientation(orientation)

        validate_family_graph(family_graph)

        roots = find_root_people(family_graph)
        session = LayoutSession.create(family_graph, resolved_spacing)
        layout_roots(roots, session)

        canonical = LayoutResult(
            nodes=session.build_nodes(),
            partnership_connections=session.partnership_connections,
            child_connections=session.child_connections,
            orientation=Orientation.TOP_DOWN,
        )

        logger.info(
            f"Laid out {len(family_graph.people)} people, "
            f"{len(family_graph.partnerships)} partnerships from {len(roots)} roots "
            f"({resolved_orientation.value})"
        )
        return transform_layout(canonical, resolved_orientation)


def calculate_layout(
    graph: Union[FamilyGraph, Dict[str, Any]],
    spacing: Optional[Union[SpacingConfig, Dict[str, float]]] = None,
    orientation: Optional[Union[Orientation, str]] = None,
) -> LayoutResult:
    """Calculate the layout for a family graph.

    Args:
        graph: Family graph (model or wire-format dict)
        spacing: Spacing config, partial overrides, or None for defaults
        orientation: Target orientation, None for the configured default

    Returns:
        LayoutResult

    Raises:
        FamilyGraphValidationError: If the graph fails validation
    """
    return PartnershipLayoutEngine().layout(graph, spacing=spacing, orientation=orientation)
