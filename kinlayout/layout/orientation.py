"""Orientation transforms.

The placement pass always works top-down (generation axis = y, increasing
downward; sibling axis = x). Other orientations are fixed linear maps of
that canonical result, applied to every node and every connector point so
lines stay attached to nodes.
"""

from typing import Callable, Dict, Tuple

from kinlayout.models.layout_result import LayoutResult, Orientation, Point

PointTransform = Callable[[float, float], Tuple[float, float]]

TRANSFORMS: Dict[Orientation, PointTransform] = {
    Orientation.TOP_DOWN: lambda x, y: (x, y),
    # Ancestors below descendants
    Orientation.BOTTOM_UP: lambda x, y: (x, -y),
    # Generations advance rightward
    Orientation.LEFT_RIGHT: lambda x, y: (y, x),
    # Generations advance leftward
    Orientation.RIGHT_LEFT: lambda x, y: (-y, x),
}


def transform_point(point: Point, orientation: Orientation) -> Point:
    """Map a canonical top-down point into the given orientation."""
    x, y = TRANSFORMS[Orientation(orientation)](point.x, point.y)
    return Point(x=x, y=y)


def transform_layout(result: LayoutResult, orientation: Orientation) -> LayoutResult:
    """Apply an orientation to a canonical top-down layout.

    Args:
        result: Layout computed in top-down orientation
        orientation: Target orientation

    Returns:
        New LayoutResult with every point transformed and orientation set
    """
    orientation = Orientation(orientation)
    if orientation == Orientation.TOP_DOWN:
        return result.model_copy(update={"orientation": orientation})

    transform = TRANSFORMS[orientation]

    nodes = []
    for node in result.nodes:
        x, y = transform(node.x, node.y)
        nodes.append(node.model_copy(update={"x": x, "y": y}))

    partnership_connections = [
        conn.model_copy(update={"midpoint": transform_point(conn.midpoint, orientation)})
        for conn in result.partnership_connections
    ]
    child_connections = [
        conn.model_copy(
            update={
                "drop_point": transform_point(conn.drop_point, orientation),
                "child_point": transform_point(conn.child_point, orientation),
            }
        )
        for conn in result.child_connections
    ]

    return LayoutResult(
        nodes=nodes,
        partnership_connections=partnership_connections,
        child_connections=child_connections,
        orientation=orientation,
    )
