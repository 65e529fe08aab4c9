"""Layout engines registry.

Available engines:
- partnership: partnership-centric family tree layout
"""

from kinlayout.layout.engines.base import LayoutEngine
from kinlayout.layout.engines.partnership import PartnershipLayoutEngine, calculate_layout

# Engine registry
ENGINES = {
    "partnership": PartnershipLayoutEngine,
}


def get_engine(name: str) -> type:
    """Get layout engine class by name.

    Args:
        name: Engine name ('partnership')

    Returns:
        Layout engine class

    Raises:
        ValueError: If engine not found
    """
    if name not in ENGINES:
        raise ValueError(f"Unknown layout engine: {name}. Available: {list(ENGINES.keys())}")
    return ENGINES[name]


__all__ = [
    "LayoutEngine",
    "PartnershipLayoutEngine",
    "calculate_layout",
    "ENGINES",
    "get_engine",
]
