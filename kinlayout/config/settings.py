"""
Layout defaults with environment variable overrides

This module provides the spacing and orientation used when a caller does not
pass its own. Values are read from environment variables at import time so a
deployment can retune the default look without code changes.

Usage:
    from kinlayout.config.settings import get_default_spacing

    spacing = get_default_spacing()
    layout = calculate_layout(graph, spacing=spacing)

Environment Variables:
    KINLAYOUT_GENERATION_GAP=100     - Distance between generations
    KINLAYOUT_SIBLING_GAP=50         - Distance between sibling subtrees
    KINLAYOUT_PARTNER_GAP=30         - Distance between partners
    KINLAYOUT_ORIENTATION=top-down   - top-down | bottom-up | left-right | right-left
"""

import os
from typing import Dict, Union

from kinlayout.models.layout_result import Orientation, SpacingConfig


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(
            f"Environment variable {name} must be a number, got '{raw}'"
        )


# Settings with environment variable overrides
SETTINGS: Dict[str, Union[float, str]] = {
    'generation_gap': _float_env('KINLAYOUT_GENERATION_GAP', 100.0),
    'sibling_gap': _float_env('KINLAYOUT_SIBLING_GAP', 50.0),
    'partner_gap': _float_env('KINLAYOUT_PARTNER_GAP', 30.0),
    'orientation': os.getenv('KINLAYOUT_ORIENTATION', Orientation.TOP_DOWN.value),
}


def get_default_spacing() -> SpacingConfig:
    """
    Build the default spacing from current settings.

    Returns:
        SpacingConfig with the configured gaps

    Raises:
        pydantic.ValidationError: If a configured gap is not positive

    Example:
        >>> get_default_spacing()
        SpacingConfig(generation=100.0, siblings=50.0, partners=30.0)
    """
    return SpacingConfig(
        generation=SETTINGS['generation_gap'],
        siblings=SETTINGS['sibling_gap'],
        partners=SETTINGS['partner_gap'],
    )


def get_default_orientation() -> Orientation:
    """
    Get the configured default orientation.

    Raises:
        ValueError: If the configured value is not a known orientation
    """
    value = SETTINGS['orientation']
    try:
        return Orientation(value)
    except ValueError:
        available = ', '.join(o.value for o in Orientation)
        raise ValueError(
            f"Unknown orientation: '{value}'. "
            f"Available orientations: {available}"
        )


def get_all_settings() -> Dict[str, Union[float, str]]:
    """
    Get all settings and their current values.

    Example:
        >>> get_all_settings()
        {
            'generation_gap': 100.0,
            'sibling_gap': 50.0,
            'partner_gap': 30.0,
            'orientation': 'top-down'
        }
    """
    return SETTINGS.copy()


def set_setting(name: str, value: Union[float, str]) -> None:
    """
    Programmatically override a setting (for testing only).

    Args:
        name: Setting name
        value: New value

    Warning:
        This is for testing only. In production, use environment variables.
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    SETTINGS[name] = value
