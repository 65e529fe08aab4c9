"""Configuration defaults for the layout engine."""

from .settings import (
    SETTINGS,
    get_default_spacing,
    get_default_orientation,
    get_all_settings,
    set_setting,
)

__all__ = [
    "SETTINGS",
    "get_default_spacing",
    "get_default_orientation",
    "get_all_settings",
    "set_setting",
]
