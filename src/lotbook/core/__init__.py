"""Core module - configuration and display units."""

from lotbook.core import units
from lotbook.core.config import get_cache_dir, settings
from lotbook.core.units import (
    format_daily_gain,
    format_weight,
    get_weight_unit,
    is_imperial,
    kg_to_lb,
    weight_kg_to_display,
)

__all__ = [
    "units",
    "settings",
    "get_cache_dir",
    # Unit conversion helpers
    "kg_to_lb",
    "weight_kg_to_display",
    "format_weight",
    "format_daily_gain",
    "get_weight_unit",
    "is_imperial",
]
