"""Unit conversion utilities using pint.

All analytics work in metric (SI) units:
- Mass: kilograms (kg)
- Daily gain: kilograms per day (kg/day)

Display units are controlled by settings.display_units:
- "metric": Display as computed (kg)
- "imperial": Convert to pounds (lb)
"""

import pint

from lotbook.core.config import settings

# Create a unit registry (lazily initialized)
_ureg: pint.UnitRegistry | None = None


def get_ureg() -> pint.UnitRegistry:
    """Get the pint unit registry (lazily initialized)."""
    global _ureg
    if _ureg is None:
        _ureg = pint.UnitRegistry()
    return _ureg


# =============================================================================
# Weight Conversions
# =============================================================================


def kg_to_lb(kg: float) -> float:
    """Convert kilograms to pounds."""
    ureg = get_ureg()
    return (kg * ureg.kilogram).to(ureg.pound).magnitude


def weight_kg_to_display(kg: float) -> tuple[float, str]:
    """Convert kilograms to display units.

    Args:
        kg: Weight in kilograms

    Returns:
        Tuple of (value, unit_symbol) in display units
    """
    if settings.display_units == "imperial":
        return (kg_to_lb(kg), "lb")
    return (kg, "kg")


def format_weight(kg: float, decimals: int = 0) -> str:
    """Format a weight for display.

    Args:
        kg: Weight in kilograms
        decimals: Number of decimal places

    Returns:
        Formatted string like "12,500 kg" or "27,558 lb"
    """
    value, unit = weight_kg_to_display(kg)
    return f"{value:,.{decimals}f} {unit}"


def format_daily_gain(kg_per_day: float, decimals: int = 2, per_animal: bool = False) -> str:
    """Format a daily gain rate for display.

    Returns:
        Formatted string like "+0.85 kg/day" or "-1.20 lb/day/head"
    """
    value, unit = weight_kg_to_display(kg_per_day)
    suffix = "/day/head" if per_animal else "/day"
    return f"{value:+.{decimals}f} {unit}{suffix}"


# =============================================================================
# Display Unit Info
# =============================================================================


def get_weight_unit() -> str:
    """Get the weight unit symbol for current display settings."""
    return "lb" if settings.display_units == "imperial" else "kg"


def is_imperial() -> bool:
    """Check if display units are imperial."""
    return settings.display_units == "imperial"
