"""Livestock lot growth and transfer analytics.

This package turns a farm's raw weighing and pasture-planning records into
consistent per-lot series: animal counts, projected total weight, daily
weight gain (whole lot and per animal), lot-to-lot transfers and pasture
move history.

Subpackages:
- lotbook.core: Configuration and display units
- lotbook.data: Record types, farm snapshot, pasture move planning
- lotbook.analysis: Deduplication, growth metrics, transfers, breeds
- lotbook.cli: Command-line reports over a cached snapshot
"""

# Re-export common items for convenience
from lotbook.analysis import (
    animal_count_evolution,
    build_lot_report,
    daily_gain,
    daily_gain_per_animal,
    deduplicate_daily,
    lot_transfers,
    parse_breed_composition,
    pasture_history,
    total_weight_projection,
)
from lotbook.core import settings
from lotbook.data import FarmSnapshot, load_snapshot, snapshot_from_dict

__all__ = [
    "settings",
    "FarmSnapshot",
    "load_snapshot",
    "snapshot_from_dict",
    "deduplicate_daily",
    "animal_count_evolution",
    "total_weight_projection",
    "daily_gain",
    "daily_gain_per_animal",
    "lot_transfers",
    "pasture_history",
    "parse_breed_composition",
    "build_lot_report",
]

__version__ = "0.1.0"
