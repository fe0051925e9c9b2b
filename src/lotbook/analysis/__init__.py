"""Lot analytics - deduplication, growth metrics, transfers, breeds.

This module provides:
- Same-day collapsing of weighing series (dedup.py)
- Animal count, total weight and daily gain series (growth.py)
- Lot-to-lot transfer ledger and pasture move history (transfers.py)
- Breed composition from lot notes (breeds.py)
- Weight range distribution (distribution.py)
- One-call lot report over a farm snapshot (report.py)
"""

from lotbook.analysis.breeds import (
    BREED_KEYWORDS,
    BreedComposition,
    BreedCount,
    format_breed_name,
    lot_breed_composition,
    parse_breed_composition,
)
from lotbook.analysis.dedup import calendar_day, deduplicate_daily
from lotbook.analysis.distribution import WeightRangeBucket, weight_distribution
from lotbook.analysis.growth import (
    TIME_RANGES,
    DailyPoint,
    GainPoint,
    SeriesSummary,
    animal_count_evolution,
    average_daily_gain,
    daily_gain,
    daily_gain_per_animal,
    filter_by_range,
    parse_time_range,
    summarize_points,
    total_weight_projection,
)
from lotbook.analysis.report import LotReport, build_lot_report
from lotbook.analysis.transfers import (
    PastureMove,
    TransferEntry,
    TransferLog,
    current_pasture_name,
    lot_transfers,
    pasture_history,
    scheduled_transfers,
    transfer_direction,
)

__all__ = [
    # dedup
    "calendar_day",
    "deduplicate_daily",
    # growth
    "TIME_RANGES",
    "DailyPoint",
    "GainPoint",
    "SeriesSummary",
    "parse_time_range",
    "filter_by_range",
    "animal_count_evolution",
    "total_weight_projection",
    "daily_gain",
    "daily_gain_per_animal",
    "summarize_points",
    "average_daily_gain",
    # transfers
    "TransferEntry",
    "TransferLog",
    "PastureMove",
    "transfer_direction",
    "lot_transfers",
    "pasture_history",
    "scheduled_transfers",
    "current_pasture_name",
    # breeds
    "BREED_KEYWORDS",
    "BreedCount",
    "BreedComposition",
    "parse_breed_composition",
    "lot_breed_composition",
    "format_breed_name",
    # distribution
    "WeightRangeBucket",
    "weight_distribution",
    # report
    "LotReport",
    "build_lot_report",
]
