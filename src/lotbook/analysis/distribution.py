"""Weight distribution of a lot's animals in fixed-width ranges."""

import math
from collections.abc import Iterable
from datetime import date
from typing import TypedDict

from lotbook.analysis.dedup import calendar_day, deduplicate_daily
from lotbook.core import settings
from lotbook.data.models import WeighingRecord


class WeightRangeBucket(TypedDict):
    range: str  # "240-270"
    start: int  # kg
    count: int  # animals


def weight_distribution(
    weighings: Iterable[WeighingRecord],
    bucket_kg: int | None = None,
    day: date | None = None,
) -> list[WeightRangeBucket]:
    """
    Count animals per weight range.

    Weighings only carry an average, so every animal of a weighing is
    placed in the range holding that average.

    Args:
        weighings: The lot's weighings (same-day duplicates collapsed)
        bucket_kg: Range width in kg (default: settings.weight_bucket_kg)
        day: Only use the weighing of this calendar day

    Returns:
        Buckets sorted by ascending range start
    """
    if bucket_kg is None:
        bucket_kg = settings.weight_bucket_kg
    if bucket_kg <= 0:
        raise ValueError(f"bucket_kg must be positive, got {bucket_kg}")

    counts: dict[int, int] = {}
    for w in deduplicate_daily(weighings):
        if day is not None and calendar_day(w.date) != calendar_day(day):
            continue
        if w.number_of_animals <= 0:
            continue
        start = math.floor(w.average_weight / bucket_kg) * bucket_kg
        counts[start] = counts.get(start, 0) + w.number_of_animals

    return [
        WeightRangeBucket(range=f"{start}-{start + bucket_kg}", start=start, count=count)
        for start, count in sorted(counts.items())
    ]
