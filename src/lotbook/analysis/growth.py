"""
Growth metrics for a lot's weighing history.

Four views are built from the same deduplicated, ascending weighing series:

- Animal-count evolution: the animal count recorded at each weighing
- Total-weight projection: average weight x the lot's *current* count
- Daily gain: change of total weight per day between consecutive weighings,
  using the lot's current count at both ends
- Daily gain per animal: change of total weight per day per animal, using
  each weighing's own animal count

Total-weight projection and aggregate daily gain apply today's animal count
to historical weighings, while the per-animal view uses the count recorded
with each weighing. The two are kept deliberately; do not align them without
a product decision.

All views take the lot's weighings in any order (same-day duplicates are
collapsed first) and never raise on sparse data: too few points give empty
series and zero summaries.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import NotRequired, TypedDict

from lotbook.analysis.dedup import calendar_day, deduplicate_daily
from lotbook.data.models import Lot, WeighingRecord

# Time-range choices offered to users (days back from today, None = all)
TIME_RANGES = {
    "all": None,
    "30": 30,
    "90": 90,
    "180": 180,
}


class DailyPoint(TypedDict):
    """One point of a per-weighing series."""

    date: date
    animals: int
    weight: float  # kg; average weight (evolution) or projected total (projection)


class GainPoint(TypedDict):
    """Gain over the interval ending at ``date``."""

    date: date  # end of the interval
    display_date: str  # "YYYY-MM-DD → YYYY-MM-DD"
    daily_gain: float  # kg/day (aggregate) or kg/day/animal
    period: int  # days in the interval
    animals_diff: NotRequired[int]  # per-animal view only


class SeriesSummary(TypedDict):
    """First vs. last point of a (filtered) series."""

    initial: float
    current: float
    delta: float
    percent_change: float


# -----------------------------------------------------------------------------
# Time Range Filtering
# -----------------------------------------------------------------------------


def parse_time_range(value: str | int | None) -> int | None:
    """
    Convert a time-range choice to a number of days.

    Accepts "all"/None (no filtering), one of the TIME_RANGES keys, or a
    positive integer number of days.
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        if value <= 0:
            raise ValueError(f"Time range must be a positive number of days, got {value}")
        return value

    key = str(value).strip().lower()
    if key in TIME_RANGES:
        return TIME_RANGES[key]
    raise ValueError(f"Unknown time range {value!r} (choose from: {', '.join(TIME_RANGES)})")


def filter_by_range(items: Sequence[dict], days: int | None, reference_date: date | None = None) -> list:
    """
    Keep items whose date falls in the last ``days`` days.

    The window is [reference_date - days, reference_date] at day
    granularity. Values are passed through untouched; ``days=None``
    keeps everything.
    """
    if days is None:
        return list(items)

    if reference_date is None:
        reference_date = date.today()
    reference_date = calendar_day(reference_date)
    start = reference_date - timedelta(days=days)

    return [item for item in items if start <= calendar_day(item["date"]) <= reference_date]


# -----------------------------------------------------------------------------
# Series Views
# -----------------------------------------------------------------------------


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def animal_count_evolution(
    weighings: Iterable[WeighingRecord],
    lot: Lot | None,
    days: int | None = None,
    reference_date: date | None = None,
) -> list[DailyPoint]:
    """Animal count at each weighing day."""
    if lot is None:
        return []

    points = [
        DailyPoint(
            date=calendar_day(w.date),
            animals=w.number_of_animals,
            weight=w.average_weight,
        )
        for w in deduplicate_daily(weighings)
    ]
    return filter_by_range(points, days, reference_date)


def total_weight_projection(
    weighings: Iterable[WeighingRecord],
    lot: Lot | None,
    days: int | None = None,
    reference_date: date | None = None,
) -> list[DailyPoint]:
    """Total lot weight at each weighing day, projected with the lot's current count."""
    if lot is None:
        return []

    points = [
        DailyPoint(
            date=calendar_day(w.date),
            animals=lot.number_of_animals,
            weight=_round_half_up(w.average_weight * lot.number_of_animals),
        )
        for w in deduplicate_daily(weighings)
    ]
    return filter_by_range(points, days, reference_date)


def _intervals(series: list[WeighingRecord]):
    """Yield (previous, current, days_between) for consecutive weighings.

    Intervals that do not move forward in time are skipped.
    """
    for prev, current in zip(series, series[1:]):
        prev_day = calendar_day(prev.date)
        current_day = calendar_day(current.date)
        days_between = (current_day - prev_day).days
        if days_between <= 0:
            continue
        yield prev, current, days_between


def _display_range(prev: WeighingRecord, current: WeighingRecord) -> str:
    return f"{calendar_day(prev.date).isoformat()} → {calendar_day(current.date).isoformat()}"


def daily_gain(
    weighings: Iterable[WeighingRecord],
    lot: Lot | None,
    days: int | None = None,
    reference_date: date | None = None,
) -> list[GainPoint]:
    """
    Daily gain of the whole lot between consecutive weighings.

    Total weight at each end is average weight x the lot's current count,
    so the gain is (avg_i - avg_{i-1}) x count / days_between, rounded to
    2 decimals.
    """
    if lot is None:
        return []

    series = deduplicate_daily(weighings)
    count = lot.number_of_animals

    points: list[GainPoint] = []
    for prev, current, days_between in _intervals(series):
        total_diff = current.average_weight * count - prev.average_weight * count
        points.append(
            GainPoint(
                date=calendar_day(current.date),
                display_date=_display_range(prev, current),
                daily_gain=round(total_diff / days_between, 2),
                period=days_between,
            )
        )

    return filter_by_range(points, days, reference_date)


def daily_gain_per_animal(
    weighings: Iterable[WeighingRecord],
    days: int | None = None,
    reference_date: date | None = None,
) -> list[GainPoint]:
    """
    Daily gain per animal between consecutive weighings.

    Uses the animal count recorded with each weighing:

        total_diff = avg_i x n_i - avg_{i-1} x n_{i-1}
        gain = total_diff / days_between / mean(n_{i-1}, n_i)

    A zero mean count gives a gain of 0. Each point also reports
    ``animals_diff`` (n_i - n_{i-1}).
    """
    series = deduplicate_daily(weighings)

    points: list[GainPoint] = []
    for prev, current, days_between in _intervals(series):
        prev_total = prev.average_weight * prev.number_of_animals
        current_total = current.average_weight * current.number_of_animals
        avg_animals = (prev.number_of_animals + current.number_of_animals) / 2

        gain = (current_total - prev_total) / days_between / avg_animals if avg_animals > 0 else 0.0

        points.append(
            GainPoint(
                date=calendar_day(current.date),
                display_date=_display_range(prev, current),
                daily_gain=round(gain, 2),
                period=days_between,
                animals_diff=current.number_of_animals - prev.number_of_animals,
            )
        )

    return filter_by_range(points, days, reference_date)


# -----------------------------------------------------------------------------
# Summaries
# -----------------------------------------------------------------------------


def summarize_points(points: Sequence[DailyPoint], field: str = "animals") -> SeriesSummary:
    """
    Compare the last point of a series to the first.

    Args:
        points: Series from animal_count_evolution or total_weight_projection
        field: "animals" or "weight"

    Returns:
        SeriesSummary; percent_change is unrounded, and 0 when the initial value is 0
    """
    if not points:
        return SeriesSummary(initial=0, current=0, delta=0, percent_change=0.0)

    initial = points[0][field]
    current = points[-1][field]
    delta = current - initial
    percent = delta / initial * 100 if initial else 0.0

    return SeriesSummary(initial=initial, current=current, delta=delta, percent_change=percent)


def average_daily_gain(points: Sequence[GainPoint]) -> float:
    """Arithmetic mean of the interval gains (0.0 when there are none)."""
    if not points:
        return 0.0
    return round(sum(p["daily_gain"] for p in points) / len(points), 2)
