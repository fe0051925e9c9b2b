"""
Same-day collapsing of dated readings.

A lot can be weighed more than once on the same day (a re-weigh, a
correction). Every series view works from one reading per calendar day:
the one with the latest full timestamp.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime
from operator import attrgetter
from typing import TypeVar

from lotbook.data.models import parse_timestamp

T = TypeVar("T")


def calendar_day(value: date | datetime) -> date:
    """Truncate a timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def deduplicate_daily(
    records: Iterable[T],
    timestamp: Callable[[T], datetime] = attrgetter("date"),
) -> list[T]:
    """
    Keep one record per calendar day, ordered by ascending day.

    Among records sharing a day the one with the greatest timestamp wins;
    on an exact timestamp tie the first one seen is kept. The input is not
    modified and empty input gives an empty list.

    Args:
        records: Dated records in any order
        timestamp: Returns a record's full timestamp (default: ``record.date``)

    Returns:
        New list with one record per day
    """
    # day -> (comparable instant, record); a bare date counts as midnight
    by_day: dict[date, tuple[datetime, T]] = {}

    for record in records:
        value = timestamp(record)
        day = calendar_day(value)
        instant = parse_timestamp(value)
        kept = by_day.get(day)
        if kept is None or kept[0] < instant:
            by_day[day] = (instant, record)

    return [by_day[day][1] for day in sorted(by_day)]
