"""
Record types for lots, pastures, weighings and planned pasture moves.

Records mirror the collections held by the farm data store. They are frozen
so the analytics can share them freely; "updates" build new records (see
lotbook.data.planning).

Each type has a ``from_dict`` constructor that accepts the store's camelCase
keys (``lotId``, ``averageWeight``...) as well as snake_case keys.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import Enum


class LotStatus(Enum):
    ACTIVE = "active"
    SOLD = "sold"
    TREATMENT = "treatment"


class PlanningStatus(Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


def parse_timestamp(value) -> datetime:
    """
    Normalise a date-like value to a naive datetime.

    Accepts datetime, date (midnight of that day), ISO-8601 strings
    (a trailing 'Z' is allowed) and epoch milliseconds. Aware datetimes
    are converted to UTC and made naive so all records compare.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=UTC).replace(tzinfo=None)
    elif isinstance(value, str):
        result = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        raise TypeError(f"Unsupported date value: {value!r}")

    if result.tzinfo is not None:
        result = result.astimezone(UTC).replace(tzinfo=None)
    return result


def _optional_timestamp(value) -> datetime | None:
    if value is None or value == "":
        return None
    return parse_timestamp(value)


def _pick(data: dict, camel: str, snake: str, default=None):
    """Read a field by its store (camelCase) or Python (snake_case) name."""
    if camel in data:
        return data[camel]
    return data.get(snake, default)


@dataclass(frozen=True)
class Pasture:
    """A land parcel; only the name is needed for display."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "Pasture":
        return cls(id=data["id"], name=data.get("name") or "")


@dataclass(frozen=True)
class WeighingRecord:
    """A dated measurement of a lot's average weight and animal count.

    When ``destination_lot_id`` is set and differs from ``lot_id`` the
    weighing also records a transfer of animals to that lot.
    """

    id: str
    lot_id: str
    date: datetime
    average_weight: float  # kg per animal
    number_of_animals: int
    destination_lot_id: str | None = None
    notes: str | None = None

    @property
    def is_transfer(self) -> bool:
        return bool(self.destination_lot_id) and self.destination_lot_id != self.lot_id

    @classmethod
    def from_dict(cls, data: dict) -> "WeighingRecord":
        return cls(
            id=data["id"],
            lot_id=_pick(data, "lotId", "lot_id"),
            date=parse_timestamp(data["date"]),
            average_weight=float(_pick(data, "averageWeight", "average_weight")),
            number_of_animals=int(_pick(data, "numberOfAnimals", "number_of_animals")),
            destination_lot_id=_pick(data, "destinationLotId", "destination_lot_id") or None,
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class PasturePlanning:
    """A scheduled or completed move of a lot between pastures."""

    lot_id: str
    to_pasture_id: str
    scheduled_date: datetime
    from_pasture_id: str | None = None
    completed: bool = False
    completed_date: datetime | None = None
    notes: str | None = None

    @property
    def status(self) -> PlanningStatus:
        return PlanningStatus.COMPLETED if self.completed else PlanningStatus.SCHEDULED

    @property
    def effective_date(self) -> datetime:
        """When the move happened (or is due): completion date if known."""
        return self.completed_date or self.scheduled_date

    @classmethod
    def from_dict(cls, data: dict) -> "PasturePlanning":
        return cls(
            lot_id=_pick(data, "lotId", "lot_id"),
            to_pasture_id=_pick(data, "toPastureId", "to_pasture_id"),
            scheduled_date=parse_timestamp(_pick(data, "scheduledDate", "scheduled_date")),
            from_pasture_id=_pick(data, "fromPastureId", "from_pasture_id") or None,
            completed=bool(data.get("completed", False)),
            completed_date=_optional_timestamp(_pick(data, "completedDate", "completed_date")),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class Lot:
    """A managed group of animals tracked as a unit.

    ``number_of_animals`` is the current authoritative count; weighing
    records carry their own snapshot of the count at measurement time.
    """

    id: str
    name: str
    number_of_animals: int
    status: LotStatus = LotStatus.ACTIVE
    current_pasture_id: str | None = None
    breed: str | None = None
    notes: str | None = None
    planned_transfers: tuple[PasturePlanning, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "Lot":
        planned = _pick(data, "plannedTransfers", "planned_transfers") or []
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            number_of_animals=int(_pick(data, "numberOfAnimals", "number_of_animals", 0)),
            status=LotStatus(data.get("status") or "active"),
            current_pasture_id=_pick(data, "currentPastureId", "current_pasture_id") or None,
            breed=data.get("breed") or None,
            notes=data.get("notes"),
            planned_transfers=tuple(PasturePlanning.from_dict(p) for p in planned),
        )
