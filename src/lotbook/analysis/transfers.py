"""
Transfer ledger for a lot.

Two independent histories:

- Lot-to-lot transfers come from weighing records whose destinationLotId
  points at another lot. The record is outgoing for its own lot and
  incoming for the destination lot.
- Pasture-to-pasture moves come from the lot's planned transfers.
  Completed moves form the history; scheduled ones form the schedule.

Unresolvable lot or pasture ids are reported with the unknown label.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Literal, TypedDict

from lotbook.core import settings
from lotbook.data.models import Lot, Pasture, PasturePlanning, PlanningStatus, WeighingRecord
from lotbook.data.snapshot import resolve_lot_name, resolve_pasture_name

Direction = Literal["incoming", "outgoing"]


class TransferEntry(TypedDict):
    """A lot-to-lot transfer seen from one lot."""

    id: str
    date: datetime
    direction: Direction
    from_lot_id: str
    to_lot_id: str
    counterpart_lot_id: str
    counterpart_lot_name: str
    number_of_animals: int
    average_weight: float


class TransferLog(TypedDict):
    """Transfers for a lot, most recent first."""

    lot_id: str
    transfers: list[TransferEntry]
    total: int
    remaining: int  # transfers left out of a summary view
    incoming_animals: int
    outgoing_animals: int


class PastureMove(TypedDict):
    """A pasture move of a lot, with resolved pasture names."""

    lot_id: str
    status: str  # "scheduled" or "completed"
    date: datetime  # completion date, or scheduled date if not stamped
    scheduled_date: datetime
    completed_date: datetime | None
    from_pasture_id: str | None
    from_pasture_name: str
    to_pasture_id: str
    to_pasture_name: str
    notes: str | None


# -----------------------------------------------------------------------------
# Lot-to-lot Transfers
# -----------------------------------------------------------------------------


def transfer_direction(record: WeighingRecord, lot_id: str) -> Direction | None:
    """
    Classify a weighing record as a transfer for ``lot_id``.

    Returns "outgoing" when the record belongs to the lot and sends animals
    to another lot, "incoming" when another lot's record sends animals to
    this lot, None otherwise.
    """
    if not record.is_transfer:
        return None
    if record.lot_id == lot_id:
        return "outgoing"
    if record.destination_lot_id == lot_id:
        return "incoming"
    return None


def lot_transfers(
    weighings: Iterable[WeighingRecord],
    lot_id: str,
    lots: Iterable[Lot] = (),
    full_history: bool = False,
    limit: int | None = None,
) -> TransferLog:
    """
    Incoming and outgoing transfers of a lot.

    Args:
        weighings: All weighing records (transfers are recorded on the source lot)
        lot_id: Lot to build the ledger for
        lots: Lots used to resolve counterpart names
        full_history: Return every transfer instead of the most recent few
        limit: Size of the summary view (default: settings.transfer_summary_limit)

    Returns:
        TransferLog with entries sorted most recent first
    """
    lots = list(lots)
    if limit is None:
        limit = settings.transfer_summary_limit

    entries: list[TransferEntry] = []
    for record in weighings:
        direction = transfer_direction(record, lot_id)
        if direction is None:
            continue

        counterpart = record.destination_lot_id if direction == "outgoing" else record.lot_id
        entries.append(
            TransferEntry(
                id=record.id,
                date=record.date,
                direction=direction,
                from_lot_id=record.lot_id,
                to_lot_id=record.destination_lot_id,
                counterpart_lot_id=counterpart,
                counterpart_lot_name=resolve_lot_name(counterpart, lots),
                number_of_animals=record.number_of_animals,
                average_weight=record.average_weight,
            )
        )

    entries.sort(key=lambda e: e["date"], reverse=True)

    shown = entries if full_history else entries[: max(limit, 0)]

    return TransferLog(
        lot_id=lot_id,
        transfers=shown,
        total=len(entries),
        remaining=len(entries) - len(shown),
        incoming_animals=sum(e["number_of_animals"] for e in entries if e["direction"] == "incoming"),
        outgoing_animals=sum(e["number_of_animals"] for e in entries if e["direction"] == "outgoing"),
    )


# -----------------------------------------------------------------------------
# Pasture Moves
# -----------------------------------------------------------------------------


def _pasture_move(planning: PasturePlanning, pastures: list[Pasture]) -> PastureMove:
    return PastureMove(
        lot_id=planning.lot_id,
        status=planning.status.value,
        date=planning.effective_date,
        scheduled_date=planning.scheduled_date,
        completed_date=planning.completed_date,
        from_pasture_id=planning.from_pasture_id,
        from_pasture_name=resolve_pasture_name(planning.from_pasture_id, pastures),
        to_pasture_id=planning.to_pasture_id,
        to_pasture_name=resolve_pasture_name(planning.to_pasture_id, pastures),
        notes=planning.notes,
    )


def pasture_history(lot: Lot | None, pastures: Iterable[Pasture] = ()) -> list[PastureMove]:
    """Completed pasture moves, most recent first."""
    if lot is None:
        return []

    pastures = list(pastures)
    completed = [p for p in lot.planned_transfers if p.status is PlanningStatus.COMPLETED]
    completed.sort(key=lambda p: p.effective_date, reverse=True)
    return [_pasture_move(p, pastures) for p in completed]


def scheduled_transfers(lot: Lot | None, pastures: Iterable[Pasture] = ()) -> list[PastureMove]:
    """Pasture moves still waiting to happen, soonest first."""
    if lot is None:
        return []

    pastures = list(pastures)
    pending = [p for p in lot.planned_transfers if p.status is PlanningStatus.SCHEDULED]
    pending.sort(key=lambda p: p.scheduled_date)
    return [_pasture_move(p, pastures) for p in pending]


def current_pasture_name(lot: Lot | None, pastures: Iterable[Pasture] = ()) -> str:
    """Name of the pasture the lot is on now."""
    if lot is None:
        return settings.unknown_label
    return resolve_pasture_name(lot.current_pasture_id, pastures)
