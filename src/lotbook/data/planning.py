"""
Pasture move planning as immutable transforms.

A PasturePlanning entry is created either scheduled (completed=False) or,
for an immediate move, already completed. The only transition is
scheduled -> completed; it stamps completed_date and never reverts.

Every function returns new records and leaves its inputs untouched.
"""

from dataclasses import replace
from datetime import datetime

from lotbook.data.models import Lot, PasturePlanning, PlanningStatus, parse_timestamp


class TransferStateError(Exception):
    """A planning entry was asked to make a transition it cannot make."""

    pass


def schedule_transfer(
    lot: Lot,
    to_pasture_id: str,
    scheduled_date: datetime,
    from_pasture_id: str | None = None,
    completed: bool = False,
    notes: str | None = None,
) -> Lot:
    """
    Add a pasture move to a lot.

    Args:
        lot: Lot being moved
        to_pasture_id: Destination pasture
        scheduled_date: When the move is due (or happened, if completed)
        from_pasture_id: Origin pasture (default: the lot's current pasture)
        completed: Record an immediate move instead of a scheduled one
        notes: Free-text notes

    Returns:
        New Lot with the entry appended. An immediate move also sets the
        lot's current pasture to the destination.
    """
    scheduled_date = parse_timestamp(scheduled_date)
    planning = PasturePlanning(
        lot_id=lot.id,
        to_pasture_id=to_pasture_id,
        scheduled_date=scheduled_date,
        from_pasture_id=from_pasture_id if from_pasture_id is not None else lot.current_pasture_id,
        completed=completed,
        completed_date=scheduled_date if completed else None,
        notes=notes,
    )

    planned = (*lot.planned_transfers, planning)
    if completed:
        return replace(lot, planned_transfers=planned, current_pasture_id=to_pasture_id)
    return replace(lot, planned_transfers=planned)


def complete_planning(planning: PasturePlanning, completed_date: datetime) -> PasturePlanning:
    """Mark a scheduled entry completed, stamping completed_date."""
    if planning.status is PlanningStatus.COMPLETED:
        raise TransferStateError(
            f"Transfer of lot {planning.lot_id} to pasture {planning.to_pasture_id} is already completed"
        )
    return replace(planning, completed=True, completed_date=parse_timestamp(completed_date))


def complete_transfer(lot: Lot, index: int, completed_date: datetime) -> Lot:
    """
    Complete the lot's planned transfer at ``index``.

    Returns a new Lot whose entry is completed and whose current pasture
    is the entry's destination. Raises IndexError for an unknown index and
    TransferStateError if the entry is already completed.
    """
    if not 0 <= index < len(lot.planned_transfers):
        raise IndexError(f"Lot {lot.id} has no planned transfer at index {index}")

    done = complete_planning(lot.planned_transfers[index], completed_date)
    planned = tuple(done if i == index else p for i, p in enumerate(lot.planned_transfers))
    return replace(lot, planned_transfers=planned, current_pasture_id=done.to_pasture_id)


def pending_transfers(lot: Lot) -> list[tuple[int, PasturePlanning]]:
    """(index, entry) pairs for the lot's scheduled, not yet completed moves."""
    return [(i, p) for i, p in enumerate(lot.planned_transfers) if p.status is PlanningStatus.SCHEDULED]
