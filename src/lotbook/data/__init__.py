"""Data modules - record types, farm snapshot, pasture move planning."""

from lotbook.data.models import (
    Lot,
    LotStatus,
    Pasture,
    PasturePlanning,
    PlanningStatus,
    WeighingRecord,
    parse_timestamp,
)
from lotbook.data.planning import (
    TransferStateError,
    complete_planning,
    complete_transfer,
    pending_transfers,
    schedule_transfer,
)
from lotbook.data.snapshot import (
    FarmSnapshot,
    SnapshotError,
    load_snapshot,
    resolve_lot_name,
    resolve_pasture_name,
    snapshot_from_dict,
)

__all__ = [
    # models
    "Lot",
    "LotStatus",
    "Pasture",
    "PasturePlanning",
    "PlanningStatus",
    "WeighingRecord",
    "parse_timestamp",
    # snapshot
    "FarmSnapshot",
    "SnapshotError",
    "load_snapshot",
    "snapshot_from_dict",
    "resolve_lot_name",
    "resolve_pasture_name",
    # planning
    "TransferStateError",
    "schedule_transfer",
    "complete_planning",
    "complete_transfer",
    "pending_transfers",
]
