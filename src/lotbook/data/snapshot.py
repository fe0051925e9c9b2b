"""
Read-only farm snapshot.

The analytics never reach into a global store. Callers hand them a
FarmSnapshot (or the individual collections) taken from the data store;
the store owns invalidation and any caching of derived results.

Snapshot JSON layout (as exported by the store):

    {
        "weighings": [{"id", "lotId", "date", "averageWeight", "numberOfAnimals", ...}],
        "lots": [{"id", "name", "status", "numberOfAnimals", "plannedTransfers", ...}],
        "pastures": [{"id", "name"}]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from lotbook.core import get_cache_dir, settings
from lotbook.data.models import Lot, Pasture, WeighingRecord


class SnapshotError(Exception):
    """Snapshot could not be read or holds a record missing mandatory fields."""

    pass


@dataclass(frozen=True)
class FarmSnapshot:
    """Immutable view of the weighing, lot and pasture collections."""

    weighings: tuple[WeighingRecord, ...] = field(default_factory=tuple)
    lots: tuple[Lot, ...] = field(default_factory=tuple)
    pastures: tuple[Pasture, ...] = field(default_factory=tuple)

    def lot(self, lot_id: str) -> Lot | None:
        return next((lot for lot in self.lots if lot.id == lot_id), None)

    def find_lot(self, identifier: str) -> Lot | None:
        """Find a lot by id, then by name (case-insensitive)."""
        lot = self.lot(identifier)
        if lot is not None:
            return lot
        wanted = identifier.strip().lower()
        return next((lot for lot in self.lots if lot.name.lower() == wanted), None)

    def lot_name(self, lot_id: str | None) -> str:
        return resolve_lot_name(lot_id, self.lots)

    def pasture_name(self, pasture_id: str | None) -> str:
        return resolve_pasture_name(pasture_id, self.pastures)

    def weighings_for(self, lot_id: str) -> list[WeighingRecord]:
        """Weighings taken on the lot itself (not transfers into it)."""
        return [w for w in self.weighings if w.lot_id == lot_id]


def resolve_pasture_name(pasture_id: str | None, pastures) -> str:
    """Name of a pasture, or the unknown label if it cannot be resolved."""
    if pasture_id:
        for pasture in pastures:
            if pasture.id == pasture_id:
                return pasture.name or settings.unknown_label
    return settings.unknown_label


def resolve_lot_name(lot_id: str | None, lots) -> str:
    """Name of a lot, or the unknown label if it cannot be resolved."""
    if lot_id:
        for lot in lots:
            if lot.id == lot_id:
                return lot.name or settings.unknown_label
    return settings.unknown_label


def snapshot_from_dict(data: dict) -> FarmSnapshot:
    """
    Build a snapshot from store-shaped dicts.

    Missing collections become empty. A record without its mandatory
    fields raises SnapshotError naming the collection and position.
    """
    collections = (
        ("weighings", WeighingRecord),
        ("lots", Lot),
        ("pastures", Pasture),
    )

    parsed = {}
    for key, record_type in collections:
        records = []
        for i, raw in enumerate(data.get(key) or []):
            try:
                records.append(record_type.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                raise SnapshotError(f"Invalid record in {key}[{i}]: {e!r}") from e
        parsed[key] = tuple(records)

    return FarmSnapshot(**parsed)


def load_snapshot(cache_path: Path | None = None) -> FarmSnapshot:
    """Load a cached snapshot JSON file."""
    if cache_path is None:
        cache_path = get_cache_dir() / settings.snapshot_file

    try:
        with open(cache_path) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SnapshotError(f"Snapshot not found: {cache_path}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Snapshot is not valid JSON: {cache_path} ({e})") from e

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot must be a JSON object: {cache_path}")

    return snapshot_from_dict(data)
