"""Tests for record types and normalisation."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from lotbook.data.models import (
    Lot,
    LotStatus,
    Pasture,
    PasturePlanning,
    PlanningStatus,
    WeighingRecord,
    parse_timestamp,
)


class TestParseTimestamp:
    """Tests for date normalisation."""

    def test_datetime_passthrough(self):
        assert parse_timestamp(datetime(2024, 1, 1, 8, 30)) == datetime(2024, 1, 1, 8, 30)

    def test_date_becomes_midnight(self):
        assert parse_timestamp(date(2024, 1, 1)) == datetime(2024, 1, 1)

    def test_iso_string(self):
        assert parse_timestamp("2024-01-01T08:30:00") == datetime(2024, 1, 1, 8, 30)

    def test_iso_string_with_z(self):
        assert parse_timestamp("2024-01-01T08:30:00Z") == datetime(2024, 1, 1, 8, 30)

    def test_offset_converted_to_utc(self):
        assert parse_timestamp("2024-01-01T08:30:00-03:00") == datetime(2024, 1, 1, 11, 30)

    def test_epoch_milliseconds(self):
        assert parse_timestamp(1704067200000) == datetime(2024, 1, 1)

    def test_unsupported(self):
        with pytest.raises(TypeError):
            parse_timestamp(None)


class TestWeighingRecord:
    def test_from_store_dict(self):
        record = WeighingRecord.from_dict(
            {
                "id": "w1",
                "lotId": "lot-1",
                "date": "2024-01-01T08:00:00Z",
                "averageWeight": "210.5",
                "numberOfAnimals": 50,
                "destinationLotId": "lot-2",
            }
        )
        assert record.lot_id == "lot-1"
        assert record.average_weight == 210.5
        assert record.number_of_animals == 50
        assert record.destination_lot_id == "lot-2"
        assert record.is_transfer

    def test_from_snake_case_dict(self):
        record = WeighingRecord.from_dict(
            {
                "id": "w1",
                "lot_id": "lot-1",
                "date": "2024-01-01",
                "average_weight": 200,
                "number_of_animals": 10,
            }
        )
        assert record.lot_id == "lot-1"
        assert record.destination_lot_id is None
        assert not record.is_transfer

    def test_empty_destination_is_none(self):
        record = WeighingRecord.from_dict(
            {"id": "w1", "lotId": "l", "date": "2024-01-01", "averageWeight": 1, "numberOfAnimals": 1, "destinationLotId": ""}
        )
        assert record.destination_lot_id is None

    def test_missing_field_raises(self):
        with pytest.raises(KeyError):
            WeighingRecord.from_dict({"lotId": "lot-1", "date": "2024-01-01"})

    def test_frozen(self):
        record = WeighingRecord(id="w1", lot_id="l", date=datetime(2024, 1, 1), average_weight=1, number_of_animals=1)
        with pytest.raises(FrozenInstanceError):
            record.average_weight = 2


class TestLot:
    def test_from_store_dict(self):
        lot = Lot.from_dict(
            {
                "id": "lot-1",
                "name": "Lot 1",
                "status": "sold",
                "numberOfAnimals": 42,
                "currentPastureId": "p1",
                "plannedTransfers": [
                    {"lotId": "lot-1", "toPastureId": "p2", "scheduledDate": "2024-02-01", "completed": False}
                ],
            }
        )
        assert lot.status is LotStatus.SOLD
        assert lot.number_of_animals == 42
        assert lot.current_pasture_id == "p1"
        assert len(lot.planned_transfers) == 1
        assert isinstance(lot.planned_transfers, tuple)

    def test_defaults(self):
        lot = Lot.from_dict({"id": "lot-1", "name": "Lot 1"})
        assert lot.status is LotStatus.ACTIVE
        assert lot.number_of_animals == 0
        assert lot.planned_transfers == ()

    def test_bad_status(self):
        with pytest.raises(ValueError):
            Lot.from_dict({"id": "lot-1", "name": "Lot 1", "status": "lost"})


class TestPasturePlanning:
    def test_status(self):
        scheduled = PasturePlanning(lot_id="l", to_pasture_id="p", scheduled_date=datetime(2024, 1, 1))
        assert scheduled.status is PlanningStatus.SCHEDULED
        assert scheduled.effective_date == datetime(2024, 1, 1)

    def test_completed_effective_date(self):
        done = PasturePlanning.from_dict(
            {
                "lotId": "l",
                "toPastureId": "p",
                "scheduledDate": "2024-01-01",
                "completed": True,
                "completedDate": "2024-01-03",
            }
        )
        assert done.status is PlanningStatus.COMPLETED
        assert done.effective_date == datetime(2024, 1, 3)


class TestPasture:
    def test_from_dict(self):
        assert Pasture.from_dict({"id": "p1", "name": "North"}) == Pasture(id="p1", name="North")
