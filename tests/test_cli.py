"""Tests for the command-line reports."""

import json

import pytest

from lotbook.cli import cli_main
from lotbook.core import settings


@pytest.fixture(autouse=True)
def metric_units(monkeypatch):
    monkeypatch.setattr(settings, "display_units", "metric")


def run(snapshot_file, *args) -> int:
    return cli_main(["--snapshot", str(snapshot_file), *args])


class TestLots:
    def test_table(self, snapshot_file, capsys):
        assert run(snapshot_file, "lots") == 0
        out = capsys.readouterr().out
        assert "Lot 1" in out
        assert "River Paddock" in out
        assert "treatment" in out

    def test_json(self, snapshot_file, capsys):
        assert run(snapshot_file, "lots", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert [lot["id"] for lot in data] == ["lot-1", "lot-2"]
        assert data[1]["pasture"] == "Unknown"


class TestGrowth:
    def test_table(self, snapshot_file, capsys):
        assert run(snapshot_file, "growth", "lot-1") == 0
        out = capsys.readouterr().out
        assert "Growth: Lot 1 (all time)" in out
        assert "2024-01-01 → 2024-01-11" in out
        assert "+50.00 kg/day" in out

    def test_lot_by_name(self, snapshot_file, capsys):
        assert run(snapshot_file, "growth", "LOT 1") == 0
        assert "Growth: Lot 1" in capsys.readouterr().out

    def test_json(self, snapshot_file, capsys):
        assert run(snapshot_file, "growth", "lot-1", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["average_daily_gain"] == 37.5
        assert data["animal_summary"]["current"] == 40

    def test_not_enough_weighings(self, snapshot_file, capsys):
        assert run(snapshot_file, "growth", "lot-2") == 0
        assert "Not enough weighings" in capsys.readouterr().out

    def test_unknown_lot(self, snapshot_file, capsys):
        assert run(snapshot_file, "growth", "ghost") == 1
        assert "Lot not found: ghost" in capsys.readouterr().out


class TestTransfers:
    def test_outgoing(self, snapshot_file, capsys):
        assert run(snapshot_file, "transfers", "lot-1") == 0
        out = capsys.readouterr().out
        assert "-> to" in out
        assert "Lot 2" in out

    def test_incoming_json(self, snapshot_file, capsys):
        assert run(snapshot_file, "transfers", "lot-2", "--json", "--full") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["transfers"][0]["direction"] == "incoming"
        assert data["transfers"][0]["counterpart_lot_name"] == "Lot 1"


class TestPastures:
    def test_history_and_schedule(self, snapshot_file, capsys):
        assert run(snapshot_file, "pastures", "lot-1") == 0
        out = capsys.readouterr().out
        assert "Current pasture: River Paddock" in out
        assert "North Field → River Paddock" in out
        assert "Scheduled:" in out


class TestBreeds:
    def test_from_notes(self, snapshot_file, capsys):
        assert run(snapshot_file, "breeds", "lot-1") == 0
        out = capsys.readouterr().out
        assert "Nelore" in out
        assert "Anelorada" in out

    def test_none(self, snapshot_file, capsys):
        assert run(snapshot_file, "breeds", "lot-2") == 0
        assert "No breed information" in capsys.readouterr().out


class TestDistribution:
    def test_json(self, snapshot_file, capsys):
        assert run(snapshot_file, "distribution", "lot-1", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [
            {"range": "180-210", "start": 180, "count": 50},
            {"range": "210-240", "start": 210, "count": 90},
        ]

    def test_single_day(self, snapshot_file, capsys):
        assert run(snapshot_file, "distribution", "lot-1", "--day", "2024-01-21") == 0
        assert "210-240" in capsys.readouterr().out


class TestReport:
    def test_json(self, snapshot_file, capsys):
        assert run(snapshot_file, "report", "lot-1") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["lot_id"] == "lot-1"
        assert data["breeds"]["source"] == "notes"


class TestErrors:
    def test_missing_snapshot(self, tmp_path, capsys):
        assert run(tmp_path / "missing.json", "lots") == 1
        assert "Error: Snapshot not found" in capsys.readouterr().out

    def test_bad_bucket_width(self, snapshot_file, capsys):
        assert run(snapshot_file, "distribution", "lot-1", "--bucket", "0") == 1
        assert "Error: bucket_kg must be positive" in capsys.readouterr().out

    def test_invalid_day(self, snapshot_file, capsys):
        assert run(snapshot_file, "distribution", "lot-1", "--day", "2024-13-01") == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_no_command(self, snapshot_file, capsys):
        assert run(snapshot_file) == 0
        assert "usage" in capsys.readouterr().out.lower()
