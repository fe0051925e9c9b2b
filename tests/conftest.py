"""Shared test fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add src/ to path so tests can import lotbook
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def sample_farm_data():
    """Farm snapshot in the data store's (camelCase) export format."""
    return {
        "pastures": [
            {"id": "p-north", "name": "North Field"},
            {"id": "p-river", "name": "River Paddock"},
        ],
        "lots": [
            {
                "id": "lot-1",
                "name": "Lot 1",
                "status": "active",
                "numberOfAnimals": 50,
                "currentPastureId": "p-river",
                "breed": "nelore",
                "notes": "30 nelore 20 anelorada",
                "plannedTransfers": [
                    {
                        "lotId": "lot-1",
                        "fromPastureId": "p-north",
                        "toPastureId": "p-river",
                        "scheduledDate": "2024-01-05T00:00:00Z",
                        "completed": True,
                        "completedDate": "2024-01-06T00:00:00Z",
                    },
                    {
                        "lotId": "lot-1",
                        "fromPastureId": "p-river",
                        "toPastureId": "p-north",
                        "scheduledDate": "2024-03-01T00:00:00Z",
                        "completed": False,
                    },
                ],
            },
            {
                "id": "lot-2",
                "name": "Lot 2",
                "status": "treatment",
                "numberOfAnimals": 10,
                "currentPastureId": "p-gone",
            },
        ],
        "weighings": [
            {
                "id": "w1",
                "lotId": "lot-1",
                "date": "2024-01-01T08:00:00",
                "averageWeight": 200,
                "numberOfAnimals": 50,
            },
            {
                "id": "w2-early",
                "lotId": "lot-1",
                "date": "2024-01-11T07:00:00",
                "averageWeight": 205,
                "numberOfAnimals": 50,
            },
            {
                "id": "w2",
                "lotId": "lot-1",
                "date": "2024-01-11T15:00:00",
                "averageWeight": 210,
                "numberOfAnimals": 50,
            },
            {
                "id": "w3",
                "lotId": "lot-1",
                "date": "2024-01-21T09:00:00",
                "averageWeight": 215,
                "numberOfAnimals": 40,
                "destinationLotId": "lot-2",
            },
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, sample_farm_data):
    """Sample farm data written to a snapshot JSON file."""
    path = tmp_path / "farm.json"
    path.write_text(json.dumps(sample_farm_data))
    return path
