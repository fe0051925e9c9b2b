"""Everything known about one lot, computed from a farm snapshot."""

from datetime import date
from typing import TypedDict

from lotbook.analysis.breeds import BreedComposition, lot_breed_composition
from lotbook.analysis.distribution import WeightRangeBucket, weight_distribution
from lotbook.analysis.growth import (
    DailyPoint,
    GainPoint,
    SeriesSummary,
    animal_count_evolution,
    average_daily_gain,
    daily_gain,
    daily_gain_per_animal,
    summarize_points,
    total_weight_projection,
)
from lotbook.analysis.transfers import (
    PastureMove,
    TransferLog,
    current_pasture_name,
    lot_transfers,
    pasture_history,
    scheduled_transfers,
)
from lotbook.data.snapshot import FarmSnapshot


class LotReport(TypedDict):
    lot_id: str
    lot_name: str
    status: str | None
    number_of_animals: int
    current_pasture: str
    time_range_days: int | None
    animal_evolution: list[DailyPoint]
    animal_summary: SeriesSummary
    weight_projection: list[DailyPoint]
    weight_summary: SeriesSummary
    daily_gain: list[GainPoint]
    average_daily_gain: float
    daily_gain_per_animal: list[GainPoint]
    average_daily_gain_per_animal: float
    transfers: TransferLog
    pasture_history: list[PastureMove]
    scheduled_moves: list[PastureMove]
    breeds: BreedComposition
    weight_distribution: list[WeightRangeBucket]


def build_lot_report(
    snapshot: FarmSnapshot,
    lot_id: str,
    days: int | None = None,
    reference_date: date | None = None,
) -> LotReport:
    """
    Run every lot view against a snapshot.

    An unknown lot gives a report with empty series and unknown names
    rather than an error.
    """
    lot = snapshot.lot(lot_id)
    weighings = snapshot.weighings_for(lot_id)

    evolution = animal_count_evolution(weighings, lot, days, reference_date)
    projection = total_weight_projection(weighings, lot, days, reference_date)
    gains = daily_gain(weighings, lot, days, reference_date)
    gains_per_animal = daily_gain_per_animal(weighings, days, reference_date)

    if lot is not None:
        breeds = lot_breed_composition(lot)
    else:
        breeds = BreedComposition(pairs=[], source="none")

    return LotReport(
        lot_id=lot_id,
        lot_name=snapshot.lot_name(lot_id),
        status=lot.status.value if lot else None,
        number_of_animals=lot.number_of_animals if lot else 0,
        current_pasture=current_pasture_name(lot, snapshot.pastures),
        time_range_days=days,
        animal_evolution=evolution,
        animal_summary=summarize_points(evolution, "animals"),
        weight_projection=projection,
        weight_summary=summarize_points(projection, "weight"),
        daily_gain=gains,
        average_daily_gain=average_daily_gain(gains),
        daily_gain_per_animal=gains_per_animal,
        average_daily_gain_per_animal=average_daily_gain(gains_per_animal),
        transfers=lot_transfers(snapshot.weighings, lot_id, snapshot.lots),
        pasture_history=pasture_history(lot, snapshot.pastures),
        scheduled_moves=scheduled_transfers(lot, snapshot.pastures),
        breeds=breeds,
        weight_distribution=weight_distribution(weighings),
    )
