"""Command-line reports for lots in a cached farm snapshot."""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

from lotbook.analysis import (
    TIME_RANGES,
    animal_count_evolution,
    average_daily_gain,
    build_lot_report,
    current_pasture_name,
    daily_gain,
    daily_gain_per_animal,
    format_breed_name,
    lot_breed_composition,
    lot_transfers,
    parse_time_range,
    pasture_history,
    scheduled_transfers,
    summarize_points,
    total_weight_projection,
    weight_distribution,
)
from lotbook.core import format_daily_gain, format_weight, settings
from lotbook.data import FarmSnapshot, Lot, SnapshotError, load_snapshot


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def _load(args: argparse.Namespace) -> FarmSnapshot:
    path = getattr(args, "snapshot", None)
    return load_snapshot(Path(path) if path else None)


def _find_lot(snapshot: FarmSnapshot, identifier: str) -> Lot | None:
    lot = snapshot.find_lot(identifier)
    if lot is None:
        print(f"Lot not found: {identifier}")
    return lot


def _banner(title: str) -> None:
    print("=" * 70)
    print(title)
    print("=" * 70)


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------


def cmd_lots(args: argparse.Namespace) -> int:
    """List all lots."""
    snapshot = _load(args)

    if args.json:
        _print_json(
            [
                {
                    "id": lot.id,
                    "name": lot.name,
                    "status": lot.status.value,
                    "number_of_animals": lot.number_of_animals,
                    "pasture": current_pasture_name(lot, snapshot.pastures),
                }
                for lot in snapshot.lots
            ]
        )
        return 0

    print(f"{'Lot':<20} {'Status':<10} {'Animals':>8}  {'Pasture'}")
    print("-" * 60)
    for lot in snapshot.lots:
        pasture = current_pasture_name(lot, snapshot.pastures)
        print(f"{lot.name:<20} {lot.status.value:<10} {lot.number_of_animals:>8}  {pasture}")
    return 0


def cmd_growth(args: argparse.Namespace) -> int:
    """Animal count, total weight and daily gain series."""
    snapshot = _load(args)
    lot = _find_lot(snapshot, args.lot)
    if lot is None:
        return 1

    days = parse_time_range(args.range)
    weighings = snapshot.weighings_for(lot.id)

    evolution = animal_count_evolution(weighings, lot, days)
    projection = total_weight_projection(weighings, lot, days)
    gains = daily_gain(weighings, lot, days)
    gains_per_animal = daily_gain_per_animal(weighings, days)

    if args.json:
        _print_json(
            {
                "lot_id": lot.id,
                "animal_evolution": evolution,
                "animal_summary": summarize_points(evolution, "animals"),
                "weight_projection": projection,
                "weight_summary": summarize_points(projection, "weight"),
                "daily_gain": gains,
                "average_daily_gain": average_daily_gain(gains),
                "daily_gain_per_animal": gains_per_animal,
                "average_daily_gain_per_animal": average_daily_gain(gains_per_animal),
            }
        )
        return 0

    _banner(f"Growth: {lot.name} ({'all time' if days is None else f'last {days} days'})")

    animals = summarize_points(evolution, "animals")
    print(f"\nAnimals: {animals['current']} ({animals['delta']:+} / {animals['percent_change']:+.1f}%)")
    weight = summarize_points(projection, "weight")
    print(
        f"Total weight: {format_weight(weight['current'])} "
        f"({format_weight(weight['delta'])} / {weight['percent_change']:+.1f}%)"
    )
    print(f"Avg daily gain: {format_daily_gain(average_daily_gain(gains))}")
    print(f"Avg daily gain per animal: {format_daily_gain(average_daily_gain(gains_per_animal), per_animal=True)}")

    if not gains_per_animal:
        print("\nNot enough weighings for daily gain (need at least 2 days).")
        return 0

    print(f"\n{'Interval':<26} {'Days':>5} {'Lot gain':>18} {'Per animal':>22} {'Animals':>8}")
    print("-" * 84)
    lot_gain_by_date = {g["date"]: g["daily_gain"] for g in gains}
    for g in gains_per_animal:
        lot_gain = lot_gain_by_date.get(g["date"])
        lot_gain_str = format_daily_gain(lot_gain) if lot_gain is not None else "-"
        print(
            f"{g['display_date']:<26} {g['period']:>5} {lot_gain_str:>18} "
            f"{format_daily_gain(g['daily_gain'], per_animal=True):>22} {g['animals_diff']:>+8}"
        )
    return 0


def cmd_transfers(args: argparse.Namespace) -> int:
    """Lot-to-lot transfers."""
    snapshot = _load(args)
    lot = _find_lot(snapshot, args.lot)
    if lot is None:
        return 1

    log = lot_transfers(snapshot.weighings, lot.id, snapshot.lots, full_history=args.full)

    if args.json:
        _print_json(log)
        return 0

    _banner(f"Transfers: {lot.name}")
    if not log["transfers"]:
        print("\nNo transfers recorded.")
        return 0

    print(f"\n{'Date':<12} {'Direction':<10} {'Lot':<20} {'Animals':>8} {'Avg weight':>12}")
    print("-" * 66)
    for t in log["transfers"]:
        arrow = "<- from" if t["direction"] == "incoming" else "-> to"
        print(
            f"{t['date']:%Y-%m-%d}   {arrow:<10} {t['counterpart_lot_name']:<20} "
            f"{t['number_of_animals']:>8} {format_weight(t['average_weight']):>12}"
        )
    if log["remaining"]:
        print(f"... and {log['remaining']} more (use --full)")

    print(f"\nIn: {log['incoming_animals']} animals, out: {log['outgoing_animals']} animals")
    return 0


def cmd_pastures(args: argparse.Namespace) -> int:
    """Pasture move history and schedule."""
    snapshot = _load(args)
    lot = _find_lot(snapshot, args.lot)
    if lot is None:
        return 1

    history = pasture_history(lot, snapshot.pastures)
    scheduled = scheduled_transfers(lot, snapshot.pastures)

    if args.json:
        _print_json({"lot_id": lot.id, "history": history, "scheduled": scheduled})
        return 0

    _banner(f"Pastures: {lot.name}")
    print(f"\nCurrent pasture: {current_pasture_name(lot, snapshot.pastures)}")

    print("\nHistory:")
    if not history:
        print("  No completed moves.")
    for move in history:
        print(f"  {move['date']:%Y-%m-%d}  {move['from_pasture_name']} → {move['to_pasture_name']}")

    if scheduled:
        print("\nScheduled:")
        for move in scheduled:
            print(f"  {move['date']:%Y-%m-%d}  {move['from_pasture_name']} → {move['to_pasture_name']}")
    return 0


def cmd_breeds(args: argparse.Namespace) -> int:
    """Breed composition from lot notes."""
    snapshot = _load(args)
    lot = _find_lot(snapshot, args.lot)
    if lot is None:
        return 1

    composition = lot_breed_composition(lot)

    if args.json:
        _print_json(composition)
        return 0

    _banner(f"Breeds: {lot.name}")
    if not composition["pairs"]:
        print("\nNo breed information.")
        return 0

    for pair in composition["pairs"]:
        print(f"  {format_breed_name(pair['breed']):<25} {pair['count']:>6}")
    if composition["source"] == "fallback":
        print("\n(from the lot's breed field; notes give no breakdown)")
    return 0


def cmd_distribution(args: argparse.Namespace) -> int:
    """Animals per weight range."""
    snapshot = _load(args)
    lot = _find_lot(snapshot, args.lot)
    if lot is None:
        return 1

    day = date.fromisoformat(args.day) if args.day else None
    buckets = weight_distribution(snapshot.weighings_for(lot.id), bucket_kg=args.bucket, day=day)

    if args.json:
        _print_json(buckets)
        return 0

    _banner(f"Weight distribution: {lot.name}")
    if not buckets:
        print("\nNo weighings.")
        return 0

    print(f"\n{'Range (kg)':<14} {'Animals':>8}")
    print("-" * 24)
    for bucket in buckets:
        print(f"{bucket['range']:<14} {bucket['count']:>8}")
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Full lot report as JSON."""
    snapshot = _load(args)
    lot = _find_lot(snapshot, args.lot)
    if lot is None:
        return 1

    _print_json(build_lot_report(snapshot, lot.id, days=parse_time_range(args.range)))
    return 0


# -----------------------------------------------------------------------------
# Entry Point
# -----------------------------------------------------------------------------


def cli_main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Growth and transfer reports for livestock lots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  lotbook lots                          List lots
  lotbook growth "Lot 7" --range 90     Growth over the last 90 days
  lotbook transfers L7 --full           Every lot-to-lot transfer
  lotbook pastures L7                   Pasture history and schedule
  lotbook report L7 > l7.json           Everything, as JSON

Snapshot: {settings.snapshot_file} in the cache directory (override with --snapshot)
""",
    )
    parser.add_argument("--snapshot", help="Path to a farm snapshot JSON file")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    lots_parser = subparsers.add_parser("lots", help="List lots")
    lots_parser.add_argument("--json", action="store_true", help="Output as JSON")

    growth_parser = subparsers.add_parser("growth", help="Animal count, total weight and daily gain")
    growth_parser.add_argument("lot", help="Lot id or name")
    growth_parser.add_argument("--range", default="all", choices=list(TIME_RANGES), help="Days back (default: all)")
    growth_parser.add_argument("--json", action="store_true", help="Output as JSON")

    transfers_parser = subparsers.add_parser("transfers", help="Lot-to-lot transfers")
    transfers_parser.add_argument("lot", help="Lot id or name")
    transfers_parser.add_argument("--full", action="store_true", help="Show the full history")
    transfers_parser.add_argument("--json", action="store_true", help="Output as JSON")

    pastures_parser = subparsers.add_parser("pastures", help="Pasture move history and schedule")
    pastures_parser.add_argument("lot", help="Lot id or name")
    pastures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    breeds_parser = subparsers.add_parser("breeds", help="Breed composition")
    breeds_parser.add_argument("lot", help="Lot id or name")
    breeds_parser.add_argument("--json", action="store_true", help="Output as JSON")

    dist_parser = subparsers.add_parser("distribution", help="Animals per weight range")
    dist_parser.add_argument("lot", help="Lot id or name")
    dist_parser.add_argument("--day", help="Only the weighing of this day (YYYY-MM-DD)")
    dist_parser.add_argument("--bucket", type=int, help=f"Range width in kg (default: {settings.weight_bucket_kg})")
    dist_parser.add_argument("--json", action="store_true", help="Output as JSON")

    report_parser = subparsers.add_parser("report", help="Full lot report as JSON")
    report_parser.add_argument("lot", help="Lot id or name")
    report_parser.add_argument("--range", default="all", choices=list(TIME_RANGES), help="Days back (default: all)")

    args = parser.parse_args(argv)

    commands = {
        "lots": cmd_lots,
        "growth": cmd_growth,
        "transfers": cmd_transfers,
        "pastures": cmd_pastures,
        "breeds": cmd_breeds,
        "distribution": cmd_distribution,
        "report": cmd_report,
    }

    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        return command(args)
    except (SnapshotError, ValueError) as e:
        print(f"Error: {e}")
        return 1


def cli() -> None:
    """CLI entry point."""
    sys.exit(cli_main())


if __name__ == "__main__":
    cli()
