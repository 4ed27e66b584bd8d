"""Command-line interface for the airport roster engine."""

import argparse
import logging
import json
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.generators.sample_airport import generate_sample_airport, print_instance_summary
from engine import BookingEngine
from models import FrequentFlyer, Seat, RosterSnapshot


def setup_logging(level: str = "INFO", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def report_booking(label: str, result) -> None:
    """Print the outcome of one booking attempt."""
    if result.success:
        line = f"  {label}: booked {result.flight.flight_code} seat {result.seat}"
        if result.displaced is not None:
            line += f" (moved {result.displaced.name})"
    else:
        line = f"  {label}: rejected ({result.reason.value})"
        if result.suggested_seat is not None:
            line += f", nearest free seat {result.suggested_seat}"
    print(line)


def finish(snapshot: RosterSnapshot, output_file: str = None) -> None:
    """Print roster, invariant checks and optionally save JSON."""
    logger = logging.getLogger(__name__)

    snapshot.print_summary()

    print("\nInvariant Verification:")
    print("-" * 40)
    for invariant, satisfied in snapshot.verify_invariants().items():
        status = "PASS" if satisfied else "FAIL"
        print(f"  {invariant}: {status}")

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(snapshot.to_dict(), f, indent=2)
        logger.info(f"Roster saved to {output_file}")


def run_demo(verbose: bool = True, output_file: str = None) -> RosterSnapshot:
    """Run a scripted session: bookings, a seat conflict, a displacement and a delay."""
    logger = logging.getLogger(__name__)

    logger.info("Generating sample airport instance...")
    registry, directory = generate_sample_airport()
    engine = BookingEngine(registry, directory)

    if verbose:
        print_instance_summary(registry, directory)

    alice = directory.get_by_email("alice@example.com")
    ben = directory.get_by_email("ben@example.com")
    chloe = directory.get_by_email("chloe@example.com")
    erin = directory.get_by_email("erin@example.com")

    print("Bookings:")
    print("-" * 40)
    report_booking("Alice arrival QFA100 1:A", engine.book_arrival(alice, 0, 1, "A"))
    report_booking("Ben arrival QFA100 1:A", engine.book_arrival(ben, 0, 1, "A"))
    report_booking("Chloe arrival QFA100 1:A", engine.book_arrival(chloe, 0, 1, "A"))
    report_booking("Alice departure QFA200 3:C", engine.book_departure(alice, 0, 3, "C"))
    report_booking("Ben departure QFA200 2:B", engine.book_departure(ben, 0, 2, "B"))
    report_booking("Ben arrival QFA100 2:A", engine.book_arrival(ben, 0, 2, "A"))
    report_booking("Erin arrival QFA100 5:A", engine.book_arrival(erin, 0, 5, "A"))

    logger.info("Delaying QFA100 by 180 minutes...")
    result = registry.delay("QFA100", 180)
    if result.applied:
        pushed = ", ".join(f.flight_code for f in result.propagated) or "none"
        print(f"\nDelayed {result.flight.flight_code}; also pushed: {pushed}")

    print("\nAlice's flights:")
    for view in engine.booking_details(alice):
        print(f"  {view.describe()}")

    occupant = engine.find_occupant("QFA100", Seat(1, "B"))
    print(f"\nSeat 1:B on QFA100 is held by {occupant.name if occupant else 'nobody'}")

    if isinstance(chloe, FrequentFlyer):
        points = engine.points_breakdown(chloe)
        print(f"Chloe's points: {points.current:,} now, {points.projected_total:,} after flying")

    snapshot = engine.snapshot()
    finish(snapshot, output_file)
    return snapshot


def run_full_flight(verbose: bool = True, output_file: str = None) -> RosterSnapshot:
    """Fill one flight to capacity and show that further bookings are refused."""
    logger = logging.getLogger(__name__)

    registry, directory = generate_sample_airport()
    engine = BookingEngine(registry, directory)
    rules = registry.rules

    logger.info(f"Filling QFA100 with {rules.seats_per_flight} travellers...")
    for i, seat in enumerate(rules.iter_seats()):
        user = directory.register_traveller(
            f"Passenger {i + 1}", 30, "0400000000", f"passenger{i + 1}@example.com"
        ).user
        engine.book_arrival(user, 0, seat.row, seat.column)

    if verbose:
        print(f"QFA100 occupied seats: {len(registry.occupied_seats('QFA100'))}")

    print("Bookings on a full flight:")
    print("-" * 40)
    alice = directory.get_by_email("alice@example.com")
    chloe = directory.get_by_email("chloe@example.com")
    report_booking("Alice arrival QFA100 1:A", engine.book_arrival(alice, 0, 1, "A"))
    report_booking("Chloe arrival QFA100 1:A", engine.book_arrival(chloe, 0, 1, "A"))

    snapshot = engine.snapshot()
    finish(snapshot, output_file)
    return snapshot


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Airport flight roster and seat allocation engine"
    )

    parser.add_argument(
        "--scenario",
        type=str,
        default="demo",
        choices=["demo", "full_flight"],
        help="Scenario to run (default: demo)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for roster JSON"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress verbose output"
    )

    args = parser.parse_args()

    # Setup logging
    setup_logging(args.log_level, args.log_file)

    if args.scenario == "demo":
        run_demo(verbose=not args.quiet, output_file=args.output)
    elif args.scenario == "full_flight":
        run_full_flight(verbose=not args.quiet, output_file=args.output)


if __name__ == "__main__":
    main()
