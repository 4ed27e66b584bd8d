"""Sample airport dataset generator.

Creates a one-day roster of arrivals and departures at a domestic
airport, with a handful of registered users. Several aircraft fly an
inbound and an outbound leg, so delays visibly propagate.
"""

from datetime import datetime
from typing import Tuple

from models import AIRLINES, AirportRules
from engine import FlightRegistry, UserDirectory


def generate_sample_airport(
    rules: AirportRules = None
) -> Tuple[FlightRegistry, UserDirectory]:
    """
    Generate the sample airport instance.

    Returns:
        Tuple of (registry, directory)

    Dataset Details:
        - 4 arrivals and 4 departures on 1 Jan 2025
        - QFA plane 3, VOZ plane 7 and JST plane 1 each fly one arrival
          and one departure
        - 2 travellers, 2 frequent flyers, 1 flight manager
    """
    registry = FlightRegistry(rules)
    directory = UserDirectory()

    day1 = datetime(2025, 1, 1)

    # (airline, city, flight_id, plane_id, hour, minute, is_arrival)
    schedule = [
        # Inbound legs
        ("QFA", "Sydney", 100, 3, 10, 0, True),
        ("VOZ", "Melbourne", 410, 7, 8, 30, True),
        ("JST", "Perth", 620, 1, 6, 15, True),
        ("RXA", "Rockhampton", 233, 2, 12, 45, True),
        # Outbound legs
        ("QFA", "Adelaide", 200, 3, 14, 0, False),
        ("VOZ", "Sydney", 411, 7, 11, 0, False),
        ("JST", "Melbourne", 621, 1, 9, 40, False),
        ("FRE", "Sydney", 305, 5, 17, 20, False),
    ]

    for code, city, flight_id, plane_id, hour, minute, is_arrival in schedule:
        registry.register_flight(
            airline_code=code,
            airline_name=AIRLINES[code].name,
            city_name=city,
            flight_id=flight_id,
            plane_id=plane_id,
            when=day1.replace(hour=hour, minute=minute),
            is_arrival=is_arrival
        )

    directory.register_traveller("Alice Nguyen", 34, "0412345678", "alice@example.com")
    directory.register_traveller("Ben Carter", 51, "0423456789", "ben@example.com")
    directory.register_frequent_flyer(
        "Chloe Park", 29, "0434567890", "chloe@example.com",
        frequent_flyer_number=123456, points=15000
    )
    directory.register_frequent_flyer(
        "Dev Patel", 42, "0445678901", "dev@example.com",
        frequent_flyer_number=654321, points=2500
    )
    directory.register_flight_manager(
        "Erin Walsh", 38, "0456789012", "erin@example.com", staff_id=4821
    )

    return registry, directory


def print_instance_summary(registry: FlightRegistry, directory: UserDirectory) -> None:
    """Print a summary of the instance."""
    print("\n" + "=" * 60)
    print("              SAMPLE AIRPORT INSTANCE")
    print("=" * 60)

    print("\nFLIGHTS:")
    print("-" * 60)
    print(f"{'Code':<8} {'Dir':<4} {'Plane':<7} {'City':<12} {'When':<16}")
    print("-" * 60)
    for f in sorted(registry.arrivals + registry.departures, key=lambda x: (x.when, x.flight_code)):
        print(
            f"{f.flight_code:<8} {f.direction.suffix:<4} {f.plane_code:<7} "
            f"{f.city_name:<12} {f.when.strftime('%m/%d %H:%M'):<16}"
        )

    print("\nUSERS:")
    print("-" * 60)
    print(f"{'Name':<16} {'Role':<16} {'Email':<24}")
    print("-" * 60)
    for u in directory.users:
        print(f"{u.name:<16} {u.role.value:<16} {u.email:<24}")

    rules = registry.rules
    print("\nRULES:")
    print("-" * 60)
    print(f"  Seat Rows:     {rules.min_seat_row}-{rules.max_seat_row}")
    print(f"  Seat Columns:  {rules.min_seat_column}-{rules.max_seat_column}")
    print(f"  Flight IDs:    {rules.min_flight_id}-{rules.max_flight_id}")
    print(f"  Plane IDs:     {rules.min_plane_id}-{rules.max_plane_id}")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    # Generate and print the instance
    registry, directory = generate_sample_airport()
    print_instance_summary(registry, directory)
