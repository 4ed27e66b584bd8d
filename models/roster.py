"""Roster snapshot: flights, bookings and occupancy at a point in time."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from models.flight import Direction, FlightEntry
from models.user import User


@dataclass
class RosterSnapshot:
    """
    Point-in-time view of the airport roster.

    Flights are sorted by scheduled time for display; the registry
    itself keeps insertion order.
    """
    arrivals: List[FlightEntry]
    departures: List[FlightEntry]
    users: List[User]
    occupancy: Dict[str, FrozenSet[str]]
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def capture(
        cls,
        arrivals: Sequence[FlightEntry],
        departures: Sequence[FlightEntry],
        users: Sequence[User],
        occupancy: Mapping[str, FrozenSet[str]]
    ) -> 'RosterSnapshot':
        """Build a snapshot with time-sorted flight lists."""
        return cls(
            arrivals=sorted(arrivals, key=lambda f: f.when),
            departures=sorted(departures, key=lambda f: f.when),
            users=list(users),
            occupancy=dict(occupancy)
        )

    def find_flight(
        self,
        flight_code: str,
        direction: Optional[Direction] = None
    ) -> Optional[FlightEntry]:
        """Flight by code, limited to one direction if given, else arrivals first."""
        if direction is Direction.ARRIVAL:
            flights = self.arrivals
        elif direction is Direction.DEPARTURE:
            flights = self.departures
        else:
            flights = self.arrivals + self.departures
        for flight in flights:
            if flight.flight_code == flight_code:
                return flight
        return None

    def booked_seats(self) -> List[Tuple[str, str]]:
        """(flight_code, seat_key) for every booked leg."""
        seats = []
        for user in self.users:
            for booking in (user.arrival, user.departure):
                if booking is not None:
                    seats.append((booking.flight_code, booking.seat.key))
        return seats

    def verify_invariants(self) -> Dict[str, bool]:
        """
        Check roster invariants.

        Returns dict of invariant_name -> satisfied
        """
        plane_codes = [f.plane_code for f in self.arrivals + self.departures]
        booked = self.booked_seats()
        occupied = {
            (code, key) for code, keys in self.occupancy.items() for key in keys
        }

        timing_ordered = True
        for user in self.users:
            if user.arrival is None or user.departure is None:
                continue
            arrival = self.find_flight(user.arrival.flight_code, Direction.ARRIVAL) or user.arrival.flight
            departure = self.find_flight(user.departure.flight_code, Direction.DEPARTURE) or user.departure.flight
            if arrival.when >= departure.when:
                timing_ordered = False

        return {
            "plane_codes_unique": len(plane_codes) == len(set(plane_codes)),
            "seats_exclusive": all(n == 1 for n in Counter(booked).values()),
            "occupancy_matches_bookings": set(booked) == occupied,
            "timing_ordered": timing_ordered
        }

    def to_dict(self) -> dict:
        """Serialize snapshot to dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "arrivals": [f.to_dict() for f in self.arrivals],
            "departures": [f.to_dict() for f in self.departures],
            "users": [u.to_dict() for u in self.users],
            "occupancy": {
                code: sorted(keys) for code, keys in sorted(self.occupancy.items())
            }
        }

    def print_summary(self) -> None:
        """Print a formatted summary of the roster."""
        print("\n" + "=" * 60)
        print("                    AIRPORT ROSTER")
        print("=" * 60)

        print("Arrival Flights:")
        if not self.arrivals:
            print("There are no arrival flights.")
        for flight in self.arrivals:
            print(f"  {flight.describe()}")

        print("Departure Flights:")
        if not self.departures:
            print("There are no departure flights.")
        for flight in self.departures:
            print(f"  {flight.describe()}")
        print()

        print("Bookings:")
        for user in self.users:
            legs = []
            for label, booking in (("arr", user.arrival), ("dep", user.departure)):
                if booking is not None:
                    legs.append(f"{label} {booking.flight_code} seat {booking.seat}")
            if legs:
                print(f"  {user.name} ({user.role.value}): {', '.join(legs)}")

        print("=" * 60)

    def __repr__(self) -> str:
        return (
            f"RosterSnapshot(arrivals={len(self.arrivals)}, "
            f"departures={len(self.departures)}, bookings={len(self.booked_seats())})"
        )
