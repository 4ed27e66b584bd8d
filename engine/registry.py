"""Flight registry: arrival and departure rosters plus seat occupancy."""

from datetime import datetime
from typing import Dict, FrozenSet, List, Mapping, Optional, Set, Tuple
import logging

from models.flight import Direction, FlightEntry, Seat
from models.network import FlightNode
from models.outcome import DelayResult, FailureReason, RegistrationResult
from models.rules import AirportRules
from engine.delay import DelayPropagator

logger = logging.getLogger(__name__)


class FlightRegistry:
    """
    Owns the airport's flights and the per-flight seat occupancy table.

    Arrivals and departures are kept in insertion order. Flights are
    immutable; a delay replaces the entry in place.

    Occupancy maps a flight code to the set of occupied seat keys
    ("row:column"). Occupying a taken seat or freeing a free one is a
    no-op.
    """

    def __init__(self, rules: Optional[AirportRules] = None):
        self.rules = rules or AirportRules()

        self._arrivals: List[FlightEntry] = []
        self._departures: List[FlightEntry] = []
        self._occupied: Dict[str, Set[str]] = {}

        self.propagator = DelayPropagator()

    # ------------------------------------------------------------------
    # Flights
    # ------------------------------------------------------------------

    def is_plane_assigned(self, plane_code: str) -> bool:
        """Check if any registered flight already uses the plane code."""
        for flight in self._arrivals:
            if flight.plane_code == plane_code:
                return True
        for flight in self._departures:
            if flight.plane_code == plane_code:
                return True
        return False

    def add_arrival(self, flight: FlightEntry) -> None:
        """
        Append an arrival flight.

        Does not check plane-code uniqueness; callers must check
        `is_plane_assigned` first (see `register_flight`).
        """
        self._arrivals.append(flight)

    def add_departure(self, flight: FlightEntry) -> None:
        """Append a departure flight. Same contract as `add_arrival`."""
        self._departures.append(flight)

    def register_flight(
        self,
        airline_code: str,
        airline_name: str,
        city_name: str,
        flight_id: int,
        plane_id: int,
        when: datetime,
        is_arrival: bool
    ) -> RegistrationResult:
        """
        Create and register a flight, rejecting duplicate plane codes.

        Returns:
            RegistrationResult with the new flight, or the rejection reason
        """
        if not (self.rules.is_valid_flight_id(flight_id) and self.rules.is_valid_plane_id(plane_id)):
            logger.debug(f"Rejected flight {airline_code}{flight_id}: id out of range")
            return RegistrationResult(reason=FailureReason.INVALID_INPUT)

        flight = FlightEntry(
            airline_code=airline_code,
            airline_name=airline_name,
            city_name=city_name,
            flight_id=flight_id,
            plane_id=plane_id,
            when=when,
            direction=Direction.ARRIVAL if is_arrival else Direction.DEPARTURE
        )

        if self.is_plane_assigned(flight.plane_code):
            logger.info(
                f"Plane {flight.plane_code} has already been assigned to "
                f"{'an arrival' if is_arrival else 'a departure'} flight"
            )
            return RegistrationResult(reason=FailureReason.DUPLICATE_PLANE_CODE)

        if is_arrival:
            self.add_arrival(flight)
        else:
            self.add_departure(flight)

        logger.info(f"Flight {flight.flight_code} on plane {flight.plane_code} added")
        return RegistrationResult(flight=flight)

    @property
    def arrivals(self) -> Tuple[FlightEntry, ...]:
        """Arrival flights in insertion order."""
        return tuple(self._arrivals)

    @property
    def departures(self) -> Tuple[FlightEntry, ...]:
        """Departure flights in insertion order."""
        return tuple(self._departures)

    def flights(self, direction: Direction) -> Tuple[FlightEntry, ...]:
        """Flights in the given direction, in insertion order."""
        return self.arrivals if direction is Direction.ARRIVAL else self.departures

    def find_by_flight_code(
        self,
        flight_code: str,
        direction: Optional[Direction] = None
    ) -> Optional[FlightEntry]:
        """
        Find a flight by code.

        Codes may repeat across directions. Without a direction, arrivals
        are searched before departures.
        """
        node = self._locate(flight_code, direction)
        if node is None:
            return None
        return self._collection(node.direction)[node.index]

    def _locate(
        self,
        flight_code: str,
        direction: Optional[Direction] = None
    ) -> Optional[FlightNode]:
        directions = (direction,) if direction is not None else tuple(Direction)
        for side in directions:
            for index, flight in enumerate(self._collection(side)):
                if flight.flight_code == flight_code:
                    return FlightNode(side, index)
        return None

    def _collection(self, direction: Direction) -> List[FlightEntry]:
        return self._arrivals if direction is Direction.ARRIVAL else self._departures

    # ------------------------------------------------------------------
    # Delays
    # ------------------------------------------------------------------

    def delay(self, flight_code: str, minutes: int) -> DelayResult:
        """
        Delay a flight and every opposite-direction leg flown by the
        same aircraft.

        Args:
            flight_code: Flight to delay
            minutes: Non-negative delay in minutes; zero changes nothing

        Returns:
            DelayResult with the delayed flight and the propagated legs
        """
        if minutes < 0:
            return DelayResult(reason=FailureReason.INVALID_INPUT)

        node = self._locate(flight_code)
        if node is None:
            logger.debug(f"Delay of unknown flight {flight_code} ignored")
            return DelayResult(reason=FailureReason.FLIGHT_NOT_FOUND)

        collection = self._collection(node.direction)
        if minutes == 0:
            return DelayResult(flight=collection[node.index])

        delayed = collection[node.index].delayed(minutes)
        collection[node.index] = delayed
        logger.info(f"Flight {flight_code} delayed by {minutes} min to {delayed.when:%H:%M %d/%m/%Y}")

        propagated = self.propagator.propagate(
            self._arrivals, self._departures, node, minutes
        )
        return DelayResult(flight=delayed, propagated=propagated)

    # ------------------------------------------------------------------
    # Seats
    # ------------------------------------------------------------------

    def is_seat_occupied(self, flight_code: str, seat: Seat) -> bool:
        return seat.key in self._occupied.get(flight_code, ())

    def occupy_seat(self, flight_code: str, seat: Seat) -> None:
        self._occupied.setdefault(flight_code, set()).add(seat.key)

    def free_seat(self, flight_code: str, seat: Seat) -> None:
        if flight_code in self._occupied:
            self._occupied[flight_code].discard(seat.key)

    def occupied_seats(self, flight_code: str) -> FrozenSet[str]:
        """Occupied seat keys on a flight."""
        return frozenset(self._occupied.get(flight_code, ()))

    @property
    def occupancy(self) -> Mapping[str, FrozenSet[str]]:
        """Read-only copy of the occupancy table."""
        return {code: frozenset(seats) for code, seats in self._occupied.items()}

    def __repr__(self) -> str:
        return (
            f"FlightRegistry(arrivals={len(self._arrivals)}, "
            f"departures={len(self._departures)})"
        )
