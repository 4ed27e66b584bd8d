"""Booking orchestrator."""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from models.catalog import flight_points
from models.flight import Direction, FlightEntry, Seat
from models.outcome import BookingResult, FailureReason
from models.roster import RosterSnapshot
from models.user import Booking, FrequentFlyer, Role, User
from engine.directory import UserDirectory
from engine.policy import POLICY_BY_ROLE, SeatPolicy
from engine.registry import FlightRegistry
from engine.seat_allocator import SeatAllocator

logger = logging.getLogger(__name__)


@dataclass
class BookingView:
    """A user's booked leg with the flight's current schedule."""
    direction: Direction
    flight: FlightEntry
    seat: Seat

    def describe(self) -> str:
        when = self.flight.when.strftime('%H:%M %d/%m/%Y')
        if self.direction is Direction.ARRIVAL:
            return (
                f"Arrival Flight: Flight {self.flight.flight_code} from "
                f"{self.flight.city_name} arriving at {when} in seat {self.seat}."
            )
        return (
            f"Departure Flight: Flight {self.flight.flight_code} to "
            f"{self.flight.city_name} departing at {when} in seat {self.seat}."
        )


@dataclass
class PointsBreakdown:
    """Frequent flyer points held now and pending from booked legs."""
    current: int
    arrival: int = 0
    departure: int = 0

    @property
    def pending(self) -> int:
        return self.arrival + self.departure

    @property
    def projected_total(self) -> int:
        return self.current + self.pending


class BookingEngine:
    """
    Entry point for booking and querying flights.

    Validates the leg, the flight choice and the arrival/departure
    ordering, resolves the seat through the policy for the user's role,
    then commits the booking to the user and the registry's occupancy.
    Every call is a single attempt; retries belong to the caller.
    """

    def __init__(
        self,
        registry: FlightRegistry,
        directory: UserDirectory,
        allocator: Optional[SeatAllocator] = None
    ):
        self.registry = registry
        self.directory = directory
        self.allocator = allocator or SeatAllocator(registry.rules)

        # One policy instance per bookable role
        self.policies: Dict[Role, SeatPolicy] = {
            role: policy_class(registry, directory, self.allocator)
            for role, policy_class in POLICY_BY_ROLE.items()
        }

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def can_book(self, user: User, direction: Direction) -> Optional[FailureReason]:
        """
        Check if the user may book a leg in the given direction.

        Returns:
            None if allowed, else the reason it is not
        """
        if not user.can_book:
            return FailureReason.ROLE_NOT_PERMITTED
        if user.booking_for(direction) is not None:
            return FailureReason.LEG_ALREADY_BOOKED
        if not self.registry.flights(direction):
            return FailureReason.NO_FLIGHTS_AVAILABLE
        return None

    def can_book_arrival(self, user: User) -> Optional[FailureReason]:
        return self.can_book(user, Direction.ARRIVAL)

    def can_book_departure(self, user: User) -> Optional[FailureReason]:
        return self.can_book(user, Direction.DEPARTURE)

    def current_flight(self, booking: Booking) -> FlightEntry:
        """The booked flight as currently scheduled, after any delays."""
        current = self.registry.find_by_flight_code(booking.flight_code, booking.flight.direction)
        return current or booking.flight

    def validate_timing(self, user: User, candidate: FlightEntry, is_arrival: bool) -> bool:
        """
        Check arrival/departure ordering for a candidate flight.

        An arrival must land strictly before the user's booked departure;
        a departure must leave strictly after the user's booked arrival.
        """
        if is_arrival:
            if user.departure is not None:
                departs = self.current_flight(user.departure).when
                if candidate.when >= departs:
                    return False
        else:
            if user.arrival is not None:
                arrives = self.current_flight(user.arrival).when
                if candidate.when <= arrives:
                    return False
        return True

    # ------------------------------------------------------------------
    # Booking
    # ------------------------------------------------------------------

    def book(
        self,
        user: User,
        flight_index: int,
        seat_row: int,
        seat_column: str,
        is_arrival: bool
    ) -> BookingResult:
        """
        Book a seat on a flight for a user.

        Args:
            user: User making the booking
            flight_index: Position of the flight in the registry's
                arrival or departure list
            seat_row: Requested seat row
            seat_column: Requested seat column letter
            is_arrival: Book the arrival leg if True, else the departure leg

        Returns:
            BookingResult with the assigned seat, or the rejection reason
        """
        direction = Direction.ARRIVAL if is_arrival else Direction.DEPARTURE

        reason = self.can_book(user, direction)
        if reason is not None:
            return self._reject(user, reason)

        flights = self.registry.flights(direction)
        if not 0 <= flight_index < len(flights):
            return self._reject(user, FailureReason.FLIGHT_NOT_FOUND)
        flight = flights[flight_index]

        if not self.validate_timing(user, flight, is_arrival):
            return self._reject(user, FailureReason.TIMING_CONFLICT)

        requested = Seat(seat_row, seat_column.upper())
        if not self.registry.rules.is_valid_seat(requested):
            return self._reject(user, FailureReason.INVALID_INPUT)

        resolution = self.policies[user.role].resolve(flight.flight_code, requested)
        if not resolution.granted:
            return self._reject(user, resolution.reason, resolution.suggested_seat)

        user.book(flight, resolution.seat)
        self.registry.occupy_seat(flight.flight_code, resolution.seat)
        logger.info(
            f"{user.name} booked {direction.value} {flight.flight_code} seat {resolution.seat}"
        )

        return BookingResult(
            seat=resolution.seat,
            flight=flight,
            displaced=resolution.displaced
        )

    def book_arrival(self, user: User, flight_index: int, seat_row: int, seat_column: str) -> BookingResult:
        return self.book(user, flight_index, seat_row, seat_column, is_arrival=True)

    def book_departure(self, user: User, flight_index: int, seat_row: int, seat_column: str) -> BookingResult:
        return self.book(user, flight_index, seat_row, seat_column, is_arrival=False)

    def _reject(
        self,
        user: User,
        reason: FailureReason,
        suggested_seat: Optional[Seat] = None
    ) -> BookingResult:
        logger.debug(f"Booking for {user.name} rejected: {reason.value}")
        return BookingResult.rejected(reason, suggested_seat)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_occupant(self, flight_code: str, seat: Seat) -> Optional[User]:
        """User holding a seat on a flight, if any."""
        return self.directory.find_by_seat(flight_code, seat)

    def booking_details(self, user: User) -> List[BookingView]:
        """The user's booked legs with current flight times."""
        views = []
        for direction in (Direction.ARRIVAL, Direction.DEPARTURE):
            booking = user.booking_for(direction)
            if booking is not None:
                views.append(BookingView(direction, self.current_flight(booking), booking.seat))
        return views

    def points_breakdown(self, user: FrequentFlyer) -> PointsBreakdown:
        """Points held plus the points each booked leg will earn."""
        breakdown = PointsBreakdown(current=user.points)
        if user.arrival is not None:
            breakdown.arrival = flight_points(self.current_flight(user.arrival))
        if user.departure is not None:
            breakdown.departure = flight_points(self.current_flight(user.departure))
        return breakdown

    def snapshot(self) -> RosterSnapshot:
        """Capture flights, bookings and occupancy for reporting."""
        return RosterSnapshot.capture(
            arrivals=self.registry.arrivals,
            departures=self.registry.departures,
            users=list(self.directory.users),
            occupancy=self.registry.occupancy
        )
