"""Typed outcomes returned by registry and booking operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from models.flight import FlightEntry, Seat

if TYPE_CHECKING:
    from models.user import User


class FailureReason(Enum):
    """Why an operation was rejected. None of these are fatal."""
    # Not found
    FLIGHT_NOT_FOUND = "flight_not_found"

    # Conflicts: caller must supply different input
    DUPLICATE_PLANE_CODE = "duplicate_plane_code"
    DUPLICATE_EMAIL = "duplicate_email"
    LEG_ALREADY_BOOKED = "leg_already_booked"
    TIMING_CONFLICT = "timing_conflict"
    SEAT_CONFLICT = "seat_conflict"
    ROLE_NOT_PERMITTED = "role_not_permitted"

    # Capacity: caller must choose a different flight
    NO_FLIGHTS_AVAILABLE = "no_flights_available"
    CAPACITY_EXHAUSTED = "capacity_exhausted"

    INVALID_INPUT = "invalid_input"


@dataclass
class RegistrationResult:
    """Result of registering a flight or a user."""
    flight: Optional[FlightEntry] = None
    user: Optional['User'] = None
    reason: Optional[FailureReason] = None

    @property
    def success(self) -> bool:
        return self.reason is None


@dataclass
class BookingResult:
    """
    Result of a booking attempt.

    Attributes:
        seat: Seat assigned to the booking user, on success
        flight: Flight booked, on success
        reason: Failure reason, on rejection
        suggested_seat: Nearest free seat when the requested one was
            taken; informational only, never assigned automatically
        displaced: User moved off the requested seat, if any
    """
    seat: Optional[Seat] = None
    flight: Optional[FlightEntry] = None
    reason: Optional[FailureReason] = None
    suggested_seat: Optional[Seat] = None
    displaced: Optional['User'] = None

    @property
    def success(self) -> bool:
        return self.reason is None

    @classmethod
    def rejected(cls, reason: FailureReason, suggested_seat: Optional[Seat] = None) -> 'BookingResult':
        return cls(reason=reason, suggested_seat=suggested_seat)


@dataclass
class DelayResult:
    """Result of delaying a flight."""
    flight: Optional[FlightEntry] = None
    propagated: List[FlightEntry] = field(default_factory=list)
    reason: Optional[FailureReason] = None

    @property
    def applied(self) -> bool:
        return self.reason is None
