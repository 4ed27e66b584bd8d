"""User and booking data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.flight import Direction, FlightEntry, Seat


class Role(Enum):
    """Actor roles, each with its own booking rights."""
    TRAVELLER = "traveller"
    FREQUENT_FLYER = "frequent_flyer"
    FLIGHT_MANAGER = "flight_manager"


@dataclass
class Booking:
    """
    One booked leg: the flight as it was when booked, and the seat held.

    The flight's time may have moved since booking; look it up in the
    registry by flight code for the current schedule.
    """
    flight: FlightEntry
    seat: Seat

    @property
    def flight_code(self) -> str:
        return self.flight.flight_code


class User:
    """
    Base class for registered users.

    Attributes:
        name: Display name
        age: Age in years
        mobile: Mobile phone number
        email: Email address, unique case-insensitively
        arrival: Booked arrival leg, if any
        departure: Booked departure leg, if any
    """
    role: Role

    def __init__(self, name: str, age: int, mobile: str, email: str):
        self.name = name
        self.age = age
        self.mobile = mobile
        self.email = email
        self.arrival: Optional[Booking] = None
        self.departure: Optional[Booking] = None

    @property
    def can_book(self) -> bool:
        """Whether this user may book flights at all."""
        return self.role is not Role.FLIGHT_MANAGER

    def booking_for(self, direction: Direction) -> Optional[Booking]:
        """Booking held for the given direction."""
        return self.arrival if direction is Direction.ARRIVAL else self.departure

    def book(self, flight: FlightEntry, seat: Seat) -> Booking:
        """Store a booking on the leg matching the flight's direction."""
        booking = Booking(flight=flight, seat=seat)
        if flight.is_arrival:
            self.arrival = booking
        else:
            self.departure = booking
        return booking

    def holds_seat(self, flight_code: str, seat: Seat) -> bool:
        """Check if this user holds the given seat on the given flight."""
        for booking in (self.arrival, self.departure):
            if booking and booking.flight_code == flight_code and booking.seat == seat:
                return True
        return False

    def reseat(self, flight_code: str, new_seat: Seat) -> bool:
        """
        Move this user to a new seat on the leg using the given flight.

        The arrival leg is checked first. Returns False if neither leg
        uses the flight.
        """
        if self.arrival and self.arrival.flight_code == flight_code:
            self.arrival.seat = new_seat
            return True
        if self.departure and self.departure.flight_code == flight_code:
            self.departure.seat = new_seat
            return True
        return False

    def to_dict(self) -> dict:
        """Serialize user and bookings to dictionary."""
        return {
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "arrival": self._booking_dict(self.arrival),
            "departure": self._booking_dict(self.departure)
        }

    @staticmethod
    def _booking_dict(booking: Optional[Booking]) -> Optional[dict]:
        if booking is None:
            return None
        return {"flight_code": booking.flight_code, "seat": booking.seat.key}

    def __hash__(self) -> int:
        return hash(self.email.lower())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, User):
            return self.email.lower() == other.email.lower()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name} <{self.email}>)"


class Traveller(User):
    """An ordinary traveller. Never displaces other passengers."""
    role = Role.TRAVELLER


class FrequentFlyer(User):
    """A loyalty-program traveller who may claim an occupied seat."""
    role = Role.FREQUENT_FLYER

    def __init__(
        self,
        name: str,
        age: int,
        mobile: str,
        email: str,
        frequent_flyer_number: int,
        points: int = 0
    ):
        super().__init__(name, age, mobile, email)
        self.frequent_flyer_number = frequent_flyer_number
        self.points = points

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["frequent_flyer_number"] = self.frequent_flyer_number
        data["points"] = self.points
        return data


class FlightManager(User):
    """Flight-operations staff. Registers and delays flights, cannot book."""
    role = Role.FLIGHT_MANAGER

    def __init__(self, name: str, age: int, mobile: str, email: str, staff_id: str):
        super().__init__(name, age, mobile, email)
        self.staff_id = staff_id

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["staff_id"] = self.staff_id
        return data
