"""Core data models for the airport roster."""

from models.flight import FlightEntry, Direction, Seat
from models.rules import AirportRules
from models.catalog import Airline, City, AIRLINES, CITIES, flight_points
from models.user import User, Traveller, FrequentFlyer, FlightManager, Booking, Role
from models.outcome import FailureReason, RegistrationResult, BookingResult, DelayResult
from models.network import AircraftNetwork, FlightNode
from models.roster import RosterSnapshot

__all__ = [
    "FlightEntry",
    "Direction",
    "Seat",
    "AirportRules",
    "Airline",
    "City",
    "AIRLINES",
    "CITIES",
    "flight_points",
    "User",
    "Traveller",
    "FrequentFlyer",
    "FlightManager",
    "Booking",
    "Role",
    "FailureReason",
    "RegistrationResult",
    "BookingResult",
    "DelayResult",
    "AircraftNetwork",
    "FlightNode",
    "RosterSnapshot",
]
