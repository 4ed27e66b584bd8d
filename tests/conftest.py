"""Pytest fixtures for airport roster tests."""

import pytest
from datetime import datetime
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import AirportRules, Direction, FlightEntry
from engine import BookingEngine, FlightRegistry, UserDirectory
from data.generators.sample_airport import generate_sample_airport


@pytest.fixture
def default_rules():
    """Standard 10x4 seat grid."""
    return AirportRules()


@pytest.fixture
def qantas_rotation():
    """QFA plane 3 arriving from Sydney at 10:00 and leaving for Adelaide at 14:00."""
    return [
        FlightEntry(
            airline_code="QFA",
            airline_name="Qantas",
            city_name="Sydney",
            flight_id=100,
            plane_id=3,
            when=datetime(2025, 1, 1, 10, 0),
            direction=Direction.ARRIVAL
        ),
        FlightEntry(
            airline_code="QFA",
            airline_name="Qantas",
            city_name="Adelaide",
            flight_id=200,
            plane_id=3,
            when=datetime(2025, 1, 1, 14, 0),
            direction=Direction.DEPARTURE
        )
    ]


@pytest.fixture
def registry(default_rules, qantas_rotation):
    """Registry holding the Qantas rotation plus an unrelated Virgin pair."""
    reg = FlightRegistry(default_rules)
    arrival, departure = qantas_rotation
    reg.add_arrival(arrival)
    reg.add_departure(departure)
    reg.register_flight("VOZ", "Virgin", "Melbourne", 410, 7, datetime(2025, 1, 1, 8, 30), True)
    reg.register_flight("VOZ", "Virgin", "Perth", 411, 8, datetime(2025, 1, 1, 9, 0), False)
    return reg


@pytest.fixture
def directory():
    """Two travellers and two frequent flyers."""
    users = UserDirectory()
    users.register_traveller("Alice", 30, "0411111111", "alice@example.com")
    users.register_traveller("Ben", 40, "0422222222", "ben@example.com")
    users.register_frequent_flyer("Chloe", 29, "0433333333", "chloe@example.com", 123456, 15000)
    users.register_frequent_flyer("Dev", 42, "0444444444", "dev@example.com", 654321, 0)
    users.register_flight_manager("Erin", 38, "0455555555", "erin@example.com", 4821)
    return users


@pytest.fixture
def engine(registry, directory):
    """Booking engine over the registry and directory fixtures."""
    return BookingEngine(registry, directory)


@pytest.fixture
def sample_airport():
    """Full sample airport instance."""
    return generate_sample_airport()
