"""Airline and city lookup tables with frequent flyer point costs."""

from dataclasses import dataclass
from typing import Dict, Optional

from models.flight import FlightEntry


@dataclass(frozen=True)
class Airline:
    """An airline operating at the airport."""
    code: str
    name: str
    points_multiplier: int = 1


@dataclass(frozen=True)
class City:
    """A domestic destination and the points a flight to or from it earns."""
    name: str
    base_points: int


AIRLINES: Dict[str, Airline] = {
    a.code: a for a in (
        Airline("JST", "Jetstar"),
        Airline("QFA", "Qantas"),
        Airline("RXA", "Regional Express"),
        Airline("VOZ", "Virgin"),
        Airline("FRE", "Fly Pelican"),
    )
}

CITIES: Dict[str, City] = {
    c.name: c for c in (
        City("Sydney", 1200),
        City("Melbourne", 1750),
        City("Rockhampton", 1400),
        City("Adelaide", 1950),
        City("Perth", 3375),
    )
}

# Points earned for a city missing from the table
DEFAULT_CITY_POINTS = 1000


def airline_by_code(code: str) -> Optional[Airline]:
    """Look up an airline by its three-letter code."""
    return AIRLINES.get(code)


def city_points(city_name: str) -> int:
    """Base points for a flight to or from the given city."""
    city = CITIES.get(city_name)
    return city.base_points if city else DEFAULT_CITY_POINTS


def flight_points(flight: FlightEntry) -> int:
    """Points a frequent flyer earns for one flight."""
    airline = AIRLINES.get(flight.airline_code)
    multiplier = airline.points_multiplier if airline else 1
    return city_points(flight.city_name) * multiplier
