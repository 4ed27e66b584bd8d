"""Flight and seat data models."""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Direction of a flight relative to the airport."""
    ARRIVAL = "arrival"
    DEPARTURE = "departure"

    @property
    def suffix(self) -> str:
        """Plane code suffix for this direction."""
        return "A" if self is Direction.ARRIVAL else "D"

    @property
    def opposite(self) -> 'Direction':
        """The other direction."""
        if self is Direction.ARRIVAL:
            return Direction.DEPARTURE
        return Direction.ARRIVAL


@dataclass(frozen=True)
class FlightEntry:
    """
    Immutable snapshot of one scheduled flight.

    Attributes:
        airline_code: Three-letter airline code (e.g., "QFA")
        airline_name: Airline display name
        city_name: Origin city for arrivals, destination city for departures
        flight_id: Numeric flight identifier
        plane_id: Numeric plane identifier within the airline
        when: Scheduled arrival or departure time
        direction: Arrival or departure
    """
    airline_code: str
    airline_name: str
    city_name: str
    flight_id: int
    plane_id: int
    when: datetime
    direction: Direction

    @property
    def flight_code(self) -> str:
        """Flight code, e.g. QFA450."""
        return f"{self.airline_code}{self.flight_id}"

    @property
    def plane_code(self) -> str:
        """Plane code, e.g. QFA3A. Unique across all registered flights."""
        return f"{self.airline_code}{self.plane_id}{self.direction.suffix}"

    @property
    def aircraft(self) -> Tuple[str, int]:
        """Physical aircraft identity used for delay propagation."""
        return (self.airline_code, self.plane_id)

    @property
    def is_arrival(self) -> bool:
        return self.direction is Direction.ARRIVAL

    def delayed(self, minutes: int) -> 'FlightEntry':
        """Copy of this flight shifted later by the given minutes."""
        return replace(self, when=self.when + timedelta(minutes=minutes))

    def describe(self) -> str:
        """One-line description used by flight listings."""
        when = self.when.strftime('%H:%M %d/%m/%Y')
        if self.is_arrival:
            movement = f"arriving at {when} from {self.city_name}"
        else:
            movement = f"departing at {when} to {self.city_name}"
        return (
            f"Flight {self.flight_code} operated by {self.airline_name} "
            f"{movement} on plane {self.plane_code}."
        )

    def to_dict(self) -> dict:
        """Serialize flight to dictionary."""
        return {
            "flight_code": self.flight_code,
            "plane_code": self.plane_code,
            "airline_code": self.airline_code,
            "airline_name": self.airline_name,
            "city": self.city_name,
            "when": self.when.isoformat(),
            "direction": self.direction.value
        }

    def __repr__(self) -> str:
        return (
            f"FlightEntry({self.flight_code} {self.direction.value} "
            f"{self.when.strftime('%m/%d %H:%M')} plane={self.plane_code})"
        )


@dataclass(frozen=True, order=True)
class Seat:
    """
    A seat on a flight, addressed by row number and column letter.

    The canonical key "row:column" (e.g. "3:B") is what the occupancy
    table stores.
    """
    row: int
    column: str

    @property
    def key(self) -> str:
        return f"{self.row}:{self.column}"

    @classmethod
    def parse(cls, key: str) -> 'Seat':
        """
        Parse a "row:column" seat key.

        Raises:
            ValueError: If the key is not of the form "<int>:<letter>"
        """
        parts = key.split(":") if key else []
        if len(parts) != 2 or len(parts[1]) != 1:
            raise ValueError(f"Malformed seat key: {key!r}")
        try:
            row = int(parts[0])
        except ValueError:
            raise ValueError(f"Malformed seat row in key: {key!r}") from None
        return cls(row=row, column=parts[1].upper())

    def __str__(self) -> str:
        return self.key
