"""Airport rules: seat grid and identifier bounds."""

from dataclasses import dataclass
from typing import Iterator, List

from models.flight import Seat


@dataclass
class AirportRules:
    """
    Operational bounds for flights and seating.

    These rules define the seat grid every flight shares and the
    ranges accepted for flight and plane identifiers.
    """
    # Seat grid
    min_seat_row: int = 1
    max_seat_row: int = 10
    min_seat_column: str = "A"
    max_seat_column: str = "D"

    # Identifier ranges
    min_flight_id: int = 100
    max_flight_id: int = 900
    min_plane_id: int = 0
    max_plane_id: int = 9

    @property
    def rows(self) -> range:
        """Seat rows, in ascending order."""
        return range(self.min_seat_row, self.max_seat_row + 1)

    @property
    def columns(self) -> List[str]:
        """Seat column letters, in ascending order."""
        return [
            chr(code)
            for code in range(ord(self.min_seat_column), ord(self.max_seat_column) + 1)
        ]

    @property
    def seats_per_flight(self) -> int:
        """Total seats on every flight."""
        return len(self.rows) * len(self.columns)

    def iter_seats(self) -> Iterator[Seat]:
        """All seats in row-major order."""
        for row in self.rows:
            for column in self.columns:
                yield Seat(row, column)

    def is_valid_seat(self, seat: Seat) -> bool:
        """Check if a seat lies on the grid."""
        return seat.row in self.rows and seat.column in self.columns

    def is_valid_flight_id(self, flight_id: int) -> bool:
        return self.min_flight_id <= flight_id <= self.max_flight_id

    def is_valid_plane_id(self, plane_id: int) -> bool:
        return self.min_plane_id <= plane_id <= self.max_plane_id
