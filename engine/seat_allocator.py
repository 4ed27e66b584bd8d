"""Next-available seat search."""

from typing import AbstractSet, Iterator, Mapping, Optional, Sequence
import logging

from models.flight import Seat
from models.rules import AirportRules

logger = logging.getLogger(__name__)


def _candidates(
    requested: Seat,
    rows: Sequence[int],
    columns: Sequence[str]
) -> Iterator[Seat]:
    """
    Yield seats in search order, staying near the request first.

    1. Same row, next column
    2. Later rows, first column
    3. Earlier rows, first column
    4. Every seat, row-major
    """
    first_column = columns[0]

    if requested.column in columns:
        next_index = columns.index(requested.column) + 1
        if next_index < len(columns):
            yield Seat(requested.row, columns[next_index])

    for row in rows:
        if row > requested.row:
            yield Seat(row, first_column)

    for row in rows:
        if row < requested.row:
            yield Seat(row, first_column)

    for row in rows:
        for column in columns:
            yield Seat(row, column)


def next_available(
    requested: Seat,
    occupied: AbstractSet[str],
    rows: Sequence[int],
    columns: Sequence[str]
) -> Optional[Seat]:
    """
    Find the nearest free seat to a requested one.

    Args:
        requested: Seat the search is anchored at
        occupied: Occupied seat keys for the flight
        rows: Seat rows in ascending order
        columns: Seat column letters in ascending order

    Returns:
        First free seat in search order, or None if every seat is taken
    """
    for seat in _candidates(requested, rows, columns):
        if seat.key not in occupied:
            return seat
    return None


class SeatAllocator:
    """Seat search against a flight registry's occupancy table."""

    def __init__(self, rules: Optional[AirportRules] = None):
        self.rules = rules or AirportRules()

    def next_available(
        self,
        flight_code: str,
        requested: Seat,
        occupancy: Mapping[str, AbstractSet[str]]
    ) -> Optional[Seat]:
        """Nearest free seat to `requested` on the given flight."""
        occupied = occupancy.get(flight_code, frozenset())
        seat = next_available(requested, occupied, self.rules.rows, self.rules.columns)

        if seat is None:
            logger.debug(f"No free seat on {flight_code} ({len(occupied)} occupied)")
        else:
            logger.debug(f"Next free seat on {flight_code} after {requested}: {seat}")
        return seat
