"""Unit tests for the next-available seat search."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from models import AirportRules, Seat
from engine import SeatAllocator, next_available


def search(requested, occupied, rules=None):
    rules = rules or AirportRules()
    return next_available(Seat.parse(requested), set(occupied), rules.rows, rules.columns)


class TestSearchOrder:
    """Tests for the order seats are tried in."""

    def test_next_column_same_row(self):
        """Test the adjacent seat in the same row is tried first."""
        assert search("1:A", {"1:A"}) == Seat(1, "B")

    def test_only_immediate_next_column(self):
        """Test the search moves rows rather than further along the row."""
        assert search("1:A", {"1:A", "1:B"}) == Seat(2, "A")

    def test_last_column_moves_to_next_row(self):
        """Test a request in the last column continues on the next row."""
        assert search("4:D", {"4:D"}) == Seat(5, "A")

    def test_last_row_wraps_to_first(self):
        """Test the search wraps to earlier rows after the last row."""
        assert search("10:D", {"10:D"}) == Seat(1, "A")

    def test_earlier_rows_before_full_scan(self):
        """Test earlier rows' first column beats the full scan."""
        occupied = {"6:A", "6:B"} | {f"{r}:A" for r in range(7, 11)}
        assert search("6:A", occupied) == Seat(1, "A")

    def test_full_scan_fallback(self):
        """Test the row-major scan once every first column is taken."""
        occupied = {f"{r}:A" for r in range(1, 11)} | {"3:B"}
        assert search("3:A", occupied) == Seat(1, "B")

    def test_full_scan_can_return_requested_seat(self):
        """Test a free requested seat is found by the full scan."""
        occupied = {f"{r}:A" for r in range(2, 11)} | {"1:B"}
        assert search("1:A", occupied) == Seat(1, "A")


class TestCompleteness:
    """Tests that the search finds a seat whenever one exists."""

    @pytest.mark.parametrize("free_key", ["1:A", "5:C", "10:D", "7:B"])
    def test_single_free_seat_found(self, default_rules, free_key):
        """Test the last free seat is found from any anchor."""
        occupied = {s.key for s in default_rules.iter_seats()} - {free_key}
        for anchor in ("1:A", "6:B", "10:D"):
            assert search(anchor, occupied) == Seat.parse(free_key)

    def test_full_flight_returns_none(self, default_rules):
        """Test no seat is returned once all 40 are taken."""
        occupied = {s.key for s in default_rules.iter_seats()}
        assert search("1:A", occupied) is None

    def test_deterministic(self):
        """Test repeated searches on the same snapshot agree."""
        occupied = {"2:A", "2:B", "3:A"}
        first = search("2:A", occupied)
        assert all(search("2:A", occupied) == first for _ in range(5))


class TestSeatAllocator:
    """Tests for the occupancy-table wrapper."""

    def test_reads_flight_occupancy(self):
        """Test only the given flight's seats are considered."""
        allocator = SeatAllocator()
        occupancy = {"QFA100": frozenset({"1:A", "1:B"}), "QFA200": frozenset({"2:A"})}
        assert allocator.next_available("QFA100", Seat(1, "A"), occupancy) == Seat(2, "A")

    def test_unknown_flight_treated_as_empty(self):
        """Test a flight with no occupancy entry has every seat free."""
        allocator = SeatAllocator()
        assert allocator.next_available("JST620", Seat(3, "C"), {}) == Seat(3, "D")

    def test_custom_grid(self):
        """Test the allocator respects a smaller grid."""
        allocator = SeatAllocator(AirportRules(max_seat_row=2, max_seat_column="B"))
        occupancy = {"QFA100": frozenset({"1:A", "1:B", "2:A"})}
        assert allocator.next_available("QFA100", Seat(1, "A"), occupancy) == Seat(2, "B")
