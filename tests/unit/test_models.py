"""Unit tests for data models."""

import pytest
from datetime import datetime, timedelta
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from models import (
    AirportRules, Direction, FlightEntry, FlightManager, FrequentFlyer, Seat, Traveller,
    RosterSnapshot, flight_points
)
from models.catalog import DEFAULT_CITY_POINTS, airline_by_code, city_points


class TestFlightEntry:
    """Tests for FlightEntry model."""

    def test_flight_code(self, qantas_rotation):
        """Test flight code is airline code followed by flight id."""
        assert qantas_rotation[0].flight_code == "QFA100"
        assert qantas_rotation[1].flight_code == "QFA200"

    def test_plane_code_direction_suffix(self, qantas_rotation):
        """Test plane code carries an A or D suffix by direction."""
        arrival, departure = qantas_rotation
        assert arrival.plane_code == "QFA3A"
        assert departure.plane_code == "QFA3D"

    def test_same_aircraft_across_directions(self, qantas_rotation):
        """Test arrival and departure on one plane share aircraft identity."""
        arrival, departure = qantas_rotation
        assert arrival.aircraft == departure.aircraft == ("QFA", 3)
        assert arrival.plane_code != departure.plane_code

    def test_delayed_returns_shifted_copy(self, qantas_rotation):
        """Test delay produces a new entry and leaves the original unchanged."""
        arrival = qantas_rotation[0]
        later = arrival.delayed(45)
        assert later.when == arrival.when + timedelta(minutes=45)
        assert arrival.when == datetime(2025, 1, 1, 10, 0)
        assert later.flight_code == arrival.flight_code

    def test_immutable(self, qantas_rotation):
        """Test flight entries cannot be mutated."""
        with pytest.raises(AttributeError):
            qantas_rotation[0].plane_id = 4

    def test_describe(self, qantas_rotation):
        """Test listing text for arrivals and departures."""
        arrival, departure = qantas_rotation
        assert arrival.describe() == (
            "Flight QFA100 operated by Qantas arriving at 10:00 01/01/2025 "
            "from Sydney on plane QFA3A."
        )
        assert "departing at 14:00 01/01/2025 to Adelaide" in departure.describe()

    def test_direction_opposite(self):
        """Test direction helpers."""
        assert Direction.ARRIVAL.opposite is Direction.DEPARTURE
        assert Direction.DEPARTURE.suffix == "D"


class TestSeat:
    """Tests for Seat model."""

    def test_key(self):
        """Test canonical seat key."""
        assert Seat(3, "B").key == "3:B"
        assert str(Seat(10, "D")) == "10:D"

    def test_parse(self):
        """Test parsing a seat key."""
        assert Seat.parse("7:c") == Seat(7, "C")

    @pytest.mark.parametrize("key", ["", "3B", "3:", "x:A", "3:AB", "1:2:A"])
    def test_parse_malformed(self, key):
        """Test malformed keys raise ValueError."""
        with pytest.raises(ValueError):
            Seat.parse(key)


class TestAirportRules:
    """Tests for AirportRules model."""

    def test_grid(self, default_rules):
        """Test default grid is 10 rows by A-D."""
        assert list(default_rules.rows) == list(range(1, 11))
        assert default_rules.columns == ["A", "B", "C", "D"]
        assert default_rules.seats_per_flight == 40

    def test_iter_seats_row_major(self, default_rules):
        """Test seats are produced row by row."""
        seats = list(default_rules.iter_seats())
        assert seats[:5] == [Seat(1, "A"), Seat(1, "B"), Seat(1, "C"), Seat(1, "D"), Seat(2, "A")]
        assert len(set(seats)) == 40

    def test_seat_validity(self, default_rules):
        """Test seats off the grid are invalid."""
        assert default_rules.is_valid_seat(Seat(10, "D"))
        assert not default_rules.is_valid_seat(Seat(0, "A"))
        assert not default_rules.is_valid_seat(Seat(1, "E"))

    def test_id_bounds(self, default_rules):
        """Test flight and plane id ranges."""
        assert default_rules.is_valid_flight_id(100)
        assert default_rules.is_valid_flight_id(900)
        assert not default_rules.is_valid_flight_id(901)
        assert default_rules.is_valid_plane_id(0)
        assert not default_rules.is_valid_plane_id(10)

    def test_custom_grid(self):
        """Test a smaller grid."""
        rules = AirportRules(max_seat_row=2, max_seat_column="B")
        assert rules.seats_per_flight == 4


class TestCatalog:
    """Tests for airline and city lookup tables."""

    def test_airline_lookup(self):
        """Test airlines by code."""
        assert airline_by_code("RXA").name == "Regional Express"
        assert airline_by_code("XXX") is None

    def test_city_points(self):
        """Test city base points and the unknown-city default."""
        assert city_points("Perth") == 3375
        assert city_points("Darwin") == DEFAULT_CITY_POINTS

    def test_flight_points(self, qantas_rotation):
        """Test flight points use the city table."""
        arrival, departure = qantas_rotation
        assert flight_points(arrival) == 1200
        assert flight_points(departure) == 1950


class TestUser:
    """Tests for User models."""

    def test_can_book_by_role(self):
        """Test flight managers are the only role barred from booking."""
        assert Traveller("Alice", 30, "0411111111", "alice@example.com").can_book
        assert FrequentFlyer("Chloe", 29, "0433333333", "chloe@example.com", 123456).can_book
        assert not FlightManager("Erin", 45, "0455555555", "erin@example.com", "4821").can_book

    def test_book_by_direction(self, qantas_rotation):
        """Test bookings land on the leg matching the flight direction."""
        user = Traveller("Alice", 30, "0411111111", "alice@example.com")
        arrival, departure = qantas_rotation
        user.book(arrival, Seat(1, "A"))
        user.book(departure, Seat(2, "B"))
        assert user.arrival.flight_code == "QFA100"
        assert user.departure.seat == Seat(2, "B")
        assert user.booking_for(Direction.DEPARTURE) is user.departure

    def test_holds_seat_and_reseat(self, qantas_rotation):
        """Test seat ownership and reseating on the matching leg."""
        user = Traveller("Alice", 30, "0411111111", "alice@example.com")
        user.book(qantas_rotation[1], Seat(1, "A"))
        assert user.holds_seat("QFA200", Seat(1, "A"))
        assert user.reseat("QFA200", Seat(1, "B"))
        assert user.departure.seat == Seat(1, "B")
        assert not user.reseat("QFA999", Seat(1, "C"))

    def test_equality_by_email(self):
        """Test users compare by email, ignoring case."""
        a = Traveller("Alice", 30, "0411111111", "Alice@Example.com")
        b = FrequentFlyer("Alice", 30, "0411111111", "alice@example.com", 123456)
        assert a == b
        assert hash(a) == hash(b)

    def test_to_dict(self, qantas_rotation):
        """Test serialization includes role and bookings."""
        user = FrequentFlyer("Chloe", 29, "0433333333", "chloe@example.com", 123456, 500)
        user.book(qantas_rotation[0], Seat(4, "C"))
        data = user.to_dict()
        assert data["role"] == "frequent_flyer"
        assert data["arrival"] == {"flight_code": "QFA100", "seat": "4:C"}
        assert data["departure"] is None
        assert data["points"] == 500


class TestRosterSnapshot:
    """Tests for RosterSnapshot model."""

    def test_capture_sorts_by_time(self, qantas_rotation):
        """Test flights are sorted by time in the snapshot."""
        arrival = qantas_rotation[0]
        early = FlightEntry("JST", "Jetstar", "Perth", 620, 1, datetime(2025, 1, 1, 6, 0), Direction.ARRIVAL)
        snapshot = RosterSnapshot.capture([arrival, early], [], [], {})
        assert [f.flight_code for f in snapshot.arrivals] == ["JST620", "QFA100"]

    def test_verify_detects_orphaned_occupancy(self, qantas_rotation):
        """Test occupancy without a booking fails verification."""
        snapshot = RosterSnapshot.capture(
            qantas_rotation[:1], qantas_rotation[1:], [], {"QFA100": frozenset({"1:A"})}
        )
        checks = snapshot.verify_invariants()
        assert checks["plane_codes_unique"]
        assert not checks["occupancy_matches_bookings"]

    def test_verify_detects_double_booking(self, qantas_rotation):
        """Test two users on one seat fail verification."""
        a = Traveller("Alice", 30, "0411111111", "alice@example.com")
        b = Traveller("Ben", 40, "0422222222", "ben@example.com")
        a.book(qantas_rotation[0], Seat(1, "A"))
        b.book(qantas_rotation[0], Seat(1, "A"))
        snapshot = RosterSnapshot.capture(
            qantas_rotation[:1], [], [a, b], {"QFA100": frozenset({"1:A"})}
        )
        assert not snapshot.verify_invariants()["seats_exclusive"]

    def test_find_flight_by_direction(self, qantas_rotation):
        """Test a code shared by both directions resolves within the given one."""
        arrival = FlightEntry("QFA", "Qantas", "Sydney", 300, 1, datetime(2025, 1, 1, 10, 0), Direction.ARRIVAL)
        departure = FlightEntry("QFA", "Qantas", "Perth", 300, 2, datetime(2025, 1, 1, 20, 0), Direction.DEPARTURE)
        snapshot = RosterSnapshot.capture([arrival], [departure], [], {})
        assert snapshot.find_flight("QFA300") is arrival
        assert snapshot.find_flight("QFA300", Direction.DEPARTURE) is departure
        assert snapshot.find_flight("QFA100", Direction.DEPARTURE) is None
