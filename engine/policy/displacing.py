"""Seat policy for frequent flyers."""

import logging

from models.flight import Seat
from models.outcome import FailureReason
from engine.policy.base import SeatPolicy, SeatResolution

logger = logging.getLogger(__name__)


class DisplacingPolicy(SeatPolicy):
    """
    Grants the requested seat, moving any current occupant.

    The occupant is reseated at the nearest free seat to the one they
    vacate, searched before the vacated seat is released so it is never
    handed straight back to them. If the flight has no other free seat,
    nothing changes and the request fails with CAPACITY_EXHAUSTED.

    An occupied seat with no holder on record is simply released.
    """

    def resolve(self, flight_code: str, requested: Seat) -> SeatResolution:
        """Grant `requested`; the occupant's new seat never includes the seat they vacate."""
        if not self.registry.is_seat_occupied(flight_code, requested):
            return SeatResolution(seat=requested)

        replacement = self.next_available(flight_code, requested)
        if replacement is None:
            logger.debug(f"{flight_code} is full; cannot displace holder of {requested}")
            return SeatResolution(seat=None, reason=FailureReason.CAPACITY_EXHAUSTED)

        occupant = self.directory.find_by_seat(flight_code, requested)
        self.registry.free_seat(flight_code, requested)

        if occupant is None:
            logger.warning(f"Seat {requested} on {flight_code} was occupied with no holder; released")
            return SeatResolution(seat=requested)

        occupant.reseat(flight_code, replacement)
        self.registry.occupy_seat(flight_code, replacement)
        logger.info(
            f"Displaced {occupant.name} on {flight_code} from {requested} to {replacement}"
        )
        return SeatResolution(seat=requested, displaced=occupant)
