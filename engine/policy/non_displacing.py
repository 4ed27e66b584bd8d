"""Seat policy for ordinary travellers."""

import logging

from models.flight import Seat
from models.outcome import FailureReason
from engine.policy.base import SeatPolicy, SeatResolution

logger = logging.getLogger(__name__)


class NonDisplacingPolicy(SeatPolicy):
    """
    Grants a seat only if it is free.

    A taken seat is refused with SEAT_CONFLICT. The nearest free seat
    is reported as a suggestion but never assigned: the traveller must
    ask again.
    """

    def resolve(self, flight_code: str, requested: Seat) -> SeatResolution:
        if not self.registry.is_seat_occupied(flight_code, requested):
            return SeatResolution(seat=requested)

        suggestion = self.next_available(flight_code, requested)
        if suggestion is None:
            logger.debug(f"{flight_code} is full; {requested} refused")
            return SeatResolution(seat=None, reason=FailureReason.CAPACITY_EXHAUSTED)

        logger.debug(f"Seat {requested} on {flight_code} is occupied; {suggestion} is free")
        return SeatResolution(
            seat=None,
            reason=FailureReason.SEAT_CONFLICT,
            suggested_seat=suggestion
        )
