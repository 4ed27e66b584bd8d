"""Delay propagation across flights sharing an aircraft."""

from typing import List
import logging

from models.flight import Direction, FlightEntry
from models.network import AircraftNetwork, FlightNode

logger = logging.getLogger(__name__)


class DelayPropagator:
    """
    Cascades a delay from one flight to the opposite-direction legs
    flown by the same aircraft.

    Propagation is one level deep: the pushed legs do not push further.
    There is no cap on cumulative delay.
    """

    def propagate(
        self,
        arrivals: List[FlightEntry],
        departures: List[FlightEntry],
        source: FlightNode,
        minutes: int
    ) -> List[FlightEntry]:
        """
        Shift every leg linked to `source` by `minutes`, in place.

        Args:
            arrivals: Arrival collection (mutated)
            departures: Departure collection (mutated)
            source: The flight that was delayed
            minutes: Delay to apply

        Returns:
            The replacement entries, in collection order
        """
        network = AircraftNetwork(arrivals, departures)
        target = arrivals if source.direction.opposite is Direction.ARRIVAL else departures

        shifted: List[FlightEntry] = []
        for node in network.linked_legs(source):
            delayed = network.flight_at(node).delayed(minutes)
            target[node.index] = delayed
            shifted.append(delayed)
            logger.info(
                f"Delay propagated to {delayed.flight_code} "
                f"(plane {delayed.plane_code}) by {minutes} min"
            )

        return shifted
