"""Aircraft rotation network linking flights flown by the same plane."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple
import networkx as nx

from models.flight import Direction, FlightEntry


@dataclass(frozen=True)
class FlightNode:
    """Node in the rotation network: a flight's slot in its collection."""
    direction: Direction
    index: int


class AircraftNetwork:
    """
    Bipartite graph of arrival and departure flights.

    An edge joins an arrival and a departure flown by the same aircraft,
    i.e. sharing (airline_code, plane_id). A flight's neighbours are the
    legs a delay to it must push out.

    Nodes are keyed by position rather than flight code, since flight
    codes are not required to be unique.
    """

    def __init__(
        self,
        arrivals: Sequence[FlightEntry],
        departures: Sequence[FlightEntry]
    ):
        self.arrivals = list(arrivals)
        self.departures = list(departures)

        self.graph = nx.Graph()
        self._build_network()

    def _build_network(self) -> None:
        """Construct nodes per flight and edges per shared aircraft."""
        by_aircraft: Dict[Tuple[str, int], List[FlightNode]] = {}

        for direction, flights in (
            (Direction.ARRIVAL, self.arrivals),
            (Direction.DEPARTURE, self.departures)
        ):
            for index, flight in enumerate(flights):
                node = FlightNode(direction, index)
                self.graph.add_node(node, **self._node_features(flight))
                by_aircraft.setdefault(flight.aircraft, []).append(node)

        for nodes in by_aircraft.values():
            for a in nodes:
                for b in nodes:
                    # Same-direction legs never push each other out
                    if a.direction is Direction.ARRIVAL and b.direction is Direction.DEPARTURE:
                        self.graph.add_edge(a, b)

    def _node_features(self, flight: FlightEntry) -> dict:
        return {
            "flight_code": flight.flight_code,
            "plane_code": flight.plane_code,
            "aircraft": flight.aircraft,
            "time": flight.when.timestamp()
        }

    def flight_at(self, node: FlightNode) -> FlightEntry:
        """Flight stored at a node."""
        if node.direction is Direction.ARRIVAL:
            return self.arrivals[node.index]
        return self.departures[node.index]

    def linked_legs(self, node: FlightNode) -> List[FlightNode]:
        """Opposite-direction legs flown by the same aircraft, by index."""
        if node not in self.graph:
            return []
        return sorted(self.graph.neighbors(node), key=lambda n: n.index)

    @property
    def num_nodes(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def num_links(self) -> int:
        return self.graph.number_of_edges()

    def __repr__(self) -> str:
        return f"AircraftNetwork(flights={self.num_nodes}, links={self.num_links})"
