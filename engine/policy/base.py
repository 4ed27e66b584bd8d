"""Base class for seat conflict resolution policies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from models.flight import Seat
from models.outcome import FailureReason
from models.user import User
from engine.directory import UserDirectory
from engine.registry import FlightRegistry
from engine.seat_allocator import SeatAllocator


@dataclass
class SeatResolution:
    """Outcome of resolving a seat request on one flight."""
    seat: Optional[Seat]
    reason: Optional[FailureReason] = None
    suggested_seat: Optional[Seat] = None
    displaced: Optional[User] = None

    @property
    def granted(self) -> bool:
        """Whether the requested seat can be committed to the requester."""
        return self.reason is None


class SeatPolicy(ABC):
    """
    Abstract base class for seat conflict resolution.

    Each policy decides what happens when a requested seat is already
    held: ordinary travellers are turned away, frequent flyers displace
    the occupant.
    """

    def __init__(
        self,
        registry: FlightRegistry,
        directory: UserDirectory,
        allocator: Optional[SeatAllocator] = None
    ):
        self.registry = registry
        self.directory = directory
        self.allocator = allocator or SeatAllocator(registry.rules)

    @abstractmethod
    def resolve(self, flight_code: str, requested: Seat) -> SeatResolution:
        """
        Resolve a seat request.

        Args:
            flight_code: Flight the seat is on
            requested: Seat asked for

        Returns:
            SeatResolution granting `requested` or explaining the refusal.
            A granted seat is not yet occupied; the caller commits it.
        """
        pass

    def next_available(self, flight_code: str, requested: Seat) -> Optional[Seat]:
        """Nearest free seat to `requested`, from the registry's occupancy."""
        return self.allocator.next_available(flight_code, requested, self.registry.occupancy)
