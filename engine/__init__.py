"""Flight registry and seat allocation engine."""

from engine.registry import FlightRegistry
from engine.seat_allocator import SeatAllocator, next_available
from engine.delay import DelayPropagator
from engine.directory import UserDirectory
from engine.policy import SeatPolicy, SeatResolution, NonDisplacingPolicy, DisplacingPolicy
from engine.booking import BookingEngine, BookingView, PointsBreakdown

__all__ = [
    "FlightRegistry",
    "SeatAllocator",
    "next_available",
    "DelayPropagator",
    "UserDirectory",
    "SeatPolicy",
    "SeatResolution",
    "NonDisplacingPolicy",
    "DisplacingPolicy",
    "BookingEngine",
    "BookingView",
    "PointsBreakdown",
]
