"""Seat conflict resolution policies."""

from typing import Dict, Type

from models.user import Role
from engine.policy.base import SeatPolicy, SeatResolution
from engine.policy.non_displacing import NonDisplacingPolicy
from engine.policy.displacing import DisplacingPolicy

POLICY_BY_ROLE: Dict[Role, Type[SeatPolicy]] = {
    Role.TRAVELLER: NonDisplacingPolicy,
    Role.FREQUENT_FLYER: DisplacingPolicy,
}


__all__ = [
    "SeatPolicy",
    "SeatResolution",
    "NonDisplacingPolicy",
    "DisplacingPolicy",
    "POLICY_BY_ROLE",
]
