"""In-memory directory of registered users."""

from typing import Iterator, List, Optional
import logging

from models.flight import Seat
from models.outcome import FailureReason, RegistrationResult
from models.user import FlightManager, FrequentFlyer, Traveller, User

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Holds every registered user, grouped by role.

    Emails are unique across all roles, compared case-insensitively.
    Inputs are assumed validated by the caller.
    """

    def __init__(self):
        self.travellers: List[Traveller] = []
        self.frequent_flyers: List[FrequentFlyer] = []
        self.flight_managers: List[FlightManager] = []

    @property
    def users(self) -> Iterator[User]:
        """All users: travellers, then frequent flyers, then flight managers."""
        yield from self.travellers
        yield from self.frequent_flyers
        yield from self.flight_managers

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        for user in self.users:
            if user.email.lower() == wanted:
                return user
        return None

    def register_traveller(self, name: str, age: int, mobile: str, email: str) -> RegistrationResult:
        return self._add(Traveller(name, age, mobile, email), self.travellers)

    def register_frequent_flyer(
        self,
        name: str,
        age: int,
        mobile: str,
        email: str,
        frequent_flyer_number: int,
        points: int = 0
    ) -> RegistrationResult:
        user = FrequentFlyer(name, age, mobile, email, frequent_flyer_number, points)
        return self._add(user, self.frequent_flyers)

    def register_flight_manager(
        self,
        name: str,
        age: int,
        mobile: str,
        email: str,
        staff_id: int
    ) -> RegistrationResult:
        return self._add(FlightManager(name, age, mobile, email, str(staff_id)), self.flight_managers)

    def _add(self, user: User, bucket: list) -> RegistrationResult:
        if self.email_exists(user.email):
            logger.info(f"Registration rejected: email {user.email} already in use")
            return RegistrationResult(reason=FailureReason.DUPLICATE_EMAIL)

        bucket.append(user)
        logger.info(f"Registered {user.role.value} {user.name}")
        return RegistrationResult(user=user)

    def find_by_seat(self, flight_code: str, seat: Seat) -> Optional[User]:
        """Find the user holding a seat on a flight, on either leg."""
        for user in self.users:
            if user.holds_seat(flight_code, seat):
                return user
        return None

    def __len__(self) -> int:
        return len(self.travellers) + len(self.frequent_flyers) + len(self.flight_managers)
