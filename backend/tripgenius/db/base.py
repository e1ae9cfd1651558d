# backend/tripgenius/db/base.py

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class DuplicateEmailError(Exception):
    pass


# Fields a trip update may touch; everything else is owned by the store.
TRIP_MUTABLE_FIELDS = (
    "name", "destination", "start_date", "end_date", "budget",
    "members", "mood", "itinerary", "favorite",
)


class TripStore(ABC):
    """
    Persistence for users and their trips.

    Records go in and come out as plain dicts with snake_case keys, the
    same shape for every backend, so routes never see storage details.
    """

    # ------------------------------------------------------------------
    # USERS
    # ------------------------------------------------------------------
    @abstractmethod
    def create_user(
        self, email: str, name: str, password_hash: str,
        email_verified: bool = False,
        verification_token: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Insert a user. Raises DuplicateEmailError if the email is taken."""

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def get_user_by_verification_token(self, token: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def mark_email_verified(self, user_id: str) -> None:
        """Set email_verified and clear the verification token."""

    # ------------------------------------------------------------------
    # TRIPS
    # ------------------------------------------------------------------
    @abstractmethod
    def create_trip(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def get_trip(self, trip_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def list_trips(self, user_id: str) -> List[Dict[str, Any]]:
        """Trips owned by user_id, newest first."""

    @abstractmethod
    def update_trip(self, trip_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply changes (TRIP_MUTABLE_FIELDS only), bump updated_at. None if missing."""

    @abstractmethod
    def delete_trip(self, trip_id: str) -> bool:
        ...


def normalize_email(email: str) -> str:
    return email.strip().lower()
