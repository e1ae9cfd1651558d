# backend/tripgenius/db/memory_store.py

import copy
import threading
from typing import Any, Dict, List, Optional
from uuid import uuid4

from tripgenius.db.base import (
    TRIP_MUTABLE_FIELDS,
    DuplicateEmailError,
    TripStore,
    normalize_email,
)
from tripgenius.utils.time_utils import utc_now_iso


class MemoryStore(TripStore):
    """Process-lifetime dicts. A restart loses everything."""

    def __init__(self) -> None:
        self._users: Dict[str, Dict[str, Any]] = {}      # id -> user
        self._emails: Dict[str, str] = {}                # email -> id
        self._trips: Dict[str, Dict[str, Any]] = {}      # id -> trip (insertion ordered)
        self._lock = threading.Lock()

    # ----------------------------------------------------------------------
    # USERS
    # ----------------------------------------------------------------------
    def create_user(
        self, email: str, name: str, password_hash: str,
        email_verified: bool = False,
        verification_token: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        email = normalize_email(email)
        with self._lock:
            if email in self._emails:
                raise DuplicateEmailError(email)
            user = {
                "id": user_id or f"user_{uuid4().hex[:12]}",
                "email": email,
                "name": name,
                "password_hash": password_hash,
                "created_at": utc_now_iso(),
                "email_verified": email_verified,
                "verification_token": verification_token,
            }
            self._users[user["id"]] = user
            self._emails[email] = user["id"]
            return dict(user)

    def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            user_id = self._emails.get(normalize_email(email))
            user = self._users.get(user_id) if user_id else None
            return dict(user) if user else None

    def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            user = self._users.get(user_id)
            return dict(user) if user else None

    def get_user_by_verification_token(self, token: str) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        with self._lock:
            for user in self._users.values():
                if user["verification_token"] == token:
                    return dict(user)
        return None

    def mark_email_verified(self, user_id: str) -> None:
        with self._lock:
            user = self._users.get(user_id)
            if user:
                user["email_verified"] = True
                user["verification_token"] = None

    # ----------------------------------------------------------------------
    # TRIPS
    # ----------------------------------------------------------------------
    def create_trip(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        now = utc_now_iso()
        trip = {field: data.get(field) for field in TRIP_MUTABLE_FIELDS}
        trip.update({
            "id": uuid4().hex,
            "user_id": user_id,
            "favorite": bool(data.get("favorite", False)),
            "created_at": now,
            "updated_at": now,
        })
        with self._lock:
            self._trips[trip["id"]] = trip
            return copy.deepcopy(trip)

    def get_trip(self, trip_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            trip = self._trips.get(trip_id)
            return copy.deepcopy(trip) if trip else None

    def list_trips(self, user_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            owned = [copy.deepcopy(t) for t in self._trips.values() if t["user_id"] == user_id]
        owned.reverse()
        # stable: equal timestamps keep newest-inserted first
        owned.sort(key=lambda t: t["created_at"], reverse=True)
        return owned

    def update_trip(self, trip_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            trip = self._trips.get(trip_id)
            if not trip:
                return None
            for field, value in changes.items():
                if field in TRIP_MUTABLE_FIELDS:
                    trip[field] = value
            trip["updated_at"] = utc_now_iso()
            return copy.deepcopy(trip)

    def delete_trip(self, trip_id: str) -> bool:
        with self._lock:
            return self._trips.pop(trip_id, None) is not None
