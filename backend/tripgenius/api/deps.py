# backend/tripgenius/api/deps.py

from typing import Optional

from fastapi import Header, HTTPException

from tripgenius.core.logger import get_logger
from tripgenius.core.security import decode_token
from tripgenius.db.base import TripStore
from tripgenius.db.store import get_store

log = get_logger("auth")


def store_dep() -> TripStore:
    return get_store()


# --------------------------
# Extract user ID from "Authorization: Bearer <jwt>"
# --------------------------
def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    if not authorization:
        raise HTTPException(401, "No token provided")
    if not authorization.startswith("Bearer "):
        raise HTTPException(401, "Invalid token")

    payload = decode_token(authorization.split(" ", 1)[1].strip())
    if not payload or not payload.get("sub"):
        raise HTTPException(401, "Invalid token")
    return str(payload["sub"])
