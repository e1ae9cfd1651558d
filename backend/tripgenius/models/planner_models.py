# backend/tripgenius/models/planner_models.py

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from tripgenius.models.base import CamelModel


# -------------------------
# Chat
# -------------------------
class ChatIn(BaseModel):
    prompt: Optional[str] = None
    destination: Optional[str] = None
    context: Optional[Dict[str, Any]] = None


class ChatOut(BaseModel):
    reply: str


# -------------------------
# Collaboration
# -------------------------
class CollabPublishIn(BaseModel):
    room: Optional[str] = None
    message: Optional[Any] = None


class CollabPublishOut(BaseModel):
    ok: bool = True


# -------------------------
# Local guides
# -------------------------
class LocalGuide(CamelModel):
    id: str
    name: str
    city: str
    languages: List[str]
    rating: float
    reviews: int
    specialties: List[str]
    price_per_day: float
    image: str = ""


class GuidesOut(CamelModel):
    destination: str
    guides: List[LocalGuide]


# -------------------------
# Packing list
# -------------------------
class PackingCategory(CamelModel):
    category: str
    items: List[str]


class PackingOut(CamelModel):
    destination: str
    days: int
    avg_temp: Optional[float] = None
    categories: List[PackingCategory]


# -------------------------
# Passport expiry
# -------------------------
class PassportStatusOut(CamelModel):
    expiry_date: Optional[date] = None
    days_remaining: Optional[int] = None
    status: str    # valid | warning | expired
