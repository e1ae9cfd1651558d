# backend/tripgenius/models/itinerary_models.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Mood(str, Enum):
    FOODIE = "foodie"
    ADVENTURE = "adventure"
    RELAX = "relax"
    CULTURE = "culture"
    ROMANTIC = "romantic"
    FAMILY = "family"
    NIGHTLIFE = "nightlife"
    SPIRITUAL = "spiritual"
    SHOPPING = "shopping"
    NATURE = "nature"
    PHOTOGRAPHY = "photography"


class ItineraryRequest(BaseModel):
    destination: Optional[str] = None
    days: Optional[int] = None
    budget: Optional[float] = None
    mood: Optional[Mood] = None


class ItineraryDay(BaseModel):
    day: int
    theme: Mood
    activities: List[str]


class ItineraryResponse(BaseModel):
    destination: str
    days: List[ItineraryDay]
