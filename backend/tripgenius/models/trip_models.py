# backend/tripgenius/models/trip_models.py

from datetime import date
from typing import List, Optional

from pydantic import Field, model_validator

from tripgenius.models.base import CamelModel
from tripgenius.models.itinerary_models import ItineraryResponse, Mood


def check_date_order(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise ValueError("endDate must not be before startDate")


class TripCreate(CamelModel):
    name: Optional[str] = None
    destination: str = Field(min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: float = Field(0, ge=0)
    members: int = Field(1, ge=1)
    mood: Mood = Mood.ADVENTURE
    itinerary: Optional[ItineraryResponse] = None
    favorite: bool = False

    @model_validator(mode="after")
    def _dates_in_order(self):
        check_date_order(self.start_date, self.end_date)
        return self


class TripUpdate(CamelModel):
    """Every field optional; only the ones sent are applied."""

    name: Optional[str] = None
    destination: Optional[str] = Field(None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = Field(None, ge=0)
    members: Optional[int] = Field(None, ge=1)
    mood: Optional[Mood] = None
    itinerary: Optional[ItineraryResponse] = None
    favorite: Optional[bool] = None


class TripOut(CamelModel):
    id: str
    user_id: str
    name: str
    destination: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: float
    members: int
    mood: Mood
    itinerary: Optional[ItineraryResponse] = None
    favorite: bool
    created_at: str
    updated_at: str


class TripListOut(CamelModel):
    trips: List[TripOut]
