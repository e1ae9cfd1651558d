# backend/tripgenius/services/itinerary_service.py

from typing import List

from tripgenius.models.itinerary_models import (
    ItineraryDay,
    ItineraryRequest,
    ItineraryResponse,
    Mood,
)
from tripgenius.utils.data_loader import load_data

DEFAULT_DAYS = 3
MIN_DAYS = 1
MAX_DAYS = 14
DEFAULT_MOOD = Mood.ADVENTURE
DEFAULT_DESTINATION = "Your Destination"


def clamp_days(days) -> int:
    # 0 and missing both mean "use the default"
    return max(MIN_DAYS, min(MAX_DAYS, int(days or DEFAULT_DAYS)))


def suggest_activities(destination: str, mood: Mood) -> List[str]:
    templates = load_data("activities")[mood.value]
    return [t.format(destination=destination) for t in templates]


def generate_itinerary(req: ItineraryRequest) -> ItineraryResponse:
    days = clamp_days(req.days)
    mood = req.mood or DEFAULT_MOOD
    destination = (req.destination or "").strip() or DEFAULT_DESTINATION

    return ItineraryResponse(
        destination=destination,
        days=[
            ItineraryDay(
                day=d,
                theme=mood,
                activities=suggest_activities(destination, mood),
            )
            for d in range(1, days + 1)
        ],
    )
