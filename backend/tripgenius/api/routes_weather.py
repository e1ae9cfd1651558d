# backend/tripgenius/api/routes_weather.py

from fastapi import APIRouter

from tripgenius.models.travel_models import WeatherResponse
from tripgenius.services import weather_service

router = APIRouter(tags=["weather"])


@router.get("/weather", response_model=WeatherResponse)
def get_weather(location: str = ""):
    return weather_service.get_weather(location.strip())
