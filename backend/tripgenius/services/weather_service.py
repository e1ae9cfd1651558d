# backend/tripgenius/services/weather_service.py

import re
from collections import Counter
from datetime import timedelta
from typing import Any, Dict, List

from tripgenius.core.config_loader import settings
from tripgenius.core.errors import UpstreamError
from tripgenius.core.logger import get_logger
from tripgenius.models.travel_models import (
    WeatherAlert,
    WeatherDay,
    WeatherHour,
    WeatherResponse,
)
from tripgenius.services.cache import MemoryCache
from tripgenius.services.http_client import fetch_json_with_retry
from tripgenius.utils.time_utils import utc_now

log = get_logger("weather")

GEO_URL = "https://api.openweathermap.org/geo/1.0/direct"
FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"

SEVERE_PATTERN = re.compile(r"storm|thunder|rain|snow", re.IGNORECASE)
PRECIPITATION_ALERT = "Potential precipitation or storm within 24h"

_cache = MemoryCache(ttl_seconds=settings.weather_cache_ttl_seconds)


def _most_common(descriptions: List[str]) -> str:
    if not descriptions:
        return ""
    return Counter(descriptions).most_common(1)[0][0]


def _description(item: Dict[str, Any]) -> str:
    weather = item.get("weather") or [{}]
    return str(weather[0].get("description") or "")


def summarize_forecast(location: str, entries: List[Dict[str, Any]]) -> WeatherResponse:
    """
    Collapse an OpenWeather 3-hourly forecast list into daily/hourly views.

    Daily: per calendar date, min of mins, max of maxes and the most
    frequent description; first 5 dates only.
    Hourly: the first 8 entries (next 24h).
    """
    by_day: Dict[str, Dict[str, Any]] = {}
    for item in entries:
        day_key = str(item["dt_txt"]).split(" ")[0]
        t_min = item["main"]["temp_min"]
        t_max = item["main"]["temp_max"]
        day = by_day.setdefault(day_key, {"min": t_min, "max": t_max, "desc": []})
        day["min"] = min(day["min"], t_min)
        day["max"] = max(day["max"], t_max)
        desc = _description(item)
        if desc:
            day["desc"].append(desc)

    daily = [
        WeatherDay(date=day_key, temp_min=d["min"], temp_max=d["max"], summary=_most_common(d["desc"]))
        for day_key, d in list(by_day.items())[:5]
    ]

    next_24h = entries[:8]
    hourly = [
        WeatherHour(
            time_iso=str(item.get("dt_txt")),
            temp=float((item.get("main") or {}).get("temp") or 0),
            desc=_description(item),
        )
        for item in next_24h
    ]

    alerts = []
    if any(SEVERE_PATTERN.search(_description(item)) for item in next_24h):
        alerts.append(WeatherAlert(type="weather", description=PRECIPITATION_ALERT))

    return WeatherResponse(location=location, daily=daily, hourly=hourly, alerts=alerts)


def fallback_forecast(location: str) -> WeatherResponse:
    now = utc_now()
    daily = [
        WeatherDay(
            date=(now + timedelta(days=i)).isoformat(),
            temp_min=18 + i,
            temp_max=26 + i,
            summary="Partly cloudy" if i % 2 else "Sunny",
        )
        for i in range(5)
    ]
    hourly = [
        WeatherHour(
            time_iso=(now + timedelta(hours=3 * (i + 1))).isoformat(),
            temp=22 + (i % 3),
            desc="clear sky" if i % 2 else "clouds",
        )
        for i in range(8)
    ]
    return WeatherResponse(location=location, daily=daily, hourly=hourly, alerts=[])


def _fetch_live(location: str) -> WeatherResponse:
    key = settings.OPENWEATHER_API_KEY
    geo = fetch_json_with_retry(
        GEO_URL, params={"q": location, "limit": 1, "appid": key}, timeout=4,
    )
    if not geo:
        raise UpstreamError(f"OpenWeather could not geocode {location!r}", url=GEO_URL)

    forecast = fetch_json_with_retry(
        FORECAST_URL,
        params={"lat": geo[0]["lat"], "lon": geo[0]["lon"], "units": "metric", "appid": key},
        timeout=5,
    )
    return summarize_forecast(location, forecast.get("list") or [])


def get_weather(location: str) -> WeatherResponse:
    """Forecast for `location`, served from a 30 minute cache; never raises on upstream trouble."""
    cached = _cache.get(location)
    if cached is not None:
        return cached

    result = None
    if settings.OPENWEATHER_API_KEY and location:
        try:
            result = _fetch_live(location)
        except (UpstreamError, KeyError, TypeError, ValueError) as e:
            log.warning(f"Live weather for {location!r} unavailable, using fallback: {e}")

    if result is None:
        result = fallback_forecast(location)

    _cache.set(location, result)
    return result


def clear_cache() -> None:
    _cache.clear()
