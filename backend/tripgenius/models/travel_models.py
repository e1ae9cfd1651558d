# backend/tripgenius/models/travel_models.py

from typing import Any, Dict, List, Optional

from pydantic import Field

from tripgenius.models.base import CamelModel


# -------------------------
# Weather
# -------------------------
class WeatherDay(CamelModel):
    date: str
    temp_min: float
    temp_max: float
    summary: str


class WeatherHour(CamelModel):
    time_iso: str = Field(alias="timeISO")
    temp: float
    desc: str


class WeatherAlert(CamelModel):
    type: str
    description: str


class WeatherResponse(CamelModel):
    location: str
    daily: List[WeatherDay]
    hourly: List[WeatherHour] = []
    alerts: List[WeatherAlert] = []


# -------------------------
# Currency
# -------------------------
class CurrencyConvertResponse(CamelModel):
    amount: float
    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    rate: float
    result: float


# -------------------------
# Geocoding / travel options
# -------------------------
class GeocodeResult(CamelModel):
    label: str
    lat: float
    lon: float


class GeocodeSearchResponse(CamelModel):
    results: List[GeocodeResult]


class ReverseGeocodeResponse(CamelModel):
    label: str
    address: Dict[str, Any]


class Coords(CamelModel):
    lat: float
    lon: float


class RouteCoords(CamelModel):
    origin: Coords
    destination: Coords


class TravelOption(CamelModel):
    mode: str           # flight | train | car | bus | waterway
    time_hours: float
    price: int          # INR
    available: bool


class TravelOptionsResponse(CamelModel):
    km: int
    coords: RouteCoords
    options: List[TravelOption]


# -------------------------
# Places / events / visa
# -------------------------
class Place(CamelModel):
    id: str
    title: str
    lat: float
    lon: float
    url: str
    summary: str


class PlacesResponse(CamelModel):
    places: List[Place]


class LocalEvent(CamelModel):
    id: str
    title: str
    when: str
    kind: str
    where: str
    url: str


class EventsResponse(CamelModel):
    location: str
    results: List[LocalEvent]


class VisaResponse(CamelModel):
    from_country: str = Field(alias="from")
    to_country: str = Field(alias="to")
    visa: str
    notes: Optional[str] = None
