# backend/tripgenius/api/routes_geo.py

import math

from fastapi import APIRouter, HTTPException

from tripgenius.core.errors import UpstreamError
from tripgenius.core.logger import get_logger
from tripgenius.models.travel_models import (
    GeocodeSearchResponse,
    ReverseGeocodeResponse,
    TravelOptionsResponse,
)
from tripgenius.services import geo_service

router = APIRouter(tags=["geo"])
log = get_logger("geo")

# a 200 from Nominatim can still carry an unexpected shape
GEO_FAILURES = (UpstreamError, KeyError, TypeError, ValueError, AttributeError)


def _parse_coord(value: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise HTTPException(400, "Invalid lat/lon")
    if not math.isfinite(number):
        raise HTTPException(400, "Invalid lat/lon")
    return number


@router.get("/geocode/search", response_model=GeocodeSearchResponse)
def geocode_search(q: str = ""):
    if not q.strip():
        raise HTTPException(400, "Missing q")
    try:
        return GeocodeSearchResponse(results=geo_service.search(q.strip()))
    except GEO_FAILURES as e:
        log.error(f"Geocoding {q!r} failed: {e}")
        raise HTTPException(500, "Geocoding failed")


@router.get("/geocode/reverse", response_model=ReverseGeocodeResponse)
def reverse_geocode(lat: str = "", lon: str = ""):
    lat_f, lon_f = _parse_coord(lat), _parse_coord(lon)
    try:
        return geo_service.reverse(lat_f, lon_f)
    except GEO_FAILURES as e:
        log.error(f"Reverse geocoding ({lat_f}, {lon_f}) failed: {e}")
        raise HTTPException(500, "Reverse geocoding failed")


@router.get("/travel/options", response_model=TravelOptionsResponse)
def travel_options(origin: str = "", destination: str = ""):
    origin, destination = origin.strip(), destination.strip()
    if not origin or not destination:
        raise HTTPException(400, "Missing origin/destination")
    try:
        result = geo_service.travel_options(origin, destination)
    except GEO_FAILURES as e:
        log.error(f"Travel options {origin!r} -> {destination!r} failed: {e}")
        raise HTTPException(500, "Failed to compute travel options")
    if result is None:
        raise HTTPException(404, "Could not geocode")
    return result
