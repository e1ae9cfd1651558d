# backend/tripgenius/services/geo_service.py

from typing import Any, Dict, List, Optional

from tripgenius.core.logger import get_logger
from tripgenius.models.travel_models import (
    Coords,
    GeocodeResult,
    ReverseGeocodeResponse,
    RouteCoords,
    TravelOption,
    TravelOptionsResponse,
)
from tripgenius.services.http_client import fetch_json_with_retry
from tripgenius.utils.geo_utils import haversine_km, round_half_up

log = get_logger("geo")

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
NOMINATIM_REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"

# checked in this order for the human-readable locality
LOCALITY_KEYS = ("city", "town", "village", "hamlet", "suburb")


# -------------------------------------------------------
# FORWARD / REVERSE GEOCODING
# -------------------------------------------------------
def _nominatim_search(query: str) -> List[Dict[str, Any]]:
    return fetch_json_with_retry(
        NOMINATIM_SEARCH_URL,
        params={"format": "jsonv2", "q": query},
        timeout=4,
    ) or []


def search(query: str, limit: int = 5) -> List[GeocodeResult]:
    hits = _nominatim_search(query)
    return [
        GeocodeResult(label=h.get("display_name", ""), lat=float(h["lat"]), lon=float(h["lon"]))
        for h in hits[:limit]
    ]


def geocode_first(query: str) -> Optional[Dict[str, Any]]:
    """Best Nominatim hit as {lat, lon, class}, or None."""
    hits = _nominatim_search(query)
    if not hits:
        return None
    top = hits[0]
    return {"lat": float(top["lat"]), "lon": float(top["lon"]), "class": top.get("class")}


def reverse(lat: float, lon: float) -> ReverseGeocodeResponse:
    data = fetch_json_with_retry(
        NOMINATIM_REVERSE_URL,
        params={"format": "jsonv2", "lat": lat, "lon": lon},
        timeout=4,
    )
    address = (data or {}).get("address") or {}
    locality = next((address[k] for k in LOCALITY_KEYS if address.get(k)), "")
    parts = [locality, address.get("state", ""), address.get("country", "")]
    return ReverseGeocodeResponse(label=", ".join(p for p in parts if p), address=address)


# -------------------------------------------------------
# TRAVEL OPTIONS
# -------------------------------------------------------
def estimate_options(km: float, near_water: bool) -> List[TravelOption]:
    """Rough time/price (INR) estimates per transport mode for a straight-line distance."""
    def option(mode: str, speed_kmh: float, price: float, available: bool) -> TravelOption:
        return TravelOption(
            mode=mode,
            time_hours=round(km / speed_kmh, 1),
            price=round_half_up(price),
            available=available,
        )

    return [
        option("flight", 700, 3.5 * km + 1500, km > 300),
        option("train", 80, 0.9 * km + 200, km > 50),
        option("car", 60, 12 * km, True),
        option("bus", 50, 1.2 * km + 150, True),
        option("waterway", 30, 0.8 * km + 300, km > 200 and near_water),
    ]


def travel_options(origin: str, destination: str) -> Optional[TravelOptionsResponse]:
    """None when either endpoint cannot be geocoded."""
    o = geocode_first(origin)
    d = geocode_first(destination)
    if not o or not d:
        log.info(f"Could not geocode route {origin!r} -> {destination!r}")
        return None

    km = haversine_km(o["lat"], o["lon"], d["lat"], d["lon"])
    near_water = o["class"] == "place" or d["class"] == "place"

    return TravelOptionsResponse(
        km=round_half_up(km),
        coords=RouteCoords(
            origin=Coords(lat=o["lat"], lon=o["lon"]),
            destination=Coords(lat=d["lat"], lon=d["lon"]),
        ),
        options=estimate_options(km, near_water),
    )
