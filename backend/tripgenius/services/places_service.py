# backend/tripgenius/services/places_service.py

from typing import List

from tripgenius.core.errors import UpstreamError
from tripgenius.core.logger import get_logger
from tripgenius.models.travel_models import Place
from tripgenius.services import geo_service
from tripgenius.services.http_client import fetch_json_with_retry

log = get_logger("places")

WIKI_API_URL = "https://en.wikipedia.org/w/api.php"
SEARCH_RADIUS_M = 10000
SEARCH_LIMIT = 30


def nearby_places(location: str) -> List[Place]:
    """Wikipedia articles within 10 km of `location`. Empty list on any failure."""
    try:
        geo = geo_service.geocode_first(location)
        if not geo:
            return []
        data = fetch_json_with_retry(
            WIKI_API_URL,
            params={
                "action": "query",
                "format": "json",
                "list": "geosearch",
                "gscoord": f"{geo['lat']}|{geo['lon']}",
                "gsradius": SEARCH_RADIUS_M,
                "gslimit": SEARCH_LIMIT,
            },
        )
    except UpstreamError as e:
        log.warning(f"Places lookup for {location!r} failed: {e}")
        return []

    hits = ((data or {}).get("query") or {}).get("geosearch") or []
    return [
        Place(
            id=str(p["pageid"]),
            title=p["title"],
            lat=float(p["lat"]),
            lon=float(p["lon"]),
            url=f"https://en.wikipedia.org/?curid={p['pageid']}",
            summary=f"{p['title']} near {location}",
        )
        for p in hits
    ]
