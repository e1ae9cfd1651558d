# backend/tripgenius/api/routes_explore.py

from fastapi import APIRouter, HTTPException, Query

from tripgenius.models.travel_models import EventsResponse, PlacesResponse, VisaResponse
from tripgenius.services import events_service, places_service, visa_service

router = APIRouter(tags=["explore"])


@router.get("/places", response_model=PlacesResponse)
def get_places(location: str = ""):
    if not location.strip():
        raise HTTPException(400, "Missing location")
    return PlacesResponse(places=places_service.nearby_places(location.strip()))


@router.get("/events", response_model=EventsResponse)
def get_events(location: str = ""):
    location = location.strip()
    if not location:
        raise HTTPException(400, "Missing location")
    return EventsResponse(location=location, results=events_service.upcoming_events(location))


@router.get("/visa", response_model=VisaResponse)
def visa_check(
    from_country: str = Query("", alias="from"),
    to_country: str = Query("", alias="to"),
):
    from_country, to_country = from_country.strip(), to_country.strip()
    if not from_country or not to_country:
        raise HTTPException(400, "Missing from/to")
    return visa_service.visa_requirement(from_country, to_country)
