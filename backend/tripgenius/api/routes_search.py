# backend/tripgenius/api/routes_search.py

from fastapi import APIRouter

from tripgenius.models.search_models import FlightSearchOut, HotelSearchOut
from tripgenius.services import search_service

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/flights", response_model=FlightSearchOut)
def search_flights(q: str = ""):
    return FlightSearchOut(results=search_service.search_flights(q))


@router.get("/hotels", response_model=HotelSearchOut)
def search_hotels(q: str = ""):
    return HotelSearchOut(results=search_service.search_hotels(q))
