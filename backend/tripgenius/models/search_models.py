# backend/tripgenius/models/search_models.py

from typing import List

from pydantic import Field

from tripgenius.models.base import CamelModel


class Flight(CamelModel):
    id: str
    from_airport: str = Field(alias="from")
    to_airport: str = Field(alias="to")
    price: float
    airline: str
    departure: str


class Hotel(CamelModel):
    id: str
    name: str
    price_per_night: float
    rating: float
    url: str
    reviews: List[str] = []


class FlightSearchOut(CamelModel):
    results: List[Flight]


class HotelSearchOut(CamelModel):
    results: List[Hotel]
