# backend/tripgenius/services/search_service.py

from typing import List

from tripgenius.models.search_models import Flight, Hotel


# Listings are mock data until a real provider is wired in.
def search_flights(q: str = "") -> List[Flight]:
    q = q.strip()
    return [
        Flight(id="F1", from_airport="NYC", to_airport=q or "LAX",
               price=399, airline="SkyJet", departure="09:20"),
        Flight(id="F2", from_airport="NYC", to_airport=q or "SFO",
               price=459, airline="AeroFly", departure="14:45"),
    ]


def search_hotels(q: str = "") -> List[Hotel]:
    q = q.strip()
    return [
        Hotel(
            id="H1",
            name=f"{q or 'Grand'} Plaza",
            price_per_night=129,
            rating=4.4,
            url="https://booking.com",
            reviews=[
                "Clean rooms and friendly staff.",
                "Great location near attractions.",
            ],
        ),
        Hotel(
            id="H2",
            name=f"{q or 'Sun'} Resort",
            price_per_night=179,
            rating=4.6,
            url="https://agoda.com",
            reviews=[
                "Amazing breakfast and ocean view!",
                "Spacious rooms and fast Wi-Fi.",
            ],
        ),
    ]
