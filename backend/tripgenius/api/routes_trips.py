# backend/tripgenius/api/routes_trips.py

from fastapi import APIRouter, Depends, HTTPException

from tripgenius.api.deps import get_current_user_id, store_dep
from tripgenius.core.logger import get_logger
from tripgenius.db.base import TripStore
from tripgenius.models.trip_models import (
    TripCreate,
    TripListOut,
    TripOut,
    TripUpdate,
    check_date_order,
)
from tripgenius.models.user_models import MessageOut

router = APIRouter(prefix="/trips", tags=["trips"])
log = get_logger("trips")

# an update may null these out; null is ignored for every other field
CLEARABLE_FIELDS = ("start_date", "end_date", "itinerary")


# --------------------------
# Ownership check
# --------------------------
def _owned_trip(trip_id: str, user_id: str, store: TripStore) -> dict:
    trip = store.get_trip(trip_id)
    if not trip:
        raise HTTPException(404, "Trip not found")
    if trip["user_id"] != user_id:
        log.info(f"User {user_id} denied access to trip {trip_id}")
        raise HTTPException(403, "Not allowed to access this trip")
    return trip


@router.get("", response_model=TripListOut)
def list_trips(user_id: str = Depends(get_current_user_id), store: TripStore = Depends(store_dep)):
    return {"trips": store.list_trips(user_id)}


@router.post("", response_model=TripOut, status_code=201)
def create_trip(data: TripCreate,
                user_id: str = Depends(get_current_user_id),
                store: TripStore = Depends(store_dep)):
    fields = data.model_dump(mode="json")
    fields["name"] = (fields.get("name") or "").strip() or f"Trip to {data.destination}"
    trip = store.create_trip(user_id, fields)
    log.info(f"User {user_id} created trip {trip['id']}")
    return trip


@router.get("/{trip_id}", response_model=TripOut)
def get_trip(trip_id: str,
             user_id: str = Depends(get_current_user_id),
             store: TripStore = Depends(store_dep)):
    return _owned_trip(trip_id, user_id, store)


@router.put("/{trip_id}", response_model=TripOut)
def update_trip(trip_id: str, data: TripUpdate,
                user_id: str = Depends(get_current_user_id),
                store: TripStore = Depends(store_dep)):
    current = _owned_trip(trip_id, user_id, store)
    changes = {
        field: value
        for field, value in data.model_dump(mode="json", exclude_unset=True).items()
        if value is not None or field in CLEARABLE_FIELDS
    }

    # validate against the merged record, not just the patch
    merged = TripOut.model_validate({**current, **changes})
    try:
        check_date_order(merged.start_date, merged.end_date)
    except ValueError as e:
        raise HTTPException(400, str(e))

    return store.update_trip(trip_id, changes)


@router.patch("/{trip_id}/favorite", response_model=TripOut)
def toggle_favorite(trip_id: str,
                    user_id: str = Depends(get_current_user_id),
                    store: TripStore = Depends(store_dep)):
    trip = _owned_trip(trip_id, user_id, store)
    return store.update_trip(trip_id, {"favorite": not trip["favorite"]})


@router.delete("/{trip_id}", response_model=MessageOut)
def delete_trip(trip_id: str,
                user_id: str = Depends(get_current_user_id),
                store: TripStore = Depends(store_dep)):
    _owned_trip(trip_id, user_id, store)
    store.delete_trip(trip_id)
    log.info(f"User {user_id} deleted trip {trip_id}")
    return {"message": "Trip deleted"}
