import pytest

from tripgenius.db.base import DuplicateEmailError
from tripgenius.db.memory_store import MemoryStore
from tripgenius.db.sqlite_store import SQLiteStore


@pytest.fixture(params=["memory", "sqlite"])
def backend(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    return SQLiteStore(str(tmp_path / "db" / "tripgenius.db"))


def test_create_and_lookup_user(backend):
    user = backend.create_user("Ana@Example.com ", "Ana", "hash", verification_token="tok")
    assert user["email"] == "ana@example.com"
    assert user["email_verified"] is False
    assert user["id"].startswith("user_")

    assert backend.get_user_by_email("ANA@example.com")["id"] == user["id"]
    assert backend.get_user_by_id(user["id"])["name"] == "Ana"
    assert backend.get_user_by_verification_token("tok")["id"] == user["id"]
    assert backend.get_user_by_verification_token("") is None
    assert backend.get_user_by_id("missing") is None


def test_duplicate_email_rejected(backend):
    backend.create_user("dup@example.com", "One", "hash")
    with pytest.raises(DuplicateEmailError):
        backend.create_user("DUP@example.com", "Two", "hash")


def test_mark_email_verified(backend):
    user = backend.create_user("v@example.com", "V", "hash", verification_token="abc")
    backend.mark_email_verified(user["id"])
    stored = backend.get_user_by_id(user["id"])
    assert stored["email_verified"] is True
    assert stored["verification_token"] is None
    assert backend.get_user_by_verification_token("abc") is None


def test_trip_crud(backend):
    itinerary = {"destination": "Rome", "days": [{"day": 1, "activities": ["Walk"]}]}
    trip = backend.create_trip("u1", {
        "name": "Rome", "destination": "Rome", "budget": 900.0, "members": 2,
        "mood": "culture", "itinerary": itinerary,
    })
    assert trip["user_id"] == "u1"
    assert trip["itinerary"] == itinerary
    assert trip["favorite"] is False
    assert trip["created_at"] == trip["updated_at"]

    updated = backend.update_trip(trip["id"], {"favorite": True, "budget": 1200.0, "user_id": "hijack"})
    assert updated["favorite"] is True
    assert updated["budget"] == 1200.0
    assert updated["user_id"] == "u1"

    cleared = backend.update_trip(trip["id"], {"itinerary": None})
    assert cleared["itinerary"] is None

    assert backend.update_trip("missing", {"name": "x"}) is None
    assert backend.delete_trip(trip["id"]) is True
    assert backend.delete_trip(trip["id"]) is False
    assert backend.get_trip(trip["id"]) is None


def test_list_trips_newest_first_per_owner(backend):
    first = backend.create_trip("u1", {"destination": "A"})
    second = backend.create_trip("u1", {"destination": "B"})
    backend.create_trip("u2", {"destination": "C"})

    assert [t["id"] for t in backend.list_trips("u1")] == [second["id"], first["id"]]
    assert backend.list_trips("nobody") == []


def test_returned_records_are_copies(backend):
    trip = backend.create_trip("u1", {"destination": "A", "itinerary": {"days": []}})
    trip["itinerary"]["days"].append("mutated")
    assert backend.get_trip(trip["id"])["itinerary"] == {"days": []}
