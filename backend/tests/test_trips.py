import pytest


@pytest.fixture
def trip_payload():
    return {
        "destination": "Lisbon",
        "startDate": "2026-05-01",
        "endDate": "2026-05-05",
        "budget": 1800,
        "members": 2,
        "mood": "foodie",
    }


def test_trips_require_auth(client):
    assert client.get("/api/trips").status_code == 401
    assert client.post("/api/trips", json={"destination": "Rome"}).status_code == 401


def test_create_and_get_trip(client, auth_headers, trip_payload):
    resp = client.post("/api/trips", json=trip_payload, headers=auth_headers)
    assert resp.status_code == 201
    trip = resp.json()
    assert trip["destination"] == "Lisbon"
    assert trip["name"] == "Trip to Lisbon"
    assert trip["startDate"] == "2026-05-01"
    assert trip["members"] == 2
    assert trip["mood"] == "foodie"
    assert trip["favorite"] is False

    fetched = client.get(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json() == trip


def test_create_trip_with_generated_itinerary(client, auth_headers):
    itinerary = client.post("/api/ai/itinerary", json={"destination": "Kyoto", "days": 2, "mood": "culture"}).json()
    resp = client.post(
        "/api/trips",
        json={"destination": "Kyoto", "name": "Temples", "itinerary": itinerary},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["itinerary"] == itinerary


def test_create_trip_validation(client, auth_headers):
    backwards = client.post(
        "/api/trips",
        json={"destination": "Oslo", "startDate": "2026-06-10", "endDate": "2026-06-01"},
        headers=auth_headers,
    )
    assert backwards.status_code == 400
    assert "endDate" in backwards.json()["message"]

    negative_budget = client.post(
        "/api/trips", json={"destination": "Oslo", "budget": -5}, headers=auth_headers
    )
    assert negative_budget.status_code == 400

    no_destination = client.post("/api/trips", json={"budget": 10}, headers=auth_headers)
    assert no_destination.status_code == 400

    bad_mood = client.post("/api/trips", json={"destination": "Oslo", "mood": "sleepy"}, headers=auth_headers)
    assert bad_mood.status_code == 400


def test_list_trips_only_returns_own_trips_newest_first(client, signup):
    _, alice = signup()
    _, bob = signup()

    first = client.post("/api/trips", json={"destination": "Paris"}, headers=alice).json()
    second = client.post("/api/trips", json={"destination": "Tokyo"}, headers=alice).json()
    client.post("/api/trips", json={"destination": "Cairo"}, headers=bob)

    trips = client.get("/api/trips", headers=alice).json()["trips"]
    assert [t["id"] for t in trips] == [second["id"], first["id"]]


def test_other_users_trip_is_forbidden(client, signup):
    _, alice = signup()
    _, bob = signup()
    trip = client.post("/api/trips", json={"destination": "Paris"}, headers=alice).json()

    assert client.get(f"/api/trips/{trip['id']}", headers=bob).status_code == 403
    assert client.put(f"/api/trips/{trip['id']}", json={"budget": 1}, headers=bob).status_code == 403
    assert client.patch(f"/api/trips/{trip['id']}/favorite", headers=bob).status_code == 403
    assert client.delete(f"/api/trips/{trip['id']}", headers=bob).status_code == 403


def test_missing_trip_is_404(client, auth_headers):
    resp = client.get("/api/trips/does-not-exist", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Trip not found"}


def test_update_trip_applies_only_sent_fields(client, auth_headers, trip_payload):
    trip = client.post("/api/trips", json=trip_payload, headers=auth_headers).json()

    resp = client.put(
        f"/api/trips/{trip['id']}",
        json={"budget": 2500, "members": 3, "name": None},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["budget"] == 2500
    assert updated["members"] == 3
    assert updated["name"] == trip["name"]
    assert updated["destination"] == "Lisbon"
    assert updated["createdAt"] == trip["createdAt"]


def test_update_trip_checks_merged_dates(client, auth_headers, trip_payload):
    trip = client.post("/api/trips", json=trip_payload, headers=auth_headers).json()
    resp = client.put(f"/api/trips/{trip['id']}", json={"endDate": "2026-04-01"}, headers=auth_headers)
    assert resp.status_code == 400

    cleared = client.put(f"/api/trips/{trip['id']}", json={"startDate": None}, headers=auth_headers)
    assert cleared.status_code == 200
    assert cleared.json()["startDate"] is None


def test_toggle_favorite(client, auth_headers):
    trip = client.post("/api/trips", json={"destination": "Bali"}, headers=auth_headers).json()

    on = client.patch(f"/api/trips/{trip['id']}/favorite", headers=auth_headers)
    assert on.status_code == 200
    assert on.json()["favorite"] is True

    off = client.patch(f"/api/trips/{trip['id']}/favorite", headers=auth_headers)
    assert off.json()["favorite"] is False


def test_delete_trip(client, auth_headers):
    trip = client.post("/api/trips", json={"destination": "Bali"}, headers=auth_headers).json()

    resp = client.delete(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Trip deleted"}

    assert client.get(f"/api/trips/{trip['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/trips/{trip['id']}", headers=auth_headers).status_code == 404
