import pytest

from tripgenius.core.errors import UpstreamError
from tripgenius.services import geo_service
from tripgenius.utils.geo_utils import haversine_km, round_half_up

DELHI = {"lat": "28.6139", "lon": "77.2090", "display_name": "New Delhi, India", "class": "boundary"}
MUMBAI = {"lat": "19.0760", "lon": "72.8777", "display_name": "Mumbai, India", "class": "place"}
AGRA = {"lat": "27.1767", "lon": "78.0081", "display_name": "Agra, India", "class": "boundary"}


@pytest.fixture
def nominatim(monkeypatch):
    """Route Nominatim search queries to canned hits by query text."""
    hits = {"Delhi": [DELHI], "Mumbai": [MUMBAI], "Agra": [AGRA], "Many": [DELHI] * 7}

    def fake_fetch(url, params=None, **kwargs):
        if url == geo_service.NOMINATIM_SEARCH_URL:
            return hits.get(params["q"], [])
        raise AssertionError(f"unexpected url {url}")

    monkeypatch.setattr(geo_service, "fetch_json_with_retry", fake_fetch)


def test_haversine_known_distance():
    # Delhi -> Mumbai is roughly 1150 km as the crow flies
    km = haversine_km(28.6139, 77.2090, 19.0760, 72.8777)
    assert 1140 < km < 1160
    assert haversine_km(10, 10, 10, 10) == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2


def test_estimate_options_short_hop():
    options = {o.mode: o for o in geo_service.estimate_options(40, near_water=True)}
    assert options["flight"].available is False
    assert options["train"].available is False
    assert options["car"].price == 480
    assert options["bus"].price == 198
    assert options["bus"].time_hours == 0.8
    assert options["waterway"].available is False


def test_estimate_options_long_haul():
    options = {o.mode: o for o in geo_service.estimate_options(1000, near_water=False)}
    assert options["flight"].available is True
    assert options["flight"].price == 5000
    assert options["flight"].time_hours == 1.4
    assert options["train"].price == 1100
    assert options["waterway"].available is False


def test_geocode_search_endpoint(client, nominatim):
    resp = client.get("/api/geocode/search", params={"q": "Many"})
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert len(results) == 5
    assert results[0] == {"label": "New Delhi, India", "lat": 28.6139, "lon": 77.209}


def test_geocode_search_requires_q(client):
    resp = client.get("/api/geocode/search")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing q"}


def test_geocode_search_upstream_failure_is_500(client, monkeypatch):
    def fail(url, params=None, **kwargs):
        raise UpstreamError("down", url=url)

    monkeypatch.setattr(geo_service, "fetch_json_with_retry", fail)
    resp = client.get("/api/geocode/search", params={"q": "Delhi"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Geocoding failed"}


@pytest.mark.parametrize("payload", [
    [{"display_name": "Delhi, India"}],
    {"error": "Unable to geocode"},
])
def test_geocode_search_malformed_payload_is_500(client, monkeypatch, payload):
    monkeypatch.setattr(geo_service, "fetch_json_with_retry", lambda url, params=None, **kw: payload)
    resp = client.get("/api/geocode/search", params={"q": "Delhi"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Geocoding failed"}


def test_reverse_geocode_malformed_payload_is_500(client, monkeypatch):
    monkeypatch.setattr(geo_service, "fetch_json_with_retry", lambda url, params=None, **kw: ["odd"])
    resp = client.get("/api/geocode/reverse", params={"lat": "1", "lon": "2"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Reverse geocoding failed"}


def test_reverse_geocode_builds_label(client, monkeypatch):
    def fake_fetch(url, params=None, **kwargs):
        assert url == geo_service.NOMINATIM_REVERSE_URL
        return {"address": {"town": "Hallstatt", "state": "Upper Austria", "country": "Austria"}}

    monkeypatch.setattr(geo_service, "fetch_json_with_retry", fake_fetch)
    resp = client.get("/api/geocode/reverse", params={"lat": "47.56", "lon": "13.64"})
    assert resp.status_code == 200
    assert resp.json()["label"] == "Hallstatt, Upper Austria, Austria"


def test_reverse_geocode_skips_missing_parts(monkeypatch):
    monkeypatch.setattr(
        geo_service, "fetch_json_with_retry",
        lambda url, params=None, **kw: {"address": {"country": "Antarctica"}},
    )
    assert geo_service.reverse(-80, 0).label == "Antarctica"


@pytest.mark.parametrize("params", [{"lat": "abc", "lon": "1"}, {"lat": "1"}, {"lat": "nan", "lon": "2"}])
def test_reverse_geocode_invalid_coords(client, params):
    resp = client.get("/api/geocode/reverse", params=params)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid lat/lon"}


def test_travel_options_endpoint(client, nominatim):
    resp = client.get("/api/travel/options", params={"origin": "Delhi", "destination": "Mumbai"})
    assert resp.status_code == 200
    body = resp.json()
    assert 1140 < body["km"] < 1160
    assert body["coords"]["origin"] == {"lat": 28.6139, "lon": 77.209}
    modes = {o["mode"]: o for o in body["options"]}
    assert list(modes) == ["flight", "train", "car", "bus", "waterway"]
    assert modes["flight"]["available"] is True
    # Mumbai is a Nominatim "place", so waterways are on the table
    assert modes["waterway"]["available"] is True
    assert "timeHours" in modes["car"]


def test_travel_options_waterway_needs_a_place(client, nominatim):
    body = client.get("/api/travel/options", params={"origin": "Delhi", "destination": "Agra"}).json()
    modes = {o["mode"]: o for o in body["options"]}
    assert modes["waterway"]["available"] is False


def test_travel_options_errors(client, nominatim):
    assert client.get("/api/travel/options", params={"origin": "Delhi"}).status_code == 400

    resp = client.get("/api/travel/options", params={"origin": "Delhi", "destination": "Nowhere"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Could not geocode"}
