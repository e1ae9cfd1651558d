import asyncio
import json

import pytest

from tripgenius.services.collab_service import KEEPALIVE_FRAME, CollabHub, sse_frame


def _payload(frame):
    assert frame.startswith("data: ") and frame.endswith("\n\n")
    return json.loads(frame[len("data: "):])


@pytest.mark.asyncio
async def test_new_subscriber_gets_history_then_live_events():
    hub = CollabHub(history_limit=10, keepalive_seconds=5)
    hub.publish("trip-1", {"text": "hello"})

    stream = hub.subscribe("trip-1")
    history = _payload(await stream.__anext__())
    assert history["type"] == "history"
    assert [e["payload"] for e in history["payload"]] == [{"text": "hello"}]

    next_frame = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)
    hub.publish("trip-1", "second")
    event = _payload(await next_frame)
    assert event["type"] == "message"
    assert event["payload"] == "second"
    assert isinstance(event["id"], int)

    await stream.aclose()
    assert "trip-1" not in hub.rooms


@pytest.mark.asyncio
async def test_empty_room_sends_no_history_and_keeps_alive():
    hub = CollabHub(keepalive_seconds=0.01)
    stream = hub.subscribe("quiet")

    assert await stream.__anext__() == KEEPALIVE_FRAME
    assert len(hub.rooms["quiet"]) == 1

    await stream.aclose()
    assert hub.rooms == {}


@pytest.mark.asyncio
async def test_rooms_are_isolated():
    hub = CollabHub(keepalive_seconds=0.05)
    stream = hub.subscribe("a")
    next_frame = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)

    hub.publish("b", "not for you")
    assert await next_frame == KEEPALIVE_FRAME
    await stream.aclose()


def test_history_is_bounded():
    hub = CollabHub(history_limit=3)
    for i in range(5):
        hub.publish("r", i)
    assert [e["payload"] for e in hub.history["r"]] == [2, 3, 4]


@pytest.mark.asyncio
async def test_history_outlives_subscribers():
    hub = CollabHub(keepalive_seconds=0.01)
    hub.publish("trip-9", "saved")

    first = hub.subscribe("trip-9")
    await first.__anext__()
    await first.aclose()
    assert "trip-9" not in hub.rooms

    second = hub.subscribe("trip-9")
    history = _payload(await second.__anext__())
    assert [e["payload"] for e in history["payload"]] == ["saved"]
    await second.aclose()


def test_sse_frame_format():
    assert sse_frame({"a": 1}) == 'data: {"a": 1}\n\n'


def test_publish_endpoint(client):
    resp = client.post("/api/collab/publish", json={"room": "r1", "message": {"op": "add"}})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}

    missing = client.post("/api/collab/publish", json={"room": "r1"})
    assert missing.status_code == 400
    assert missing.json() == {"error": "Missing room/message"}


def test_subscribe_requires_room(client):
    resp = client.get("/api/collab/subscribe")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing room"}
