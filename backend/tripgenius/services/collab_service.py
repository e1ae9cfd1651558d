"""
Room-based collaboration over server-sent events.

Each subscriber owns an asyncio.Queue registered under a room. Publishing
appends the event to the room's bounded history and fans it out to every
queue in the room. New subscribers first receive the history, then live
events, with a keepalive comment whenever the room has been quiet.
"""

import asyncio
import json
from collections import deque
from typing import Any, AsyncIterator, Deque, Dict, Optional, Set

from tripgenius.core.config_loader import settings
from tripgenius.core.logger import get_logger
from tripgenius.utils.time_utils import now_ms

log = get_logger("collab")

KEEPALIVE_FRAME = ": keepalive\n\n"


def sse_frame(data: Dict[str, Any]) -> str:
    return f"data: {json.dumps(data)}\n\n"


class CollabHub:
    def __init__(self, history_limit: Optional[int] = None,
                 keepalive_seconds: Optional[float] = None) -> None:
        self.history_limit = history_limit or settings.collab_history_limit
        self.keepalive_seconds = keepalive_seconds or settings.collab_keepalive_seconds
        self.rooms: Dict[str, Set[asyncio.Queue]] = {}
        # kept for the process lifetime, even after a room's last subscriber
        # leaves; each deque is capped at history_limit but rooms are not evicted
        self.history: Dict[str, Deque[Dict[str, Any]]] = {}

    def publish(self, room: str, message: Any) -> Dict[str, Any]:
        """Record and broadcast a message. Must run on the event loop thread."""
        event = {"id": now_ms(), "type": "message", "payload": message}

        hist = self.history.setdefault(room, deque(maxlen=self.history_limit))
        hist.append(event)

        for queue in list(self.rooms.get(room, ())):
            queue.put_nowait(event)
        return event

    def _join(self, room: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        self.rooms.setdefault(room, set()).add(queue)
        log.debug(f"Subscriber joined room {room!r} ({len(self.rooms[room])} total)")
        return queue

    def _leave(self, room: str, queue: asyncio.Queue) -> None:
        members = self.rooms.get(room)
        if members is None:
            return
        members.discard(queue)
        if not members:
            del self.rooms[room]
        log.debug(f"Subscriber left room {room!r}")

    async def subscribe(self, room: str) -> AsyncIterator[str]:
        """Yield SSE frames for `room` until the consumer stops iterating."""
        queue = self._join(room)
        try:
            hist = self.history.get(room)
            if hist:
                yield sse_frame({"type": "history", "payload": list(hist)})

            while True:
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=self.keepalive_seconds)
                except asyncio.TimeoutError:
                    yield KEEPALIVE_FRAME
                    continue
                yield sse_frame(event)
        finally:
            self._leave(room, queue)


hub = CollabHub()
