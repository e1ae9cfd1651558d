# backend/tripgenius/api/routes_collab.py

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from tripgenius.models.planner_models import CollabPublishIn, CollabPublishOut
from tripgenius.services.collab_service import hub

router = APIRouter(prefix="/collab", tags=["collab"])


@router.get("/subscribe")
async def collab_subscribe(room: str = ""):
    room = room.strip()
    if not room:
        raise HTTPException(400, "Missing room")
    return StreamingResponse(
        hub.subscribe(room),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@router.post("/publish", response_model=CollabPublishOut)
async def collab_publish(data: CollabPublishIn):
    room = (data.room or "").strip()
    if not room or not data.message:
        raise HTTPException(400, "Missing room/message")
    hub.publish(room, data.message)
    return CollabPublishOut(ok=True)
