# backend/tripgenius/api/routes_ai.py

from fastapi import APIRouter, HTTPException

from tripgenius.models.itinerary_models import ItineraryRequest, ItineraryResponse
from tripgenius.models.planner_models import ChatIn, ChatOut
from tripgenius.services import chat_service
from tripgenius.services.itinerary_service import generate_itinerary

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/itinerary", response_model=ItineraryResponse)
def itinerary(req: ItineraryRequest):
    """Day-by-day activity plan from the mood template table."""
    return generate_itinerary(req)


@router.post("/chat", response_model=ChatOut)
def chat(req: ChatIn):
    prompt = (req.prompt or "").strip()
    if not prompt:
        raise HTTPException(400, "Missing prompt")
    return ChatOut(reply=chat_service.reply(prompt, req.destination, req.context))
