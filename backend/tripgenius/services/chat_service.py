# backend/tripgenius/services/chat_service.py

from typing import Any, Dict, Optional

from openai import OpenAIError

from tripgenius.core import llm
from tripgenius.core.logger import get_logger

log = get_logger("chat")

# first keyword found in the prompt wins
CANNED_REPLIES = {
    "weather": (
        "For {dest}, check the Weather section. Plan outdoor activities on sunny days; "
        "keep indoor options for uncertain forecasts. Bring light rain gear if alerts "
        "mention rain/storms."
    ),
    "budget": (
        "Estimate costs by transport, stay, food, and activities. Use Budget Overview; "
        "set budget to suggested total if shortfalls show."
    ),
    "transport": (
        "Compare modes by price/time/eco. Trains and buses are eco-friendlier; flights "
        "save time on long routes."
    ),
    "food": (
        "Try popular local spots near attractions to save time. For dietary needs, "
        "search ahead and mark options on the plan."
    ),
}

GENERIC_REPLY = (
    "Here are tips for {dest}: plan a balanced day (morning landmark, afternoon local "
    "area, evening food/market). Keep travel buffers (30-45m) and hydrate. Use the "
    "Calendar to slot times and keep nearby places handy."
)


def resolve_destination(destination: Optional[str], context: Optional[Dict[str, Any]]) -> str:
    return str(destination or (context or {}).get("destination") or "your trip")


def canned_reply(prompt: str, dest: str) -> str:
    lowered = prompt.lower()
    for keyword, template in CANNED_REPLIES.items():
        if keyword in lowered:
            return template.format(dest=dest)
    return GENERIC_REPLY.format(dest=dest)


def reply(prompt: str, destination: Optional[str] = None,
          context: Optional[Dict[str, Any]] = None) -> str:
    dest = resolve_destination(destination, context)

    if llm.llm_enabled():
        try:
            answer = llm.travel_tips(prompt, dest).strip()
            if answer:
                return answer
        except OpenAIError as e:
            log.warning(f"LLM chat failed, using canned reply: {e}")

    return canned_reply(prompt, dest)
