# backend/tripgenius/core/llm.py

from typing import Optional

from openai import OpenAI

from tripgenius.core.config_loader import settings


_client: Optional[OpenAI] = None


def llm_enabled() -> bool:
    return bool(settings.OPENAI_API_KEY)


def _get_client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(api_key=settings.OPENAI_API_KEY)
    return _client


# ---------------------------------------------------------------------------
# TRAVEL TIPS (short natural-language answer)
# ---------------------------------------------------------------------------
def travel_tips(prompt: str, destination: str) -> str:
    system = (
        "You are TripGenius, a concise travel assistant. "
        f"The traveller is planning a trip to {destination}. "
        "Answer in 2-4 practical sentences."
    )
    completion = _get_client().chat.completions.create(
        model=settings.gpt_model,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ],
        temperature=0.7,
    )
    return completion.choices[0].message.content or ""
