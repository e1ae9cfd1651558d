# backend/tripgenius/services/events_service.py

from datetime import timedelta
from typing import List
from urllib.parse import quote

from tripgenius.models.travel_models import LocalEvent
from tripgenius.utils.time_utils import utc_now

# (id, title suffix, kind, search terms), one per day from tomorrow
EVENT_TEMPLATES = (
    ("e1", "Street Food Crawl", "food", "food crawl"),
    ("e2", "Weekend Market", "market", "weekend market"),
    ("e3", "Live Music Night", "music", "live music"),
)


def upcoming_events(location: str) -> List[LocalEvent]:
    base = location.split(",")[0].strip()
    now = utc_now()
    return [
        LocalEvent(
            id=event_id,
            title=f"{base} {title}",
            when=(now + timedelta(days=offset)).isoformat(),
            kind=kind,
            where=base,
            url=f"https://www.google.com/search?q={quote(f'{base} {terms}')}",
        )
        for offset, (event_id, title, kind, terms) in enumerate(EVENT_TEMPLATES, start=1)
    ]
