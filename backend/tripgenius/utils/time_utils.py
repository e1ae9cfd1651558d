# backend/tripgenius/utils/time_utils.py

import math
from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from tripgenius.core.config_loader import settings


def local_tz():
    return pytz.timezone(settings.timezone)


def utc_now() -> datetime:
    return datetime.now(pytz.UTC)


def utc_now_iso() -> str:
    """ISO-8601 with millisecond precision and a Z suffix."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_ms() -> int:
    return int(utc_now().timestamp() * 1000)


def local_today() -> date:
    return datetime.now(local_tz()).date()


def parse_iso_date(text: str) -> date:
    """
    Accepts:
    - 2025-03-12
    - 2025-03-12T08:00:00Z (time part ignored)
    """
    text = text.strip()
    if "T" in text:
        text = text.split("T", 1)[0]
    return datetime.strptime(text, "%Y-%m-%d").date()


def days_until(target: date, today: Optional[date] = None) -> int:
    """Whole days from today to target, rounded up like a calendar countdown."""
    today = today or local_today()
    delta = datetime.combine(target, datetime.min.time()) - datetime.combine(today, datetime.min.time())
    return math.ceil(delta / timedelta(days=1))
