# backend/tripgenius/services/planner_tools.py

from datetime import date
from typing import List, Optional

from tripgenius.models.planner_models import (
    LocalGuide,
    PackingCategory,
    PackingOut,
    PassportStatusOut,
)
from tripgenius.models.travel_models import WeatherResponse
from tripgenius.utils.data_loader import load_data
from tripgenius.utils.time_utils import days_until

BASE_PACKING = ("essentials", "toiletries", "documents", "electronics")
COLD_BELOW_C = 10
HOT_ABOVE_C = 28
PASSPORT_WARNING_DAYS = 180


# -------------------------------------------------------
# LOCAL GUIDES
# -------------------------------------------------------
def local_guides(destination: str) -> List[LocalGuide]:
    return [LocalGuide(**g) for g in load_data("guides").get(destination, [])]


# -------------------------------------------------------
# PACKING LIST
# -------------------------------------------------------
def first_day_avg_temp(weather: Optional[WeatherResponse]) -> Optional[float]:
    if not weather:
        return None
    first = weather.daily[0] if weather.daily else None
    t_max = first.temp_max if first and first.temp_max is not None else 20
    t_min = first.temp_min if first and first.temp_min is not None else 15
    return (t_max + t_min) / 2


def packing_list(destination: str, days: int, weather: Optional[WeatherResponse]) -> PackingOut:
    table = load_data("packing")
    keys = list(BASE_PACKING)

    avg_temp = first_day_avg_temp(weather)
    if avg_temp is not None:
        if avg_temp < COLD_BELOW_C:
            keys.append("warm")
        elif avg_temp > HOT_ABOVE_C:
            keys.append("tropical")

    return PackingOut(
        destination=destination,
        days=days,
        avg_temp=avg_temp,
        categories=[PackingCategory(**table[k]) for k in keys],
    )


def packing_list_text(packing: PackingOut) -> str:
    lines = [f"Packing list for {packing.destination} ({packing.days} days)", ""]
    for cat in packing.categories:
        lines.append(f"{cat.category}:")
        lines.extend(f"  [ ] {item}" for item in cat.items)
        lines.append("")
    return "\n".join(lines)


# -------------------------------------------------------
# PASSPORT EXPIRY
# -------------------------------------------------------
def passport_status(expiry: Optional[date], today: Optional[date] = None) -> PassportStatusOut:
    if expiry is None:
        return PassportStatusOut(status="valid")

    remaining = days_until(expiry, today)
    if remaining < 0:
        status = "expired"
    elif remaining < PASSPORT_WARNING_DAYS:
        status = "warning"
    else:
        status = "valid"

    return PassportStatusOut(expiry_date=expiry, days_remaining=remaining, status=status)
