# backend/tripgenius/api/routes_planner.py

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from tripgenius.models.planner_models import GuidesOut, PackingOut, PassportStatusOut
from tripgenius.services import planner_tools, weather_service
from tripgenius.utils.time_utils import parse_iso_date

router = APIRouter(tags=["planner"])


@router.get("/guides", response_model=GuidesOut)
def get_guides(destination: str = ""):
    return GuidesOut(destination=destination, guides=planner_tools.local_guides(destination))


@router.get("/packing", response_model=PackingOut)
def get_packing_list(
    destination: str = "",
    days: int = Query(5, ge=1, le=60),
    output: str = Query("json", alias="format"),
):
    destination = destination.strip()
    weather = weather_service.get_weather(destination) if destination else None
    packing = planner_tools.packing_list(destination, days, weather)

    if output == "text":
        filename = f"packing-list-{destination or 'trip'}.txt".replace(" ", "_")
        return PlainTextResponse(
            planner_tools.packing_list_text(packing),
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
    return packing


@router.get("/passport/status", response_model=PassportStatusOut)
def passport_status(expiry: Optional[str] = None):
    if not expiry:
        return planner_tools.passport_status(None)
    try:
        expiry_date = parse_iso_date(expiry)
    except ValueError:
        raise HTTPException(400, "Invalid expiry date, expected YYYY-MM-DD")
    return planner_tools.passport_status(expiry_date)
