# backend/tripgenius/services/visa_service.py

from tripgenius.models.travel_models import VisaResponse
from tripgenius.utils.data_loader import load_data

UNKNOWN_RULE = {"visa": "Check embassy", "notes": "Rules vary; verify with official sources."}


def visa_requirement(from_country: str, to_country: str) -> VisaResponse:
    from_country = from_country.upper()
    to_country = to_country.upper()
    rule = load_data("visa_rules").get(from_country, {}).get(to_country, UNKNOWN_RULE)
    return VisaResponse(from_country=from_country, to_country=to_country, **rule)
