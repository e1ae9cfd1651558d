# backend/tripgenius/services/currency_service.py

import math

from tripgenius.core.config_loader import settings
from tripgenius.core.errors import UpstreamError
from tripgenius.core.logger import get_logger
from tripgenius.models.travel_models import CurrencyConvertResponse
from tripgenius.services.http_client import fetch_json_with_retry

log = get_logger("currency")

CONVERT_URL = "https://api.exchangerate.host/convert"


def _finite(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def convert(amount: float, from_currency: str, to_currency: str) -> CurrencyConvertResponse:
    """
    Convert via exchangerate.host. Fails open: any upstream problem yields
    the configured fixed fallback rate instead of an error.
    """
    from_currency = from_currency.upper()
    to_currency = to_currency.upper()

    params = {"from": from_currency, "to": to_currency, "amount": amount}
    if settings.EXCHANGERATE_API_KEY:
        params["access_key"] = settings.EXCHANGERATE_API_KEY

    try:
        data = fetch_json_with_retry(CONVERT_URL, params=params, retries=0)
        rate = (data.get("info") or {}).get("rate")
        result = data.get("result")
        if not _finite(rate) and _finite(result) and amount:
            rate = result / amount
        if not _finite(rate):
            raise ValueError(f"no usable rate in response: {data}")
        if not _finite(result):
            result = amount * rate
        return CurrencyConvertResponse(
            amount=amount, from_currency=from_currency, to_currency=to_currency,
            rate=rate, result=result,
        )
    except (UpstreamError, AttributeError, ValueError) as e:
        log.warning(f"Currency conversion {from_currency}->{to_currency} fell back: {e}")

    rate = settings.currency_fallback_rate
    return CurrencyConvertResponse(
        amount=amount, from_currency=from_currency, to_currency=to_currency,
        rate=rate, result=amount * rate,
    )
