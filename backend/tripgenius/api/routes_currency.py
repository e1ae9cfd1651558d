# backend/tripgenius/api/routes_currency.py

from fastapi import APIRouter, Query

from tripgenius.models.travel_models import CurrencyConvertResponse
from tripgenius.services import currency_service

router = APIRouter(prefix="/currency", tags=["currency"])


@router.get("/convert", response_model=CurrencyConvertResponse)
def convert_currency(
    amount: float = 1,
    from_currency: str = Query("INR", alias="from"),
    to_currency: str = Query("USD", alias="to"),
):
    return currency_service.convert(amount or 1, from_currency or "INR", to_currency or "USD")
