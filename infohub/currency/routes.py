from typing import Optional
from fastapi import APIRouter, Depends, Query

from infohub.currency.schemas import ConversionResponse
from infohub.currency.services import CurrencyService, get_currency_service

convert_router = APIRouter()


@convert_router.get("", response_model=ConversionResponse)
async def convert_currency(
    from_currency: Optional[str] = Query(None, alias="from", description="Исходная валюта, например INR"),
    to_currency: Optional[str] = Query(None, alias="to", description="Целевая валюта, например USD"),
    amount: Optional[str] = Query(None, description="Неотрицательная сумма"),
    service: CurrencyService = Depends(get_currency_service),
):
    """Конвертация суммы из одной валюты в другую."""

    return await service.convert(from_currency, to_currency, amount)
