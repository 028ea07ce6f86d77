from fastapi import APIRouter, Depends

from infohub.quotes.schemas import QuoteResponse
from infohub.quotes.services import QuoteService, get_quote_service

quote_router = APIRouter()


@quote_router.get("", response_model=QuoteResponse)
async def get_quote(service: QuoteService = Depends(get_quote_service)):
    """Случайная цитата. Всегда 200: при недоступности источников отдаётся цитата по умолчанию."""

    return await service.get_quote()
