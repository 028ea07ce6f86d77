from typing import Any, Awaitable, Callable, NamedTuple, Optional, Sequence
from fastapi import Request

from infohub.core.config_log import logger
from infohub.quotes.client import QuotableClient, ZenQuotesClient
from infohub.quotes.schemas import DEFAULT_QUOTE, QuoteResponse
from infohub.utils.upstream import UpstreamResult


class QuoteAttempt(NamedTuple):
    """Одна попытка цепочки: запрос к провайдеру и разбор его тела."""

    name: str
    fetch: Callable[[], Awaitable[UpstreamResult]]
    extract: Callable[[Any], Optional[QuoteResponse]]


def _build_quote(content: Any, author: Any) -> Optional[QuoteResponse]:
    if not isinstance(content, str) or not content.strip():
        return None
    if not isinstance(author, str) or not author.strip():
        author = "Unknown"
    return QuoteResponse(content=content, author=author)


def quote_from_quotable(data: Any) -> Optional[QuoteResponse]:
    if not isinstance(data, dict):
        return None
    return _build_quote(data.get("content"), data.get("author"))


def quote_from_zenquotes(data: Any) -> Optional[QuoteResponse]:
    # /api/random отдаёт список из одной цитаты
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        return None
    return _build_quote(data.get("q"), data.get("a"))


async def first_available(attempts: Sequence[QuoteAttempt], default: QuoteResponse) -> QuoteResponse:
    """
    Перебирает попытки строго по очереди и возвращает первую удачную цитату.
    Таймаут, ошибка сети, статус не 2xx и пустое тело считаются одинаково
    неудачной попыткой. Если не удалась ни одна, возвращается default.
    """

    for attempt in attempts:
        result = await attempt.fetch()
        quote = attempt.extract(result.data) if result.ok else None
        if quote is not None:
            return quote
        logger.warning(f"Цитата: источник {attempt.name} недоступен, пробуем следующий")

    logger.warning("Цитата: все источники недоступны, используем цитату по умолчанию")
    return default


class QuoteService:
    """Сервис цитат с цепочкой Quotable -> ZenQuotes -> цитата по умолчанию."""

    def __init__(self, primary: QuotableClient, secondary: ZenQuotesClient):
        self.attempts = (
            QuoteAttempt("quotable", primary.random, quote_from_quotable),
            QuoteAttempt("zenquotes", secondary.random, quote_from_zenquotes),
        )

    async def get_quote(self) -> QuoteResponse:
        return await first_available(self.attempts, DEFAULT_QUOTE)


def get_quote_service(request: Request) -> QuoteService:
    return request.app.state.quote_service
