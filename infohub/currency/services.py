import math
import re
from typing import Optional
from fastapi import Request

from infohub.core.config_log import logger
from infohub.core.exceptions import (
    InvalidAmountError,
    InvalidRequestError,
    UnsupportedPairError,
    UpstreamError,
)
from infohub.currency.client import FrankfurterClient
from infohub.currency.schemas import ConversionResponse


CONVERT_ERROR_MESSAGE = "Failed to convert currency"
CURRENCY_CODE_RE = re.compile(r"^[A-Z]{3}$")
DECIMAL_AMOUNT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
PREFIXED_AMOUNT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_amount(raw: str) -> float:
    """
    Разбирает сумму по правилам JS Number(): пустая строка даёт 0,
    допустимы десятичная запись с экспонентой и целые 0x/0o/0b.
    Подчёркивания и не-ASCII цифры отклоняются.
    Результат должен быть конечным неотрицательным числом.
    """
    text = raw.strip()
    if not text:
        return 0.0

    try:
        if PREFIXED_AMOUNT_RE.fullmatch(text):
            amount = float(int(text, 0))
        elif DECIMAL_AMOUNT_RE.fullmatch(text):
            amount = float(text)
        else:
            raise InvalidAmountError()
    except OverflowError:
        raise InvalidAmountError()

    if not math.isfinite(amount) or amount < 0:
        raise InvalidAmountError()
    # -0 отдаём как 0
    return amount + 0.0


class CurrencyService:
    """Сервис конвертации валют по курсам Frankfurter."""

    def __init__(self, client: FrankfurterClient):
        self.client = client

    async def convert(
        self,
        from_currency: Optional[str],
        to_currency: Optional[str],
        amount_raw: Optional[str],
    ) -> ConversionResponse:
        base = (from_currency or "").strip().upper()
        target = (to_currency or "").strip().upper()

        if not base or not target or amount_raw is None:
            raise InvalidRequestError("Missing required query params: from, to, amount")

        for code in (base, target):
            if not CURRENCY_CODE_RE.match(code):
                raise InvalidRequestError(f"Invalid currency code: {code}")

        amount = parse_amount(amount_raw)

        result = await self.client.latest(base, target)
        if not result.ok:
            raise UpstreamError(result.message or CONVERT_ERROR_MESSAGE, result.status_code)

        rates = result.data.get("rates") if isinstance(result.data, dict) else None
        rate = rates.get(target) if isinstance(rates, dict) else None
        valid_rate = (
            isinstance(rate, (int, float))
            and not isinstance(rate, bool)
            and math.isfinite(rate)
            and rate > 0
        )
        if not valid_rate:
            logger.info(f"Нет курса {base}->{target} в ответе Frankfurter")
            raise UnsupportedPairError()

        return ConversionResponse(
            from_currency=base,
            to_currency=target,
            rate=rate,
            amount=amount,
            converted=amount * rate,
        )


def get_currency_service(request: Request) -> CurrencyService:
    return request.app.state.currency_service
