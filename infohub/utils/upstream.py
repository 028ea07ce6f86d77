import asyncio
from typing import Any, Dict, Optional, Sequence
import httpx
from pydantic import BaseModel

from infohub.core.config_log import logger


class UpstreamResult(BaseModel):
    """
    Результат обращения к внешнему API.
    При ok=True в data лежит разобранное JSON-тело ответа,
    иначе status_code и message описывают ошибку (оба могут отсутствовать).
    """

    ok: bool
    data: Any = None
    status_code: Optional[int] = None
    message: Optional[str] = None


def _extract_message(response: httpx.Response, message_keys: Sequence[str]) -> Optional[str]:
    """Достаёт текст ошибки из тела ответа провайдера по первому найденному ключу."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in message_keys:
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


async def fetch_json(
    client: httpx.AsyncClient,
    source: str,
    url: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    timeout: float,
    message_keys: Sequence[str] = ("message",),
) -> UpstreamResult:
    """
    Выполняет GET-запрос к внешнему API и возвращает UpstreamResult.
    Исключения httpx наружу не выходят: таймаут, ошибка соединения,
    статус не 2xx и нечитаемый JSON превращаются в ok=False.
    timeout ограничивает весь запрос целиком, включая чтение тела.
    """

    try:
        response = await asyncio.wait_for(
            client.get(url, params=params, timeout=timeout),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.warning(f"{source}: Timeout ({timeout} с)")
        return UpstreamResult(ok=False)
    except httpx.RequestError as e:
        logger.error(f"{source}: Ошибка подключения: {str(e)[:100]}")
        return UpstreamResult(ok=False)

    if not response.is_success:
        message = _extract_message(response, message_keys)
        logger.error(f"{source} HTTP ошибка ({response.status_code}): {(message or response.text)[:100]}")
        return UpstreamResult(ok=False, status_code=response.status_code, message=message)

    try:
        data = response.json()
    except ValueError:
        logger.error(f"{source}: ответ не является JSON")
        return UpstreamResult(ok=False)

    return UpstreamResult(ok=True, data=data)
