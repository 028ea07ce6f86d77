import traceback
import uuid
from typing import Dict, Optional
from contextvars import ContextVar
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from infohub.core.config_log import logger


request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class InfoHubException(Exception):
    """Базовый класс для всех пользовательских исключений."""
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        headers: Optional[Dict[str, str]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class InvalidRequestError(InfoHubException):
    """Отсутствует или некорректен обязательный параметр запроса."""
    def __init__(self, message: str):
        super().__init__(message=message, status_code=400)


class InvalidAmountError(InfoHubException):
    """Сумма не является конечным неотрицательным числом."""
    def __init__(self, message: str = "Invalid amount"):
        super().__init__(message=message, status_code=400)


class UnsupportedPairError(InfoHubException):
    """Провайдер курсов не вернул курс для запрошенной валюты."""
    def __init__(self, message: str = "Unsupported currency pair"):
        super().__init__(message=message, status_code=400)


class ServerMisconfiguredError(InfoHubException):
    """Не задан обязательный ключ доступа к внешнему API."""
    def __init__(self, message: str):
        super().__init__(message=message, status_code=500)


class UpstreamError(InfoHubException):
    """
    Ошибка внешнего API. Статус берётся из ответа провайдера,
    если он был получен, иначе 500.
    """
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message=message, status_code=status_code or 500)


def create_error_response(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Создает стандартизированный JSON ответ вида {"error": message}."""

    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


async def infohub_exception_handler(request: Request, exc: InfoHubException) -> JSONResponse:
    """Обработчик для всех исключений, наследующихся от InfoHubException."""

    logger.warning(
        f"API Error ({exc.status_code}): {exc.message} | Path: {request.url.path} | "
        f"Request: {request_id_ctx.get()}"
    )
    return create_error_response(exc.status_code, exc.message, exc.headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Обработчик для стандартных HTTP исключений от Starlette."""

    messages = {404: "Not found", 405: "Method not allowed"}
    msg = messages.get(exc.status_code, str(exc.detail))
    return create_error_response(exc.status_code, msg, getattr(exc, "headers", None))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Обработчик для всех непредвиденных исключений."""

    logger.error(f"Unhandled Exception: {type(exc).__name__}: {str(exc)} | Traceback: {traceback.format_exc()}")
    return create_error_response(500, "Unexpected server error")


async def request_id_middleware(request: Request, call_next):
    """Middleware для генерации уникального идентификатора запроса и его передачи в контекст."""

    req_id = str(uuid.uuid4())
    request_id_ctx.set(req_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = req_id
    return response


def setup_exception_handlers(app: FastAPI):
    """Функция для настройки всех обработчиков исключений и middleware в FastAPI приложении."""

    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(InfoHubException, infohub_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
