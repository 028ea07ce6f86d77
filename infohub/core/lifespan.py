from contextlib import asynccontextmanager
from fastapi import FastAPI
import httpx

from infohub.core.config_app import Settings, settings
from infohub.core.config_log import logger
from infohub.currency.client import FrankfurterClient
from infohub.currency.services import CurrencyService
from infohub.quotes.client import QuotableClient, ZenQuotesClient
from infohub.quotes.services import QuoteService
from infohub.weather.client import OpenWeatherClient
from infohub.weather.services import WeatherService


def init_services(app: FastAPI, http: httpx.AsyncClient, config: Settings) -> None:
    """Создает сервисы один раз при старте и кладет их в app.state."""

    app.state.weather_service = WeatherService(
        OpenWeatherClient(
            http,
            api_key=config.OPENWEATHER_API_KEY,
            url=config.OPENWEATHER_URL,
            timeout=config.UPSTREAM_TIMEOUT_SECONDS,
        )
    )
    app.state.currency_service = CurrencyService(
        FrankfurterClient(http, url=config.FRANKFURTER_URL, timeout=config.UPSTREAM_TIMEOUT_SECONDS)
    )
    app.state.quote_service = QuoteService(
        primary=QuotableClient(http, url=config.QUOTABLE_URL, timeout=config.QUOTE_TIMEOUT_SECONDS),
        secondary=ZenQuotesClient(http, url=config.ZENQUOTES_URL, timeout=config.QUOTE_TIMEOUT_SECONDS),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения: общий HTTP-клиент для внешних API."""
    logger.info("Запуск приложения")

    http = httpx.AsyncClient(follow_redirects=True)
    init_services(app, http, settings)
    logger.info(f"{settings.PROJECT_NAME} server running on port {settings.PORT}")

    try:
        yield
    finally:
        try:
            await http.aclose()
        except Exception as e:
            logger.warning(f"Ошибка при закрытии HTTP-клиента: {e}")

        logger.info("Приложение остановлено")
