from typing import Optional
from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from infohub.core.config_log import logger
from infohub.core.exceptions import InvalidRequestError, ServerMisconfiguredError, UpstreamError
from infohub.weather.client import OpenWeatherClient
from infohub.weather.schemas import WeatherResponse


WEATHER_ERROR_MESSAGE = "Failed to fetch weather data"


class WeatherService:
    """Сервис погоды: валидация города, запрос к OpenWeather и нормализация ответа."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def get_weather(self, city: Optional[str]) -> WeatherResponse:
        city = (city or "").strip()
        if not city:
            raise InvalidRequestError("Missing required query param: city")

        if not self.client.api_key:
            logger.error("Запрос погоды без OPENWEATHER_API_KEY")
            raise ServerMisconfiguredError("Server missing OpenWeather API key")

        result = await self.client.current(city)
        if not result.ok:
            raise UpstreamError(result.message or WEATHER_ERROR_MESSAGE, result.status_code)

        try:
            report = WeatherResponse.from_openweather(result.data)
        except (PydanticValidationError, AttributeError, TypeError, KeyError, IndexError) as e:
            logger.error(f"OpenWeather API: неожиданный формат ответа для '{city}': {str(e)[:100]}")
            raise UpstreamError(WEATHER_ERROR_MESSAGE)

        logger.info(f"Погода для '{city}': {report.temperature}°C, {report.condition}")
        return report


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service
