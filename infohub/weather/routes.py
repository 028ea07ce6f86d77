from typing import Optional
from fastapi import APIRouter, Depends, Query

from infohub.weather.schemas import WeatherResponse
from infohub.weather.services import WeatherService, get_weather_service

weather_router = APIRouter()


@weather_router.get("", response_model=WeatherResponse)
async def get_weather(
    city: Optional[str] = Query(None, description="Название города, например Kolkata"),
    service: WeatherService = Depends(get_weather_service),
):
    """Текущая погода по названию города."""

    return await service.get_weather(city)
