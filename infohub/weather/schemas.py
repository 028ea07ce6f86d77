from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


# Числа OpenWeather отдаются как пришли: 74 остаётся 74, 9999.5 остаётся 9999.5
Number = Union[int, float]


class WeatherResponse(BaseModel):
    """Модель ответа с погодой. Поля OpenWeather переименованы, значения не пересчитываются."""

    model_config = ConfigDict(populate_by_name=True)

    city: str
    country: Optional[str] = None
    temperature: Number
    feels_like: Optional[Number] = Field(None, alias="feelsLike")
    condition: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    humidity: Optional[Number] = Field(None, description="Влажность, %")
    wind_speed: Optional[Number] = Field(None, alias="windSpeed")
    wind_deg: Optional[Number] = Field(None, alias="windDeg", description="Направление ветра в градусах")
    sunrise: Optional[Number] = Field(None, description="Восход, секунды UNIX")
    sunset: Optional[Number] = Field(None, description="Закат, секунды UNIX")
    pressure: Optional[Number] = None
    visibility: Optional[Number] = Field(None, description="Видимость в метрах")

    @classmethod
    def from_openweather(cls, data: Dict[str, Any]) -> "WeatherResponse":
        """Собирает ответ из тела OpenWeather /data/2.5/weather."""
        main = data.get("main") or {}
        sys_info = data.get("sys") or {}
        wind = data.get("wind") or {}
        conditions = data.get("weather")
        # weather должен быть списком; иначе условия считаем неизвестными
        current = conditions[0] if isinstance(conditions, list) and conditions else {}
        if not isinstance(current, dict):
            current = {}

        return cls(
            city=data.get("name"),
            country=sys_info.get("country"),
            temperature=main.get("temp"),
            feels_like=main.get("feels_like"),
            condition=current.get("main"),
            description=current.get("description"),
            icon=current.get("icon"),
            humidity=main.get("humidity"),
            wind_speed=wind.get("speed"),
            wind_deg=wind.get("deg"),
            sunrise=sys_info.get("sunrise"),
            sunset=sys_info.get("sunset"),
            pressure=main.get("pressure"),
            visibility=data.get("visibility"),
        )
