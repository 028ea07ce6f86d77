from typing import Optional
import httpx

from infohub.utils.upstream import UpstreamResult, fetch_json


class OpenWeatherClient:
    """Клиент OpenWeather API (текущая погода по названию города)."""

    def __init__(self, http: httpx.AsyncClient, api_key: Optional[str], url: str, timeout: float):
        self._http = http
        self._url = url
        self._timeout = timeout
        self.api_key = api_key

    async def current(self, city: str) -> UpstreamResult:
        return await fetch_json(
            self._http,
            "OpenWeather API",
            self._url,
            params={"q": city, "appid": self.api_key, "units": "metric"},
            timeout=self._timeout,
        )
