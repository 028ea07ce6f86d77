"""Общие фикстуры: заглушки внешних API поверх httpx.MockTransport."""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from infohub.core.config_app import Settings
from infohub.core.lifespan import init_services
from main import app


WEATHER_HOST = "api.openweathermap.org"
RATES_HOST = "api.frankfurter.app"
QUOTABLE_HOST = "api.quotable.io"
ZENQUOTES_HOST = "zenquotes.io"


class StubUpstream:
    """Отвечает на запросы по хосту и запоминает все исходящие вызовы."""

    def __init__(self):
        self.routes: Dict[str, Dict[str, Any]] = {}
        self.calls: List[httpx.Request] = []

    def on(
        self,
        host: str,
        status: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        exc: Optional[Exception] = None,
    ) -> None:
        self.routes[host] = {"status": status, "json": json, "text": text, "exc": exc}

    def hosts(self) -> List[str]:
        return [request.url.host for request in self.calls]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route = self.routes.get(request.url.host)
        if route is None:
            raise httpx.ConnectError("connection refused", request=request)
        if route["exc"] is not None:
            raise route["exc"]
        if route["text"] is not None:
            return httpx.Response(route["status"], text=route["text"])
        return httpx.Response(route["status"], json=route["json"])


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def http_client(upstream: StubUpstream) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def config() -> Settings:
    config = Settings()
    config.OPENWEATHER_API_KEY = "test-key"
    config.OPENWEATHER_URL = f"https://{WEATHER_HOST}/data/2.5/weather"
    config.FRANKFURTER_URL = f"https://{RATES_HOST}/latest"
    config.QUOTABLE_URL = f"https://{QUOTABLE_HOST}/random"
    config.ZENQUOTES_URL = f"https://{ZENQUOTES_HOST}/api/random"
    return config


@pytest.fixture
def client(http_client: httpx.AsyncClient, config: Settings):
    """TestClient без lifespan: сервисы собраны поверх заглушек."""
    init_services(app, http_client, config)
    app.dependency_overrides.clear()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
async def slow_drip_url():
    """
    Настоящий TCP-сервер: отдаёт заголовки сразу, а тело по байту раз в 0.2 с.
    Read-таймаут httpx на таком сервере не срабатывает.
    """
    handlers = []

    async def drip(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        handlers.append(asyncio.current_task())
        try:
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: 1000\r\n\r\n"
            )
            for _ in range(1000):
                writer.write(b" ")
                await writer.drain()
                await asyncio.sleep(0.2)
        except (ConnectionError, asyncio.IncompleteReadError):
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(drip, "127.0.0.1", 0)
    host, port = server.sockets[0].getsockname()[:2]
    yield f"http://{host}:{port}/random"

    server.close()
    for task in handlers:
        task.cancel()
    await asyncio.gather(*handlers, return_exceptions=True)
