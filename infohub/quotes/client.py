import httpx

from infohub.utils.upstream import UpstreamResult, fetch_json


class QuotableClient:
    """Основной источник цитат: Quotable, тело вида {"content": ..., "author": ...}."""

    def __init__(self, http: httpx.AsyncClient, url: str, timeout: float):
        self._http = http
        self._url = url
        self._timeout = timeout

    async def random(self) -> UpstreamResult:
        return await fetch_json(self._http, "Quotable API", self._url, timeout=self._timeout)


class ZenQuotesClient:
    """Резервный источник цитат: ZenQuotes, тело вида [{"q": ..., "a": ...}]."""

    def __init__(self, http: httpx.AsyncClient, url: str, timeout: float):
        self._http = http
        self._url = url
        self._timeout = timeout

    async def random(self) -> UpstreamResult:
        return await fetch_json(self._http, "ZenQuotes API", self._url, timeout=self._timeout)
