import httpx

from infohub.utils.upstream import UpstreamResult, fetch_json


class FrankfurterClient:
    """Клиент Frankfurter API (последние курсы ЕЦБ)."""

    def __init__(self, http: httpx.AsyncClient, url: str, timeout: float):
        self._http = http
        self._url = url
        self._timeout = timeout

    async def latest(self, base: str, target: str) -> UpstreamResult:
        return await fetch_json(
            self._http,
            "Frankfurter API",
            self._url,
            params={"from": base, "to": target},
            timeout=self._timeout,
            message_keys=("error", "message"),
        )
