"""HTTP fetcher for the accounts JSON document."""
from __future__ import annotations

import logging

import httpx

from account_totals.config import SETTINGS
from account_totals.domain.errors import FetchError
from account_totals.domain.repositories import FetchCallback

logger = logging.getLogger(__name__)


class HttpJsonFetcher:
    """Issues a single GET and resolves the callback once, without retries."""

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = SETTINGS.request_timeout if timeout is None else timeout
        self._transport = transport

    async def fetch(self, url: str, callback: FetchCallback) -> None:
        try:
            data = await self._get_json(url)
        except FetchError as exc:
            logger.warning("%s", exc)
            callback(exc, None)
            return
        callback(None, data)

    async def _get_json(self, url: str) -> object:
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except httpx.TimeoutException as exc:
            raise FetchError(url, "request timed out") from exc
        except httpx.HTTPError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        if response.status_code != 200:
            raise FetchError(url, f"HTTP {response.status_code}", status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(url, "response is not valid JSON", status_code=response.status_code) from exc
