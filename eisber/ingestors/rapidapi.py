"""Shared HTTP plumbing for data sources served through RapidAPI."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from eisber.config import settings
from eisber.ingestors.errors import MalformedResponse, SourceUnavailable

logger = logging.getLogger("eisber.ingestors.rapidapi")


class RapidAPIIngestor:
    """Issue a single authenticated GET per lookup, without retries.

    Every failure is logged and re-raised as ``SourceUnavailable`` or
    ``MalformedResponse`` so callers can decide whether the cycle goes on.
    """

    source = "rapidapi"

    def __init__(
        self,
        *,
        base_url: str,
        api_host: str,
        timeout: float,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_host = api_host
        self.timeout = timeout
        self.api_key = api_key if api_key is not None else settings.rapidapi_key
        self.transport = transport
        self.http_client = http_client

    def _headers(self) -> dict[str, str]:
        return {"x-rapidapi-host": self.api_host, "x-rapidapi-key": self.api_key}

    async def _get(self, url: str) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(
                url, headers=self._headers(), timeout=self.timeout
            )
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            return await client.get(url, headers=self._headers())

    async def _get_json(self, path: str) -> Any:
        """Fetch ``path`` and decode the JSON body; ``None`` for 204 No Content."""

        url = f"{self.base_url}{path}"
        try:
            response = await self._get(url)
        except httpx.TimeoutException as exc:
            logger.warning("%s request timed out: %s", self.source, exc)
            raise SourceUnavailable(self.source, "request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("%s request failed: %s", self.source, exc)
            raise SourceUnavailable(self.source, "request failed") from exc

        if response.status_code == 429:
            logger.warning("%s rate limit encountered: %s", self.source, response.text)
            raise SourceUnavailable(self.source, "rate limited")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "%s returned HTTP %s: %s", self.source, exc.response.status_code, exc
            )
            raise SourceUnavailable(
                self.source, f"HTTP {exc.response.status_code}"
            ) from exc

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Failed to parse %s JSON response: %s", self.source, exc)
            raise MalformedResponse(self.source, "invalid JSON") from exc


__all__ = ["RapidAPIIngestor"]
