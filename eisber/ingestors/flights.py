"""Flight route lookups by callsign using AeroDataBox."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from eisber.config import settings
from eisber.ingestors.errors import MalformedResponse
from eisber.ingestors.rapidapi import RapidAPIIngestor
from eisber.models.route import RouteInfo

logger = logging.getLogger("eisber.ingestors.flights")


class FlightRouteIngestor(RapidAPIIngestor):
    """Resolve a callsign to route, airline and aircraft model details.

    AeroDataBox can return several flights for a reused callsign; only the
    first one is used.
    """

    source = "aerodatabox-flights"

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_host: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.aerodatabox_base_url,
            api_host=api_host or settings.aerodatabox_api_host,
            api_key=api_key,
            timeout=timeout or settings.aerodatabox_timeout,
            transport=transport,
            http_client=http_client,
        )

    async def fetch_route(self, callsign: str) -> Optional[RouteInfo]:
        callsign = (callsign or "").strip()
        if not callsign:
            return None

        payload = await self._get_json(f"/flights/callsign/{quote(callsign)}")
        if payload is None:
            logger.debug("%s: no flight data found", callsign)
            return None
        if not isinstance(payload, list):
            raise MalformedResponse(self.source, "expected a JSON array")
        if not payload:
            logger.debug("%s: no flight data found", callsign)
            return None

        first = payload[0]
        if not isinstance(first, dict):
            raise MalformedResponse(self.source, "flight entry is not an object")
        try:
            route = RouteInfo.from_flight_payload(first)
        except ValidationError as exc:
            logger.warning("Failed to parse flight data for %s: %s", callsign, exc)
            raise MalformedResponse(self.source, "invalid flight entry") from exc

        logger.debug("%s: route data %s", callsign, route)
        return route


__all__ = ["FlightRouteIngestor"]
