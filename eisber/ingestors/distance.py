"""Airport-to-airport great-circle distance lookups using AeroDataBox."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from eisber.config import settings
from eisber.ingestors.errors import MalformedResponse
from eisber.ingestors.rapidapi import RapidAPIIngestor
from eisber.models.route import extract_distance_km

logger = logging.getLogger("eisber.ingestors.distance")


class AirportDistanceIngestor(RapidAPIIngestor):
    """Fetch the distance between two airports identified by ICAO code."""

    source = "aerodatabox-distance"

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

    async def fetch_distance(
        self, from_icao: str | None, to_icao: str | None
    ) -> Optional[float]:
        if not from_icao or not to_icao:
            return None

        payload = await self._get_json(
            f"/airports/icao/{quote(from_icao)}/distance-time/{quote(to_icao)}"
        )
        if payload is None:
            return None
        if not isinstance(payload, dict):
            raise MalformedResponse(self.source, "expected a JSON object")

        try:
            distance_km = extract_distance_km(payload)
        except (TypeError, ValueError) as exc:
            logger.warning("Invalid distance for %s -> %s: %s", from_icao, to_icao, exc)
            raise MalformedResponse(self.source, "invalid distance value") from exc

        logger.debug("%s -> %s: %s km", from_icao, to_icao, distance_km)
        return distance_km


__all__ = ["AirportDistanceIngestor"]
