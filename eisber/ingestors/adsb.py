"""ADS-B ingestor for aircraft near the observation point via ADS-B Exchange."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from eisber.config import settings
from eisber.domain import RadiusClass
from eisber.ingestors.errors import MalformedResponse
from eisber.ingestors.rapidapi import RapidAPIIngestor
from eisber.models.aircraft import ObservedObject

logger = logging.getLogger("eisber.ingestors.adsb")


class NearbyAircraftIngestor(RapidAPIIngestor):
    """Fetch contacts within a radius class of a fixed point."""

    source = "adsbexchange"

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
            base_url=base_url or settings.adsb_base_url,
            api_host=api_host or settings.adsb_api_host,
            api_key=api_key,
            timeout=timeout or settings.adsb_timeout,
            transport=transport,
            http_client=http_client,
        )

    async def fetch_nearby(
        self, lat: float, lon: float, radius: RadiusClass | int
    ) -> list[ObservedObject]:
        radius = RadiusClass.parse(radius)
        payload = await self._get_json(
            f"/json/lat/{lat}/lon/{lon}/dist/{radius.value}/"
        )
        if payload is None:
            return []
        if not isinstance(payload, dict):
            logger.warning("Unexpected ADS-B payload type: %s", type(payload).__name__)
            raise MalformedResponse(self.source, "expected a JSON object")

        raw_objects = payload.get("ac") or []
        if not isinstance(raw_objects, list):
            raise MalformedResponse(self.source, "'ac' is not a list")
        logger.debug("%s aircraft reported nearby", payload.get("total", len(raw_objects)))

        objects: list[ObservedObject] = []
        for entry in raw_objects:
            observed = self._normalize_entry(entry)
            if observed:
                objects.append(observed)

        logger.debug("Ingested %s nearby aircraft", len(objects))
        return objects

    def _normalize_entry(self, entry: Any) -> Optional[ObservedObject]:
        if not isinstance(entry, dict):
            return None
        try:
            observed = ObservedObject.model_validate(entry)
        except ValidationError as exc:
            logger.debug("Skipping unparseable ADS-B record %s: %s", entry.get("icao"), exc)
            return None

        # Contacts without a registration are not fully acquired yet.
        if not observed.registration:
            return None
        return observed


__all__ = ["NearbyAircraftIngestor"]
