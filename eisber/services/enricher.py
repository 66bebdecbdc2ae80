"""Enrich a detected aircraft with route, distance and CO2 information."""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Protocol

from eisber.config import settings
from eisber.ingestors import (
    AirportDistanceIngestor,
    DataSourceError,
    FlightRouteIngestor,
)
from eisber.models.aircraft import EnrichedFlight
from eisber.models.route import RouteInfo

logger = logging.getLogger("eisber.enricher")

_MODEL_SEPARATORS = re.compile(r"[-/]")


class RouteSource(Protocol):
    """Looks up route details for a callsign."""

    async def fetch_route(self, callsign: str) -> Optional[RouteInfo]:
        ...


class DistanceSource(Protocol):
    """Looks up the great-circle distance between two airports."""

    async def fetch_distance(
        self, from_icao: str | None, to_icao: str | None
    ) -> Optional[float]:
        ...


def compute_co2_tons(distance_km: float, co2_kg_per_km: float) -> int:
    """Whole metric tons of CO2 for a flight of ``distance_km``; 0 if unknown."""

    if not distance_km:
        return 0
    return math.floor(distance_km * co2_kg_per_km / 1000)


def simplify_model(model: str) -> str:
    """Cut a model name down to its base designator, e.g. ``A320-200`` -> ``A320``."""

    return _MODEL_SEPARATORS.split(model, maxsplit=1)[0]


class Enricher:
    """Merge secondary lookups into an ``EnrichedFlight``.

    Lookups are awaited one after the other. A failing source only leaves
    its fields unknown; ``enrich`` itself does not raise for source errors.
    """

    def __init__(
        self,
        route_source: Optional[RouteSource] = None,
        distance_source: Optional[DistanceSource] = None,
        *,
        co2_kg_per_km: float | None = None,
    ) -> None:
        self.route_source = route_source or FlightRouteIngestor()
        self.distance_source = distance_source or AirportDistanceIngestor()
        self.co2_kg_per_km = (
            co2_kg_per_km if co2_kg_per_km is not None else settings.co2_kg_per_km
        )

    async def enrich(self, flight: EnrichedFlight) -> EnrichedFlight:
        route = await self._load_route(flight)
        if route is not None:
            flight = flight.merge_route(route)

        if not flight.route_distance_km and flight.departure_icao and flight.arrival_icao:
            distance_km = await self._load_distance(flight)
            if distance_km:
                flight = flight.model_copy(update={"route_distance_km": distance_km})

        updates: dict[str, object] = {}
        if flight.route_distance_km:
            updates["co2_tons"] = compute_co2_tons(
                flight.route_distance_km, self.co2_kg_per_km
            )
        if flight.model:
            updates["model"] = simplify_model(flight.model)
        if updates:
            flight = flight.model_copy(update=updates)
        return flight

    async def _load_route(self, flight: EnrichedFlight) -> Optional[RouteInfo]:
        if not flight.callsign:
            return None
        logger.debug("%s: getting flight data", flight.registration)
        try:
            return await self.route_source.fetch_route(flight.callsign)
        except DataSourceError as exc:
            logger.warning("Route data unavailable for %s: %s", flight.callsign, exc)
            return None

    async def _load_distance(self, flight: EnrichedFlight) -> Optional[float]:
        logger.debug("%s: getting flight distance", flight.registration)
        try:
            return await self.distance_source.fetch_distance(
                flight.departure_icao, flight.arrival_icao
            )
        except DataSourceError as exc:
            logger.warning(
                "Distance unavailable for %s -> %s: %s",
                flight.departure_icao,
                flight.arrival_icao,
                exc,
            )
            return None


__all__ = ["Enricher", "compute_co2_tons", "simplify_model"]
