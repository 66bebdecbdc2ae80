"""Detection pipeline: one poll cycle end to end, plus the loop that drives it."""

from __future__ import annotations

import asyncio
from collections import deque
import logging
from typing import Optional, Protocol

from eisber.config import settings
from eisber.domain import RadiusClass
from eisber.ingestors import DataSourceError, NearbyAircraftIngestor
from eisber.models.aircraft import EnrichedFlight, ObservedObject
from eisber.services.announcer import PhraseSource, build_announcement
from eisber.services.enricher import Enricher
from eisber.services.ledger import DedupLedger
from eisber.services.narration import LoggingNarrator, Narrator
from eisber.services.selector import select_nearest

logger = logging.getLogger("eisber.pipeline")


class NearbySource(Protocol):
    async def fetch_nearby(
        self, lat: float, lon: float, radius: RadiusClass | int
    ) -> list[ObservedObject]:
        ...


class DetectionPipeline:
    """Find at most one newly seen aircraft per cycle and enrich it."""

    def __init__(
        self,
        nearby_source: Optional[NearbySource] = None,
        enricher: Optional[Enricher] = None,
        ledger: Optional[DedupLedger] = None,
        *,
        lat: float | None = None,
        lon: float | None = None,
        radius: RadiusClass | None = None,
        min_speed_kt: float | None = None,
    ) -> None:
        self.nearby_source = nearby_source or NearbyAircraftIngestor()
        self.enricher = enricher or Enricher()
        self.ledger = ledger if ledger is not None else DedupLedger()
        self.lat = lat if lat is not None else settings.location_lat
        self.lon = lon if lon is not None else settings.location_lon
        self.radius = radius or settings.search_radius_nm
        self.min_speed_kt = (
            min_speed_kt if min_speed_kt is not None else settings.min_speed_kt
        )
        self._lock = asyncio.Lock()

    async def run_cycle(self) -> Optional[EnrichedFlight]:
        """Return the enriched nearest aircraft if it has not been seen before."""

        async with self._lock:
            try:
                nearby = await self.nearby_source.fetch_nearby(
                    self.lat, self.lon, self.radius
                )
            except DataSourceError as exc:
                logger.warning("Nearby aircraft unavailable this cycle: %s", exc)
                return None

            nearest = select_nearest(nearby, self.min_speed_kt)
            if nearest is None:
                logger.info("No aircraft found (%s contacts).", len(nearby))
                return None
            if self.ledger.has_been_seen(nearest.icao):
                logger.info("No new aircraft found; %s seen before.", nearest.icao)
                return None
            self.ledger.mark_seen(nearest.icao)

            flight = await self.enricher.enrich(EnrichedFlight.from_observed(nearest))

        logger.info(
            "New aircraft: %s icao:%s type:%s alt:%d dst:%.2f op:%s call:%s %s -> %s (%d km, %dt CO2)",
            flight.registration,
            flight.icao,
            flight.type_code,
            flight.altitude_ft,
            flight.distance_nm,
            flight.operator_icao,
            flight.callsign,
            flight.departure_name or "",
            flight.arrival_name or "",
            flight.route_distance_km,
            flight.co2_tons,
        )
        return flight


class DetectionPoller:
    """Run the pipeline on a fixed interval and announce new aircraft."""

    def __init__(
        self,
        pipeline: Optional[DetectionPipeline] = None,
        narrator: Optional[Narrator] = None,
        phrases: Optional[PhraseSource] = None,
        *,
        interval_s: float | None = None,
        home_airport: str | None = None,
        cry_per_co2_tons: int | None = None,
        keep_recent: int | None = None,
    ) -> None:
        self.pipeline = pipeline or DetectionPipeline()
        self.narrator = narrator or LoggingNarrator()
        self.phrases = phrases or PhraseSource()
        self.interval_s = interval_s if interval_s is not None else settings.poll_interval_s
        self.home_airport = home_airport or settings.home_airport
        self.cry_per_co2_tons = cry_per_co2_tons or settings.cry_per_co2_tons
        self.recent: deque[EnrichedFlight] = deque(
            maxlen=keep_recent or settings.recent_detections
        )

    async def poll_once(self) -> Optional[EnrichedFlight]:
        flight = await self.pipeline.run_cycle()
        if flight is None:
            return None

        self.recent.appendleft(flight)
        parts = build_announcement(
            flight,
            self.phrases,
            home_airport=self.home_airport,
            cry_per_co2_tons=self.cry_per_co2_tons,
        )
        await self.narrator.say(parts)
        return flight

    async def run(self) -> None:
        """Poll until cancelled; a failed cycle never stops the loop."""

        while True:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                logger.info("Detection poller cancelled")
                raise
            except Exception:  # pragma: no cover - defensive logging
                logger.exception("Detection cycle failed")
            await asyncio.sleep(self.interval_s)


__all__ = ["DetectionPipeline", "DetectionPoller"]
