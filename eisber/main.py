from __future__ import annotations

import asyncio
import contextlib
import logging
import time

import httpx
from fastapi import FastAPI, Request

from eisber.api import api_router
from eisber.config import settings
from eisber.ingestors import (
    AirportDistanceIngestor,
    FlightRouteIngestor,
    NearbyAircraftIngestor,
)
from eisber.services import DetectionPipeline, DetectionPoller, Enricher

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("eisber")


def build_poller(http_client: httpx.AsyncClient) -> DetectionPoller:
    """Wire the ingestors, pipeline and poller around one shared client."""

    enricher = Enricher(
        FlightRouteIngestor(http_client=http_client),
        AirportDistanceIngestor(http_client=http_client),
    )
    pipeline = DetectionPipeline(
        NearbyAircraftIngestor(http_client=http_client), enricher
    )
    return DetectionPoller(pipeline)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown lifecycle."""

    app.state.http_client = httpx.AsyncClient()
    app.state.poller = build_poller(app.state.http_client)
    logger.info(
        "Watching %.5f, %.5f within %s nm",
        settings.location_lat,
        settings.location_lon,
        settings.search_radius_nm.value,
    )

    if settings.poll_enabled:
        if not settings.rapidapi_key:
            logger.warning("RapidAPI key is missing; lookups will be rejected")
        app.state.poll_task = asyncio.create_task(app.state.poller.run())
        logger.info("Detection poller started (every %ss)", settings.poll_interval_s)

    try:
        yield
    finally:
        task = getattr(app.state, "poll_task", None)
        if task:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        client: httpx.AsyncClient | None = getattr(app.state, "http_client", None)
        if client:
            await client.aclose()


app = FastAPI(title="EisBER", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    return {"message": "EisBER is watching the sky"}
