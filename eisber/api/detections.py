"""Endpoints exposing recent detections and a manual poll trigger."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from eisber.models import DetectionListResponse, PollResponse
from eisber.services import DetectionPoller

router = APIRouter(prefix="/api/v1", tags=["detections"])

logger = logging.getLogger("eisber.api.detections")


def get_poller(request: Request) -> DetectionPoller:
    poller: DetectionPoller | None = getattr(request.app.state, "poller", None)
    if poller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Detection poller not initialized",
        )
    return poller


@router.get(
    "/detections",
    response_model=DetectionListResponse,
    summary="List recent detections",
)
async def list_detections(
    poller: DetectionPoller = Depends(get_poller),
) -> DetectionListResponse:
    """Return the detections kept in memory since startup, newest first."""

    return DetectionListResponse(
        seen_count=len(poller.pipeline.ledger),
        detections=list(poller.recent),
    )


@router.post(
    "/detections/poll",
    response_model=PollResponse,
    summary="Run one detection cycle now",
)
async def trigger_poll(poller: DetectionPoller = Depends(get_poller)) -> PollResponse:
    """Run a cycle outside the schedule; it waits for any cycle in progress."""

    flight = await poller.poll_once()
    logger.info("Manual poll finished (detected=%s)", flight is not None)
    return PollResponse(detected=flight is not None, flight=flight)
