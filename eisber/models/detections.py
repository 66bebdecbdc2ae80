"""Response models for the detection endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from eisber.models.aircraft import EnrichedFlight


class DetectionListResponse(BaseModel):
    """Recent detections held in memory, newest first."""

    seen_count: int = Field(..., description="Aircraft announced since startup")
    detections: list[EnrichedFlight] = Field(
        default_factory=list, description="Most recent detections"
    )


class PollResponse(BaseModel):
    """Outcome of a manually triggered poll cycle."""

    detected: bool = Field(..., description="Whether a new aircraft was found")
    flight: Optional[EnrichedFlight] = Field(
        default=None, description="Enriched record for the new aircraft"
    )
