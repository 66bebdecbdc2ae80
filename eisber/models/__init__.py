"""Pydantic models for EisBER."""

from .aircraft import EnrichedFlight, ObservedObject
from .detections import DetectionListResponse, PollResponse
from .route import RouteInfo

__all__ = [
    "DetectionListResponse",
    "EnrichedFlight",
    "ObservedObject",
    "PollResponse",
    "RouteInfo",
]
