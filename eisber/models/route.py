"""Route metadata returned by AeroDataBox for a callsign."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


def _dig(payload: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    return payload


class RouteInfo(BaseModel):
    """Per-flight route details; each field is independently optional."""

    distance_km: Optional[float] = Field(
        default=None, description="Great-circle distance of the route in km"
    )
    departure_name: Optional[str] = Field(default=None, description="Departure city")
    departure_icao: Optional[str] = Field(default=None, description="Departure airport ICAO")
    arrival_name: Optional[str] = Field(default=None, description="Arrival city")
    arrival_icao: Optional[str] = Field(default=None, description="Arrival airport ICAO")
    is_cargo: Optional[bool] = Field(default=None, description="Cargo flight")
    model: Optional[str] = Field(default=None, description="Aircraft model")
    airline: Optional[str] = Field(default=None, description="Airline name")

    @classmethod
    def from_flight_payload(cls, entry: dict[str, Any]) -> "RouteInfo":
        """Build from one element of the ``/flights/callsign`` response."""

        return cls(
            distance_km=_dig(entry, "greatCircleDistance", "km"),
            departure_name=_dig(entry, "departure", "airport", "municipalityName"),
            departure_icao=_dig(entry, "departure", "airport", "icao"),
            arrival_name=_dig(entry, "arrival", "airport", "municipalityName"),
            arrival_icao=_dig(entry, "arrival", "airport", "icao"),
            is_cargo=entry.get("isCargo"),
            model=_dig(entry, "aircraft", "model"),
            airline=_dig(entry, "airline", "name"),
        )


def extract_distance_km(payload: Any) -> Optional[float]:
    """Pull ``greatCircleDistance.km`` out of an AeroDataBox payload."""

    value = _dig(payload, "greatCircleDistance", "km")
    if value is None:
        return None
    return float(value)


__all__ = ["RouteInfo", "extract_distance_km"]
