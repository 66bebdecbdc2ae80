"""Models for aircraft seen by the ADS-B feed and their enriched form."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eisber.models.route import RouteInfo


class ObservedObject(BaseModel):
    """Raw nearby contact as reported by ADS-B Exchange.

    The feed sends most values as strings and leaves unknown ones blank, so
    blanks fall back to the field default before validation. The identifier
    and distance have no default: records without them are not usable.
    """

    icao: str = Field(..., min_length=1, description="ICAO 24-bit transponder code")
    registration: str = Field(default="", alias="reg", description="Tail number")
    type_code: str = Field(default="", alias="type", description="ICAO type designator")
    callsign: str = Field(default="", alias="call", description="Flight callsign")
    operator_icao: str = Field(
        default="", alias="opicao", description="ICAO code of the operator"
    )
    altitude_ft: float = Field(default=0, alias="alt", description="Altitude in feet")
    ground_speed_kt: float = Field(
        default=0, alias="spd", description="Ground speed in knots"
    )
    distance_nm: float = Field(
        ...,
        ge=0,
        alias="dst",
        description="Distance from the observation point in nautical miles",
    )
    on_ground: bool = Field(default=False, alias="gnd", description="Reported on ground")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("registration", "type_code", "callsign", "operator_icao", mode="before")
    @classmethod
    def _blank_string(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("icao", mode="before")
    @classmethod
    def _upper_icao(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("altitude_ft", "ground_speed_kt", "on_ground", mode="before")
    @classmethod
    def _blank_number(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("altitude_ft")
    @classmethod
    def _clamp_altitude(cls, value: float) -> float:
        # Below-sea-level reports near coastal airports.
        return max(value, 0.0)


class EnrichedFlight(BaseModel):
    """Working aggregate for one detection, filled in as lookups succeed."""

    icao: str = Field(..., description="ICAO 24-bit transponder code")
    registration: str = Field(default="", description="Tail number")
    type_code: str = Field(default="", description="ICAO type designator")
    callsign: str = Field(default="", description="Flight callsign")
    operator_icao: str = Field(default="", description="ICAO code of the operator")
    altitude_ft: float = Field(default=0, description="Altitude in feet")
    distance_nm: float = Field(
        default=0, description="Distance from the observation point in nautical miles"
    )

    departure_name: Optional[str] = Field(default=None, description="Departure city")
    departure_icao: Optional[str] = Field(default=None, description="Departure airport ICAO")
    arrival_name: Optional[str] = Field(default=None, description="Arrival city")
    arrival_icao: Optional[str] = Field(default=None, description="Arrival airport ICAO")
    model: Optional[str] = Field(default=None, description="Aircraft model")
    airline: Optional[str] = Field(default=None, description="Airline name")
    is_cargo: bool = Field(default=False, description="Cargo flight")
    route_distance_km: float = Field(
        default=0, description="Great-circle route length in km, 0 when unknown"
    )
    co2_tons: int = Field(
        default=0, description="Estimated CO2 for the flight in metric tons, 0 when unknown"
    )

    @classmethod
    def from_observed(cls, observed: ObservedObject) -> "EnrichedFlight":
        return cls(
            icao=observed.icao,
            registration=observed.registration,
            type_code=observed.type_code,
            callsign=observed.callsign,
            operator_icao=observed.operator_icao,
            altitude_ft=observed.altitude_ft,
            distance_nm=observed.distance_nm,
        )

    def merge_route(self, route: RouteInfo) -> "EnrichedFlight":
        """Return a copy with every known route field applied.

        Unknown values in ``route`` never overwrite what is already known.
        """

        updates: dict[str, Any] = {}
        for name in (
            "departure_name",
            "departure_icao",
            "arrival_name",
            "arrival_icao",
            "model",
            "airline",
        ):
            value = getattr(route, name)
            if value:
                updates[name] = value
        if route.is_cargo is not None:
            updates["is_cargo"] = self.is_cargo or route.is_cargo
        if route.distance_km:
            updates["route_distance_km"] = route.distance_km
        return self.model_copy(update=updates)


__all__ = ["EnrichedFlight", "ObservedObject"]
