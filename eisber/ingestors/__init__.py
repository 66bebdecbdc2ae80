"""Data source clients for EisBER."""

from .adsb import NearbyAircraftIngestor
from .distance import AirportDistanceIngestor
from .errors import DataSourceError, MalformedResponse, SourceUnavailable
from .flights import FlightRouteIngestor

__all__ = [
    "AirportDistanceIngestor",
    "DataSourceError",
    "FlightRouteIngestor",
    "MalformedResponse",
    "NearbyAircraftIngestor",
    "SourceUnavailable",
]
