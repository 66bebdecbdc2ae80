"""Configuration settings for the EisBER announcer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from eisber.domain import DEFAULT_RADIUS, RadiusClass

logger = logging.getLogger("eisber.config")

# Shared SSM client for secret reads. Default to a region so imports do not
# fail in environments without AWS configuration (e.g. CI test runners).
_ssm_client = boto3.client(
    "ssm",
    region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "eu-central-1",
)


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_rapidapi_key() -> str:
    """Return the RapidAPI key shared by the ADS-B and AeroDataBox clients.

    ``RAPIDAPI_KEY`` wins when set. Otherwise the key is read from the SSM
    parameter named by ``RAPIDAPI_KEY_SSM_PARAM`` and cached in-memory.
    """

    value = os.getenv("RAPIDAPI_KEY")
    if value:
        return value

    parameter = os.getenv("RAPIDAPI_KEY_SSM_PARAM")
    if not parameter:
        raise RuntimeError("RapidAPI key not configured")

    try:
        response = _ssm_client.get_parameter(Name=parameter, WithDecryption=True)
        value = response.get("Parameter", {}).get("Value")
    except (ClientError, BotoCoreError) as exc:  # pragma: no cover - AWS error passthrough
        logger.error("Failed to load RapidAPI key from SSM: %s", exc)
        raise RuntimeError("Unable to load RapidAPI key from SSM") from exc

    if not value:
        logger.error("Received empty RapidAPI key from SSM")
        raise RuntimeError("RapidAPI key not configured in SSM")

    return value


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    eisber_env: str = os.getenv("EISBER_ENV", "local")
    log_level: str = os.getenv("EISBER_LOG_LEVEL", "INFO")

    # Observation point, defaults to BER
    location_lat: float = float(os.getenv("EISBER_LOCATION_LAT", "52.364598"))
    location_lon: float = float(os.getenv("EISBER_LOCATION_LON", "13.471815"))
    search_radius_nm: RadiusClass = RadiusClass.parse(
        os.getenv("EISBER_SEARCH_RADIUS_NM", str(DEFAULT_RADIUS.value))
    )
    home_airport: str = os.getenv("EISBER_HOME_AIRPORT", "EDDB")

    # Announcement tuning
    co2_kg_per_km: float = float(os.getenv("EISBER_CO2_KG_PER_KM", "12"))
    cry_per_co2_tons: int = int(os.getenv("EISBER_CRY_PER_CO2_TONS", "5"))
    min_speed_kt: float = float(os.getenv("EISBER_MIN_SPEED_KT", "50"))

    # Polling
    poll_enabled: bool = _get_bool("EISBER_POLL_ENABLED", default=True)
    poll_interval_s: float = float(os.getenv("EISBER_POLL_INTERVAL_S", "15"))
    recent_detections: int = int(os.getenv("EISBER_RECENT_DETECTIONS", "20"))

    # ADS-B Exchange via RapidAPI
    adsb_base_url: str = os.getenv(
        "ADSB_BASE_URL", "https://adsbexchange-com1.p.rapidapi.com"
    )
    adsb_api_host: str = os.getenv("ADSB_API_HOST", "adsbexchange-com1.p.rapidapi.com")
    adsb_timeout: float = float(os.getenv("ADSB_TIMEOUT", "10.0"))

    # AeroDataBox via RapidAPI
    aerodatabox_base_url: str = os.getenv(
        "AERODATABOX_BASE_URL", "https://aerodatabox.p.rapidapi.com"
    )
    aerodatabox_api_host: str = os.getenv(
        "AERODATABOX_API_HOST", "aerodatabox.p.rapidapi.com"
    )
    aerodatabox_timeout: float = float(os.getenv("AERODATABOX_TIMEOUT", "10.0"))

    rapidapi_key: str = ""


settings = Settings()

# Populate the key lazily so tests can override behavior via env
try:
    settings.rapidapi_key = get_rapidapi_key()
except RuntimeError:
    logger.warning("RapidAPI key not available at import time")

__all__ = ["settings", "Settings", "get_rapidapi_key"]
