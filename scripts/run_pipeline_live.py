#!/usr/bin/env python
"""
Run one live detection cycle against ADS-B Exchange and AeroDataBox.

Needs RAPIDAPI_KEY (or RAPIDAPI_KEY_SSM_PARAM) in the environment.

Usage (from repo root):
    python scripts/run_pipeline_live.py [--lat 52.52 --lon 13.40 --radius 25]
"""

import argparse
import asyncio
import logging

from eisber.config import settings
from eisber.domain import RadiusClass
from eisber.ingestors import NearbyAircraftIngestor
from eisber.services import DetectionPipeline, PhraseSource, build_announcement, select_nearest


async def main(lat: float, lon: float, radius: RadiusClass) -> None:
    print(f"=== Live detection cycle for {lat}, {lon} within {radius.value} nm ===\n")

    ingestor = NearbyAircraftIngestor()
    contacts = await ingestor.fetch_nearby(lat, lon, radius)
    print(f"{len(contacts)} registered contacts:")
    for idx, obj in enumerate(contacts, start=1):
        print(
            f"  {idx}. {obj.registration} icao={obj.icao} type={obj.type_code} "
            f"spd={obj.ground_speed_kt:.1f} alt={obj.altitude_ft:.0f} "
            f"dst={obj.distance_nm:.2f} ground={obj.on_ground}"
        )
    nearest = select_nearest(contacts, settings.min_speed_kt)
    print(f"\nNearest candidate: {nearest.icao if nearest else None}")

    pipeline = DetectionPipeline(lat=lat, lon=lon, radius=radius)
    flight = await pipeline.run_cycle()
    if flight is None:
        print("\nNo new aircraft found.")
        return

    print("\nEnrichedFlight:")
    print(flight.model_dump())
    parts = build_announcement(
        flight,
        PhraseSource(),
        home_airport=settings.home_airport,
        cry_per_co2_tons=settings.cry_per_co2_tons,
    )
    print("\nAnnouncement:")
    for text in parts:
        print(f'---> "{text}"')


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--lat", type=float, default=settings.location_lat)
    parser.add_argument("--lon", type=float, default=settings.location_lon)
    parser.add_argument("--radius", type=RadiusClass.parse, default=settings.search_radius_nm)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(args.lat, args.lon, args.radius))
