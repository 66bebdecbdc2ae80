"""Turn an enriched flight into the spoken announcement fragments."""

from __future__ import annotations

import random
from typing import Mapping, Optional, Sequence

from eisber.models.aircraft import EnrichedFlight

FEET_TO_METERS = 0.3048

DEFAULT_PHRASES: dict[str, list[str]] = {
    "intro": [
        "Oh no.",
        "Oh shit.",
        "Bummer.",
        "Damn.",
    ],
    "intro2": [
        "There is another",
        "I can see a",
    ],
}


class PhraseSource:
    """Random phrase picker over named groups.

    Pass a seeded ``random.Random`` to make picks reproducible.
    """

    def __init__(
        self,
        phrases: Optional[Mapping[str, Sequence[str]]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.phrases = dict(phrases if phrases is not None else DEFAULT_PHRASES)
        self.rng = rng or random.Random()

    def pick(self, group: str) -> str:
        options = self.phrases[group]
        if not options:
            return ""
        return self.rng.choice(list(options))


def _intro(flight: EnrichedFlight, phrases: PhraseSource) -> str:
    text = f"{phrases.pick('intro')} {phrases.pick('intro2')} "
    if flight.airline:
        text += f"{flight.airline} "
    if flight.is_cargo:
        text += "cargo "
    text += f"{flight.model or 'plane'} "
    return text


def _route(flight: EnrichedFlight, home_airport: str) -> str:
    if not flight.departure_name and not flight.arrival_name:
        return ""
    if flight.departure_icao == home_airport:
        return f"starting to {flight.arrival_name or 'someplace'} "
    if flight.arrival_icao == home_airport:
        return f"arriving from {flight.departure_name or 'somewhere'} "

    text = "passing by "
    if flight.altitude_ft > 1000:
        altitude_km = round(flight.altitude_ft * FEET_TO_METERS / 1000)
        text += f"at {altitude_km} kilometers "
    text += "on its way "
    if flight.departure_name:
        text += f"from {flight.departure_name} "
    if flight.arrival_name:
        text += f"to {flight.arrival_name} "
    return text


def count_cries(co2_tons: int, cry_per_co2_tons: int, rng: random.Random) -> int:
    """One cry per ``cry_per_co2_tons`` tons; a random 2-4 when CO2 is unknown."""

    if co2_tons:
        return co2_tons // max(cry_per_co2_tons, 1)
    return rng.randint(2, 4)


def build_announcement(
    flight: EnrichedFlight,
    phrases: PhraseSource,
    *,
    home_airport: str,
    cry_per_co2_tons: int,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Return the four announcement fragments in speaking order."""

    rng = rng or phrases.rng
    emissions = ""
    if flight.co2_tons:
        emissions = f"and it produces another {flight.co2_tons} tons of carbon dioxide "
    emissions += ". "

    cries = count_cries(flight.co2_tons, cry_per_co2_tons, rng)
    return [
        _intro(flight, phrases),
        _route(flight, home_airport),
        emissions,
        "ii " * cries,
    ]


__all__ = [
    "DEFAULT_PHRASES",
    "PhraseSource",
    "build_announcement",
    "count_cries",
]
