import random

import pytest

from eisber.models import EnrichedFlight
from eisber.services import PhraseSource, build_announcement
from eisber.services.announcer import count_cries


def _phrases() -> PhraseSource:
    return PhraseSource({"intro": ["Damn."], "intro2": ["I can see a"]}, rng=random.Random(1))


def _announce(flight: EnrichedFlight, rng: random.Random | None = None) -> list[str]:
    return build_announcement(
        flight, _phrases(), home_airport="EDDB", cry_per_co2_tons=5, rng=rng
    )


def test_phrase_source_picks_from_group():
    phrases = PhraseSource(rng=random.Random(3))

    assert phrases.pick("intro") in {"Oh no.", "Oh shit.", "Bummer.", "Damn."}
    assert phrases.pick("intro2") in {"There is another", "I can see a"}


def test_phrase_source_is_reproducible_with_seed():
    first = PhraseSource(rng=random.Random(42))
    second = PhraseSource(rng=random.Random(42))

    assert [first.pick("intro") for _ in range(5)] == [second.pick("intro") for _ in range(5)]


def test_phrase_source_returns_empty_for_empty_group():
    phrases = PhraseSource({"intro": []})

    assert phrases.pick("intro") == ""
    with pytest.raises(KeyError):
        phrases.pick("outro")


def test_announcement_for_departure_from_home():
    flight = EnrichedFlight(
        icao="3C6589",
        airline="Lufthansa",
        is_cargo=True,
        model="A321",
        departure_name="Berlin",
        departure_icao="EDDB",
        arrival_name="Frankfurt",
        arrival_icao="EDDF",
        route_distance_km=450,
        co2_tons=12,
    )

    parts = _announce(flight)

    assert parts == [
        "Damn. I can see a Lufthansa cargo A321 ",
        "starting to Frankfurt ",
        "and it produces another 12 tons of carbon dioxide . ",
        "ii ii ",
    ]


def test_announcement_for_arrival_at_home():
    flight = EnrichedFlight(icao="ABC123", arrival_icao="EDDB", arrival_name="Berlin", departure_icao="LEBL")

    parts = _announce(flight, rng=random.Random(0))

    assert parts[0] == "Damn. I can see a plane "
    assert parts[1] == "arriving from somewhere "
    assert parts[2] == ". "
    assert parts[3] in {"ii ii ", "ii ii ii ", "ii ii ii ii "}


def test_announcement_for_overflight():
    flight = EnrichedFlight(
        icao="ABC123",
        altitude_ft=36000,
        departure_name="Oslo",
        departure_icao="ENGM",
        arrival_name="Vienna",
        arrival_icao="LOWW",
    )

    parts = _announce(flight)

    assert parts[1] == "passing by at 11 kilometers on its way from Oslo to Vienna "


def test_announcement_omits_low_altitude_and_unknown_route():
    low = EnrichedFlight(icao="ABC123", altitude_ft=900, arrival_name="Leipzig")
    unknown = EnrichedFlight(icao="ABC124", altitude_ft=20000)

    assert _announce(low)[1] == "passing by on its way to Leipzig "
    assert _announce(unknown)[1] == ""


def test_count_cries_without_co2_is_random_between_two_and_four():
    rng = random.Random(5)

    counts = {count_cries(0, 5, rng) for _ in range(50)}

    assert counts <= {2, 3, 4}
    assert count_cries(23, 5, rng) == 4
