import httpx
import pytest

from eisber.domain import RadiusClass
from eisber.ingestors import MalformedResponse, NearbyAircraftIngestor, SourceUnavailable
from eisber.services import select_nearest


def _ingestor(handler) -> NearbyAircraftIngestor:
    return NearbyAircraftIngestor(
        base_url="https://adsb.example.test",
        api_host="adsb.example.test",
        api_key="test-key",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.anyio
async def test_adsb_ingestor_parses_nearby_aircraft():
    payload = {
        "total": "3",
        "ac": [
            {
                "icao": "3c6589",
                "reg": "D-AIBE",
                "type": "A319",
                "spd": "312.5",
                "alt": "8000",
                "call": "DLH4AB ",
                "opicao": "DLH",
                "dst": "2.31",
                "gnd": "0",
            },
            {
                "icao": "4CA7B6",
                "reg": "",
                "type": "B738",
                "spd": "400",
                "alt": "12000",
                "call": "RYR12",
                "opicao": "RYR",
                "dst": "1.2",
                "gnd": "0",
            },
            {
                "icao": "3C4B26",
                "reg": "D-ABYT",
                "type": "B748",
                "spd": "",
                "alt": "",
                "call": "",
                "opicao": "",
                "dst": "4.8",
                "gnd": "1",
            },
        ],
    }
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json=payload)

    objects = await _ingestor(handler).fetch_nearby(52.364598, 13.471815, RadiusClass.NM_5)

    assert len(seen) == 1
    assert seen[0].url.path == "/json/lat/52.364598/lon/13.471815/dist/5/"
    assert seen[0].headers["x-rapidapi-host"] == "adsb.example.test"
    assert seen[0].headers["x-rapidapi-key"] == "test-key"

    # The contact without a registration is dropped.
    assert [obj.icao for obj in objects] == ["3C6589", "3C4B26"]
    first = objects[0]
    assert first.registration == "D-AIBE"
    assert first.type_code == "A319"
    assert first.callsign == "DLH4AB"
    assert first.operator_icao == "DLH"
    assert first.altitude_ft == 8000
    assert first.ground_speed_kt == pytest.approx(312.5)
    assert first.distance_nm == pytest.approx(2.31)
    assert first.on_ground is False

    ground = objects[1]
    assert ground.on_ground is True
    assert ground.ground_speed_kt == 0
    assert ground.altitude_ft == 0


@pytest.mark.anyio
async def test_adsb_ingestor_handles_empty_aircraft_list():
    ingestor = _ingestor(lambda request: httpx.Response(200, json={"total": 0, "ac": None}))

    assert await ingestor.fetch_nearby(0.0, 0.0, 10) == []


@pytest.mark.anyio
async def test_adsb_ingestor_skips_unparseable_records():
    payload = {"ac": ["garbage", {"reg": "D-AAAA"}, {"icao": "ABC123", "reg": "D-BBBB", "dst": "far"}]}
    ingestor = _ingestor(lambda request: httpx.Response(200, json=payload))

    assert await ingestor.fetch_nearby(0.0, 0.0, 10) == []


@pytest.mark.anyio
async def test_adsb_ingestor_handles_rate_limit():
    ingestor = _ingestor(lambda request: httpx.Response(429, text="rate limited"))

    with pytest.raises(SourceUnavailable):
        await ingestor.fetch_nearby(0.0, 0.0, 10)


@pytest.mark.anyio
async def test_adsb_ingestor_handles_error_response():
    ingestor = _ingestor(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(SourceUnavailable) as exc_info:
        await ingestor.fetch_nearby(0.0, 0.0, 10)

    assert exc_info.value.source == "adsbexchange"


@pytest.mark.anyio
async def test_adsb_ingestor_handles_timeout():
    def handler(request: httpx.Request):
        raise httpx.ReadTimeout("timeout", request=request)

    with pytest.raises(SourceUnavailable):
        await _ingestor(handler).fetch_nearby(0.0, 0.0, 10)


@pytest.mark.anyio
async def test_adsb_ingestor_rejects_invalid_json():
    ingestor = _ingestor(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(MalformedResponse):
        await ingestor.fetch_nearby(0.0, 0.0, 10)


@pytest.mark.anyio
async def test_adsb_ingestor_rejects_unknown_radius():
    ingestor = _ingestor(lambda request: httpx.Response(200, json={"ac": []}))

    with pytest.raises(ValueError):
        await ingestor.fetch_nearby(0.0, 0.0, 7)


@pytest.mark.anyio
async def test_adsb_ingestor_drops_records_without_identifier():
    payload = {"ac": [{"icao": "  ", "reg": "D-ANON", "spd": "300", "dst": "1.0", "gnd": "0"}]}
    ingestor = _ingestor(lambda request: httpx.Response(200, json=payload))

    assert await ingestor.fetch_nearby(0.0, 0.0, 10) == []


@pytest.mark.anyio
async def test_adsb_ingestor_drops_records_without_distance():
    payload = {
        "ac": [
            {"icao": "AAAAAA", "reg": "D-REAL", "spd": "300", "dst": "0.8", "gnd": "0"},
            {"icao": "BBBBBB", "reg": "D-NODST", "spd": "300", "dst": "", "gnd": "0"},
            {"icao": "CCCCCC", "reg": "D-NOKEY", "spd": "300", "gnd": "0"},
        ]
    }
    ingestor = _ingestor(lambda request: httpx.Response(200, json=payload))

    objects = await ingestor.fetch_nearby(0.0, 0.0, 10)

    assert [obj.icao for obj in objects] == ["AAAAAA"]
    assert select_nearest(objects).icao == "AAAAAA"


@pytest.mark.anyio
async def test_adsb_ingestor_clamps_negative_altitude():
    payload = {"ac": [{"icao": "AAAAAA", "reg": "D-LOW", "spd": "140", "alt": "-25", "dst": "0.4", "gnd": "0"}]}
    ingestor = _ingestor(lambda request: httpx.Response(200, json=payload))

    objects = await ingestor.fetch_nearby(0.0, 0.0, 10)

    assert len(objects) == 1
    assert objects[0].altitude_ft == 0
