from __future__ import annotations

import httpx
import pytest

from geopath.adapters.geocoding import IpApiLocator, NominatimGeocoder
from geopath.adapters.http import HttpClientConfig
from geopath.domain.exceptions import GeocodingError
from geopath.domain.models import GeoPoint

CONFIG = HttpClientConfig(user_agent="geopath-tests/1.0", timeout_s=1.0)


def _geocoder(handler) -> NominatimGeocoder:
    return NominatimGeocoder(
        base_url="https://nominatim.test/",
        config=CONFIG,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.anyio
async def test_geocode_requests_best_match_and_parses_it() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[
                {
                    "lat": "39.9526",
                    "lon": "-75.1652",
                    "display_name": "Philadelphia, Pennsylvania, United States",
                    "address": {"city": "Philadelphia", "country_code": "us"},
                }
            ],
        )

    place = await _geocoder(handler).geocode("Philadelphia")

    assert place.location == GeoPoint(lat=39.9526, lng=-75.1652)
    assert place.display_name.startswith("Philadelphia")
    assert place.address["country_code"] == "us"

    (request,) = seen
    assert request.url.path == "/search"
    assert request.url.params["q"] == "Philadelphia"
    assert request.url.params["limit"] == "1"
    assert request.url.params["format"] == "json"
    assert request.headers["User-Agent"] == "geopath-tests/1.0"


@pytest.mark.anyio
async def test_geocode_without_results_raises() -> None:
    geocoder = _geocoder(lambda request: httpx.Response(200, json=[]))

    with pytest.raises(GeocodingError, match="No results found"):
        await geocoder.geocode("nowhere at all")


@pytest.mark.anyio
async def test_geocode_wraps_http_errors() -> None:
    geocoder = _geocoder(lambda request: httpx.Response(503, text="busy"))

    with pytest.raises(GeocodingError, match="Geocoding failed"):
        await geocoder.geocode("Philadelphia")


@pytest.mark.anyio
async def test_geocode_rejects_out_of_range_payload() -> None:
    geocoder = _geocoder(
        lambda request: httpx.Response(200, json=[{"lat": "123.0", "lon": "0"}])
    )

    with pytest.raises(GeocodingError):
        await geocoder.geocode("Broken")


@pytest.mark.anyio
async def test_reverse_geocode_sends_coordinates() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "lat": "40.7127",
                "lon": "-74.0059",
                "display_name": "City Hall, New York",
                "address": {"city": "New York"},
            },
        )

    place = await _geocoder(handler).reverse_geocode(GeoPoint(lat=40.7128, lng=-74.006))

    assert place.display_name == "City Hall, New York"
    assert place.location == GeoPoint(lat=40.7127, lng=-74.0059)
    (request,) = seen
    assert request.url.path == "/reverse"
    assert request.url.params["lat"] == "40.7128"
    assert request.url.params["lon"] == "-74.006"


@pytest.mark.anyio
async def test_reverse_geocode_error_payload_raises() -> None:
    geocoder = _geocoder(
        lambda request: httpx.Response(200, json={"error": "Unable to geocode"})
    )

    with pytest.raises(GeocodingError, match="No results found"):
        await geocoder.reverse_geocode(GeoPoint(lat=0.0, lng=0.0))


def test_nominatim_base_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOMINATIM_BASE_URL", "http://localhost:8080/")
    assert NominatimGeocoder(config=CONFIG).base_url == "http://localhost:8080"


def test_http_client_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEOCODER_USER_AGENT", "my-app/2.0")
    monkeypatch.setenv("GEOCODER_TIMEOUT_S", "3.5")

    cfg = HttpClientConfig.from_env()

    assert cfg == HttpClientConfig(user_agent="my-app/2.0", timeout_s=3.5)


@pytest.mark.anyio
async def test_ip_locator_parses_ipapi_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://ipapi.test/json/"
        return httpx.Response(
            200,
            json={
                "latitude": 40.7128,
                "longitude": -74.006,
                "city": "New York",
                "country_name": "United States",
            },
        )

    locator = IpApiLocator(
        url="https://ipapi.test/json/",
        config=CONFIG,
        transport=httpx.MockTransport(handler),
    )

    found = await locator.current_location()

    assert found.location == GeoPoint(lat=40.7128, lng=-74.006)
    assert found.city == "New York"
    assert found.country == "United States"


@pytest.mark.anyio
async def test_ip_locator_failure_raises_geocoding_error() -> None:
    locator = IpApiLocator(
        url="https://ipapi.test/json/",
        config=CONFIG,
        transport=httpx.MockTransport(
            lambda request: httpx.Response(
                200, json={"error": True, "reason": "RateLimited"}
            )
        ),
    )

    with pytest.raises(GeocodingError, match="Unable to determine current location"):
        await locator.current_location()
