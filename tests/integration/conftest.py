from __future__ import annotations

import os

import httpx
import pytest

from geopath.adapters.geocoding.nominatim_geocoder import DEFAULT_NOMINATIM_BASE_URL


def _nominatim_healthy(base_url: str) -> bool:
    url = base_url.rstrip("/") + "/status"
    try:
        resp = httpx.get(url, params={"format": "json"}, timeout=3.0)
        return 200 <= resp.status_code < 300
    except httpx.HTTPError:
        return False


@pytest.fixture(scope="session", autouse=True)
def geocoder_env() -> None:
    """Identify the test run to the public provider, as its usage policy asks."""

    os.environ.setdefault("GEOCODER_USER_AGENT", "geopath-integration-tests/1.0")
    os.environ.setdefault("GEOCODER_TIMEOUT_S", "10")


@pytest.fixture(scope="session")
def require_nominatim(geocoder_env: None) -> str:
    base_url = os.environ.get("NOMINATIM_BASE_URL", DEFAULT_NOMINATIM_BASE_URL)
    if not os.getenv("GEOPATH_LIVE_TESTS"):
        pytest.skip("Set GEOPATH_LIVE_TESTS=1 to run tests against live providers")

    if not _nominatim_healthy(base_url):
        msg = f"Nominatim not reachable at {base_url}"

        # A CI job that opts into live tests expects the provider to be up.
        if os.getenv("CI") or os.getenv("GITHUB_ACTIONS"):
            pytest.fail(msg, pytrace=False)

        pytest.skip(f"{msg}; skipping integration tests")
    return base_url
