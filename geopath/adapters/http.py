from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

DEFAULT_USER_AGENT = "geopath/1.0"
DEFAULT_TIMEOUT_S = 10.0


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    return float(raw)


@dataclass(frozen=True, slots=True)
class HttpClientConfig:
    """Settings shared by every outbound provider call.

    Env vars:
      - GEOCODER_USER_AGENT: User-Agent header (Nominatim rejects anonymous clients)
      - GEOCODER_TIMEOUT_S: request timeout in seconds (default 10)
    """

    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float = DEFAULT_TIMEOUT_S

    @staticmethod
    def from_env() -> "HttpClientConfig":
        user_agent = (os.getenv("GEOCODER_USER_AGENT") or "").strip()
        return HttpClientConfig(
            user_agent=user_agent or DEFAULT_USER_AGENT,
            timeout_s=_env_float("GEOCODER_TIMEOUT_S", DEFAULT_TIMEOUT_S),
        )


def async_client(
    config: HttpClientConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    cfg = config or HttpClientConfig.from_env()
    return httpx.AsyncClient(
        timeout=cfg.timeout_s,
        headers={"User-Agent": cfg.user_agent},
        transport=transport,
    )
