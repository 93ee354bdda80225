"""OpenWeatherMap API client with upstream error mapping.

No retries: every failure is terminal for the request and surfaces as one of
the errors in weatherdash.errors.
"""

import logging
from typing import Any

import httpx

from weatherdash.config.defaults import MIN_QUERY_LENGTH
from weatherdash.config.schema import ProviderConfig
from weatherdash.errors import (
    InvalidQuery,
    MalformedFeed,
    UpstreamAuthError,
    UpstreamRateLimited,
    UpstreamUnavailable,
)
from weatherdash.models.common import UnitSystem

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"
OWM_GEO_URL = "https://api.openweathermap.org/geo/1.0"
DEFAULT_USER_AGENT = "weatherdash/0.1.0"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OWM_BASE_URL,
        geo_url: str = OWM_GEO_URL,
        timeout: float = 10.0,
        search_limit: int = 5,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.geo_url = geo_url.rstrip("/")
        self.timeout = timeout
        self.search_limit = search_limit
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, provider: ProviderConfig) -> "OpenWeatherClient":
        return cls(
            api_key=provider.api_key,
            base_url=provider.base_url,
            geo_url=provider.geo_url,
            timeout=provider.timeout_seconds,
            search_limit=provider.search_limit,
        )

    def search_locations(self, query: str | None) -> list[dict]:
        """Direct geocoding: up to ``search_limit`` places matching a name."""
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            raise InvalidQuery(
                f"Search text must be at least {MIN_QUERY_LENGTH} characters"
            )
        return self._get(
            f"{self.geo_url}/direct",
            {"q": query, "limit": self.search_limit},
            "search locations",
        )

    def reverse_geocode(self, lat: float, lon: float) -> list[dict]:
        return self._get(
            f"{self.geo_url}/reverse",
            {"lat": lat, "lon": lon, "limit": 1},
            "reverse geocode",
        )

    def get_current(
        self, lat: float, lon: float, units: UnitSystem | str = UnitSystem.IMPERIAL
    ) -> dict:
        return self._get(
            f"{self.base_url}/weather",
            {"lat": lat, "lon": lon, "units": str(units)},
            "fetch current weather",
        )

    def get_forecast(
        self, lat: float, lon: float, units: UnitSystem | str = UnitSystem.IMPERIAL
    ) -> dict:
        """5-day forecast in 3-hour steps."""
        return self._get(
            f"{self.base_url}/forecast",
            {"lat": lat, "lon": lon, "units": str(units)},
            "fetch forecast",
        )

    def _get(self, url: str, params: dict[str, Any], action: str) -> Any:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(
                url,
                params={**params, "appid": self.api_key},
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.warning("OpenWeatherMap request failed (%s): %s", action, e)
            raise UpstreamUnavailable(
                f"Failed to {action}: weather service unreachable"
            ) from e

        if resp.status_code in (401, 403):
            logger.warning("OpenWeatherMap rejected credentials (%s)", action)
            raise UpstreamAuthError(
                f"Failed to {action}: weather service rejected the API key"
            )
        if resp.status_code == 429:
            logger.warning("OpenWeatherMap rate limit hit (%s)", action)
            raise UpstreamRateLimited(
                f"Failed to {action}: weather service rate limit reached"
            )
        if resp.is_error:
            logger.warning(
                "OpenWeatherMap returned %d (%s)", resp.status_code, action
            )
            raise UpstreamUnavailable(
                f"Failed to {action}: weather service returned {resp.status_code}"
            )

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedFeed(f"Failed to {action}: response was not JSON") from e
