"""Weather fetcher: current + 5-day/3-hour feed, parsed and aggregated."""

import logging
from typing import Any

from weatherdash.forecast.aggregator import aggregate
from weatherdash.forecast.onecall import to_onecall
from weatherdash.ingest.feed_parser import parse_current, parse_forecast_feed
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.models.common import UnitSystem
from weatherdash.models.weather import ForecastBundle
from weatherdash.session.session import WeatherSession

logger = logging.getLogger(__name__)


class WeatherFetcher:
    """Fetches fresh data on every call; there is no cache."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    def fetch(
        self, lat: float, lon: float, units: UnitSystem | str = UnitSystem.IMPERIAL
    ) -> ForecastBundle:
        """Fetch and aggregate. Upstream errors propagate unchanged."""
        current = parse_current(self.client.get_current(lat, lon, units))
        samples, offset = parse_forecast_feed(self.client.get_forecast(lat, lon, units))
        return aggregate(
            current, samples, utc_offset_seconds=offset, lat=lat, lon=lon
        )

    def fetch_onecall(
        self, lat: float, lon: float, units: UnitSystem | str = UnitSystem.IMPERIAL
    ) -> dict[str, Any]:
        return to_onecall(self.fetch(lat, lon, units))

    def fetch_for_session(self, session: WeatherSession) -> ForecastBundle | None:
        """Fetch for the session's location and units.

        Returns None when there is no location, or when the location or
        settings changed while the fetch was in flight.
        """
        ticket = session.begin_fetch()
        if ticket.location is None:
            logger.info("No location selected, nothing to fetch")
            return None

        bundle = self.fetch(ticket.location.lat, ticket.location.lon, ticket.units)
        if not session.is_current(ticket):
            logger.info(
                "Discarding forecast for %s: superseded by a newer selection",
                ticket.location.display_name or "previous location",
            )
            return None
        return bundle
