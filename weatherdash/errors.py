"""Error taxonomy shared by the ingest layer, the core, and the surfaces."""


class WeatherError(Exception):
    """Base class. ``message`` is safe to show to the user."""

    kind = "weather_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedFeed(WeatherError):
    """Empty or unparseable provider payload."""

    kind = "malformed_feed"


class UpstreamAuthError(WeatherError):
    kind = "upstream_auth"


class UpstreamRateLimited(WeatherError):
    kind = "upstream_rate_limited"


class UpstreamUnavailable(WeatherError):
    """Network/connection failure or an unexpected upstream status."""

    kind = "upstream_unavailable"


class InvalidQuery(WeatherError):
    """Missing or too-short search text, or missing coordinates."""

    kind = "invalid_query"
