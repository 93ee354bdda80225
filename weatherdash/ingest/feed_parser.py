"""Parse OpenWeatherMap JSON into typed samples.

Any missing key or wrong type becomes MalformedFeed.
"""

from typing import Any

from weatherdash.errors import MalformedFeed
from weatherdash.models.location import GeocodingResult
from weatherdash.models.weather import (
    CurrentConditions,
    RawForecastSample,
    WeatherCondition,
)


def parse_condition(raw: dict) -> WeatherCondition:
    return WeatherCondition(
        id=int(raw["id"]),
        main=str(raw.get("main", "")),
        description=str(raw.get("description", "")),
        icon=str(raw.get("icon", "")),
    )


def parse_forecast_sample(raw: dict) -> RawForecastSample:
    try:
        main = raw["main"]
        wind = raw.get("wind") or {}
        gust = wind.get("gust")
        uvi = raw.get("uvi")
        return RawForecastSample(
            timestamp=int(raw["dt"]),
            temperature=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            pressure=main["pressure"],
            humidity=main["humidity"],
            cloud_cover_pct=(raw.get("clouds") or {}).get("all", 0),
            wind_speed=float(wind.get("speed", 0.0)),
            wind_deg=wind.get("deg", 0),
            visibility_m=raw.get("visibility", 0),
            precipitation_probability=float(raw.get("pop", 0.0)),
            conditions=tuple(parse_condition(w) for w in raw.get("weather", [])),
            wind_gust=float(gust) if gust is not None else None,
            uvi=float(uvi) if uvi is not None else None,
            rain_mm=float((raw.get("rain") or {}).get("3h", 0.0)),
            snow_mm=float((raw.get("snow") or {}).get("3h", 0.0)),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedFeed(f"Unparseable forecast sample: {e}") from e


def parse_forecast_feed(raw: Any) -> tuple[list[RawForecastSample], int]:
    """Return samples ascending by timestamp and the provider UTC offset."""
    if not isinstance(raw, dict):
        raise MalformedFeed("Forecast feed is not an object")
    items = raw.get("list")
    if not isinstance(items, list) or not items:
        raise MalformedFeed("Forecast feed contained no samples")
    samples = sorted(
        (parse_forecast_sample(item) for item in items), key=lambda s: s.timestamp
    )
    city = raw.get("city") or {}
    try:
        offset = int(city.get("timezone", 0))
    except (TypeError, ValueError, AttributeError) as e:
        raise MalformedFeed(f"Unparseable timezone offset: {e}") from e
    return samples, offset


def parse_current(raw: Any) -> CurrentConditions:
    try:
        main = raw["main"]
        sys_ = raw["sys"]
        wind = raw.get("wind") or {}
        gust = wind.get("gust")
        return CurrentConditions(
            timestamp=int(raw["dt"]),
            temperature=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            pressure=main["pressure"],
            humidity=main["humidity"],
            cloud_cover_pct=(raw.get("clouds") or {}).get("all", 0),
            wind_speed=float(wind.get("speed", 0.0)),
            wind_deg=wind.get("deg", 0),
            visibility_m=raw.get("visibility", 0),
            conditions=tuple(parse_condition(w) for w in raw.get("weather", [])),
            sunrise=int(sys_["sunrise"]),
            sunset=int(sys_["sunset"]),
            uvi=float(raw.get("uvi", 0.0)),
            wind_gust=float(gust) if gust is not None else None,
            rain_mm=float((raw.get("rain") or {}).get("1h", 0.0)),
            snow_mm=float((raw.get("snow") or {}).get("1h", 0.0)),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedFeed(f"Unparseable current conditions: {e}") from e


def parse_geocoding(raw: Any) -> list[GeocodingResult]:
    if not isinstance(raw, list):
        raise MalformedFeed("Geocoding response is not a list")
    try:
        return [
            GeocodingResult(
                name=str(item["name"]),
                lat=float(item["lat"]),
                lon=float(item["lon"]),
                country=str(item.get("country", "")),
                state=item.get("state"),
            )
            for item in raw
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedFeed(f"Unparseable geocoding result: {e}") from e
