"""Serialize a ForecastBundle to the OneCall-compatible response shape.

This is the stable public contract of ``/api/weather/data``, whichever
upstream endpoints fed the bundle.
"""

from typing import Any

from weatherdash.models.weather import (
    CurrentConditions,
    DailyAggregate,
    ForecastBundle,
    HourlySlice,
    WeatherCondition,
)


def to_onecall(bundle: ForecastBundle) -> dict[str, Any]:
    return {
        "lat": bundle.lat,
        "lon": bundle.lon,
        "timezone": timezone_label(bundle.utc_offset_seconds),
        "timezone_offset": bundle.utc_offset_seconds,
        "current": current_to_dict(bundle.current),
        "hourly": [hourly_to_dict(h) for h in bundle.hourly],
        "daily": [daily_to_dict(d) for d in bundle.daily],
    }


def timezone_label(utc_offset_seconds: int) -> str:
    sign = "+" if utc_offset_seconds >= 0 else "-"
    hours, rem = divmod(abs(utc_offset_seconds), 3600)
    return f"UTC{sign}{hours:02d}:{rem // 60:02d}"


def condition_to_dict(c: WeatherCondition) -> dict[str, Any]:
    return {"id": c.id, "main": c.main, "description": c.description, "icon": c.icon}


def current_to_dict(c: CurrentConditions) -> dict[str, Any]:
    data: dict[str, Any] = {
        "dt": c.timestamp,
        "sunrise": c.sunrise,
        "sunset": c.sunset,
        "temp": c.temperature,
        "feels_like": c.feels_like,
        "pressure": c.pressure,
        "humidity": c.humidity,
        "uvi": c.uvi,
        "clouds": c.cloud_cover_pct,
        "visibility": c.visibility_m,
        "wind_speed": c.wind_speed,
        "wind_deg": c.wind_deg,
        "weather": [condition_to_dict(w) for w in c.conditions],
    }
    if c.wind_gust is not None:
        data["wind_gust"] = c.wind_gust
    if c.rain_mm:
        data["rain"] = {"1h": c.rain_mm}
    if c.snow_mm:
        data["snow"] = {"1h": c.snow_mm}
    return data


def hourly_to_dict(h: HourlySlice) -> dict[str, Any]:
    data: dict[str, Any] = {
        "dt": h.timestamp,
        "temp": h.temperature,
        "feels_like": h.feels_like,
        "pressure": h.pressure,
        "humidity": h.humidity,
        "uvi": h.uvi,
        "clouds": h.cloud_cover_pct,
        "visibility": h.visibility_m,
        "wind_speed": h.wind_speed,
        "wind_deg": h.wind_deg,
        "weather": [condition_to_dict(w) for w in h.conditions],
        "pop": h.precipitation_probability,
    }
    if h.wind_gust is not None:
        data["wind_gust"] = h.wind_gust
    if h.rain_mm:
        data["rain"] = {"3h": h.rain_mm}
    if h.snow_mm:
        data["snow"] = {"3h": h.snow_mm}
    return data


def daily_to_dict(d: DailyAggregate) -> dict[str, Any]:
    weather = []
    if d.representative_condition is not None:
        weather.append(condition_to_dict(d.representative_condition))
    data: dict[str, Any] = {
        "dt": d.timestamp,
        "date": d.date,
        "sunrise": d.sunrise,
        "sunset": d.sunset,
        "temp": {
            "day": d.temp.day,
            "min": d.temp_min,
            "max": d.temp_max,
            "night": d.temp.night,
            "eve": d.temp.evening,
            "morn": d.temp.morning,
        },
        "feels_like": {
            "day": d.feels_like.day,
            "night": d.feels_like.night,
            "eve": d.feels_like.evening,
            "morn": d.feels_like.morning,
        },
        "pressure": d.pressure,
        "humidity": d.humidity,
        "wind_speed": d.wind_speed,
        "wind_deg": d.wind_deg,
        "weather": weather,
        "clouds": d.clouds,
        "pop": d.pop,
        "uvi": d.uvi,
    }
    if d.rain:
        data["rain"] = d.rain
    if d.snow:
        data["snow"] = d.snow
    return data
