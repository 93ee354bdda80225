"""Output formatters for forecasts rendered with a user's settings."""

import json
from datetime import datetime, timedelta, timezone
from typing import Any

from weatherdash.config.schema import UserSettings
from weatherdash.formatting.conditions import icon_color, weather_gradient, weather_icon
from weatherdash.formatting.timeutil import (
    format_clock,
    format_long_date,
    hourly_window,
    is_day,
    relative_day_label,
)
from weatherdash.formatting.units import (
    format_distance,
    format_pressure,
    format_temp,
    format_wind_speed,
    meters_to_miles,
    round_half_up,
    uv_description,
    wind_direction,
)
from weatherdash.models.weather import ForecastBundle


def provider_tz(bundle: ForecastBundle) -> timezone:
    return timezone(timedelta(seconds=bundle.utc_offset_seconds))


def present_current(
    bundle: ForecastBundle, settings: UserSettings, now: datetime | None = None
) -> dict[str, Any]:
    """Display strings for the current conditions, hourly strip and daily list."""
    tz = provider_tz(bundle)
    c = bundle.current
    daytime = is_day(c.timestamp, c.sunrise, c.sunset)
    code = c.conditions[0].id if c.conditions else 800
    today = bundle.daily[0] if bundle.daily else None

    hourly = []
    for index, h in enumerate(hourly_window(bundle.hourly, settings.hourly_forecast_mode)):
        h_code = h.conditions[0].id if h.conditions else 800
        h_day = is_day(h.timestamp, c.sunrise, c.sunset)
        hourly.append({
            "time": "Now" if index == 0 else format_clock(
                h.timestamp, settings.hourly_forecast_mode, tz
            ),
            "temp": format_temp(h.temperature, settings.temperature_unit),
            "icon": weather_icon(h_code, h_day),
            "pop": f"{round_half_up(h.precipitation_probability * 100)}%",
        })

    daily = []
    for d in bundle.daily:
        d_code = d.representative_condition.id if d.representative_condition else 800
        daily.append({
            "day": relative_day_label(d.timestamp, now=now, tz=tz),
            "min": format_temp(d.temp_min, settings.temperature_unit),
            "max": format_temp(d.temp_max, settings.temperature_unit),
            "icon": weather_icon(d_code, True),
            "icon_color": icon_color(d_code),
            "pop": f"{round_half_up(d.pop * 100)}%",
        })

    return {
        "date": format_long_date(c.timestamp, tz),
        "time": format_clock(c.timestamp, settings.hourly_forecast_mode, tz),
        "temp": format_temp(c.temperature, settings.temperature_unit),
        "feels_like": format_temp(c.feels_like, settings.temperature_unit),
        "high": format_temp(today.temp_max, settings.temperature_unit) if today else None,
        "low": format_temp(today.temp_min, settings.temperature_unit) if today else None,
        "description": c.conditions[0].description if c.conditions else "",
        "is_day": daytime,
        "icon": weather_icon(code, daytime),
        "gradient": weather_gradient(code, daytime),
        "humidity": f"{round_half_up(c.humidity)}%",
        "wind": (
            f"{format_wind_speed(c.wind_speed, settings.wind_speed_unit)} "
            f"{wind_direction(c.wind_deg)}"
        ),
        "pressure": format_pressure(c.pressure, settings.pressure_unit),
        "visibility": format_distance(
            meters_to_miles(c.visibility_m), settings.distance_unit
        ),
        "uv": f"{round_half_up(c.uvi)} ({uv_description(c.uvi)})",
        "sunrise": format_clock(c.sunrise, settings.hourly_forecast_mode, tz),
        "sunset": format_clock(c.sunset, settings.hourly_forecast_mode, tz),
        "hourly": hourly,
        "daily": daily,
    }


def format_forecast_text(
    bundle: ForecastBundle,
    settings: UserSettings,
    location_name: str = "",
    now: datetime | None = None,
) -> str:
    """Plain text forecast for the terminal."""
    view = present_current(bundle, settings, now=now)
    header = location_name or f"{bundle.lat:.4f}, {bundle.lon:.4f}"
    lines = [
        f"=== {header} | {view['date']} {view['time']} ===",
        f"{view['temp']} (feels like {view['feels_like']}) {view['description']}",
    ]
    if view["high"] is not None:
        lines.append(f"H: {view['high']}  L: {view['low']}")
    lines.append(
        f"Wind: {view['wind']} | Humidity: {view['humidity']} | "
        f"Pressure: {view['pressure']}"
    )
    lines.append(
        f"Visibility: {view['visibility']} | UV: {view['uv']} | "
        f"Sunrise {view['sunrise']} / Sunset {view['sunset']}"
    )
    lines.append("Hourly:")
    for h in view["hourly"]:
        lines.append(f"  {h['time']:>8}  {h['temp']:>6}  {h['pop']:>4}")
    lines.append("Daily:")
    for d in view["daily"]:
        lines.append(f"  {d['day']:<8}  {d['min']:>6} / {d['max']:<6}  {d['pop']:>4}")
    return "\n".join(lines)


def format_forecast_json(
    bundle: ForecastBundle, settings: UserSettings, now: datetime | None = None
) -> str:
    """JSON display view for programmatic consumption."""
    return json.dumps(present_current(bundle, settings, now=now), indent=2)
