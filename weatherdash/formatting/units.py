"""Unit conversion and display strings for raw weather fields.

Every function takes the unit preference explicitly. The provider already
returns temperature and wind speed in the requested unit system, so those
formatters only round and label.
"""

import math

from weatherdash.models.common import PressureUnit, UnitSystem

HPA_TO_INHG = 0.02953
MILES_TO_KM = 1.60934
METERS_PER_MILE = 1609

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

# (inclusive upper bound, label), first match wins
UV_BANDS = (
    (2, "Low"),
    (5, "Moderate"),
    (7, "High"),
    (10, "Very High"),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


def format_temp(value: float, unit: UnitSystem | str) -> str:
    symbol = "C" if UnitSystem(unit) == UnitSystem.METRIC else "F"
    return f"{round_half_up(value)}°{symbol}"


def format_wind_speed(value: float, unit: UnitSystem | str) -> str:
    label = "km/h" if UnitSystem(unit) == UnitSystem.METRIC else "mph"
    return f"{round_half_up(value)} {label}"


def pressure_to_inhg(hpa: float) -> float:
    return round(hpa * HPA_TO_INHG, 2)


def pressure_from_inhg(inhg: float) -> float:
    return inhg / HPA_TO_INHG


def format_pressure(hpa: float, unit: PressureUnit | str) -> str:
    if PressureUnit(unit) == PressureUnit.INHG:
        return f"{hpa * HPA_TO_INHG:.2f} inHg"
    return f"{hpa} hPa"


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE


def format_distance(miles: float, unit: UnitSystem | str) -> str:
    if UnitSystem(unit) == UnitSystem.METRIC:
        return f"{round_half_up(miles * MILES_TO_KM)} km"
    return f"{round_half_up(miles)} mi"


def wind_direction(degrees: float) -> str:
    """Nearest of the 16 compass points."""
    index = round_half_up((degrees % 360) / 22.5) % 16
    return COMPASS_POINTS[index]


def uv_description(uv_index: float) -> str:
    for upper, label in UV_BANDS:
        if uv_index <= upper:
            return label
    return "Extreme"
