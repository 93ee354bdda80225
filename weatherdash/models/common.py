"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class PressureUnit(StrEnum):
    HPA = "hPa"
    INHG = "inHg"


class HourlyMode(StrEnum):
    TWELVE = "12h"
    TWENTY_FOUR = "24h"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
