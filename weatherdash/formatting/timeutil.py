"""Timestamp helpers shared by the aggregator and the display layer."""

from datetime import UTC, date, datetime, timedelta, tzinfo

from weatherdash.models.common import HourlyMode


def local_date(timestamp: int, utc_offset_seconds: int = 0) -> date:
    """Calendar date of an epoch timestamp at a fixed provider UTC offset."""
    return datetime.fromtimestamp(timestamp + utc_offset_seconds, UTC).date()


def is_day(timestamp: int, sunrise: int, sunset: int) -> bool:
    """True strictly between sunrise and sunset."""
    return sunrise < timestamp < sunset


def relative_day_label(
    timestamp: int, now: datetime | None = None, tz: tzinfo | None = None
) -> str:
    """'Today', 'Tomorrow', or a 3-letter weekday.

    Compares calendar dates in ``tz`` (system local time when None), not
    elapsed seconds.
    """
    if now is None:
        now = datetime.now(tz)
    when = datetime.fromtimestamp(timestamp, tz)
    today = now.astimezone(tz).date() if now.tzinfo else now.date()
    if when.date() == today:
        return "Today"
    if when.date() == today + timedelta(days=1):
        return "Tomorrow"
    return when.strftime("%a")


def format_clock(
    timestamp: int, mode: HourlyMode | str = HourlyMode.TWELVE, tz: tzinfo | None = None
) -> str:
    when = datetime.fromtimestamp(timestamp, tz)
    if HourlyMode(mode) == HourlyMode.TWENTY_FOUR:
        return when.strftime("%H:%M")
    hour = when.hour % 12 or 12
    return f"{hour}:{when.minute:02d} {'AM' if when.hour < 12 else 'PM'}"


def format_long_date(timestamp: int, tz: tzinfo | None = None) -> str:
    when = datetime.fromtimestamp(timestamp, tz)
    return f"{when.strftime('%A')}, {when.day} {when.strftime('%b')}"


def hourly_window(hourly: list, mode: HourlyMode | str) -> list:
    """Slices shown for the hourly forecast mode: 12 or 24 entries."""
    count = 24 if HourlyMode(mode) == HourlyMode.TWENTY_FOUR else 12
    return hourly[:count]
