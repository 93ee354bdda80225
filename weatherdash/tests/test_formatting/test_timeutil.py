"""Tests for shared timestamp helpers."""

from datetime import UTC, date, datetime, timedelta, timezone

from weatherdash.formatting.timeutil import (
    format_clock,
    format_long_date,
    hourly_window,
    is_day,
    local_date,
    relative_day_label,
)
from weatherdash.models.common import HourlyMode

# 2026-02-11T00:00:00Z, a Wednesday
BASE_TS = 1770768000


class TestIsDay:
    def test_sunrise_is_exclusive(self):
        assert is_day(sunrise=100, sunset=200, timestamp=100) is False

    def test_sunset_is_exclusive(self):
        assert is_day(sunrise=100, sunset=200, timestamp=200) is False

    def test_between(self):
        assert is_day(sunrise=100, sunset=200, timestamp=150) is True

    def test_before_sunrise(self):
        assert is_day(sunrise=100, sunset=200, timestamp=50) is False


class TestLocalDate:
    def test_utc(self):
        assert local_date(BASE_TS) == date(2026, 2, 11)

    def test_negative_offset_moves_to_previous_day(self):
        assert local_date(BASE_TS + 3600, -5 * 3600) == date(2026, 2, 10)

    def test_positive_offset(self):
        assert local_date(BASE_TS - 3600, 2 * 3600) == date(2026, 2, 11)


class TestRelativeDayLabel:
    now = datetime(2026, 2, 11, 23, 30, tzinfo=UTC)

    def test_today(self):
        assert relative_day_label(BASE_TS + 60, now=self.now, tz=UTC) == "Today"

    def test_tomorrow_by_calendar_not_elapsed(self):
        # 31 minutes after now, but already the next calendar day
        ts = BASE_TS + 24 * 3600 + 60
        assert relative_day_label(ts, now=self.now, tz=UTC) == "Tomorrow"

    def test_weekday(self):
        ts = BASE_TS + 2 * 24 * 3600
        assert relative_day_label(ts, now=self.now, tz=UTC) == "Fri"

    def test_uses_given_timezone(self):
        tz = timezone(timedelta(hours=-5))
        # 2026-02-11T02:00Z is still 2026-02-10 in UTC-5
        now = datetime(2026, 2, 10, 12, 0, tzinfo=tz)
        assert relative_day_label(BASE_TS + 2 * 3600, now=now, tz=tz) == "Today"


class TestFormatClock:
    def test_twelve_hour(self):
        assert format_clock(BASE_TS + 13 * 3600 + 5 * 60, HourlyMode.TWELVE, UTC) == "1:05 PM"

    def test_midnight_twelve_hour(self):
        assert format_clock(BASE_TS, "12h", UTC) == "12:00 AM"

    def test_twenty_four_hour(self):
        assert format_clock(BASE_TS + 13 * 3600 + 5 * 60, "24h", UTC) == "13:05"


class TestFormatLongDate:
    def test_format(self):
        assert format_long_date(BASE_TS, UTC) == "Wednesday, 11 Feb"


class TestHourlyWindow:
    def test_twelve(self):
        assert hourly_window(list(range(24)), "12h") == list(range(12))

    def test_twenty_four(self):
        assert hourly_window(list(range(24)), HourlyMode.TWENTY_FOUR) == list(range(24))

    def test_short_input(self):
        assert hourly_window([1, 2], "24h") == [1, 2]
