"""Tests for parsing provider JSON into typed samples."""

import pytest

from weatherdash.errors import MalformedFeed
from weatherdash.ingest.feed_parser import (
    parse_current,
    parse_forecast_feed,
    parse_forecast_sample,
    parse_geocoding,
)


class TestParseForecastFeed:
    def test_samples_and_offset(self, forecast_payload: dict):
        samples, offset = parse_forecast_feed(forecast_payload)
        assert len(samples) == 40
        assert offset == 0
        first = samples[0]
        assert first.temperature == 40.0
        assert first.wind_gust == 8.0
        assert first.uvi is None
        assert first.conditions[0].id == 800
        assert samples[4].rain_mm == 0.5

    def test_sorted_ascending(self, forecast_payload: dict):
        forecast_payload["list"].reverse()
        samples, _ = parse_forecast_feed(forecast_payload)
        timestamps = [s.timestamp for s in samples]
        assert timestamps == sorted(timestamps)

    def test_timezone_offset(self, forecast_payload: dict):
        forecast_payload["city"]["timezone"] = -18000
        _, offset = parse_forecast_feed(forecast_payload)
        assert offset == -18000

    @pytest.mark.parametrize("raw", [None, [], {}, {"list": []}, {"list": "nope"}])
    def test_empty_or_invalid(self, raw):
        with pytest.raises(MalformedFeed):
            parse_forecast_feed(raw)

    def test_missing_main(self):
        with pytest.raises(MalformedFeed):
            parse_forecast_sample({"dt": 1, "weather": []})


class TestParseCurrent:
    def test_fields(self, current_payload: dict):
        current = parse_current(current_payload)
        assert current.temperature == 44.6
        assert current.sunrise == 1770810000
        assert current.sunset == 1770848400
        assert current.uvi == 0.0
        assert current.wind_gust == 15.0
        assert current.conditions[0].id == 801

    def test_missing_sys(self, current_payload: dict):
        del current_payload["sys"]
        with pytest.raises(MalformedFeed):
            parse_current(current_payload)

    def test_not_an_object(self):
        with pytest.raises(MalformedFeed):
            parse_current("error")


class TestParseGeocoding:
    def test_display_names(self, geocoding_payload: list):
        results = parse_geocoding(geocoding_payload)
        assert results[0].display_name == "Portland, Oregon, US"
        assert results[2].display_name == "Portland, AU"

    def test_not_a_list(self):
        with pytest.raises(MalformedFeed):
            parse_geocoding({"cod": 401})
