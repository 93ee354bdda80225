"""Tests for config and settings schema validation."""

import pytest
from pydantic import ValidationError

from weatherdash.config.schema import (
    AppConfig,
    Location,
    ProviderConfig,
    UnitPreferences,
    UserSettings,
)
from weatherdash.models.common import HourlyMode, PressureUnit, Theme, UnitSystem


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.provider.api_key == ""
        assert config.server.port == 8777
        assert config.defaults.temperature_unit == UnitSystem.IMPERIAL

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ProviderConfig(api_key="k", bogus=True)

    def test_search_limit_bounds(self):
        with pytest.raises(ValidationError):
            ProviderConfig(search_limit=0)
        with pytest.raises(ValidationError):
            ProviderConfig(search_limit=6)


class TestUserSettings:
    def test_defaults(self):
        s = UserSettings()
        assert s.temperature_unit == UnitSystem.IMPERIAL
        assert s.wind_speed_unit == UnitSystem.IMPERIAL
        assert s.pressure_unit == PressureUnit.HPA
        assert s.distance_unit == UnitSystem.IMPERIAL
        assert s.hourly_forecast_mode == HourlyMode.TWELVE
        assert s.theme == Theme.LIGHT
        assert s.weather_animation is True
        assert s.daily_forecast_alerts is False

    def test_units_view(self):
        s = UserSettings(pressure_unit="inHg", theme="dark")
        assert s.units == UnitPreferences(pressure_unit="inHg")

    def test_invalid_unit(self):
        with pytest.raises(ValidationError):
            UserSettings(temperature_unit="kelvin")

    def test_extra_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            UserSettings(font="comic")


class TestLocation:
    def test_valid(self):
        loc = Location(lat=45.5, lon=-122.6, display_name="Portland, Oregon, US")
        assert loc.lat == 45.5

    @pytest.mark.parametrize("lat, lon", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(ValidationError):
            Location(lat=lat, lon=lon)
