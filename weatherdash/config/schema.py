"""Pydantic v2 configuration and session schema with strict validation."""

from pydantic import BaseModel, Field

from weatherdash.models.common import HourlyMode, PressureUnit, Theme, UnitSystem


class UnitPreferences(BaseModel):
    model_config = {"extra": "forbid"}

    temperature_unit: UnitSystem = UnitSystem.IMPERIAL
    wind_speed_unit: UnitSystem = UnitSystem.IMPERIAL
    pressure_unit: PressureUnit = PressureUnit.HPA
    distance_unit: UnitSystem = UnitSystem.IMPERIAL
    hourly_forecast_mode: HourlyMode = HourlyMode.TWELVE


class UserSettings(UnitPreferences):
    theme: Theme = Theme.LIGHT
    weather_animation: bool = True
    severe_weather_alerts: bool = True
    daily_forecast_alerts: bool = False
    precipitation_alerts: bool = True

    @property
    def units(self) -> UnitPreferences:
        return UnitPreferences(
            **self.model_dump(include=set(UnitPreferences.model_fields))
        )


class Location(BaseModel):
    model_config = {"extra": "forbid"}

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    display_name: str = ""


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = "https://api.openweathermap.org/data/2.5"
    geo_url: str = "https://api.openweathermap.org/geo/1.0"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    search_limit: int = Field(default=5, ge=1, le=5)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherdash.db"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    server: ServerConfig = ServerConfig()
    storage: StorageConfig = StorageConfig()
    defaults: UserSettings = UserSettings()
