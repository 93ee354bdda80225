"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import AppConfig
from weatherdash.models.weather import (
    CurrentConditions,
    RawForecastSample,
    WeatherCondition,
)
from weatherdash.session.store import MemorySessionStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# 2026-02-11T00:00:00Z, a Wednesday
BASE_TS = 1770768000
STEP = 3 * 3600

CLEAR = WeatherCondition(id=800, main="Clear", description="clear sky", icon="01d")
RAIN = WeatherCondition(id=500, main="Rain", description="light rain", icon="10d")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def current_payload() -> dict:
    with open(FIXTURE_DIR / "owm_current.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_payload() -> list:
    with open(FIXTURE_DIR / "owm_geocoding.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload() -> dict:
    """A 5-day, 40-sample 3-hour feed starting at BASE_TS, UTC offset 0."""
    items = []
    for i in range(40):
        items.append({
            "dt": BASE_TS + i * STEP,
            "main": {
                "temp": 40.0 + (i % 8),
                "feels_like": 35.0 + (i % 8),
                "pressure": 1010 + (i % 4),
                "humidity": 60 + (i % 8),
            },
            "weather": [
                {"id": 500 if i % 8 == 4 else 800, "main": "x", "description": "x", "icon": "01d"}
            ],
            "clouds": {"all": 20},
            "wind": {"speed": 5.0, "deg": 180, "gust": 8.0},
            "visibility": 10000,
            "pop": round((i % 8) / 10, 1),
            "rain": {"3h": 0.5} if i % 8 == 4 else None,
        })
    for item in items:
        if item["rain"] is None:
            del item["rain"]
    return {
        "cod": "200",
        "cnt": 40,
        "list": items,
        "city": {"name": "Testville", "timezone": 0, "sunrise": 0, "sunset": 0},
    }


@pytest.fixture
def make_sample() -> Callable[..., RawForecastSample]:
    def _make(
        timestamp: int,
        temperature: float = 50.0,
        condition: WeatherCondition = CLEAR,
        **overrides,
    ) -> RawForecastSample:
        fields = {
            "timestamp": timestamp,
            "temperature": temperature,
            "feels_like": temperature - 2,
            "pressure": 1013,
            "humidity": 50,
            "cloud_cover_pct": 10,
            "wind_speed": 4.0,
            "wind_deg": 90,
            "visibility_m": 10000,
            "precipitation_probability": 0.0,
            "conditions": (condition,),
        }
        fields.update(overrides)
        return RawForecastSample(**fields)

    return _make


@pytest.fixture
def current() -> CurrentConditions:
    return CurrentConditions(
        timestamp=BASE_TS + 12 * 3600,
        temperature=44.6,
        feels_like=40.2,
        pressure=1012,
        humidity=65,
        cloud_cover_pct=20,
        wind_speed=9.4,
        wind_deg=200,
        visibility_m=16090,
        conditions=(CLEAR,),
        sunrise=BASE_TS + 6 * 3600,
        sunset=BASE_TS + 18 * 3600,
        uvi=3.0,
    )


@pytest.fixture
def memory_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        provider={"api_key": "test-key", "base_url": "https://owm.test/data/2.5",
                  "geo_url": "https://owm.test/geo/1.0"},
        storage={"db_path": str(tmp_path / "session.db")},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key"},
        "server": {"port": 9000},
        "defaults": {"temperature_unit": "metric"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
