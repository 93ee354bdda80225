"""Tests for session persistence backends."""

from pathlib import Path

from weatherdash.config.schema import Location, UserSettings
from weatherdash.session.session import WeatherSession
from weatherdash.session.store import MemorySessionStore, SessionState, SqliteSessionStore


class TestMemorySessionStore:
    def test_empty(self):
        assert MemorySessionStore().load() is None

    def test_copies_on_save(self):
        store = MemorySessionStore()
        state = SessionState()
        store.save(state)
        assert store.load() == state
        assert store.load() is not state


class TestSqliteSessionStore:
    def test_empty_db(self, tmp_path: Path):
        assert SqliteSessionStore(tmp_path / "s.db").load() is None

    def test_round_trip(self, tmp_path: Path):
        store = SqliteSessionStore(tmp_path / "s.db")
        state = SessionState(
            settings=UserSettings(temperature_unit="metric", hourly_forecast_mode="24h"),
            location=Location(lat=51.5, lon=-0.12, display_name="London, GB"),
        )
        store.save(state)
        assert store.load() == state

    def test_settings_without_location(self, tmp_path: Path):
        store = SqliteSessionStore(tmp_path / "s.db")
        store.save(SessionState(settings=UserSettings(theme="auto")))
        loaded = store.load()
        assert loaded.settings.theme == "auto"
        assert loaded.location is None

    def test_survives_restart(self, tmp_path: Path):
        db = tmp_path / "nested" / "s.db"
        first = WeatherSession(SqliteSessionStore(db))
        first.update_settings(pressure_unit="inHg")
        first.set_location(Location(lat=1.5, lon=2.5, display_name="Somewhere"))

        second = WeatherSession(SqliteSessionStore(db))
        assert second.settings.pressure_unit == "inHg"
        assert second.location.display_name == "Somewhere"
