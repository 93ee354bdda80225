"""Persistence port for session state, with SQLite and in-memory backends."""

import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from weatherdash.config.schema import Location, UserSettings
from weatherdash.storage.database import connect, run_migrations
from weatherdash.storage.session_repo import get_session_value, set_session_value

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
LOCATION_KEY = "location"


class SessionState(BaseModel):
    model_config = {"extra": "forbid"}

    settings: UserSettings = UserSettings()
    location: Location | None = None


class SessionStore(Protocol):
    def load(self) -> SessionState | None: ...

    def save(self, state: SessionState) -> None: ...


class MemorySessionStore:
    def __init__(self, state: SessionState | None = None):
        self._state = state

    def load(self) -> SessionState | None:
        if self._state is None:
            return None
        return self._state.model_copy(deep=True)

    def save(self, state: SessionState) -> None:
        self._state = state.model_copy(deep=True)


class SqliteSessionStore:
    """Stores settings and location as JSON rows in session_state."""

    def __init__(self, db_path: str | Path):
        self.db_path = db_path
        conn = connect(db_path)
        try:
            run_migrations(conn)
        finally:
            conn.close()

    def load(self) -> SessionState | None:
        conn = connect(self.db_path)
        try:
            settings_json = get_session_value(conn, SETTINGS_KEY)
            location_json = get_session_value(conn, LOCATION_KEY)
        finally:
            conn.close()

        if settings_json is None and location_json is None:
            return None
        return SessionState(
            settings=(
                UserSettings.model_validate_json(settings_json)
                if settings_json
                else UserSettings()
            ),
            location=(
                Location.model_validate_json(location_json)
                if location_json
                else None
            ),
        )

    def save(self, state: SessionState) -> None:
        conn = connect(self.db_path)
        try:
            set_session_value(conn, SETTINGS_KEY, state.settings.model_dump_json())
            if state.location is not None:
                set_session_value(conn, LOCATION_KEY, state.location.model_dump_json())
        finally:
            conn.close()
        logger.debug("Saved session state to %s", self.db_path)
