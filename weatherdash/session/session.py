"""User session: settings and location with explicit persistence.

A session is constructed per caller around an injected store. Changing the
location or any setting bumps the generation, so results fetched for the
previous parameters can be recognised as superseded.
"""

import logging
from dataclasses import dataclass
from typing import Any

from weatherdash.config.defaults import DEFAULT_SETTINGS
from weatherdash.config.schema import Location, UserSettings
from weatherdash.models.common import UnitSystem
from weatherdash.session.store import SessionState, SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchTicket:
    generation: int
    location: Location | None
    units: UnitSystem


class WeatherSession:
    def __init__(self, store: SessionStore, defaults: UserSettings | None = None):
        self.store = store
        state = store.load()
        if state is None:
            state = SessionState(settings=defaults or DEFAULT_SETTINGS)
            store.save(state)
        self._state = state
        self._generation = 0

    @property
    def settings(self) -> UserSettings:
        return self._state.settings

    @property
    def location(self) -> Location | None:
        return self._state.location

    @property
    def generation(self) -> int:
        return self._generation

    def update_settings(self, **changes: Any) -> list[str]:
        """Apply a partial update. Returns the names of fields that changed.

        Raises pydantic.ValidationError (and leaves the session untouched) on
        unknown fields or invalid values.
        """
        current = self._state.settings
        data = current.model_dump()
        data.update(changes)
        updated = UserSettings.model_validate(data)
        changed = [
            name
            for name in UserSettings.model_fields
            if getattr(updated, name) != getattr(current, name)
        ]
        if not changed:
            return []

        self._state = self._state.model_copy(update={"settings": updated})
        self.store.save(self._state)
        self._generation += 1
        logger.info("Settings updated: %s", ", ".join(changed))
        return changed

    def set_location(self, location: Location) -> None:
        """Replace the location. Data for the previous location is discarded."""
        self._state = self._state.model_copy(update={"location": location})
        self.store.save(self._state)
        self._generation += 1
        logger.info(
            "Location set to %s (%.4f, %.4f)",
            location.display_name or "unnamed", location.lat, location.lon,
        )

    def begin_fetch(self) -> FetchTicket:
        return FetchTicket(
            generation=self._generation,
            location=self.location,
            units=self.settings.temperature_unit,
        )

    def is_current(self, ticket: FetchTicket) -> bool:
        return ticket.generation == self._generation
