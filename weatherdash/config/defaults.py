"""Defaults applied on first run and when the config file leaves them out."""

from weatherdash.config.schema import UserSettings

API_KEY_ENV = "OPENWEATHER_API_KEY"

DEFAULT_SETTINGS = UserSettings()

# Minimum characters before a location search is sent upstream.
MIN_QUERY_LENGTH = 3
