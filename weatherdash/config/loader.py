"""YAML config loader with environment overrides and runtime get/set."""

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.defaults import API_KEY_ENV
from weatherdash.config.schema import AppConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path yields defaults. If the file leaves ``provider.api_key``
    empty, the OPENWEATHER_API_KEY environment variable fills it.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file %s not found, using defaults", path)

    provider = raw.setdefault("provider", {}) or {}
    raw["provider"] = provider
    if not provider.get("api_key") and os.environ.get(API_KEY_ENV):
        provider["api_key"] = os.environ[API_KEY_ENV]

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    target[parts[-1]] = coerce_value(target[parts[-1]], value)
    return AppConfig(**data)


def coerce_value(old_value: Any, value: Any) -> Any:
    """Coerce a string from the command line to the type of the old value."""
    if not isinstance(value, str):
        return value
    if isinstance(old_value, bool):
        lowered = value.lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    if isinstance(old_value, int):
        return int(value)
    if isinstance(old_value, float):
        return float(value)
    return value
