"""CLI entry point for the weather dashboard."""

import argparse
import json
import logging

from pydantic import ValidationError

from weatherdash.config.loader import coerce_value, load_config
from weatherdash.config.schema import AppConfig, Location
from weatherdash.errors import WeatherError
from weatherdash.ingest.feed_parser import parse_geocoding
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.ingest.weather_fetcher import WeatherFetcher
from weatherdash.reporting.formatters import format_forecast_json, format_forecast_text
from weatherdash.session.session import WeatherSession
from weatherdash.session.store import SqliteSessionStore

DEFAULT_CONFIG = "configs/default.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Weather dashboard backed by OpenWeatherMap",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite session DB path")

    sub = parser.add_subparsers(dest="command")

    # search / locate
    search_p = sub.add_parser("search", help="Search locations by name")
    search_p.add_argument("query")
    locate_p = sub.add_parser("locate", help="Reverse geocode and save a location")
    locate_p.add_argument("lat", type=float)
    locate_p.add_argument("lon", type=float)

    # forecast
    forecast_p = sub.add_parser("forecast", help="Show the forecast")
    forecast_p.add_argument("--lat", type=float)
    forecast_p.add_argument("--lon", type=float)
    forecast_p.add_argument("--json", action="store_true", help="Print JSON")

    # settings show / settings set
    settings_p = sub.add_parser("settings", help="Settings operations")
    settings_sub = settings_p.add_subparsers(dest="settings_command")
    settings_sub.add_parser("show", help="Display current settings")
    set_p = settings_sub.add_parser("set", help="Set a setting")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard server")
    serve_p.add_argument("--host")
    serve_p.add_argument("--port", type=int)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )

    try:
        if args.command == "search":
            return _cmd_search(config, args)
        elif args.command == "locate":
            return _cmd_locate(config, args)
        elif args.command == "forecast":
            return _cmd_forecast(config, args)
        elif args.command == "settings":
            return _cmd_settings(config, args)
        elif args.command == "serve":
            return _cmd_serve(config, args)
    except WeatherError as e:
        print(f"Error: {e.message}")
        return 1

    parser.print_help()
    return 1


def _session(config: AppConfig) -> WeatherSession:
    return WeatherSession(
        SqliteSessionStore(config.storage.db_path), defaults=config.defaults
    )


def _cmd_search(config: AppConfig, args) -> int:
    client = OpenWeatherClient.from_config(config.provider)
    results = parse_geocoding(client.search_locations(args.query))
    if not results:
        print("No locations found")
        return 0
    for r in results:
        print(f"{r.display_name}  ({r.lat:.4f}, {r.lon:.4f})")
    return 0


def _cmd_locate(config: AppConfig, args) -> int:
    client = OpenWeatherClient.from_config(config.provider)
    results = parse_geocoding(client.reverse_geocode(args.lat, args.lon))
    name = results[0].display_name if results else ""
    session = _session(config)
    session.set_location(Location(lat=args.lat, lon=args.lon, display_name=name))
    print(f"Location: {name or 'unnamed'} ({args.lat:.4f}, {args.lon:.4f})")
    return 0


def _cmd_forecast(config: AppConfig, args) -> int:
    session = _session(config)
    fetcher = WeatherFetcher(OpenWeatherClient.from_config(config.provider))

    if args.lat is not None and args.lon is not None:
        bundle = fetcher.fetch(args.lat, args.lon, session.settings.temperature_unit)
        name = ""
    elif session.location is not None:
        bundle = fetcher.fetch_for_session(session)
        name = session.location.display_name
    else:
        print("No location selected. Use 'locate' or pass --lat/--lon.")
        return 1

    if bundle is None:
        print("Selection changed while fetching, try again")
        return 1
    if args.json:
        print(format_forecast_json(bundle, session.settings))
    else:
        print(format_forecast_text(bundle, session.settings, name))
    return 0


def _cmd_settings(config: AppConfig, args) -> int:
    session = _session(config)
    if args.settings_command == "show":
        print(json.dumps(session.settings.model_dump(mode="json"), indent=2))
        return 0
    elif args.settings_command == "set":
        if "=" not in args.keyvalue:
            print("Expected key=value")
            return 1
        key, value = args.keyvalue.split("=", 1)
        if key not in type(session.settings).model_fields:
            print(f"Unknown setting: {key}")
            return 1
        try:
            value = coerce_value(getattr(session.settings, key), value)
            changed = session.update_settings(**{key: value})
        except (ValueError, ValidationError) as e:
            print(f"Invalid value for {key}: {e}")
            return 1
        if changed:
            print(f"Set {key} = {getattr(session.settings, key)}")
        else:
            print(f"{key} unchanged")
        return 0
    else:
        print("Usage: settings [show|set key=value]")
        return 1


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from weatherdash.dashboard import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Serving dashboard on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port)
    return 0
