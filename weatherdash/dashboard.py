"""Weather dashboard: FastAPI backend proxying OpenWeatherMap + session settings."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from weatherdash.config.schema import AppConfig, Location
from weatherdash.errors import (
    InvalidQuery,
    MalformedFeed,
    UpstreamAuthError,
    UpstreamRateLimited,
    UpstreamUnavailable,
    WeatherError,
)
from weatherdash.ingest.feed_parser import parse_geocoding
from weatherdash.ingest.openweather_client import OpenWeatherClient
from weatherdash.ingest.weather_fetcher import WeatherFetcher
from weatherdash.models.common import UnitSystem, utc_now_iso
from weatherdash.reporting.formatters import present_current
from weatherdash.session.session import WeatherSession
from weatherdash.session.store import SessionStore, SqliteSessionStore

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[WeatherError], int] = {
    InvalidQuery: 400,
    UpstreamAuthError: 502,
    UpstreamRateLimited: 429,
    UpstreamUnavailable: 503,
    MalformedFeed: 502,
}


def create_app(
    config: AppConfig,
    store: SessionStore | None = None,
    client: OpenWeatherClient | None = None,
) -> FastAPI:
    if store is None:
        store = SqliteSessionStore(config.storage.db_path)
    if client is None:
        client = OpenWeatherClient.from_config(config.provider)

    session = WeatherSession(store, defaults=config.defaults)
    fetcher = WeatherFetcher(client)

    app = FastAPI(title="Weather Dashboard", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.session = session
    app.state.fetcher = fetcher

    @app.exception_handler(WeatherError)
    async def weather_error_handler(request: Request, exc: WeatherError):
        status = ERROR_STATUS.get(type(exc), 500)
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status, content={"message": exc.message, "error": exc.kind}
        )

    # ── Provider proxy ──────────────────────────────────────────

    @app.get("/api/weather/locations")
    def search_locations(query: str | None = None):
        """Geocoding search by place name."""
        results = parse_geocoding(client.search_locations(query))
        return [_geocoding_dict(r) for r in results]

    @app.get("/api/weather/reverse-geocode")
    def reverse_geocode(lat: float | None = None, lon: float | None = None):
        _require_coordinates(lat, lon)
        results = parse_geocoding(client.reverse_geocode(lat, lon))
        return [_geocoding_dict(r) for r in results]

    @app.get("/api/weather/data")
    def weather_data(
        lat: float | None = None,
        lon: float | None = None,
        units: UnitSystem = UnitSystem.IMPERIAL,
    ):
        """OneCall-compatible current/hourly/daily payload."""
        _require_coordinates(lat, lon)
        return fetcher.fetch_onecall(lat, lon, units)

    @app.get("/api/weather/display")
    def weather_display():
        """Formatted strings for the saved location, rendered with saved settings."""
        if session.location is None:
            raise InvalidQuery("No location selected")
        bundle = fetcher.fetch_for_session(session)
        if bundle is None:
            return JSONResponse(
                status_code=409,
                content={"message": "Selection changed, refetch", "error": "superseded"},
            )
        view = present_current(bundle, session.settings)
        view["location"] = session.location.display_name
        return view

    # ── Session endpoints ───────────────────────────────────────

    @app.get("/api/settings")
    def get_settings():
        return session.settings.model_dump(mode="json")

    @app.post("/api/settings")
    def update_settings(update: dict[str, Any]):
        """Partial update; only provided fields are changed."""
        try:
            changed = session.update_settings(**update)
        except ValidationError as e:
            return JSONResponse(
                status_code=422,
                content={
                    "message": "Invalid settings",
                    "error": "invalid_settings",
                    "detail": [
                        {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                    ],
                },
            )
        return {
            "status": "updated" if changed else "no_change",
            "changed": changed,
            "settings": session.settings.model_dump(mode="json"),
        }

    @app.get("/api/location")
    def get_location():
        if session.location is None:
            return None
        return session.location.model_dump()

    @app.post("/api/location")
    def set_location(location: Location):
        session.set_location(location)
        return {"status": "updated", "location": location.model_dump()}

    @app.get("/api/health")
    def get_health():
        return {
            "status": "ok",
            "api_key_configured": bool(config.provider.api_key),
            "location_selected": session.location is not None,
            "timestamp": utc_now_iso(),
        }

    return app


def _require_coordinates(lat: float | None, lon: float | None) -> None:
    if lat is None or lon is None:
        raise InvalidQuery("Latitude and longitude are required")


def _geocoding_dict(r) -> dict[str, Any]:
    return {
        "name": r.name,
        "lat": r.lat,
        "lon": r.lon,
        "country": r.country,
        "state": r.state,
        "display_name": r.display_name,
    }


if __name__ == "__main__":
    import uvicorn

    from weatherdash.config.loader import load_config

    cfg = load_config()
    uvicorn.run(create_app(cfg), host=cfg.server.host, port=cfg.server.port)
