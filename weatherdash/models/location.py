"""Geocoding results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeocodingResult:
    name: str
    lat: float
    lon: float
    country: str
    state: str | None = None

    @property
    def display_name(self) -> str:
        if self.state:
            return f"{self.name}, {self.state}, {self.country}"
        return f"{self.name}, {self.country}"
