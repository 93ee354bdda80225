"""Provider weather samples and the aggregates derived from them."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WeatherCondition:
    id: int
    main: str
    description: str
    icon: str


@dataclass(frozen=True)
class RawForecastSample:
    """One 3-hour step of the provider forecast."""

    timestamp: int
    temperature: float
    feels_like: float
    pressure: float
    humidity: float
    cloud_cover_pct: float
    wind_speed: float
    wind_deg: float
    visibility_m: float
    precipitation_probability: float  # 0..1
    conditions: tuple[WeatherCondition, ...]
    wind_gust: float | None = None
    uvi: float | None = None
    rain_mm: float = 0.0  # 3h accumulation
    snow_mm: float = 0.0

    @property
    def primary_condition(self) -> WeatherCondition | None:
        return self.conditions[0] if self.conditions else None


@dataclass(frozen=True)
class CurrentConditions:
    timestamp: int
    temperature: float
    feels_like: float
    pressure: float
    humidity: float
    cloud_cover_pct: float
    wind_speed: float
    wind_deg: float
    visibility_m: float
    conditions: tuple[WeatherCondition, ...]
    sunrise: int
    sunset: int
    uvi: float = 0.0
    wind_gust: float | None = None
    rain_mm: float = 0.0  # 1h accumulation
    snow_mm: float = 0.0


@dataclass(frozen=True)
class DayPeriods:
    morning: float
    day: float
    evening: float
    night: float


@dataclass(frozen=True)
class HourlySlice:
    timestamp: int
    temperature: float
    feels_like: float
    pressure: float
    humidity: float
    cloud_cover_pct: float
    wind_speed: float
    wind_deg: float
    visibility_m: float
    precipitation_probability: float
    conditions: tuple[WeatherCondition, ...]
    uvi: float
    wind_gust: float | None = None
    rain_mm: float = 0.0
    snow_mm: float = 0.0


@dataclass(frozen=True)
class DailyAggregate:
    date: str  # YYYY-MM-DD, provider-local
    timestamp: int  # first sample of the day
    representative_condition: WeatherCondition | None
    temp_min: float
    temp_max: float
    temp_avg: float
    temp: DayPeriods
    feels_like: DayPeriods
    pop: float
    humidity: int
    pressure: int
    wind_speed: float
    wind_deg: float
    clouds: int
    sunrise: int
    sunset: int
    uvi: float = 0.0
    rain: float = 0.0
    snow: float = 0.0


@dataclass(frozen=True)
class ForecastBundle:
    current: CurrentConditions
    hourly: list[HourlySlice] = field(default_factory=list)
    daily: list[DailyAggregate] = field(default_factory=list)
    lat: float = 0.0
    lon: float = 0.0
    utc_offset_seconds: int = 0
