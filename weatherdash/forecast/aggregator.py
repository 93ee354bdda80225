"""Reshape a 3-hour forecast feed into hourly slices and daily aggregates.

Sunrise, sunset and UV only exist on the current-conditions sample, so every
daily entry reuses today's sunrise/sunset. This is a provider fidelity
limitation, kept as is.
"""

import logging
from collections.abc import Sequence
from itertools import groupby

from weatherdash.errors import MalformedFeed
from weatherdash.formatting.timeutil import local_date
from weatherdash.models.weather import (
    CurrentConditions,
    DailyAggregate,
    DayPeriods,
    ForecastBundle,
    HourlySlice,
    RawForecastSample,
)

logger = logging.getLogger(__name__)

HOURLY_ENTRIES = 24


def aggregate(
    current: CurrentConditions,
    forecast_samples: Sequence[RawForecastSample],
    *,
    utc_offset_seconds: int = 0,
    lat: float = 0.0,
    lon: float = 0.0,
) -> ForecastBundle:
    """Build the hourly and daily series from ascending forecast samples."""
    if not forecast_samples:
        raise MalformedFeed("Forecast feed contained no samples")

    hourly = [to_hourly(s) for s in forecast_samples[:HOURLY_ENTRIES]]

    daily: list[DailyAggregate] = []
    buckets = groupby(
        forecast_samples, key=lambda s: local_date(s.timestamp, utc_offset_seconds)
    )
    for index, (day, samples) in enumerate(buckets):
        daily.append(
            aggregate_day(
                day.isoformat(), list(samples), current, is_first_day=index == 0
            )
        )

    logger.debug(
        "Aggregated %d samples into %d hourly and %d daily entries",
        len(forecast_samples), len(hourly), len(daily),
    )
    return ForecastBundle(
        current=current,
        hourly=hourly,
        daily=daily,
        lat=lat,
        lon=lon,
        utc_offset_seconds=utc_offset_seconds,
    )


def to_hourly(sample: RawForecastSample) -> HourlySlice:
    return HourlySlice(
        timestamp=sample.timestamp,
        temperature=sample.temperature,
        feels_like=sample.feels_like,
        pressure=sample.pressure,
        humidity=sample.humidity,
        cloud_cover_pct=sample.cloud_cover_pct,
        wind_speed=sample.wind_speed,
        wind_deg=sample.wind_deg,
        visibility_m=sample.visibility_m,
        precipitation_probability=sample.precipitation_probability,
        conditions=sample.conditions,
        uvi=sample.uvi if sample.uvi is not None else 0.0,
        wind_gust=sample.wind_gust,
        rain_mm=sample.rain_mm,
        snow_mm=sample.snow_mm,
    )


def aggregate_day(
    day: str,
    samples: list[RawForecastSample],
    current: CurrentConditions,
    is_first_day: bool = False,
) -> DailyAggregate:
    """Summarize one calendar day of samples.

    The representative condition is the middle sample's, favouring midday
    over a statistical mode.
    """
    if not samples:
        raise MalformedFeed(f"No samples for {day}")

    n = len(samples)
    middle = samples[n // 2]
    morning, evening, night = samples[0], samples[(3 * n) // 4], samples[-1]
    temps = [s.temperature for s in samples]
    temp_avg = sum(temps) / n

    if is_first_day:
        uvi = current.uvi
    else:
        uvi = max((s.uvi for s in samples if s.uvi is not None), default=0.0)

    return DailyAggregate(
        date=day,
        timestamp=samples[0].timestamp,
        representative_condition=middle.primary_condition,
        temp_min=min(temps),
        temp_max=max(temps),
        temp_avg=temp_avg,
        temp=DayPeriods(
            morning=morning.temperature,
            day=temp_avg,
            evening=evening.temperature,
            night=night.temperature,
        ),
        feels_like=DayPeriods(
            morning=morning.feels_like,
            day=middle.feels_like,
            evening=evening.feels_like,
            night=night.feels_like,
        ),
        pop=max(s.precipitation_probability for s in samples),
        humidity=round(_mean(s.humidity for s in samples)),
        pressure=round(_mean(s.pressure for s in samples)),
        wind_speed=round(_mean(s.wind_speed for s in samples), 2),
        wind_deg=middle.wind_deg,
        clouds=round(_mean(s.cloud_cover_pct for s in samples)),
        sunrise=current.sunrise,
        sunset=current.sunset,
        uvi=uvi,
        rain=round(sum(s.rain_mm for s in samples), 2),
        snow=round(sum(s.snow_mm for s in samples), 2),
    )


def _mean(values) -> float:
    items = list(values)
    return sum(items) / len(items)
