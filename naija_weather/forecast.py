import logging
import math
from typing import Any

import httpx

from naija_weather import config
from naija_weather.conditions import label_for
from naija_weather.errors import ProviderDataMissing, ProviderFetchFailed
from naija_weather.geocoding import resolve
from naija_weather.http_client import PROVIDER_ERRORS, borrow_client
from naija_weather.models import Coordinates, ForecastMode, ForecastPoint, NormalizedForecast

logger = logging.getLogger(__name__)

HOURLY_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relativehumidity_2m",
    "windspeed_10m",
    "windgusts_10m",
    "weathercode",
    "precipitation_probability",
    "uv_index",
)
DAILY_FIELDS = (
    "weathercode",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
)
HOURLY_POINTS = 24
DAILY_POINTS = 7


def _round(value: float) -> int:
    # Halves round up (29.5 -> 30, -0.5 -> 0), unlike Python's round().
    return math.floor(value + 0.5)


def _round_optional(value: float | None) -> int | None:
    return None if value is None else _round(value)


def _optional(block: dict, field: str, index: int | None = None) -> Any:
    try:
        value = block[field]
        return value if index is None else value[index]
    except (KeyError, IndexError, TypeError):
        return None


def _required(block: dict, field: str, location: str, index: int | None = None) -> Any:
    value = _optional(block, field, index)
    if value is None:
        where = field if index is None else f"{field}[{index}]"
        raise ProviderDataMissing(f"Provider returned no value for {where}", location)
    return value


def _request_params(coords: Coordinates, mode: ForecastMode) -> dict:
    params = {
        "latitude": coords.latitude,
        "longitude": coords.longitude,
        "timezone": "auto",
    }
    if mode is ForecastMode.current:
        params["current_weather"] = "true"
        params["hourly"] = ",".join(HOURLY_FIELDS)
    elif mode is ForecastMode.hourly:
        params["hourly"] = ",".join(HOURLY_FIELDS)
        params["forecast_hours"] = HOURLY_POINTS
    else:
        params["daily"] = ",".join(DAILY_FIELDS)
        params["forecast_days"] = DAILY_POINTS
    return params


def _shape_current(data: dict, name: str) -> NormalizedForecast:
    current = data.get("current_weather")
    hourly = data.get("hourly")
    if not current or not hourly:
        raise ProviderDataMissing("No current weather data available", name)

    # Feels-like, humidity, gusts, rain chance and UV only exist in the hourly
    # block; its first entry stands in for "now".
    return NormalizedForecast(
        location=name,
        temperature=_round(_required(current, "temperature", name)),
        feels_like=_round(_required(hourly, "apparent_temperature", name, 0)),
        humidity=_round(_required(hourly, "relativehumidity_2m", name, 0)),
        wind_speed=_round(_required(current, "windspeed", name)),
        wind_gust=_round(_required(hourly, "windgusts_10m", name, 0)),
        conditions=label_for(_optional(current, "weathercode")),
        precipitation_probability=_round_optional(_optional(hourly, "precipitation_probability", 0)),
        uv_index=_round_optional(_optional(hourly, "uv_index", 0)),
    )


def _mirror_first(name: str, points: list[ForecastPoint]) -> NormalizedForecast:
    first = points[0]
    # humidity and wind are not part of the hourly/daily shapes and stay 0
    return NormalizedForecast(
        location=name,
        temperature=first.temperature,
        feels_like=first.temperature,
        humidity=0,
        wind_speed=0,
        wind_gust=0,
        conditions=first.conditions,
        forecast=points,
    )


def _shape_hourly(data: dict, name: str) -> NormalizedForecast:
    hourly = data.get("hourly")
    if not hourly or not hourly.get("time"):
        raise ProviderDataMissing("No hourly forecast data available", name)

    points = [
        ForecastPoint(
            time=time,
            temperature=_round(_required(hourly, "temperature_2m", name, index)),
            conditions=label_for(_optional(hourly, "weathercode", index)),
            precipitation_probability=_round_optional(
                _optional(hourly, "precipitation_probability", index)
            ),
            uv_index=_round_optional(_optional(hourly, "uv_index", index)),
        )
        for index, time in enumerate(hourly["time"])
    ]
    return _mirror_first(name, points)


def _shape_daily(data: dict, name: str) -> NormalizedForecast:
    daily = data.get("daily")
    if not daily or not daily.get("time"):
        raise ProviderDataMissing("No daily forecast data available", name)

    points = []
    for index, time in enumerate(daily["time"]):
        high = _required(daily, "temperature_2m_max", name, index)
        low = _required(daily, "temperature_2m_min", name, index)
        points.append(
            ForecastPoint(
                time=time,
                temperature=_round((high + low) / 2),
                conditions=label_for(_optional(daily, "weathercode", index)),
                precipitation_probability=_round_optional(
                    _optional(daily, "precipitation_probability_max", index)
                ),
            )
        )
    return _mirror_first(name, points)


_SHAPERS = {
    ForecastMode.current: _shape_current,
    ForecastMode.hourly: _shape_hourly,
    ForecastMode.daily: _shape_daily,
}


async def _fetch(
    client: httpx.AsyncClient, coords: Coordinates, mode: ForecastMode, subject: str
) -> NormalizedForecast:
    """Fetch and shape one forecast; provider failures are raised as ProviderFetchFailed naming ``subject``."""
    try:
        response = await client.get(config.FORECAST_URL, params=_request_params(coords, mode))
        response.raise_for_status()
        return _SHAPERS[mode](response.json(), coords.canonical_name)
    except PROVIDER_ERRORS as exc:
        logger.error("Forecast fetch failed for %r (%s): %s", subject, mode.value, exc)
        raise ProviderFetchFailed(subject, exc) from exc


async def fetch(
    coords: Coordinates,
    mode: ForecastMode | str = ForecastMode.current,
    client: httpx.AsyncClient | None = None,
) -> NormalizedForecast:
    """Fetch and normalise the forecast for already-resolved coordinates."""
    mode = ForecastMode(mode)
    async with borrow_client(client) as http:
        return await _fetch(http, coords, mode, coords.canonical_name)


async def get_weather(
    location: str,
    mode: ForecastMode | str = ForecastMode.current,
    client: httpx.AsyncClient | None = None,
) -> NormalizedForecast:
    """Resolve ``location`` and return its normalised forecast for ``mode``.

    LocationNotFound and ProviderDataMissing are raised unchanged. Any other
    provider or network failure is raised as ProviderFetchFailed naming
    ``location``; no partially filled record is ever returned.
    """
    mode = ForecastMode(mode)
    logger.info("Weather request: location=%r mode=%s", location, mode.value)

    async with borrow_client(client) as http:
        coords = await resolve(location, http)
        return await _fetch(http, coords, mode, location)
