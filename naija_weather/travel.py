"""
Travel advisory synthesis for a trip between two cities.

The advisory combines the current weather and the first hour of the hourly
forecast for the origin and the destination. Only hour 0 of each hourly
series feeds the rain signal; the actual travel window is not estimated.
"""

import asyncio
import logging
import re

import httpx

from naija_weather import config
from naija_weather.errors import ProviderFetchFailed
from naija_weather.forecast import get_weather
from naija_weather.http_client import borrow_client
from naija_weather.models import (
    CityWeatherSummary,
    ForecastMode,
    NormalizedForecast,
    TravelAdvisory,
)

logger = logging.getLogger(__name__)

CITY_RAIN_THRESHOLD = 50
WET_ROAD_THRESHOLD = 60
HEAT_TIP_THRESHOLD = 30
HOT_REMARK_THRESHOLD = 32
COOL_REMARK_THRESHOLD = 24

GENERAL_TIPS = (
    "Check your fuel level before you comot",
    "Make sure your phone battery full for navigation",
)
WET_ROAD_TIPS = (
    "Drive slower than usual - road go slippery",
    "Make sure your wipers dey work well",
    "Check your tires - rain no be friend to bald tires",
)
HEAT_TIPS = (
    "Carry extra water to avoid dehydration",
    "If you get AC, better use am for this heat",
)
LOW_VISIBILITY_TIPS = (
    "Make sure your headlights dey work properly",
    "Watch out for bad roads - e hard to see for night",
)
CLOSING_TIPS = (
    "No forget your driver license and papers - police dey wait 😂",
    "If traffic hold you, patient na virtue 🙏",
)

_DARK_WORDS = ("night", "evening")
_CLOCK_12H = re.compile(r"\b(\d{1,2})(?::\d{2})?\s*([ap])\.?\s*m\b", re.IGNORECASE)
_CLOCK_24H = re.compile(r"\b(\d{1,2}):\d{2}\b")


def _hour_zero_rain(hourly: NormalizedForecast) -> int | None:
    if not hourly.forecast:
        return None
    return hourly.forecast[0].precipitation_probability


def _clock_hour(hint: str) -> int | None:
    match = _CLOCK_12H.search(hint)
    if match:
        hour = int(match.group(1)) % 12
        return hour + 12 if match.group(2).lower() == "p" else hour
    match = _CLOCK_24H.search(hint)
    if match:
        return int(match.group(1))
    return None


def is_after_dark(departure_hint: str | None) -> bool:
    """True when the hint mentions night/evening or names a time between 18:00 and 06:00."""
    if not departure_hint:
        return False
    lowered = departure_hint.lower()
    if any(word in lowered for word in _DARK_WORDS):
        return True
    hour = _clock_hour(departure_hint)
    return hour is not None and (hour >= 18 or hour < 6)


def build_narrative(
    from_city: str,
    to_city: str,
    origin: CityWeatherSummary,
    destination: CityWeatherSummary,
    departure_hint: str | None = None,
) -> str:
    advice = f"If you dey go from {from_city} to {to_city}"
    if departure_hint:
        advice += f" around {departure_hint}"

    origin_wet = (origin.precipitation_probability or 0) > CITY_RAIN_THRESHOLD
    destination_wet = (destination.precipitation_probability or 0) > CITY_RAIN_THRESHOLD

    if origin_wet and destination_wet:
        advice += ", rain go show face for both cities ☔. Better carry umbrella and drive carefully oo!"
    elif origin_wet:
        advice += (
            f", rain go start for {from_city} before you reach {to_city} 🌧️. "
            "Check your wipers before you comot!"
        )
    elif destination_wet:
        advice += (
            f", weather dey okay for {from_city} but rain go welcome you for {to_city} ☔. "
            "Prepare for wet road!"
        )
    else:
        advice += ", the weather dey cooperate well well 🌤️. Good journey ahead!"

    mean_temperature = (origin.temperature + destination.temperature) / 2
    if mean_temperature > HOT_REMARK_THRESHOLD:
        advice += " E go hot small - better carry water for the road 💧."
    elif mean_temperature < COOL_REMARK_THRESHOLD:
        advice += " Weather dey cool - you go enjoy the journey 🌬️."

    return advice


def build_recommendations(
    origin: CityWeatherSummary,
    destination: CityWeatherSummary,
    departure_hint: str | None = None,
) -> list[str]:
    recommendations = list(GENERAL_TIPS)

    max_rain = max(
        origin.precipitation_probability or 0,
        destination.precipitation_probability or 0,
    )
    if max_rain > WET_ROAD_THRESHOLD:
        recommendations.extend(WET_ROAD_TIPS)

    if origin.temperature > HEAT_TIP_THRESHOLD or destination.temperature > HEAT_TIP_THRESHOLD:
        recommendations.extend(HEAT_TIPS)

    if is_after_dark(departure_hint):
        recommendations.extend(LOW_VISIBILITY_TIPS)

    recommendations.extend(CLOSING_TIPS)
    return recommendations


def _summarize_city(current: NormalizedForecast, hourly: NormalizedForecast) -> CityWeatherSummary:
    return CityWeatherSummary(
        city=current.location,
        temperature=current.temperature,
        conditions=current.conditions,
        precipitation_probability=_hour_zero_rain(hourly),
    )


async def _gather_weather(
    from_query: str, to_query: str, client: httpx.AsyncClient
) -> tuple[NormalizedForecast, NormalizedForecast, NormalizedForecast, NormalizedForecast]:
    try:
        async with asyncio.TaskGroup() as group:
            origin_current = group.create_task(get_weather(from_query, ForecastMode.current, client))
            destination_current = group.create_task(get_weather(to_query, ForecastMode.current, client))
            origin_hourly = group.create_task(get_weather(from_query, ForecastMode.hourly, client))
            destination_hourly = group.create_task(get_weather(to_query, ForecastMode.hourly, client))
    except ExceptionGroup as group_error:
        # Siblings are cancelled by the group; surface the first real failure.
        raise group_error.exceptions[0]

    return (
        origin_current.result(),
        destination_current.result(),
        origin_hourly.result(),
        destination_hourly.result(),
    )


async def advise(
    from_query: str,
    to_query: str,
    departure_hint: str | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = config.ADVISORY_TIMEOUT,
) -> TravelAdvisory:
    """Build a weather advisory for driving from ``from_query`` to ``to_query``.

    Current and hourly weather for both cities are fetched concurrently. The
    first failure cancels the remaining fetches and is raised unchanged; a
    ``timeout`` expiry is raised as ProviderFetchFailed.
    """
    logger.info(
        "Travel advisory request: from=%r to=%r departure=%r",
        from_query,
        to_query,
        departure_hint,
    )

    try:
        async with asyncio.timeout(timeout):
            async with borrow_client(client) as http:
                origin_now, destination_now, origin_hourly, destination_hourly = await _gather_weather(
                    from_query, to_query, http
                )
    except TimeoutError as exc:
        route = f"{from_query} -> {to_query}"
        logger.error("Travel advisory timed out after %ss for %s", timeout, route)
        raise ProviderFetchFailed(route, exc) from exc

    origin = _summarize_city(origin_now, origin_hourly)
    destination = _summarize_city(destination_now, destination_hourly)

    return TravelAdvisory(
        origin=origin,
        destination=destination,
        narrative=build_narrative(from_query, to_query, origin, destination, departure_hint),
        recommendations=build_recommendations(origin, destination, departure_hint),
    )
