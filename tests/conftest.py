import httpx
import pytest

from naija_weather.models import CityWeatherSummary, Coordinates

LAGOS = {"latitude": 6.45407, "longitude": 3.39467, "name": "Lagos", "country": "Nigeria"}
IBADAN = {"latitude": 7.37756, "longitude": 3.90591, "name": "Ibadan", "country": "Nigeria"}
ACCRA = {"latitude": 5.55602, "longitude": -0.1969, "name": "Accra", "country": "Ghana"}


def geocoding_response(*results: dict) -> httpx.Response:
    # Open-Meteo leaves the "results" key out entirely when nothing matches
    body = {"generationtime_ms": 0.42}
    if results:
        body["results"] = list(results)
    return httpx.Response(200, json=body)


def hourly_block(
    hours: int = 24,
    temperature: float = 29.4,
    apparent_temperature: float = 33.2,
    humidity: float = 78,
    gusts: float = 24.8,
    weathercode: int = 61,
    precipitation: int | None = 40,
    uv_index: float | None = 0.35,
) -> dict:
    return {
        "time": [f"2026-10-19T{hour % 24:02d}:00" for hour in range(hours)],
        "temperature_2m": [temperature + 0.1 * hour for hour in range(hours)],
        "apparent_temperature": [apparent_temperature] * hours,
        "relativehumidity_2m": [humidity] * hours,
        "windspeed_10m": [9.7] * hours,
        "windgusts_10m": [gusts] * hours,
        "weathercode": [weathercode] + [3] * (hours - 1),
        "precipitation_probability": [precipitation] * hours,
        "uv_index": [uv_index] * hours,
    }


def current_payload(
    temperature: float = 29.4,
    weathercode: int = 61,
    windspeed: float = 11.6,
    precipitation: int | None = 40,
    **hourly,
) -> dict:
    return {
        "latitude": 6.5,
        "longitude": 3.375,
        "timezone": "Africa/Lagos",
        "current_weather": {
            "temperature": temperature,
            "windspeed": windspeed,
            "winddirection": 220,
            "weathercode": weathercode,
            "is_day": 1,
            "time": "2026-10-19T14:00",
        },
        "hourly": hourly_block(precipitation=precipitation, **hourly),
    }


def hourly_payload(**hourly) -> dict:
    return {
        "latitude": 6.5,
        "longitude": 3.375,
        "timezone": "Africa/Lagos",
        "hourly": hourly_block(**hourly),
    }


def daily_payload(
    highs=(31.0, 32.4, 30.0, 29.6, 33.1, 31.9, 30.2),
    lows=(24.0, 23.8, 25.0, 23.1, 24.6, 22.9, 23.3),
    codes=(61, 63, 3, 2, 95, 80, 1),
    precipitation=(70, 85, 20, 10, 90, 65, 5),
) -> dict:
    return {
        "latitude": 6.5,
        "longitude": 3.375,
        "timezone": "Africa/Lagos",
        "daily": {
            "time": [f"2026-10-{19 + day}" for day in range(len(highs))],
            "weathercode": list(codes),
            "temperature_2m_max": list(highs),
            "temperature_2m_min": list(lows),
            "precipitation_probability_max": list(precipitation),
        },
    }


@pytest.fixture
def lagos_coords() -> Coordinates:
    return Coordinates(latitude=6.45407, longitude=3.39467, canonical_name="Lagos")


@pytest.fixture
def city():
    def make(name: str, temperature: int = 28, precipitation: int | None = 10) -> CityWeatherSummary:
        return CityWeatherSummary(
            city=name,
            temperature=temperature,
            conditions="Partly cloudy",
            precipitation_probability=precipitation,
        )

    return make
