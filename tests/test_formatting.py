import pytest

from naija_weather.formatting import condition_emoji, summarize
from naija_weather.models import NormalizedForecast


def _forecast(**overrides) -> NormalizedForecast:
    fields = {
        "location": "Abuja",
        "temperature": 31,
        "feels_like": 31,
        "humidity": 40,
        "wind_speed": 8,
        "wind_gust": 15,
        "conditions": "Clear sky",
    }
    fields.update(overrides)
    return NormalizedForecast(**fields)


@pytest.mark.parametrize(
    "conditions, emoji",
    [
        ("Thunderstorm with slight hail", "⛈️"),
        ("Heavy snow fall", "❄️"),
        ("Slight rain showers", "🌧️"),
        ("Dense drizzle", "🌧️"),
        ("Depositing rime fog", "🌫️"),
        ("Overcast", "☁️"),
        ("Partly cloudy", "☁️"),
        ("Mainly clear", "☀️"),
        ("Unknown", "🌤️"),
    ],
)
def test_condition_emoji(conditions, emoji):
    assert condition_emoji(conditions) == emoji


def test_summary_plain():
    assert summarize(_forecast()) == "For Abuja: Clear sky ☀️, 31°C 🌡️"


def test_summary_with_feels_like_and_rain_chance():
    forecast = _forecast(
        location="Lagos",
        temperature=29,
        feels_like=34,
        conditions="Slight rain",
        precipitation_probability=70,
    )

    assert summarize(forecast) == (
        "For Lagos: Slight rain 🌧️, 29°C 🌡️, feels like 34°C, 70% chance of rain ☔"
    )


def test_summary_zero_rain_chance_is_still_reported():
    assert summarize(_forecast(precipitation_probability=0)).endswith(", 0% chance of rain ☔")
