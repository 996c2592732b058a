from naija_weather.models import NormalizedForecast

# First keyword found in the lowercased condition label wins.
_CONDITION_EMOJI = (
    ("thunderstorm", "⛈️"),
    ("snow", "❄️"),
    ("rain", "🌧️"),
    ("drizzle", "🌧️"),
    ("fog", "🌫️"),
    ("overcast", "☁️"),
    ("cloudy", "☁️"),
    ("clear", "☀️"),
)
_DEFAULT_EMOJI = "🌤️"


def condition_emoji(conditions: str) -> str:
    lowered = conditions.lower()
    for keyword, emoji in _CONDITION_EMOJI:
        if keyword in lowered:
            return emoji
    return _DEFAULT_EMOJI


def summarize(forecast: NormalizedForecast) -> str:
    """One-line chat-friendly summary of a normalised forecast."""
    text = (
        f"For {forecast.location}: {forecast.conditions} {condition_emoji(forecast.conditions)}, "
        f"{forecast.temperature}°C 🌡️"
    )
    if forecast.feels_like != forecast.temperature:
        text += f", feels like {forecast.feels_like}°C"
    if forecast.precipitation_probability is not None:
        text += f", {forecast.precipitation_probability}% chance of rain ☔"
    return text
