import json
import logging

from naija_weather.errors import WeatherError
from naija_weather.forecast import get_weather
from naija_weather.formatting import summarize
from naija_weather.models import ForecastMode
from naija_weather.travel import advise

logger = logging.getLogger(__name__)

WEATHER_TOOL = {
    "type": "function",
    "function": {
        "name": "get_weather",
        "description": "Get current, hourly or daily weather for a Nigerian city.",
        "parameters": {
            "type": "object",
            "properties": {
                "location": {
                    "type": "string",
                    "description": "Nigerian city name (e.g., Lagos, Abuja, Port Harcourt)",
                },
                "forecast_type": {
                    "type": "string",
                    "enum": [mode.value for mode in ForecastMode],
                    "description": "Type of forecast: current, hourly, or daily",
                },
            },
            "required": ["location"],
        },
    },
}

TRAVEL_WEATHER_TOOL = {
    "type": "function",
    "function": {
        "name": "get_travel_weather",
        "description": "Get a weather advisory for travel between two Nigerian cities.",
        "parameters": {
            "type": "object",
            "properties": {
                "from": {"type": "string", "description": "Starting city in Nigeria"},
                "to": {"type": "string", "description": "Destination city in Nigeria"},
                "departure_time": {
                    "type": "string",
                    "description": 'Departure time (e.g., "6PM", "morning", "afternoon")',
                },
            },
            "required": ["from", "to"],
        },
    },
}

TOOL_LIST = [WEATHER_TOOL, TRAVEL_WEATHER_TOOL]


async def execute_get_weather(location: str, forecast_type: str = "current") -> str:
    """Run the weather lookup. Always returns a JSON string, never raises."""
    try:
        mode = ForecastMode(forecast_type)
    except ValueError:
        return json.dumps({"error": f"Unknown forecast type '{forecast_type}'."})

    try:
        forecast = await get_weather(location, mode)
    except WeatherError as exc:
        logger.error("get_weather tool failed: location=%r, message=%s", location, exc)
        return json.dumps({"error": str(exc)})

    payload = forecast.model_dump(exclude_none=True)
    payload["summary"] = summarize(forecast)
    return json.dumps(payload, ensure_ascii=False)


async def execute_get_travel_weather(
    origin: str, destination: str, departure_time: str | None = None
) -> str:
    """Run the travel advisory. Always returns a JSON string, never raises."""
    try:
        advisory = await advise(origin, destination, departure_time)
    except WeatherError as exc:
        logger.error(
            "get_travel_weather tool failed: from=%r, to=%r, message=%s",
            origin,
            destination,
            exc,
        )
        return json.dumps({"error": str(exc)})

    return advisory.model_dump_json(exclude_none=True)


async def execute_tool(name: str, arguments: str) -> str:
    """Dispatch a function-calling request by tool name with JSON-encoded arguments."""
    try:
        args = json.loads(arguments)
        if name == "get_weather":
            location = args["location"]
            if not isinstance(location, str) or not location:
                raise ValueError("location must be a non-empty string")
            return await execute_get_weather(location, args.get("forecast_type") or "current")
        if name == "get_travel_weather":
            origin, destination = args["from"], args["to"]
            if not all(isinstance(city, str) and city for city in (origin, destination)):
                raise ValueError("from and to must be non-empty strings")
            departure_time = args.get("departure_time")
            if departure_time is not None and not isinstance(departure_time, str):
                raise ValueError("departure_time must be a string")
            return await execute_get_travel_weather(origin, destination, departure_time)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        logger.error("Malformed tool arguments for %s: %r: %s", name, arguments, exc)
        return json.dumps({"error": "Malformed tool arguments."})

    logger.error("Unknown tool requested: %s", name)
    return json.dumps({"error": f"Unknown tool '{name}'."})
