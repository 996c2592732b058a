import logging

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from naija_weather import config
from naija_weather.errors import WeatherError
from naija_weather.forecast import get_weather as fetch_weather
from naija_weather.models import (
    ForecastMode,
    HealthResponse,
    TravelEnvelope,
    WeatherEnvelope,
)
from naija_weather.travel import advise

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "naija-weather"
API_VERSION = "1.0.0"

WEATHER_EXAMPLE = "/api/weather?city=Lagos&forecastType=current"
TRAVEL_EXAMPLE = "/api/travel-weather?from=Lagos&to=Ibadan&departureTime=6PM"
_USAGE_EXAMPLES = {
    "/api/weather": WEATHER_EXAMPLE,
    "/api/travel-weather": TRAVEL_EXAMPLE,
}

app = FastAPI(
    title="Naija Weather API",
    description="Weather and travel advisories for Nigerian cities.",
    version=API_VERSION,
)


# ── Custom exception handlers ────────────────────────────────────────────────

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return 400 (not FastAPI's default 422) for missing / invalid parameters."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request parameters.",
            "example": _USAGE_EXAMPLES.get(request.url.path, WEATHER_EXAMPLE),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Normalise all HTTP errors to {"error": "..."} instead of {"detail": ...}."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={"error": f"Cannot {request.method} {request.url.path}"},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(WeatherError)
async def weather_exception_handler(request: Request, exc: WeatherError):
    logger.error("%s for %r: %s", type(exc).__name__, exc.location, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc), "location": exc.location},
    )


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", service=SERVICE_NAME)


@app.get("/")
async def index() -> dict:
    return {
        "name": "Naija Weather API",
        "version": API_VERSION,
        "description": "Weather API for Nigerian cities with travel advisories",
        "endpoints": {
            "health": {"method": "GET", "path": "/health"},
            "weather": {
                "method": "GET",
                "path": "/api/weather",
                "parameters": {
                    "city": "string (required) - Nigerian city name",
                    "forecastType": "string (optional) - current, hourly, or daily (default: current)",
                },
                "example": WEATHER_EXAMPLE,
            },
            "travelWeather": {
                "method": "GET",
                "path": "/api/travel-weather",
                "parameters": {
                    "from": "string (required) - starting city",
                    "to": "string (required) - destination city",
                    "departureTime": "string (optional) - e.g. 6PM, morning, evening",
                },
                "example": TRAVEL_EXAMPLE,
            },
        },
    }


@app.get(
    "/api/weather",
    response_model=WeatherEnvelope,
    response_model_exclude_none=True,
)
async def get_weather(
    city: str = Query(..., min_length=1),
    forecast_type: ForecastMode = Query(ForecastMode.current, alias="forecastType"),
) -> WeatherEnvelope:
    logger.info("Incoming request: city=%r forecastType=%s", city, forecast_type.value)
    forecast = await fetch_weather(city, forecast_type)
    return WeatherEnvelope(data=forecast)


@app.get(
    "/api/travel-weather",
    response_model=TravelEnvelope,
    response_model_exclude_none=True,
)
async def get_travel_weather(
    origin: str = Query(..., min_length=1, alias="from"),
    destination: str = Query(..., min_length=1, alias="to"),
    departure_time: str | None = Query(None, alias="departureTime"),
) -> TravelEnvelope:
    logger.info(
        "Incoming request: from=%r to=%r departureTime=%r",
        origin,
        destination,
        departure_time,
    )
    advisory = await advise(origin, destination, departure_time)
    return TravelEnvelope(data=advisory)


def main() -> None:
    uvicorn.run(
        "naija_weather.server:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
