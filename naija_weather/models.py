from enum import Enum

from pydantic import BaseModel, ConfigDict


class ForecastMode(str, Enum):
    current = "current"
    hourly = "hourly"
    daily = "daily"


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    canonical_name: str


class ForecastPoint(BaseModel):
    time: str
    temperature: int
    conditions: str
    precipitation_probability: int | None = None
    uv_index: int | None = None


class NormalizedForecast(BaseModel):
    """Flat normalised weather record shared by all three forecast modes."""
    location: str
    temperature: int
    feels_like: int
    humidity: int
    wind_speed: int
    wind_gust: int
    conditions: str
    precipitation_probability: int | None = None
    uv_index: int | None = None
    forecast: list[ForecastPoint] = []


class CityWeatherSummary(BaseModel):
    city: str
    temperature: int
    conditions: str
    precipitation_probability: int | None = None


class TravelAdvisory(BaseModel):
    origin: CityWeatherSummary
    destination: CityWeatherSummary
    narrative: str
    recommendations: list[str]


# ── REST envelopes ───────────────────────────────────────────────────────────

class WeatherEnvelope(BaseModel):
    success: bool = True
    data: NormalizedForecast


class TravelEnvelope(BaseModel):
    success: bool = True
    data: TravelAdvisory


class HealthResponse(BaseModel):
    status: str
    service: str
