import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (one level above naija_weather/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

GEOCODING_URL = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

# ISO-3166 alpha-2 code used for the first, country-restricted geocoding query
GEOCODING_COUNTRY = os.getenv("GEOCODING_COUNTRY", "NG")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10.0"))

# Deadline for a whole travel advisory (four concurrent fetches). Empty disables it.
_advisory_timeout = os.getenv("ADVISORY_TIMEOUT", "30.0")
ADVISORY_TIMEOUT = float(_advisory_timeout) if _advisory_timeout else None

PORT = int(os.getenv("PORT", "3000"))
