import logging

import httpx

from naija_weather import config
from naija_weather.errors import LocationNotFound, ProviderFetchFailed
from naija_weather.http_client import PROVIDER_ERRORS, borrow_client
from naija_weather.models import Coordinates

logger = logging.getLogger(__name__)


async def _top_match(
    client: httpx.AsyncClient, query: str, country: str | None
) -> Coordinates | None:
    params = {"name": query, "count": 1}
    if country:
        params["countryCode"] = country

    response = await client.get(config.GEOCODING_URL, params=params)
    response.raise_for_status()

    results = response.json().get("results") or []
    if not results:
        return None

    top = results[0]
    return Coordinates(
        latitude=top["latitude"],
        longitude=top["longitude"],
        canonical_name=top["name"],
    )


async def resolve(query: str, client: httpx.AsyncClient | None = None) -> Coordinates:
    """Resolve a free-text place name to coordinates.

    Searches inside the configured country first (Nigeria by default) and only
    falls back to a worldwide search when that returns nothing. The provider's
    top-ranked result is always taken as-is.

    Raises LocationNotFound when neither search matches, and
    ProviderFetchFailed when the geocoding provider cannot be reached.
    """
    try:
        async with borrow_client(client) as http:
            match = await _top_match(http, query, config.GEOCODING_COUNTRY)
            if match is None:
                logger.warning(
                    "No %s match for %r, retrying without country filter",
                    config.GEOCODING_COUNTRY,
                    query,
                )
                match = await _top_match(http, query, None)
    except PROVIDER_ERRORS as exc:
        logger.error("Geocoding failed for %r: %s", query, exc)
        raise ProviderFetchFailed(query, exc) from exc

    if match is None:
        logger.warning("Location not found: %r", query)
        raise LocationNotFound(query)

    logger.info(
        "Resolved %r to %s (%.4f, %.4f)",
        query,
        match.canonical_name,
        match.latitude,
        match.longitude,
    )
    return match
