"""
HTTP client helpers shared by the geocoding and forecast calls.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from naija_weather import config

USER_AGENT = "NaijaWeather/1.0"


def make_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.HTTP_TIMEOUT),
        headers={"User-Agent": USER_AGENT},
    )


@asynccontextmanager
async def borrow_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` as-is, or a fresh client that is closed on exit when none was given."""
    if client is not None:
        yield client
        return
    async with make_http_client() as owned:
        yield owned


# What a failed or malformed provider answer can raise while being read and shaped.
PROVIDER_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError)
