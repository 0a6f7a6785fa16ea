"""Remote city repository for the cities REST endpoint."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from weatherbetter._transport import HttpTransport, Transport
from weatherbetter.config import AppConfig
from weatherbetter.exceptions import CityDecodeError, WeatherBetterError
from weatherbetter.models.city import City

_logger = logging.getLogger(__name__)


class CityRepository:
    """Async reader for the cities API.

    Every call goes to the network; nothing is cached between calls.

    Usage::

        async with CityRepository(config) as repo:
            cities = await repo.fetch_all()
            paris = await repo.fetch_one(cities[0].id)
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._owns_transport = transport is None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CityRepository:
        if self._owns_transport:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._http_session, user_agent=self._config.user_agent)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if self._owns_transport:
            self._transport = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def url_for(self, city_id: int) -> str:
        """Detail URL for *city_id* (``base_url`` with the id appended)."""
        return f"{self._config.base_url}{city_id}"

    async def fetch_all(self) -> list[City]:
        """Fetch every city from ``base_url``.

        Raises
        ------
        CityFetchError
            On a non-200 status or a transport failure.
        CityDecodeError
            If the body is not a JSON array of valid city objects.
        """
        url = self._config.base_url
        payload = await self._require_transport().get_json(url)
        if not isinstance(payload, list):
            raise CityDecodeError(
                f"Expected a JSON array from {url}, got {type(payload).__name__}",
                url=url,
            )
        cities = [City.from_json(item, url=url) for item in payload]
        _logger.debug("Fetched %d cities from %s", len(cities), url)
        return cities

    async def fetch_one(self, city_id: int) -> City:
        """Fetch a single city by id from ``base_url + str(city_id)``."""
        url = self.url_for(city_id)
        payload = await self._require_transport().get_json(url)
        city = City.from_json(payload, url=url)
        _logger.debug("Fetched city id=%s name=%r", city.id, city.name)
        return city

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise WeatherBetterError("Repository not initialized. Use 'async with CityRepository(...) as repo:'")
        return self._transport
