"""HTTP transport for the cities API."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from weatherbetter.exceptions import CityDecodeError, CityFetchError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the repository.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...


class HttpTransport:
    """Plain JSON-over-HTTP GET transport on a shared aiohttp session."""

    def __init__(self, http_session: aiohttp.ClientSession, *, user_agent: str) -> None:
        self._http = http_session
        self._user_agent = user_agent

    async def get_json(self, url: str) -> Any:
        """GET *url* and return the decoded JSON body.

        No retry and no timeout beyond the aiohttp session default.
        """
        headers = {
            "accept": "application/json",
            "user-agent": self._user_agent,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers) as resp:
                body = await resp.read()
                if resp.status != 200:
                    snippet = body[:200].decode("utf-8", errors="replace")
                    raise CityFetchError(
                        f"HTTP {resp.status} from {url}: {snippet}",
                        status_code=resp.status,
                        url=url,
                    )
        except CityFetchError:
            raise
        except aiohttp.ClientError as exc:
            raise CityFetchError(f"Request to {url} failed: {exc}", url=url) from exc
        except TimeoutError as exc:
            raise CityFetchError(f"Request to {url} timed out", url=url) from exc

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            snippet = body[:200].decode("utf-8", errors="replace")
            raise CityDecodeError(f"Invalid JSON from {url}: {snippet}", url=url) from exc
