"""Application configuration for weatherbetter."""

from __future__ import annotations

import dataclasses
from enum import StrEnum

from weatherbetter._constants import DEFAULT_BASE_URL, USER_AGENT


class FavoriteKey(StrEnum):
    """Which city attribute identifies a favorite.

    ``NAME`` keeps the historical behavior: two cities sharing a display
    name collide even when their ids differ.
    """

    NAME = "name"
    ID = "id"


@dataclasses.dataclass(frozen=True)
class AppConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Cities endpoint. The list is fetched from ``base_url`` and a single
        city from ``base_url + str(id)``, so the value keeps its trailing slash.
    user_agent : str
        ``User-Agent`` header sent with every request.
    favorite_key : FavoriteKey
        Attribute used to de-duplicate favorites.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = USER_AGENT
    favorite_key: FavoriteKey = FavoriteKey.NAME
