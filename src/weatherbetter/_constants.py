"""Shared constants for weatherbetter."""

from __future__ import annotations

DEFAULT_BASE_URL = "http://localhost:5282/api/cities/"
USER_AGENT = "weatherbetter/0.1 (+aiohttp)"

#: Shown for any failed fetch; decode and network failures look the same to the user.
NO_DATA_MESSAGE = "No data available"
NO_FAVORITES_MESSAGE = "No favorites yet."
