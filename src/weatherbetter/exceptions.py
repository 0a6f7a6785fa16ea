"""Custom exception hierarchy for weatherbetter."""

from __future__ import annotations


class WeatherBetterError(Exception):
    """Base exception for all weatherbetter errors."""


class CityDecodeError(WeatherBetterError):
    """Response body did not match the city schema (missing keys, bad types, invalid JSON)."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)


class CityFetchError(WeatherBetterError):
    """HTTP-level failure (network error or non-200 status)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)
