"""Data models for the cities API."""

from weatherbetter.models._base import Measurement, WeatherBaseModel, coerce_measurement
from weatherbetter.models.city import City

__all__ = [
    "City",
    "Measurement",
    "WeatherBaseModel",
    "coerce_measurement",
]
