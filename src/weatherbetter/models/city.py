"""City model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import StrictInt, StrictStr, ValidationError

from weatherbetter.exceptions import CityDecodeError
from weatherbetter.models._base import Measurement, WeatherBaseModel


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class City(WeatherBaseModel):
    """Weather snapshot for a single city.

    Fields are mapped from the ``GET /api/cities/`` and
    ``GET /api/cities/{id}`` responses.
    """

    id: StrictInt
    """Server-assigned identifier."""
    name: StrictStr
    """Display name (also the default favorites key)."""
    temperature: Measurement
    """Temperature in °C."""
    condition: StrictStr
    """Free-text condition (e.g. ``"Sunny"``)."""
    wind_speed: Measurement
    """Wind speed in km/h."""
    wind_direction: StrictStr
    """Compass direction (e.g. ``"NW"``)."""
    humidity: Measurement
    """Relative humidity in percent."""
    precipitation: Measurement
    """Precipitation in mm."""
    uv: Measurement
    """UV index."""

    @classmethod
    def from_json(cls, raw: Any, *, url: str = "") -> City:
        """Validate a decoded JSON object into a :class:`City`.

        Raises
        ------
        CityDecodeError
            If *raw* is not an object, a required key is missing, or a
            field has the wrong type.
        """
        if not isinstance(raw, Mapping):
            raise CityDecodeError(
                f"Expected a JSON object for a city, got {type(raw).__name__}",
                url=url,
            )
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            raise CityDecodeError(f"Invalid city payload: {_describe_errors(exc)}", url=url) from exc

    def to_json(self) -> dict[str, Any]:
        """Encode back to the API's camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
