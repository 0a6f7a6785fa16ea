"""Base model for cities API payloads.

Every response model inherits from :class:`WeatherBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* Frozen instances: a decoded payload is never mutated.

Numeric measurements use :data:`Measurement`, which accepts integral or
fractional JSON numbers and always stores a ``float``.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def coerce_measurement(value: Any) -> float:
    """Normalize a JSON number to ``float``.

    ``bool`` is rejected even though it subclasses ``int``, and so are
    numeric strings: the API contract only allows JSON numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a JSON number, got {type(value).__name__}")
    return float(value)


Measurement = Annotated[float, BeforeValidator(coerce_measurement)]
"""Annotated type that coerces integral and fractional JSON numbers to ``float``."""


class WeatherBaseModel(BaseModel):
    """Base for cities API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
