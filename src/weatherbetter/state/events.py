"""Change notifications emitted by the application state store."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from weatherbetter.models.city import City


class StateChange(StrEnum):
    FAVORITES = "favorites"
    SELECTED_CITY = "selected_city"


class StateEvent(BaseModel):
    """A snapshot of the store taken right after a mutation."""

    model_config = ConfigDict(frozen=True)

    change: StateChange
    favorites: tuple[City, ...] = ()
    selected_city_id: int = 0
