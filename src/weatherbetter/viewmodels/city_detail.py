"""City detail screen: one city fetched by the selected id."""

from __future__ import annotations

from weatherbetter.context import AppContext
from weatherbetter.models.city import City
from weatherbetter.viewmodels._base import FetchViewModel, Ready


class CityDetailViewModel(FetchViewModel[City]):
    """Detail for the city selected when this view model was built.

    Later selection changes do not redirect an existing detail view.
    """

    def __init__(self, context: AppContext) -> None:
        super().__init__(context)
        self.city_id = context.state.selected_city_id

    async def _fetch(self) -> City:
        return await self._context.repository.fetch_one(self.city_id)

    @property
    def city(self) -> City | None:
        if isinstance(self._state, Ready):
            return self._state.data
        return None

    @property
    def title(self) -> str | None:
        city = self.city
        return None if city is None else f"Weather of {city.name}"

    @property
    def rows(self) -> list[tuple[str, str]]:
        """``(label, value)`` pairs in display order; empty until ready."""
        city = self.city
        if city is None:
            return []
        return [
            ("Temperature", f"{city.temperature} °C"),
            ("Condition", city.condition),
            ("Wind", f"{city.wind_speed} km/Hr {city.wind_direction}"),
            ("Humidity", f"{city.humidity} %"),
            ("Precipitation", f"{city.precipitation} mm"),
            ("UV", str(city.uv)),
        ]
