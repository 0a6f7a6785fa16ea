"""City list screen: every city from the server with favorite toggles."""

from __future__ import annotations

from dataclasses import dataclass

from weatherbetter.models.city import City
from weatherbetter.viewmodels._base import FetchViewModel, Ready
from weatherbetter.viewmodels.city_detail import CityDetailViewModel


@dataclass(frozen=True, slots=True)
class CityListItem:
    city: City
    is_favorite: bool


class CityListViewModel(FetchViewModel[list[City]]):
    async def _fetch(self) -> list[City]:
        return await self._context.repository.fetch_all()

    @property
    def items(self) -> list[CityListItem]:
        """Rows to render; empty until the fetch is ready."""
        if not isinstance(self._state, Ready):
            return []
        state = self._context.state
        return [CityListItem(city=city, is_favorite=state.is_favorite(city)) for city in self._state.data]

    def find(self, city_id: int) -> City | None:
        if not isinstance(self._state, Ready):
            return None
        return next((city for city in self._state.data if city.id == city_id), None)

    def toggle_favorite(self, city: City) -> bool:
        return self._context.state.toggle_favorite(city)

    def open_city(self, city: City) -> CityDetailViewModel:
        """Select *city* and build the detail view model for it."""
        self._context.state.set_selected_city(city.id)
        return CityDetailViewModel(self._context)
