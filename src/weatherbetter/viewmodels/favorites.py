"""Favorites screen. Reads the in-memory favorites, so it never fetches."""

from __future__ import annotations

from weatherbetter._constants import NO_FAVORITES_MESSAGE
from weatherbetter.models.city import City
from weatherbetter.viewmodels._base import ViewModel
from weatherbetter.viewmodels.city_detail import CityDetailViewModel


class FavoritesViewModel(ViewModel):
    empty_message = NO_FAVORITES_MESSAGE

    @property
    def favorites(self) -> tuple[City, ...]:
        return self._context.state.favorites

    @property
    def is_empty(self) -> bool:
        return not self.favorites

    @property
    def header(self) -> str:
        return f"You have {len(self.favorites)} favorites:"

    def find(self, city_id: int) -> City | None:
        return next((city for city in self.favorites if city.id == city_id), None)

    def toggle_favorite(self, city: City) -> bool:
        """Unfavorite *city* (or re-add it if it was already removed)."""
        return self._context.state.toggle_favorite(city)

    def open_city(self, city: City) -> CityDetailViewModel:
        self._context.state.set_selected_city(city.id)
        return CityDetailViewModel(self._context)
