"""View models for the city list, favorites, and city detail screens."""

from weatherbetter.viewmodels._base import Failed, FetchViewModel, Pending, Ready, ViewModel
from weatherbetter.viewmodels.city_detail import CityDetailViewModel
from weatherbetter.viewmodels.city_list import CityListItem, CityListViewModel
from weatherbetter.viewmodels.favorites import FavoritesViewModel

__all__ = [
    "CityDetailViewModel",
    "CityListItem",
    "CityListViewModel",
    "Failed",
    "FavoritesViewModel",
    "FetchViewModel",
    "Pending",
    "Ready",
    "ViewModel",
]
