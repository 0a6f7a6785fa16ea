"""In-memory application state store.

This is the only component allowed to mutate favorites and the selected
city id. View models read snapshots and subscribe to changes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable

from weatherbetter.config import AppConfig, FavoriteKey
from weatherbetter.models.city import City
from weatherbetter.state.events import StateChange, StateEvent

_logger = logging.getLogger(__name__)

StateListener = Callable[[StateEvent], None]


class AppState:
    """Favorites and selection shared across the application.

    Favorites keep insertion order and hold at most one city per favorite
    key (the city name unless configured otherwise). Mutations take an
    internal lock; listeners run synchronously after it is released.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()
        self._lock = threading.RLock()
        self._favorites: list[City] = []
        self._selected_city_id = 0
        self._listeners: list[StateListener] = []

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def favorite_key(self) -> FavoriteKey:
        return self._config.favorite_key

    @property
    def favorites(self) -> tuple[City, ...]:
        with self._lock:
            return tuple(self._favorites)

    @property
    def selected_city_id(self) -> int:
        with self._lock:
            return self._selected_city_id

    def _key(self, city: City) -> Hashable:
        if self._config.favorite_key == FavoriteKey.ID:
            return city.id
        return city.name

    def is_favorite(self, city: City) -> bool:
        key = self._key(city)
        with self._lock:
            return any(self._key(fav) == key for fav in self._favorites)

    def toggle_favorite(self, city: City) -> bool:
        """Add *city* to favorites, or remove the entry sharing its key.

        Returns whether the city is a favorite after the call.
        """
        key = self._key(city)
        with self._lock:
            index = next(
                (i for i, fav in enumerate(self._favorites) if self._key(fav) == key),
                None,
            )
            if index is None:
                self._favorites.append(city)
                added = True
            else:
                del self._favorites[index]
                added = False
            event = self._snapshot(StateChange.FAVORITES)

        _logger.debug("%s favorite %r (%d total)", "Added" if added else "Removed", key, len(event.favorites))
        self._notify(event)
        return added

    def set_selected_city(self, city_id: int) -> None:
        """Select the city the detail view fetches next. The id is not validated."""
        with self._lock:
            self._selected_city_id = city_id
            event = self._snapshot(StateChange.SELECTED_CITY)

        _logger.debug("Selected city id=%s", city_id)
        self._notify(event)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _snapshot(self, change: StateChange) -> StateEvent:
        return StateEvent(
            change=change,
            favorites=tuple(self._favorites),
            selected_city_id=self._selected_city_id,
        )

    def _notify(self, event: StateEvent) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(event)
