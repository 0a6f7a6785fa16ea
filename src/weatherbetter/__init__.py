"""weatherbetter - Async city weather client with favorites and view models."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weatherbetter")
except PackageNotFoundError:
    __version__ = "0+local"
from weatherbetter.config import AppConfig, FavoriteKey
from weatherbetter.context import AppContext
from weatherbetter.exceptions import CityDecodeError, CityFetchError, WeatherBetterError
from weatherbetter.models import City
from weatherbetter.repository import CityRepository
from weatherbetter.state import AppState, StateChange, StateEvent

__all__ = [
    "__version__",
    "AppConfig",
    "AppContext",
    "AppState",
    "City",
    "CityDecodeError",
    "CityFetchError",
    "CityRepository",
    "FavoriteKey",
    "StateChange",
    "StateEvent",
    "WeatherBetterError",
]
