"""Explicit application context handed to every view model."""

from __future__ import annotations

from dataclasses import dataclass

from weatherbetter.repository import CityRepository
from weatherbetter.state.store import AppState


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared collaborators for view models.

    One instance is built at startup; tests build their own with a fake
    transport instead of bootstrapping the whole application.
    """

    state: AppState
    repository: CityRepository
