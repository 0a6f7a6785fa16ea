"""State/store layer.

This package holds the single in-memory application state shared by every
view model: the favorites list and the selected city id.
"""

from weatherbetter.state.events import StateChange, StateEvent
from weatherbetter.state.store import AppState, StateListener

__all__ = [
    "AppState",
    "StateChange",
    "StateEvent",
    "StateListener",
]
