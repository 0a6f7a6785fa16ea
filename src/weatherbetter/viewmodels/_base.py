"""Presentation states and the shared fetch lifecycle for view models.

A view model fetches once. Its state moves ``Pending -> Ready`` on success
or ``Pending -> Failed`` on any :class:`WeatherBetterError`; there is no
retry transition. Building a new view model is what triggers a new fetch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from weatherbetter._constants import NO_DATA_MESSAGE
from weatherbetter.context import AppContext
from weatherbetter.exceptions import WeatherBetterError
from weatherbetter.state.events import StateEvent

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Pending:
    """Fetch in flight."""


@dataclass(frozen=True, slots=True)
class Ready(Generic[T]):
    """Fetch succeeded; ``data`` is ready to render."""

    data: T


@dataclass(frozen=True, slots=True)
class Failed:
    """Fetch raised; ``message`` is what the user sees."""

    error: WeatherBetterError
    message: str = NO_DATA_MESSAGE


class ViewModel:
    """Listener plumbing and store subscription shared by all view models."""

    def __init__(self, context: AppContext) -> None:
        self._context = context
        self._listeners: list[Callable[[ViewModel], None]] = []
        self._closed = False
        self._unsubscribe_state = context.state.subscribe(self._on_state_event)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[ViewModel], None]) -> Callable[[], None]:
        """Call *listener* with this view model whenever it needs re-rendering."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Detach from the store. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._unsubscribe_state()
        self._listeners.clear()

    def _on_state_event(self, event: StateEvent) -> None:
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


class FetchViewModel(ViewModel, Generic[T]):
    """A view model backed by a single repository fetch.

    Subclasses implement :meth:`_fetch`. The fetch runs as a task owned by
    this view model; :meth:`close` cancels it and any late result is
    dropped.
    """

    def __init__(self, context: AppContext) -> None:
        super().__init__(context)
        self._state: Pending | Ready[T] | Failed = Pending()
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> Pending | Ready[T] | Failed:
        return self._state

    def start(self) -> asyncio.Task[None]:
        """Schedule the fetch on the running loop (only the first call does)."""
        if self._task is None:
            if self._closed:
                raise WeatherBetterError(f"{type(self).__name__} is closed")
            self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def load(self) -> Pending | Ready[T] | Failed:
        """Start the fetch if needed, wait for it, and return the settled state.

        A cancelled fetch leaves the state :class:`Pending`.
        """
        task = self.start()
        await asyncio.wait({task})
        if not task.cancelled():
            # Re-raise anything that is not a WeatherBetterError.
            task.result()
        return self._state

    def close(self) -> None:
        if self._task is not None and not self._task.done():
            _logger.debug("Cancelling in-flight fetch for %s", type(self).__name__)
            self._task.cancel()
        super().close()

    async def _fetch(self) -> T:
        raise NotImplementedError

    async def _run(self) -> None:
        try:
            data = await self._fetch()
        except WeatherBetterError as exc:
            if self._closed:
                return
            _logger.warning("%s fetch failed: %s", type(self).__name__, exc)
            self._set_state(Failed(error=exc))
            return
        if self._closed:
            return
        self._set_state(Ready(data))

    def _set_state(self, state: Pending | Ready[T] | Failed) -> None:
        self._state = state
        self._notify()
