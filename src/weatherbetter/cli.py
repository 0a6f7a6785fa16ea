"""Interactive terminal front-end for weatherbetter.

Commands::

    list            fetch and show every city
    favorites       show favorite cities
    fav <id>        toggle a city shown by the last list/favorites
    open <id>       show the weather detail for a city
    help            show this help
    quit            exit
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import TextIO

from weatherbetter.config import AppConfig
from weatherbetter.context import AppContext
from weatherbetter.models.city import City
from weatherbetter.repository import CityRepository
from weatherbetter.state.store import AppState
from weatherbetter.viewmodels import (
    CityDetailViewModel,
    CityListViewModel,
    Failed,
    FavoritesViewModel,
    Pending,
    Ready,
)

_logger = logging.getLogger(__name__)

HELP = """Commands:
  list            fetch and show every city
  favorites       show favorite cities
  fav <id>        toggle favorite for a listed city
  open <id>       show weather detail for a listed city
  help            show this help
  quit            exit"""


class TerminalApp:
    """Renders view models as text and turns command lines into intents."""

    def __init__(self, context: AppContext, *, out: TextIO | None = None) -> None:
        self._context = context
        self._out = out or sys.stdout
        self._city_list: CityListViewModel | None = None
        self._favorites = FavoritesViewModel(context)
        self._detail: CityDetailViewModel | None = None

    def _print(self, line: str = "") -> None:
        print(line, file=self._out)

    async def handle(self, line: str) -> bool:
        """Run one command line; returns ``False`` when the user quits."""
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        handlers: dict[str, Callable[[list[str]], Awaitable[None]]] = {
            "list": self._cmd_list,
            "favorites": self._cmd_favorites,
            "fav": self._cmd_fav,
            "open": self._cmd_open,
        }
        if command in ("quit", "exit"):
            return False
        if command == "help":
            self._print(HELP)
            return True
        handler = handlers.get(command)
        if handler is None:
            self._print(f"Unknown command: {command!r} (try 'help')")
            return True
        await handler(args)
        return True

    def close(self) -> None:
        for vm in (self._city_list, self._favorites, self._detail):
            if vm is not None:
                vm.close()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def _cmd_list(self, _args: list[str]) -> None:
        if self._city_list is not None:
            self._city_list.close()
        self._city_list = CityListViewModel(self._context)
        await self._city_list.load()
        self.render_city_list()

    async def _cmd_favorites(self, _args: list[str]) -> None:
        self.render_favorites()

    async def _cmd_fav(self, args: list[str]) -> None:
        city = self._lookup(args)
        if city is None:
            return
        if self._city_list is not None and self._city_list.find(city.id) is not None:
            added = self._city_list.toggle_favorite(city)
        else:
            added = self._favorites.toggle_favorite(city)
        self._print(f"{'Added' if added else 'Removed'} {city.name} {'to' if added else 'from'} favorites")

    async def _cmd_open(self, args: list[str]) -> None:
        city = self._lookup(args)
        if city is None:
            return
        if self._detail is not None:
            self._detail.close()
        if self._city_list is not None and self._city_list.find(city.id) is not None:
            self._detail = self._city_list.open_city(city)
        else:
            self._detail = self._favorites.open_city(city)
        await self._detail.load()
        self.render_detail()

    def _lookup(self, args: list[str]) -> City | None:
        if len(args) != 1:
            self._print("Expected a single numeric city id")
            return None
        try:
            city_id = int(args[0])
        except ValueError:
            self._print("Expected a single numeric city id")
            return None
        city = None
        if self._city_list is not None:
            city = self._city_list.find(city_id)
        if city is None:
            city = self._favorites.find(city_id)
        if city is None:
            self._print(f"Unknown city id {city_id} (run 'list' first)")
        return city

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_city_list(self) -> None:
        vm = self._city_list
        if vm is None:
            return
        match vm.state:
            case Pending():
                self._print("Loading...")
            case Failed(message=message):
                self._print(message)
            case Ready():
                for item in vm.items:
                    marker = "*" if item.is_favorite else " "
                    self._print(f"[{marker}] {item.city.id:>4}  {item.city.name}")

    def render_favorites(self) -> None:
        vm = self._favorites
        if vm.is_empty:
            self._print(vm.empty_message)
            return
        self._print(vm.header)
        for city in vm.favorites:
            self._print(f"[*] {city.id:>4}  {city.name}")

    def render_detail(self) -> None:
        vm = self._detail
        if vm is None:
            return
        match vm.state:
            case Pending():
                self._print("Loading...")
            case Failed(message=message):
                self._print(message)
            case Ready():
                self._print(vm.title or "")
                for label, value in vm.rows:
                    self._print(f"  {label}: {value}")


async def run(config: AppConfig) -> None:
    state = AppState(config)
    async with CityRepository(config) as repository:
        app = TerminalApp(AppContext(state=state, repository=repository))
        print(f"Weather Better ({config.base_url}). Type 'help' for commands.")
        try:
            while True:
                try:
                    line = await asyncio.to_thread(input, "> ")
                except EOFError:
                    break
                if not await app.handle(line):
                    break
        finally:
            app.close()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="weatherbetter",
        description="Browse city weather from the cities REST endpoint.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run(AppConfig()))
    except KeyboardInterrupt:
        _logger.debug("Interrupted")


if __name__ == "__main__":
    main()
