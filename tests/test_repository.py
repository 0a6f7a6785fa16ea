from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest
from aiohttp import test_utils, web

from weatherbetter.config import AppConfig
from weatherbetter.context import AppContext
from weatherbetter.exceptions import CityDecodeError, CityFetchError, WeatherBetterError
from weatherbetter.repository import CityRepository
from weatherbetter.state.store import AppState
from weatherbetter.viewmodels import CityListViewModel, Failed

BASE_URL = "http://cities.test/api/cities/"

PARIS: dict[str, Any] = {
    "id": 1,
    "name": "Paris",
    "temperature": 21.5,
    "condition": "Sunny",
    "windSpeed": 12,
    "windDirection": "NW",
    "humidity": 40,
    "precipitation": 0.2,
    "uv": 3,
}


@dataclass
class FakeTransport:
    payloads: dict[str, Any] = field(default_factory=dict)
    status: dict[str, int] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    async def get_json(self, url: str) -> Any:
        self.calls.append(url)
        status = self.status.get(url, 200 if url in self.payloads else 404)
        if status != 200:
            raise CityFetchError(f"HTTP {status} from {url}", status_code=status, url=url)
        return self.payloads[url]


def _repo(transport: FakeTransport) -> CityRepository:
    return CityRepository(AppConfig(base_url=BASE_URL), transport=transport)


@pytest.mark.asyncio
async def test_fetch_all_decodes_array() -> None:
    transport = FakeTransport(payloads={BASE_URL: [PARIS]})

    cities = await _repo(transport).fetch_all()

    assert len(cities) == 1
    assert cities[0].name == "Paris"
    assert cities[0].wind_speed == 12.0
    assert transport.calls == [BASE_URL]


@pytest.mark.asyncio
async def test_fetch_all_requires_array() -> None:
    transport = FakeTransport(payloads={BASE_URL: PARIS})

    with pytest.raises(CityDecodeError, match="JSON array"):
        await _repo(transport).fetch_all()


@pytest.mark.asyncio
async def test_fetch_all_fails_whole_list_on_one_bad_element() -> None:
    broken = dict(PARIS, id=2)
    del broken["uv"]
    transport = FakeTransport(payloads={BASE_URL: [PARIS, broken]})

    with pytest.raises(CityDecodeError):
        await _repo(transport).fetch_all()


@pytest.mark.asyncio
async def test_fetch_is_never_cached() -> None:
    transport = FakeTransport(payloads={BASE_URL: [PARIS]})
    repo = _repo(transport)

    await repo.fetch_all()
    await repo.fetch_all()

    assert transport.calls == [BASE_URL, BASE_URL]


@pytest.mark.asyncio
async def test_selected_id_builds_detail_url() -> None:
    state = AppState(AppConfig(base_url=BASE_URL))
    transport = FakeTransport(payloads={f"{BASE_URL}42": dict(PARIS, id=42)})
    repo = _repo(transport)

    state.set_selected_city(42)
    city = await repo.fetch_one(state.selected_city_id)

    assert transport.calls == [BASE_URL + "42"]
    assert city.id == 42


@pytest.mark.asyncio
async def test_fetch_one_non_200_leaves_selection_unchanged() -> None:
    state = AppState(AppConfig(base_url=BASE_URL))
    state.set_selected_city(5)
    transport = FakeTransport(status={f"{BASE_URL}5": 500})

    with pytest.raises(CityFetchError) as exc_info:
        await _repo(transport).fetch_one(state.selected_city_id)

    assert exc_info.value.status_code == 500
    assert exc_info.value.url == BASE_URL + "5"
    assert state.selected_city_id == 5


@pytest.mark.asyncio
async def test_fetch_one_requires_object() -> None:
    transport = FakeTransport(payloads={f"{BASE_URL}1": [PARIS]})

    with pytest.raises(CityDecodeError):
        await _repo(transport).fetch_one(1)


@pytest.mark.asyncio
async def test_uninitialized_repository_raises() -> None:
    repo = CityRepository(AppConfig(base_url=BASE_URL))

    with pytest.raises(WeatherBetterError, match="not initialized"):
        await repo.fetch_all()


# ------------------------------------------------------------------
# Real aiohttp transport against a local test server
# ------------------------------------------------------------------


def _cities_app() -> web.Application:
    async def _list(_request: web.Request) -> web.Response:
        return web.json_response([PARIS])

    async def _detail(request: web.Request) -> web.Response:
        if request.match_info["city_id"] == "1":
            return web.json_response(PARIS)
        return web.Response(status=404, text="city not found")

    async def _garbage(_request: web.Request) -> web.Response:
        return web.Response(text="<html>oops</html>")

    app = web.Application()
    app.router.add_get("/api/cities/", _list)
    app.router.add_get("/api/cities/{city_id}", _detail)
    async def _slow(_request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return web.json_response([PARIS])

    async def _not_utf8(_request: web.Request) -> web.Response:
        return web.Response(body=b"[\xff\xfe]", content_type="application/json", charset="utf-8")

    app.router.add_get("/broken/", _garbage)
    app.router.add_get("/slow/", _slow)
    app.router.add_get("/latin/", _not_utf8)
    return app


@pytest.mark.asyncio
async def test_http_transport_round_trip() -> None:
    async with test_utils.TestServer(_cities_app()) as server:
        config = AppConfig(base_url=str(server.make_url("/api/cities/")))
        async with CityRepository(config) as repo:
            cities = await repo.fetch_all()
            paris = await repo.fetch_one(1)

    assert [c.name for c in cities] == ["Paris"]
    assert paris.uv == 3.0


@pytest.mark.asyncio
async def test_http_transport_non_200_raises_fetch_error() -> None:
    async with test_utils.TestServer(_cities_app()) as server:
        config = AppConfig(base_url=str(server.make_url("/api/cities/")))
        async with CityRepository(config) as repo:
            with pytest.raises(CityFetchError) as exc_info:
                await repo.fetch_one(99)

    assert exc_info.value.status_code == 404
    assert "city not found" in str(exc_info.value)


@pytest.mark.asyncio
async def test_http_transport_invalid_json_raises_decode_error() -> None:
    async with test_utils.TestServer(_cities_app()) as server:
        config = AppConfig(base_url=str(server.make_url("/broken/")))
        async with CityRepository(config) as repo:
            with pytest.raises(CityDecodeError, match="Invalid JSON"):
                await repo.fetch_all()


@pytest.mark.asyncio
async def test_http_transport_connection_error_raises_fetch_error() -> None:
    # Port 1 is reserved and refuses connections on loopback.
    async with CityRepository(AppConfig(base_url="http://127.0.0.1:1/api/cities/")) as repo:
        with pytest.raises(CityFetchError, match="failed") as exc_info:
            await repo.fetch_all()

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)


@pytest.mark.asyncio
async def test_external_session_is_not_closed() -> None:
    async with aiohttp.ClientSession() as session:
        async with CityRepository(AppConfig(base_url=BASE_URL), session=session):
            pass
        assert not session.closed


@pytest.mark.asyncio
async def test_http_transport_timeout_fails_view_model() -> None:
    async with test_utils.TestServer(_cities_app()) as server:
        config = AppConfig(base_url=str(server.make_url("/slow/")))
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=0.1)) as session:
            async with CityRepository(config, session=session) as repo:
                with pytest.raises(CityFetchError, match="timed out") as exc_info:
                    await repo.fetch_all()

                vm = CityListViewModel(AppContext(state=AppState(config), repository=repo))
                state = await vm.load()

    assert isinstance(exc_info.value.__cause__, TimeoutError)
    assert isinstance(state, Failed)
    assert isinstance(state.error, CityFetchError)


@pytest.mark.asyncio
async def test_http_transport_non_utf8_body_fails_view_model() -> None:
    async with test_utils.TestServer(_cities_app()) as server:
        config = AppConfig(base_url=str(server.make_url("/latin/")))
        async with CityRepository(config) as repo:
            with pytest.raises(CityDecodeError, match="Invalid JSON"):
                await repo.fetch_all()

            vm = CityListViewModel(AppContext(state=AppState(config), repository=repo))
            state = await vm.load()

    assert isinstance(state, Failed)
    assert isinstance(state.error, CityDecodeError)
    assert state.message == "No data available"
