import asyncio
from typing import Any, Awaitable, Callable

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from swapi_films.models.film import Film
from swapi_films.testing.factories import all_episodes


def swapi_payload(film: Film) -> dict[str, Any]:
    """SWAPI-shaped JSON for a film, including fields the model ignores."""
    payload = film.model_dump(mode="json")
    payload.update({
        "director": "George Lucas",
        "producer": "Rick McCallum",
        "characters": [],
        "url": f"https://swapi.dev/api/films/{film.episode_id}/",
    })
    return payload


class FakeSwapi:
    """Local aiohttp server answering GET /api/films/{episode_id}."""

    def __init__(self, payloads: dict[str, Any]):
        self.payloads = payloads
        self.delays: dict[str, float] = {}
        self.statuses: dict[str, int] = {}
        self.requests: list[str] = []

    async def _film(self, request: web.Request) -> web.Response:
        episode_id = request.match_info["episode_id"]
        self.requests.append(episode_id)
        await asyncio.sleep(self.delays.get(episode_id, 0))
        if episode_id in self.statuses:
            return web.json_response({"detail": "Error"}, status=self.statuses[episode_id])
        if episode_id not in self.payloads:
            return web.json_response({"detail": "Not found"}, status=404)
        payload = self.payloads[episode_id]
        if isinstance(payload, str):
            return web.Response(text=payload, content_type="application/json")
        return web.json_response(payload)

    def run(self, coro_fn: Callable[[str], Awaitable[Any]]) -> Any:
        """Start the server, await coro_fn(base_url) and return its result."""
        async def main():
            app = web.Application()
            app.router.add_get("/api/films/{episode_id}", self._film)
            async with TestServer(app) as server:
                return await coro_fn(str(server.make_url("/api")))

        return asyncio.run(main())


@pytest.fixture
def fake_swapi() -> FakeSwapi:
    return FakeSwapi({film.id: swapi_payload(film) for film in all_episodes()})


@pytest.fixture
def unreachable_base_url() -> str:
    return "http://127.0.0.1:1/api"
