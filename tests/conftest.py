from __future__ import annotations

import json

import httpx
import pytest

from puppybowl.client import PlayerApiClient
from puppybowl.config import RosterSettings


API_PREFIX = "/api/test-cohort/players"


def sample_players() -> list[dict]:
    return [
        {"id": 1, "name": "Rex", "breed": "Boxer", "status": "field", "imageUrl": "rex.png", "teamId": 4943},
        {"id": 2, "name": "Daisy", "breed": "Beagle", "status": "bench", "imageUrl": "daisy.png", "teamId": 4942},
        {"id": 3, "name": "Milo", "breed": "Pug", "status": "bench", "imageUrl": None, "teamId": None},
    ]


class FakeRosterApi:
    """In-memory stand-in for the remote players collection."""

    def __init__(self, players: list[dict] | None = None):
        self.players = [dict(player) for player in (players if players is not None else sample_players())]
        self.next_id = max((player["id"] for player in self.players if isinstance(player.get("id"), int)), default=0) + 1
        self.requests: list[httpx.Request] = []
        self.failing: set[str] = set()

    def count(self, method: str, path: str = "") -> int:
        return sum(
            1
            for request in self.requests
            if request.method == method and request.url.path == f"{API_PREFIX}{path}"
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method in self.failing:
            return httpx.Response(500, json={"success": False, "error": "boom"})
        path = request.url.path
        if not path.startswith(API_PREFIX):
            return httpx.Response(404, json={"success": False, "error": "unknown route"})
        tail = path[len(API_PREFIX):].strip("/")

        if not tail:
            if request.method == "GET":
                return httpx.Response(200, json={"success": True, "data": {"players": self.players}})
            if request.method == "POST":
                payload = json.loads(request.content)
                player = {"id": self.next_id, **payload}
                self.next_id += 1
                self.players.append(player)
                return httpx.Response(200, json={"success": True, "data": {"newPlayer": player}})
            return httpx.Response(405)

        player_id = int(tail)
        match = next((player for player in self.players if player.get("id") == player_id), None)
        if match is None:
            return httpx.Response(404, json={"success": False, "error": f"No player with id {player_id}"})
        if request.method == "GET":
            return httpx.Response(200, json={"success": True, "data": {"player": match}})
        if request.method == "DELETE":
            self.players.remove(match)
            return httpx.Response(200, json={"success": True, "data": None})
        return httpx.Response(405)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> RosterSettings:
    return RosterSettings(api_base="https://roster.test/api", cohort="test-cohort")


@pytest.fixture
def fake_api() -> FakeRosterApi:
    return FakeRosterApi()


@pytest.fixture
async def api_client(settings: RosterSettings, fake_api: FakeRosterApi):
    client = PlayerApiClient(settings, transport=httpx.MockTransport(fake_api))
    yield client
    await client.aclose()
