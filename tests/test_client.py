import json
import logging

import httpx
import pytest

from puppybowl.client import PlayerApiClient
from puppybowl.models import PlayerCandidate

from tests.conftest import FakeRosterApi, sample_players


def _client(settings, handler) -> PlayerApiClient:
    return PlayerApiClient(settings, transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_fetch_all_players_returns_envelope_players_in_order(api_client, fake_api):
    players = await api_client.fetch_all_players()

    assert [player.id for player in players] == [1, 2, 3]
    assert [player.model_dump(by_alias=True) for player in players] == sample_players()
    assert fake_api.count("GET") == 1


@pytest.mark.anyio
async def test_fetch_all_players_empty_collection(settings):
    async with _client(settings, FakeRosterApi(players=[])) as client:
        assert await client.fetch_all_players() == []


@pytest.mark.anyio
async def test_fetch_all_players_skips_unreadable_records(settings, caplog):
    records = sample_players() + [{"id": "x", "name": "Nobody"}, {"id": 9, "name": "Ghost", "breed": None}]
    async with _client(settings, FakeRosterApi(players=records)) as client:
        with caplog.at_level(logging.WARNING):
            players = await client.fetch_all_players()

    assert [player.id for player in players] == [1, 2, 3, 9]
    assert players[-1].breed is None
    assert "player record #x" in caplog.text


@pytest.mark.anyio
async def test_fetch_single_player_embeds_id_in_path(api_client, fake_api):
    player = await api_client.fetch_single_player(2)

    assert player.name == "Daisy"
    assert fake_api.requests[-1].url.path == "/api/test-cohort/players/2"


@pytest.mark.anyio
async def test_fetch_single_player_missing_logs_id(api_client, caplog):
    with caplog.at_level(logging.ERROR):
        assert await api_client.fetch_single_player(404) is None
    assert "player #404" in caplog.text


@pytest.mark.anyio
async def test_fetch_all_players_server_error_returns_none(api_client, fake_api, caplog):
    fake_api.failing.add("GET")
    with caplog.at_level(logging.ERROR):
        assert await api_client.fetch_all_players() is None
    assert "Failed to fetch players" in caplog.text


@pytest.mark.anyio
async def test_fetch_all_players_network_failure_returns_none(settings, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(settings, handler) as client:
        with caplog.at_level(logging.ERROR):
            assert await client.fetch_all_players() is None
    assert "connection refused" in caplog.text


@pytest.mark.anyio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["players"]),
        httpx.Response(200, json={"success": True}),
        httpx.Response(200, json={"success": True, "data": {"players": None}}),
        httpx.Response(200, json={"success": False, "error": "bad cohort"}),
    ],
)
async def test_fetch_all_players_malformed_envelope_returns_none(settings, response):
    async with _client(settings, lambda request: response) as client:
        assert await client.fetch_all_players() is None


@pytest.mark.anyio
async def test_create_player_posts_candidate_body(api_client, fake_api):
    candidate = PlayerCandidate(name="Biscuit", breed="Corgi", status="bench", image_url="b.png", team_id=4942)

    assert await api_client.create_player(candidate) is True

    request = fake_api.requests[-1]
    assert request.method == "POST"
    assert request.url.path == "/api/test-cohort/players"
    assert json.loads(request.content) == {
        "name": "Biscuit",
        "breed": "Corgi",
        "status": "bench",
        "imageUrl": "b.png",
        "teamId": 4942,
    }
    assert fake_api.players[-1]["id"] == 4


@pytest.mark.anyio
async def test_create_player_failure_is_logged_not_raised(api_client, fake_api, caplog):
    fake_api.failing.add("POST")
    with caplog.at_level(logging.ERROR):
        assert await api_client.create_player(PlayerCandidate(name="Biscuit")) is False
    assert "Failed to add player 'Biscuit'" in caplog.text


@pytest.mark.anyio
async def test_delete_player(api_client, fake_api):
    assert await api_client.delete_player(1) is True
    assert [player["id"] for player in fake_api.players] == [2, 3]
    assert fake_api.count("DELETE", "/1") == 1


@pytest.mark.anyio
async def test_delete_missing_player_logs_id(api_client, caplog):
    with caplog.at_level(logging.ERROR):
        assert await api_client.delete_player(99) is False
    assert "player #99" in caplog.text
