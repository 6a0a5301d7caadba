"""Async REST client for the players collection of the roster API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from puppybowl.config import RosterSettings
from puppybowl.exceptions import (
    ApiStatusError,
    ApiUnavailable,
    MalformedEnvelope,
    RosterApiError,
)
from puppybowl.models import Player, PlayerCandidate


logger = logging.getLogger("uvicorn.error")


class PlayerApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` scoped to one cohort.

    Every public method swallows ``RosterApiError`` after logging it, so
    callers only ever see ``None``/``False`` for a failed call.
    """

    def __init__(
        self,
        settings: RosterSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or RosterSettings()
        self._http = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "PlayerApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _url(self, path: str) -> str:
        return f"{self.settings.base_url}{path}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._http.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            raise ApiUnavailable(f"{method} {path} failed: {exc}", url=self._url(path)) from exc
        if resp.is_error:
            raise ApiStatusError(
                f"{method} {path} returned HTTP {resp.status_code}",
                url=str(resp.request.url),
                status_code=resp.status_code,
            )
        return resp

    async def _get_data(self, path: str) -> dict[str, Any]:
        resp = await self._request("GET", path)
        try:
            body = resp.json()
        except ValueError as exc:
            raise MalformedEnvelope(f"GET {path} returned non-JSON body", url=str(resp.request.url)) from exc
        if not isinstance(body, dict):
            raise MalformedEnvelope(f"GET {path} returned {type(body).__name__}, expected object")
        if body.get("success") is False:
            raise ApiStatusError(
                f"GET {path} reported failure: {body.get('error')}",
                url=str(resp.request.url),
                status_code=resp.status_code,
            )
        data = body.get("data")
        if not isinstance(data, dict):
            raise MalformedEnvelope(f"GET {path} response has no data object", url=str(resp.request.url))
        return data

    async def fetch_all_players(self) -> list[Player] | None:
        try:
            data = await self._get_data("/players")
            raw_players = data.get("players")
            if not isinstance(raw_players, list):
                raise MalformedEnvelope("players list missing from response")
        except RosterApiError as exc:
            logger.error("Failed to fetch players: %s", exc)
            return None
        players: list[Player] = []
        for item in raw_players:
            try:
                players.append(Player.model_validate(item))
            except ValidationError as exc:
                record_id = item.get("id") if isinstance(item, dict) else None
                logger.warning("Skipping unreadable player record #%s: %s", record_id, exc)
        logger.debug("Fetched %s players", len(players))
        return players

    async def fetch_single_player(self, player_id: int | str) -> Player | None:
        try:
            data = await self._get_data(f"/players/{player_id}")
            raw_player = data.get("player")
            if not isinstance(raw_player, dict):
                raise MalformedEnvelope(f"player #{player_id} missing from response")
            return Player.model_validate(raw_player)
        except (RosterApiError, ValidationError) as exc:
            logger.error("Failed to fetch player #%s: %s", player_id, exc)
            return None

    async def create_player(self, candidate: PlayerCandidate) -> bool:
        try:
            await self._request("POST", "/players", json=candidate.to_payload())
        except RosterApiError as exc:
            logger.error("Failed to add player %r: %s", candidate.name, exc)
            return False
        logger.info("Added player %r", candidate.name)
        return True

    async def delete_player(self, player_id: int | str) -> bool:
        try:
            await self._request("DELETE", f"/players/{player_id}")
        except RosterApiError as exc:
            logger.error("Failed to remove player #%s: %s", player_id, exc)
            return False
        logger.info("Removed player #%s", player_id)
        return True
