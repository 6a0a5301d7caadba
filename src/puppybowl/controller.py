"""Root controller: owns the view state and runs the fetch-mutate-refresh cycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from puppybowl.client import PlayerApiClient
from puppybowl.commands import Back, Command, Create, Remove, ViewDetails
from puppybowl.models import Player, PlayerCandidate
from puppybowl.views import (
    Card,
    Element,
    PlayerForm,
    render_player_detail,
    render_player_list,
)


logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class ListView:
    pass


@dataclass(frozen=True)
class DetailView:
    player_id: int


ViewState = Union[ListView, DetailView]


class DisplayRegion:
    """The single display area; only ever replaced as a whole."""

    def __init__(self) -> None:
        self.elements: Tuple[Element, ...] = ()
        self.render_count = 0

    def replace(self, elements: Iterable[Element]) -> None:
        self.elements = tuple(elements)
        self.render_count += 1

    @property
    def cards(self) -> list[Card]:
        return [element for element in self.elements if isinstance(element, Card)]

    @property
    def player_ids(self) -> list[int]:
        return [card.player_id for card in self.cards]


class RosterController:
    """Applies commands against the remote roster and re-renders the region.

    Mutations never patch local state: each one is followed by a full list
    fetch and a full re-render. Every region-replacing operation takes a
    token; with ``discard_stale_refreshes`` enabled only the most recently
    issued token may render, otherwise the last response to arrive wins.
    """

    def __init__(self, client: PlayerApiClient, *, discard_stale_refreshes: bool = False):
        self.client = client
        self.discard_stale_refreshes = discard_stale_refreshes
        self.region = DisplayRegion()
        self.form: PlayerForm | None = None
        self.state: ViewState = ListView()
        self.players: Tuple[Player, ...] = ()
        self._latest_token = 0

    def _issue_token(self) -> int:
        self._latest_token += 1
        return self._latest_token

    def _is_stale(self, token: int) -> bool:
        return self.discard_stale_refreshes and token != self._latest_token

    async def dispatch(self, command: Command) -> None:
        if isinstance(command, ViewDetails):
            await self.render_single_player(command.player_id)
        elif isinstance(command, Remove):
            await self.remove_player(command.player_id)
        elif isinstance(command, Create):
            await self.add_new_player(command.candidate)
        elif isinstance(command, Back):
            await self.refresh()
        else:
            raise TypeError(f"Unsupported command: {command!r}")

    def render_all_players(self, players: Sequence[Player] | None) -> None:
        self.players = tuple(players or ())
        self.region.replace(render_player_list(players))
        self.state = ListView()

    async def render_single_player(self, player_id: int) -> None:
        token = self._issue_token()
        player = await self.client.fetch_single_player(player_id)
        if self._is_stale(token):
            logger.debug("Discarding stale detail render for player #%s", player_id)
            return
        self.region.replace(render_player_detail(player, player_id))
        self.state = DetailView(player_id)

    async def refresh(self) -> None:
        token = self._issue_token()
        players = await self.client.fetch_all_players()
        if self._is_stale(token):
            logger.debug("Discarding stale refresh %s (latest is %s)", token, self._latest_token)
            return
        self.render_all_players(players)

    async def add_new_player(self, candidate: PlayerCandidate) -> None:
        await self.client.create_player(candidate)
        await self.refresh()

    async def remove_player(self, player_id: int) -> None:
        await self.client.delete_player(player_id)
        await self.refresh()
