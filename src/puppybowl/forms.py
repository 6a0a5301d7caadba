"""New-player form: renders the inputs and turns submissions into Create commands."""

from __future__ import annotations

import logging
from typing import Mapping

from puppybowl.commands import Create
from puppybowl.config import iter_statuses, iter_teams
from puppybowl.controller import RosterController
from puppybowl.models import PlayerCandidate
from puppybowl.views import render_new_player_form


logger = logging.getLogger("uvicorn.error")


def _coerce_team_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    value = raw.strip()
    if not value or value.lower() == "null":
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-numeric team value %r", raw)
        return None


class NewPlayerForm:
    def __init__(self, controller: RosterController, title: str):
        self.controller = controller
        self.title = title

    def render(self) -> None:
        self.controller.form = render_new_player_form(self.title, iter_teams(), iter_statuses())

    @staticmethod
    def parse(values: Mapping[str, str | None]) -> PlayerCandidate:
        """Build a candidate from raw form values; blanks pass through unchanged."""
        return PlayerCandidate(
            name=values.get("name") or "",
            breed=values.get("breed") or "",
            status=values.get("status") or "",
            image_url=values.get("imageUrl") or "",
            team_id=_coerce_team_id(values.get("team")),
        )

    async def submit(self, values: Mapping[str, str | None]) -> PlayerCandidate:
        candidate = self.parse(values)
        await self.controller.dispatch(Create(candidate))
        return candidate
