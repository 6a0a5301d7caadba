"""Closed lookup tables for team names and player status labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from puppybowl.models import PlayerStatus


UNASSIGNED_TEAM = "Unassigned"
UNKNOWN_STATUS = "None"


@dataclass(frozen=True)
class Team:
    team_id: int
    name: str


_TEAMS: Dict[int, Team] = {
    4943: Team(team_id=4943, name="Fluff"),
    4942: Team(team_id=4942, name="Ruff"),
}

_STATUS_LABELS: Dict[str, str] = {
    PlayerStatus.FIELD.value: "Field",
    PlayerStatus.BENCH.value: "Bench",
}


def get_team(team_id: Optional[int]) -> Team | None:
    if team_id is None:
        return None
    return _TEAMS.get(team_id)


def team_display_name(team_id: Optional[int]) -> str:
    team = get_team(team_id)
    return team.name if team is not None else UNASSIGNED_TEAM


def status_label(status: Optional[str]) -> str:
    if status is None:
        return UNKNOWN_STATUS
    return _STATUS_LABELS.get(status, UNKNOWN_STATUS)


def iter_teams() -> Iterable[Team]:
    return tuple(_TEAMS.values())


def iter_statuses() -> Tuple[Tuple[str, str], ...]:
    # bench first so new players default to the bench
    return (
        (PlayerStatus.BENCH.value, _STATUS_LABELS[PlayerStatus.BENCH.value]),
        (PlayerStatus.FIELD.value, _STATUS_LABELS[PlayerStatus.FIELD.value]),
    )
