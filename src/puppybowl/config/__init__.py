"""Configuration helpers: settings and the closed team/status tables."""

from .settings import RosterSettings
from .teams import (
    UNASSIGNED_TEAM,
    UNKNOWN_STATUS,
    Team,
    get_team,
    iter_statuses,
    iter_teams,
    status_label,
    team_display_name,
)

__all__ = [
    "RosterSettings",
    "Team",
    "UNASSIGNED_TEAM",
    "UNKNOWN_STATUS",
    "get_team",
    "iter_statuses",
    "iter_teams",
    "status_label",
    "team_display_name",
]
