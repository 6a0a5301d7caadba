"""Player records exchanged with the roster API."""

from .player import Player, PlayerCandidate, PlayerStatus

__all__ = ["Player", "PlayerCandidate", "PlayerStatus"]
