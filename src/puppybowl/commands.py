"""Commands emitted by rendered triggers and consumed by the controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from puppybowl.models import PlayerCandidate


@dataclass(frozen=True)
class ViewDetails:
    player_id: int


@dataclass(frozen=True)
class Remove:
    player_id: int


@dataclass(frozen=True)
class Create:
    candidate: PlayerCandidate


@dataclass(frozen=True)
class Back:
    pass


Command = Union[ViewDetails, Remove, Create, Back]
