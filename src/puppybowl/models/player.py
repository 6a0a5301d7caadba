"""Player payloads as served by the roster API."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerStatus(str, Enum):
    FIELD = "field"
    BENCH = "bench"


class Player(BaseModel):
    """Read-only copy of a remote player record."""

    id: int
    name: Optional[str] = None
    breed: Optional[str] = None
    status: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    team_id: Optional[int] = Field(None, alias="teamId")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class PlayerCandidate(BaseModel):
    """Creation payload; the remote service assigns the id."""

    name: str = ""
    breed: str = ""
    status: str = ""
    image_url: str = Field("", alias="imageUrl")
    team_id: Optional[int] = Field(None, alias="teamId")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
