"""Runtime settings for the roster UI, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger("uvicorn.error")

DEFAULT_API_BASE = "https://fsa-puppy-bowl.herokuapp.com/api"
DEFAULT_COHORT = "2501-ftb-et-web-pt"
DEFAULT_TIMEOUT = 10.0

_API_BASE_ENV = "PUPPYBOWL_API_BASE"
_COHORT_ENV = "PUPPYBOWL_COHORT"
_TIMEOUT_ENV = "PUPPYBOWL_TIMEOUT"
_DISCARD_STALE_ENV = "PUPPYBOWL_DISCARD_STALE"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class RosterSettings:
    api_base: str = DEFAULT_API_BASE
    cohort: str = DEFAULT_COHORT
    timeout: float = DEFAULT_TIMEOUT
    discard_stale_refreshes: bool = False
    title: str = "Welcome to the 2025 Puppy Bowl!"

    @property
    def base_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.cohort}"

    @classmethod
    def from_env(cls) -> "RosterSettings":
        return cls(
            api_base=os.getenv(_API_BASE_ENV) or DEFAULT_API_BASE,
            cohort=os.getenv(_COHORT_ENV) or DEFAULT_COHORT,
            timeout=_env_float(_TIMEOUT_ENV, DEFAULT_TIMEOUT, clamp_min=0.1),
            discard_stale_refreshes=_env_bool(_DISCARD_STALE_ENV, False),
        )
