"""Errors raised inside the roster API client.

Exception tree:
    RosterApiError
    +-- ApiUnavailable     (transport failure: DNS, connect, timeout)
    +-- ApiStatusError     (non-success HTTP status or ``success: false``)
    +-- MalformedEnvelope  (body is not JSON or lacks ``data.*``)

None of these escape the client: every public client operation catches
``RosterApiError``, logs it and returns an empty result.
"""

from __future__ import annotations

from typing import Optional


class RosterApiError(Exception):
    """Base exception for roster API failures."""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ApiUnavailable(RosterApiError):
    pass


class ApiStatusError(RosterApiError):
    pass


class MalformedEnvelope(RosterApiError):
    pass
