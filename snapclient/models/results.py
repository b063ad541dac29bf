"""Result records returned by client operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from snapclient.exceptions import APIError, ResponseParseError, SwitchError

T = TypeVar("T")


@dataclass
class QueryResult(Generic[T]):
    """Outcome of a state query.

    ``items`` is empty both when the switch reports no data and when the
    request failed; ``error`` tells the two apart. Records that could not be
    parsed are dropped from ``items`` and listed in ``skipped``.
    """

    items: list[T] = field(default_factory=list)
    error: SwitchError | None = None
    skipped: list[ResponseParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RequestOutcome:
    """Outcome of a single configuration request."""

    method: str
    endpoint: str
    status_code: int | None = None
    error: APIError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
