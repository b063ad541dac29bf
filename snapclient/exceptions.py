"""Exception hierarchy for the SnapRoute client."""

from __future__ import annotations

from typing import Any


class SwitchError(Exception):
    """Base exception for all SnapRoute client errors."""


class APIError(SwitchError):
    """REST API request failed (transport error or non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ConfigError(SwitchError):
    """Configuration file missing, unreadable or structurally invalid."""


class ResponseParseError(SwitchError):
    """A state record in an API response did not have the expected shape."""

    def __init__(self, message: str, record: Any = None):
        self.record = record
        super().__init__(message)
