"""Typed exception hierarchy for finbind."""

from __future__ import annotations

from typing import Any


class FinbindError(Exception):
    """Base class for all finbind errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(FinbindError):
    """Raised for configuration issues (unknown host type, invalid file, validation failure)."""


class LoadError(FinbindError):
    """Raised when a config file cannot be read or parsed."""

    pass


class APIError(FinbindError):
    """Base class for failures of a single API call."""


class TransportError(APIError):
    """The request never produced a server reply (connect failure, timeout, network error)."""


class ProtocolError(APIError):
    """The server replied, but not with the expected 2xx JSON body.

    Attributes:
        status_code: HTTP status of the reply.
        body: Reply body, decoded leniently and capped in size.
    """

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)
