"""Core errors, constants and redaction helpers."""

from finbind.core.errors import (
    APIError,
    ConfigError,
    FinbindError,
    LoadError,
    ProtocolError,
    TransportError,
)

__all__ = [
    "APIError",
    "ConfigError",
    "FinbindError",
    "LoadError",
    "ProtocolError",
    "TransportError",
]
