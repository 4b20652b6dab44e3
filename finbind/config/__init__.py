"""Configuration loading and validation."""

from finbind.config.loader import load_config
from finbind.config.schema import (
    APIHostType,
    AozoraBankConfig,
    ClientConfig,
    Config,
    DeferredConfig,
)

__all__ = [
    "APIHostType",
    "AozoraBankConfig",
    "ClientConfig",
    "Config",
    "DeferredConfig",
    "load_config",
]
