"""Core constants and paths for finbind.

Single source of truth for global paths and identifiers shared by both API clients.
"""

from pathlib import Path

from finbind import __version__

FINBIND_DIR_NAME = ".finbind"

USER_AGENT = f"finbind/{__version__}"


def get_finbind_dir() -> Path:
    """Get ~/.finbind (global config directory)."""
    return Path.home() / FINBIND_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_finbind_dir() / "config.json"
