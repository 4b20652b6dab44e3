"""Configuration loading with fail-fast behavior.

An explicit path always wins. Without one, the global config
(~/.finbind/config.json) is used when present, and Pydantic defaults otherwise.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from finbind.config.load_utils import load_json_file
from finbind.config.schema import Config
from finbind.core.constants import get_default_config_path
from finbind.core.errors import ConfigError, LoadError

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        path: Explicit config file path. Must exist when given.

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If the file is missing (explicit path only), contains
            invalid JSON, or fails validation.
    """
    source = path if path is not None else get_default_config_path()
    if path is None and not source.is_file():
        logger.debug("No global config at %s, using defaults", source)
        return Config()

    try:
        data = load_json_file(source, error_context="config")
    except LoadError as e:
        raise ConfigError(e.message) from e

    if not data:
        logger.debug("Empty config at %s, using defaults", source)
        return Config()

    logger.info("Config loaded from: %s", source)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {source}: {e}") from e
