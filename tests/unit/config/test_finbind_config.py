"""Tests for finbind configuration schema and loader."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from finbind.config.loader import load_config
from finbind.config.schema import (
    APIHostType,
    AozoraBankConfig,
    ClientConfig,
    Config,
    DeferredConfig,
)
from finbind.core.errors import ConfigError


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_defaults(self) -> None:
        """Defaults select the test host with verification on."""
        config = ClientConfig()

        assert config.host_type == APIHostType.TEST
        assert config.base_url is None
        assert config.request_timeout == 30.0
        assert config.verify_ssl is True
        assert config.extra_headers == {}

    def test_base_url_trailing_slash_stripped(self) -> None:
        config = ClientConfig(base_url="http://localhost:8080/v1/")

        assert config.base_url == "http://localhost:8080/v1"

    def test_base_url_requires_scheme(self) -> None:
        """A base URL without scheme is rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="localhost:8080")

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(request_timeout=0)

    def test_unknown_field_rejected(self) -> None:
        """extra='forbid' catches typos in config files."""
        with pytest.raises(ValidationError):
            AozoraBankConfig(host="production")

    def test_config_is_frozen(self) -> None:
        """Host selection cannot be changed after construction."""
        config = AozoraBankConfig()

        with pytest.raises(ValidationError):
            config.host_type = APIHostType.PRODUCTION

    def test_deferred_register_path_default(self) -> None:
        assert DeferredConfig().register_path == "/auto/transaction.do"


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """An explicit config file is loaded and validated."""
        config_file = tmp_path / "config.json"
        config_file.write_text(
            '{"aozorabank": {"host_type": "production", "request_timeout": 10}}',
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.aozorabank.host_type == APIHostType.PRODUCTION
        assert config.aozorabank.request_timeout == 10
        assert config.deferred == DeferredConfig()

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        """A missing explicit path is an error, not a silent default."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert "File not found" in exc_info.value.message

    def test_invalid_json_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(config_file)

        assert "Invalid JSON" in exc_info.value.message

    def test_validation_failure_raises_config_error(self, tmp_path: Path) -> None:
        """Unknown host types fail validation."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"deferred": {"host_type": "staging"}}', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(config_file)

        assert "validation failed" in exc_info.value.message

    def test_no_global_config_returns_defaults(self, tmp_path: Path) -> None:
        """Without an explicit path and no global file, defaults are used."""
        with patch(
            "finbind.config.loader.get_default_config_path",
            return_value=tmp_path / "config.json",
        ):
            config = load_config()

        assert config == Config()

    def test_global_config_used_when_present(self, tmp_path: Path) -> None:
        global_file = tmp_path / "config.json"
        global_file.write_text('{"deferred": {"host_type": "production"}}', encoding="utf-8")

        with patch(
            "finbind.config.loader.get_default_config_path", return_value=global_file
        ):
            config = load_config()

        assert config.deferred.host_type == APIHostType.PRODUCTION

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.json"
        config_file.write_text("", encoding="utf-8")

        assert load_config(config_file) == Config()
