"""Unit tests for configuration module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tx_mode.infrastructure.config import Config, ObservabilityConfig, SQLConfig, get_config


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self, fresh_config: pytest.MonkeyPatch) -> None:
        """Test default configuration values."""
        config = Config()

        assert config.sql.capitalize is False
        assert config.observability.log_level == "INFO"
        assert config.observability.log_format == "json"

    def test_env_overrides(self, fresh_config: pytest.MonkeyPatch) -> None:
        """Test that TX_MODE_* variables override nested settings."""
        fresh_config.setenv("TX_MODE_SQL__CAPITALIZE", "true")
        fresh_config.setenv("TX_MODE_OBSERVABILITY__LOG_LEVEL", "DEBUG")

        config = Config()

        assert config.sql.capitalize is True
        assert config.observability.log_level == "DEBUG"

    def test_custom_sql_config(self) -> None:
        """Test explicit SQL configuration."""
        config = Config(sql=SQLConfig(capitalize=True))
        assert config.sql.capitalize is True

    def test_invalid_log_level(self) -> None:
        """Test that an unknown log level raises validation error."""
        with pytest.raises(ValidationError):
            ObservabilityConfig(log_level="VERBOSE")  # type: ignore[arg-type]

    def test_log_formats(self) -> None:
        """Test valid log formats."""
        for log_format in ["json", "console"]:
            observability = ObservabilityConfig(log_format=log_format)  # type: ignore[arg-type]
            assert observability.log_format == log_format


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self, fresh_config: pytest.MonkeyPatch) -> None:
        """Test that get_config returns the same instance."""
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2

    def test_cache_clear_rereads_environment(self, fresh_config: pytest.MonkeyPatch) -> None:
        """Test that clearing the cache picks up new environment values."""
        assert get_config().sql.capitalize is False

        fresh_config.setenv("TX_MODE_SQL__CAPITALIZE", "1")
        get_config.cache_clear()

        assert get_config().sql.capitalize is True
