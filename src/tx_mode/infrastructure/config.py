"""Configuration management for tx_mode."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SQLConfig(BaseModel):
    """Generated SQL configuration."""

    capitalize: bool = Field(
        default=False, description="Emit upper-case SQL when the caller does not choose"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")


class Config(BaseSettings):
    """Main configuration for tx_mode."""

    model_config = SettingsConfigDict(
        env_prefix="TX_MODE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    sql: SQLConfig = Field(default_factory=SQLConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
