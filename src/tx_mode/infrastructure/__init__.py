"""Infrastructure layer - cross-cutting concerns."""

from tx_mode.infrastructure.config import Config, get_config
from tx_mode.infrastructure.logging import PACKAGE_LOGGER, get_logger, setup_logging

__all__ = [
    "Config",
    "get_config",
    "PACKAGE_LOGGER",
    "setup_logging",
    "get_logger",
]
