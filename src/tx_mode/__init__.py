"""
tx_mode - Transaction-opening commands for PostgreSQL clients

Builds ``BEGIN`` commands extended with isolation level, access mode and
deferrable mode.
"""

from tx_mode.domain.services.transaction_mode import TransactionMode
from tx_mode.domain.value_objects.transaction_types import (
    IsolationLevel,
    TransactionModeConfig,
)

__version__ = "0.1.0"

__all__ = [
    "IsolationLevel",
    "TransactionMode",
    "TransactionModeConfig",
]
