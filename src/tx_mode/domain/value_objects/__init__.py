"""Value objects for the transaction mode domain.

Exports:
    - IsolationLevel: Transaction isolation levels (NONE, SERIALIZABLE, etc.)
    - TransactionModeConfig: Isolation level, access mode and deferrable mode
"""

from tx_mode.domain.value_objects.transaction_types import (
    IsolationLevel,
    TransactionModeConfig,
)

__all__ = [
    "IsolationLevel",
    "TransactionModeConfig",
]
