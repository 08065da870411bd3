"""Domain services."""

from tx_mode.domain.services.transaction_mode import TransactionMode

__all__ = ["TransactionMode"]
