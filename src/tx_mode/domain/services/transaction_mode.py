"""Transaction-opening command builder.

Produces ``BEGIN`` followed by any of:

    - isolation level
    - access mode (READ ONLY / READ WRITE)
    - deferrable mode (DEFERRABLE / NOT DEFERRABLE)

The builder is a best-effort formatter: every input, however malformed,
normalizes to a valid command and nothing is ever raised.

Example:
    >>> mode = TransactionMode(IsolationLevel.SERIALIZABLE, read_only=True, deferrable=True)
    >>> mode.begin(False)
    'begin isolation level serializable read only deferrable'
    >>> mode.begin(True)
    'BEGIN ISOLATION LEVEL SERIALIZABLE READ ONLY DEFERRABLE'
"""

from __future__ import annotations

import logging
from numbers import Number
from typing import Any

from pydantic import ValidationError

from tx_mode.domain.value_objects.transaction_types import (
    IsolationLevel,
    TransactionModeConfig,
)
from tx_mode.infrastructure.config import get_config

logger = logging.getLogger(__name__)

# First arguments of these types are isolation levels; anything else is a record
_SCALAR_TYPES = (str, bytes, bytearray, Number)


class TransactionMode:
    """Builds the ``BEGIN`` command for a set of transaction mode settings.

    Accepts either three values or a single record as the first argument::

        TransactionMode(IsolationLevel.READ_COMMITTED, False, None)
        TransactionMode(TransactionModeConfig(ti_level=3, read_only=False))
        TransactionMode({"ti_level": 3, "read_only": False})

    Any first argument that is not None, a number or a string is a record,
    read by key (mappings) or attribute (other objects). When a record is
    given, ``read_only`` and ``deferrable`` arguments are ignored in favour
    of the record's fields, even unset ones.

    Both command strings are computed once here and returned as-is by
    :meth:`begin`.
    """

    __slots__ = ("_config", "_begin", "_cap_begin")

    def __init__(
        self,
        ti_level: Any = None,
        read_only: Any = None,
        deferrable: Any = None,
    ) -> None:
        if isinstance(ti_level, TransactionModeConfig):
            config = ti_level
        elif ti_level is not None and not isinstance(ti_level, _SCALAR_TYPES):
            config = TransactionModeConfig.from_record(ti_level)
        else:
            config = TransactionModeConfig(ti_level, read_only, deferrable)

        config = config.normalized()
        begin = _build_begin(config)

        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_begin", begin)
        object.__setattr__(self, "_cap_begin", begin.upper())

        logger.debug(f"Transaction mode built: {begin}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def begin(self, cap: bool | None = None) -> str:
        """Get the transaction-opening command.

        Args:
            cap: True for upper case, False for lower case. When omitted the
                ``sql.capitalize`` setting decides, falling back to lower case
                when the settings cannot be loaded.

        Returns:
            The precomputed command string
        """
        if cap is None:
            try:
                cap = get_config().sql.capitalize
            except ValidationError as exc:
                logger.warning(
                    f"Invalid tx_mode settings ({exc.error_count()} error(s)), using lower case"
                )
                cap = False
        return self._cap_begin if cap else self._begin

    @property
    def config(self) -> TransactionModeConfig:
        """Normalized settings this command was built from."""
        return self._config

    @property
    def isolation_level(self) -> IsolationLevel:
        """Normalized isolation level."""
        return self._config.ti_level

    @property
    def read_only(self) -> Any:
        """Access mode flag, None when unset."""
        return self._config.read_only

    @property
    def deferrable(self) -> Any:
        """Deferrable mode flag, None when unset."""
        return self._config.deferrable

    def __str__(self) -> str:
        return self._begin

    def __repr__(self) -> str:
        return (
            f"TransactionMode(ti_level={self.isolation_level.name}, "
            f"read_only={self.read_only!r}, deferrable={self.deferrable!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransactionMode):
            return NotImplemented
        return self._begin == other._begin

    def __hash__(self) -> int:
        return hash(self._begin)


def _build_begin(config: TransactionModeConfig) -> str:
    """Assemble the lower-case command in fixed clause order."""
    clauses = ["begin"]

    isolation = config.ti_level.clause
    if isolation:
        clauses.append(isolation)

    if config.read_only:
        clauses.append("read only")
    elif config.read_only is not None:
        clauses.append("read write")

    if config.deferrable:
        clauses.append("deferrable")
    elif config.deferrable is not None:
        clauses.append("not deferrable")

    return " ".join(clauses)
