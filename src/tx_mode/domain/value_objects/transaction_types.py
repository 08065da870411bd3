"""Transaction mode types and enumerations.

These types describe the settings that can follow a ``BEGIN`` command:
isolation level, access mode and deferrable mode.

References:
    - https://www.postgresql.org/docs/current/sql-begin.html
    - https://www.postgresql.org/docs/current/transaction-iso.html
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Any, Mapping


class IsolationLevel(IntEnum):
    """Transaction isolation levels.

    Members are plain integers, so a caller may pass either the member or its
    value wherever a level is expected.
    """

    NONE = 0
    """No isolation clause; the server default applies."""

    SERIALIZABLE = 1
    """Transactions behave as if run one after another."""

    REPEATABLE_READ = 2
    """One snapshot for the whole transaction."""

    READ_COMMITTED = 3
    """Each statement sees data committed before it began."""

    @property
    def clause(self) -> str | None:
        """SQL fragment for this level, or None when no clause is emitted."""
        return _ISOLATION_CLAUSES.get(self)

    @classmethod
    def from_value(cls, value: Any) -> IsolationLevel:
        """Normalize an arbitrary value to an isolation level.

        Values that are numerically greater than zero give the integer formed
        by the leading digits of their text (``"1e3"`` is 1, ``"0x2"`` is 2,
        ``2.9`` is 2); anything else (unset, zero, negatives, NaN, booleans,
        non-numeric strings and types) becomes 0. A result outside 1..3
        maps to NONE.

        Args:
            value: Level as a member, number, numeric string or anything else

        Returns:
            The matching member. Never raises.

        Example:
            >>> IsolationLevel.from_value("2")
            <IsolationLevel.REPEATABLE_READ: 2>
            >>> IsolationLevel.from_value("abc")
            <IsolationLevel.NONE: 0>
        """
        level = _truncate_positive(value)
        if 0 < level < 4:
            return cls(level)
        return cls.NONE


_ISOLATION_CLAUSES: dict[IsolationLevel, str] = {
    IsolationLevel.SERIALIZABLE: "isolation level serializable",
    IsolationLevel.REPEATABLE_READ: "isolation level repeatable read",
    IsolationLevel.READ_COMMITTED: "isolation level read committed",
}


# Floats in [_PLAIN_FORM_MIN, _PLAIN_FORM_MAX) are written in plain decimal
_PLAIN_FORM_MIN = 1e-6
_PLAIN_FORM_MAX = 1e21

_LEADING_INT = re.compile(r"\s*[+-]?(?:0[xX]([0-9a-fA-F]+)|(\d+))")


def _truncate_positive(value: Any) -> int:
    """Truncate a positive numeric value to int, 0 for everything else.

    Positivity is judged on the numeric value; the integer is then taken
    from the leading digits of the value's text, so ``"1e3"`` gives 1 and
    ``"0x2"`` gives 2.
    """
    if value is None or isinstance(value, bool):
        return 0
    # NaN fails the comparison as well
    if not _to_number(value) > 0:
        return 0
    return _leading_int(value)


def _to_number(value: Any) -> float:
    """Numeric value of a number or numeric string, NaN when there is none."""
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return math.nan
        try:
            if text[:2].lower() in ("0x", "0o", "0b"):
                return float(int(text, 0))
            return float(text)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return math.inf
    return math.nan


def _leading_int(value: Any) -> int:
    """Integer formed by the leading digits of the value's text, 0 if none."""
    if isinstance(value, int) and value < _PLAIN_FORM_MAX:
        return int(value)
    if not isinstance(value, str):
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            return 0
        if math.isinf(number) or math.isnan(number):
            return 0
        if _PLAIN_FORM_MIN <= number < _PLAIN_FORM_MAX:
            return int(number)
        # exponent form, e.g. "1e+21" or "3e-07": the first significant digit
        value = repr(number)
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    hex_digits, digits = match.groups()
    return int(hex_digits, 16) if hex_digits else int(digits)


@dataclass(frozen=True, slots=True)
class TransactionModeConfig:
    """Settings of a transaction-opening command.

    ``read_only`` and ``deferrable`` are tri-state: None means the clause is
    left out, which is not the same as False.

    Attributes:
        ti_level: Isolation level (member, integer or anything normalizable)
        read_only: True for READ ONLY, False for READ WRITE, None to omit
        deferrable: True for DEFERRABLE, False for NOT DEFERRABLE, None to omit

    Example:
        >>> TransactionModeConfig(IsolationLevel.SERIALIZABLE, read_only=True)
        TransactionModeConfig(ti_level=<IsolationLevel.SERIALIZABLE: 1>, read_only=True, deferrable=None)
    """

    ti_level: Any = None
    read_only: Any = None
    deferrable: Any = None

    @classmethod
    def from_record(cls, record: Any) -> TransactionModeConfig:
        """Build a config from a mapping or any object with matching attributes.

        Reads ``ti_level``/``read_only``/``deferrable``, with ``tiLevel`` and
        ``readOnly`` as aliases. Missing fields are unset, so a record with
        none of them (a list, say) is a bare BEGIN.
        """
        if isinstance(record, Mapping):
            field = record.get
        else:
            def field(name: str, default: Any = None) -> Any:
                return getattr(record, name, default)

        return cls(
            ti_level=field("ti_level", field("tiLevel")),
            read_only=field("read_only", field("readOnly")),
            deferrable=field("deferrable"),
        )

    def normalized(self) -> TransactionModeConfig:
        """Return a copy with ``ti_level`` normalized to an IsolationLevel."""
        return TransactionModeConfig(
            ti_level=IsolationLevel.from_value(self.ti_level),
            read_only=self.read_only,
            deferrable=self.deferrable,
        )
