"""Per-message price parsing and cost totals."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from nexmo_sms.errors import MalformedResponseError


def to_decimal(value: Any, field: str) -> Decimal:
    """Parse a numeric or numeric-looking string field into a Decimal."""
    if isinstance(value, bool):
        raise MalformedResponseError(f"'{field}' is not numeric: {value!r}")
    try:
        # floats go through str() so 0.05 stays 0.05
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise MalformedResponseError(f"'{field}' is not numeric: {value!r}") from exc
    if not result.is_finite():
        raise MalformedResponseError(f"'{field}' is not numeric: {value!r}")
    return result


def aggregate_cost(entries: Iterable[Mapping[str, Any]], key: str = "price") -> Decimal:
    """Sum ``key`` across ``entries``. Missing prices count as zero."""
    total = Decimal("0")
    for entry in entries:
        value = entry.get(key)
        if value is None:
            continue
        total += to_decimal(value, key)
    return total
