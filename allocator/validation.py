"""
allocator/validation.py
-----------------------
Boundary checks for the allocator's two inputs.

Everything that reaches :class:`KnapsackEngine` has been through here, so the
engine itself can assume a non-negative finite budget and assets with
positive prices and non-negative returns.  Symbols are treated as opaque:
only their presence is checked, never their format.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Mapping, Optional, Tuple

from allocator.config import MAX_BUDGET
from allocator.errors import InvalidAssetError, InvalidBudgetError
from allocator.models import Asset


_RETURN_KEYS = ("expectedReturn", "expected_return")


def _as_number(value: Any) -> Optional[float]:
    """Return *value* as a finite float, or ``None`` if it is not one."""
    # bool is an Integral subclass; True must not be read as 1.0
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def validate_budget(budget: Any, max_budget: float = MAX_BUDGET) -> float:
    """
    Return *budget* as a float.

    Raises
    ------
    InvalidBudgetError
        If the budget is non-numeric, not finite, negative or above
        *max_budget*.
    """
    number = _as_number(budget)
    if number is None:
        raise InvalidBudgetError(budget, "must be a finite number")
    if number < 0:
        raise InvalidBudgetError(budget, "must not be negative")
    if number > max_budget:
        raise InvalidBudgetError(
            budget, f"exceeds the safety ceiling of {max_budget:,.0f}"
        )
    return number


def validate_asset(record: Any, index: int = 0) -> Asset:
    """
    Validate one asset and return it as an :class:`Asset`.

    *record* may be an ``Asset`` or a mapping with ``symbol``, ``price`` and
    ``expectedReturn`` (or ``expected_return``) keys.
    """
    if isinstance(record, Asset):
        symbol, price, expected = record.symbol, record.price, record.expected_return
    elif isinstance(record, Mapping):
        symbol = record.get("symbol")
        price = record.get("price")
        expected = next(
            (record[k] for k in _RETURN_KEYS if k in record), None
        )
    else:
        raise InvalidAssetError(
            index, "record", record, "expected an Asset or a mapping"
        )

    if not isinstance(symbol, str) or not symbol:
        raise InvalidAssetError(index, "symbol", symbol, "must be a non-empty string")

    price_num = _as_number(price)
    if price_num is None:
        raise InvalidAssetError(index, "price", price, "must be a finite number", symbol)
    if price_num <= 0:
        raise InvalidAssetError(index, "price", price, "must be positive", symbol)

    expected_num = _as_number(expected)
    if expected_num is None:
        raise InvalidAssetError(
            index, "expectedReturn", expected, "must be a finite number", symbol
        )
    if expected_num < 0:
        raise InvalidAssetError(
            index, "expectedReturn", expected, "must not be negative", symbol
        )

    return Asset(symbol=symbol, price=price_num, expected_return=expected_num)


def validate_assets(assets: Iterable[Any]) -> Tuple[Asset, ...]:
    """Validate every asset in order; the first bad one raises."""
    if assets is None:
        return ()
    return tuple(validate_asset(record, i) for i, record in enumerate(assets))
