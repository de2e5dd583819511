"""
allocator/errors.py
-------------------
Exceptions raised by the allocator.

Both invalid-input errors subclass ``ValueError`` so callers that already
catch ``ValueError`` keep working.
"""

from __future__ import annotations

from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """Base class for every precondition violation."""


class InvalidBudgetError(InvalidArgumentError):
    """Budget is negative, non-numeric or above the configured ceiling."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid budget {value!r}: {reason}.")


class InvalidAssetError(InvalidArgumentError):
    """An asset record has a bad field.  ``index`` is its list position."""

    def __init__(
        self,
        index: int,
        field: str,
        value: Any,
        reason: str,
        symbol: Optional[str] = None,
    ):
        self.index = index
        self.field = field
        self.value = value
        self.reason = reason
        self.symbol = symbol
        label = f"asset #{index}" if not symbol else f"asset #{index} ({symbol})"
        super().__init__(f"Invalid {field} {value!r} for {label}: {reason}.")


class OptimizationCancelled(RuntimeError):
    """Raised from the DP fill loop when its cancellation token is set."""
