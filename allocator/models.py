"""
allocator/models.py
-------------------
Fixed-shape records passed in and out of the allocator.

``Asset`` is caller-owned input; ``AllocationLine`` and ``AllocationResult``
are built fresh by every optimization call.  All three are frozen so the
engine can never mutate what it was given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from allocator.enums import OptimizationMethod


@dataclass(frozen=True)
class Asset:
    """
    One candidate holding.

    ``expected_return`` is in percentage points (``12`` means 12 %).
    Build from untrusted records through
    :func:`allocator.validation.validate_asset` to get numeric checks.
    """
    symbol: str
    price: float
    expected_return: float

    @property
    def return_value_per_unit(self) -> float:
        """Monetary expected return from holding one share."""
        return self.price * self.expected_return / 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol":         self.symbol,
            "price":          self.price,
            "expectedReturn": self.expected_return,
        }


@dataclass(frozen=True)
class AllocationLine:
    """One asset's quantity / cost / return entry in a result."""
    symbol: str
    unit_price: float
    quantity: int
    total_cost: float
    expected_return_pct: float
    total_return_value: float

    @classmethod
    def for_asset(cls, asset: Asset, quantity: int) -> "AllocationLine":
        total_cost = quantity * asset.price
        return cls(
            symbol=asset.symbol,
            unit_price=asset.price,
            quantity=quantity,
            total_cost=total_cost,
            expected_return_pct=asset.expected_return,
            total_return_value=total_cost * asset.expected_return / 100,
        )

    def combine(self, other: "AllocationLine") -> "AllocationLine":
        """
        Fold *other* (same symbol) into this line.

        Quantities, costs and return values add up; the unit price and
        return percentage become cost-weighted averages.
        """
        if other.symbol != self.symbol:
            raise ValueError(f"Cannot combine {self.symbol!r} with {other.symbol!r}.")
        quantity = self.quantity + other.quantity
        total_cost = self.total_cost + other.total_cost
        total_return = self.total_return_value + other.total_return_value
        return AllocationLine(
            symbol=self.symbol,
            unit_price=total_cost / quantity,
            quantity=quantity,
            total_cost=total_cost,
            expected_return_pct=total_return / total_cost * 100,
            total_return_value=total_return,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol":            self.symbol,
            "unitPrice":         self.unit_price,
            "quantity":          self.quantity,
            "totalCost":         self.total_cost,
            "expectedReturnPct": self.expected_return_pct,
            "totalReturnValue":  self.total_return_value,
        }


@dataclass(frozen=True)
class AllocationResult:
    """
    Output of :func:`allocator.knapsack_engine.optimize`.

    ``lines`` is sorted by ``total_return_value`` descending.  Amounts are
    unrounded; rounding and currency formatting belong to the consumer.
    """
    budget: float
    lines: Tuple[AllocationLine, ...] = ()
    total_investment: float = 0.0
    total_expected_return_value: float = 0.0
    remaining_budget: float = 0.0
    objective_value: float = 0.0
    method: OptimizationMethod = OptimizationMethod.EXACT

    @classmethod
    def empty(
        cls,
        budget: float,
        method: OptimizationMethod = OptimizationMethod.EXACT,
    ) -> "AllocationResult":
        """Nothing bought: the whole budget is left over."""
        return cls(budget=budget, remaining_budget=budget, method=method)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def portfolio_return_pct(self) -> float:
        """Investment-weighted expected return in percentage points."""
        if self.total_investment <= 0:
            return 0.0
        return self.total_expected_return_value / self.total_investment * 100

    def quantities(self) -> Dict[str, int]:
        """Return ``{symbol: quantity}`` for every selected line."""
        return {line.symbol: line.quantity for line in self.lines}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines":                    [line.to_dict() for line in self.lines],
            "totalInvestment":          self.total_investment,
            "totalExpectedReturnValue": self.total_expected_return_value,
            "remainingBudget":          self.remaining_budget,
            "objectiveValue":           self.objective_value,
            "method":                   self.method.value,
        }
