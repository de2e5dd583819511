"""
allocator/result_formatter.py
-----------------------------
Text rendering of an :class:`AllocationResult`.

**Formatting-only**: all numbers come from the result as computed by the
engine; this module only rounds them for display and lays them out.
"""

from __future__ import annotations

from typing import List

from allocator.constants import CURRENCY_SYMBOL, EMPTY_SELECTION_MESSAGE
from allocator.enums import OptimizationMethod
from allocator.models import AllocationResult


class ResultFormatter:
    """
    Build human-readable summaries of allocation results.

    Entry point::

        text = ResultFormatter.render(result)
    """

    # ------------------------------------------------------------------ #
    #  Public entry points
    # ------------------------------------------------------------------ #

    @staticmethod
    def render(result: AllocationResult, currency: str = CURRENCY_SYMBOL) -> str:
        """Summary block followed by the allocation table."""
        return (
            ResultFormatter.summary(result, currency)
            + "\n\n"
            + ResultFormatter.table(result, currency)
        )

    @staticmethod
    def summary(result: AllocationResult, currency: str = CURRENCY_SYMBOL) -> str:
        lines = [
            f"Total investment : {ResultFormatter.money(result.total_investment, currency)}",
            f"Expected return  : {result.portfolio_return_pct:.2f}%"
            f" ({ResultFormatter.money(result.total_expected_return_value, currency)})",
            f"Remaining budget : {ResultFormatter.money(result.remaining_budget, currency)}",
        ]
        if result.method is OptimizationMethod.GREEDY:
            lines.append("Note: budget too large for exact search; greedy allocation used.")
        return "\n".join(lines)

    @staticmethod
    def table(result: AllocationResult, currency: str = CURRENCY_SYMBOL) -> str:
        """
        ASCII table of the selected lines, one row per asset::

            Symbol    Qty      Price       Cost   Return    Value
            TSLA        4    $240.00    $960.00   20.00%  $192.00
        """
        if result.is_empty:
            return EMPTY_SELECTION_MESSAGE

        header = (
            f"{'Symbol':<8} {'Qty':>5} {'Price':>12} {'Cost':>14} "
            f"{'Return':>8} {'Value':>12}"
        )
        rows: List[str] = [header, "-" * len(header)]
        for line in result.lines:
            rows.append(
                f"{line.symbol:<8} {line.quantity:>5} "
                f"{ResultFormatter.money(line.unit_price, currency):>12} "
                f"{ResultFormatter.money(line.total_cost, currency):>14} "
                f"{line.expected_return_pct:>7.2f}% "
                f"{ResultFormatter.money(line.total_return_value, currency):>12}"
            )
        return "\n".join(rows)

    @staticmethod
    def money(amount: float, currency: str = CURRENCY_SYMBOL) -> str:
        """``1234.5`` → ``"$1,234.50"``."""
        return f"{currency}{amount:,.2f}"
