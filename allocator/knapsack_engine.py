"""
allocator/knapsack_engine.py
----------------------------
Pure optimization engine: (budget, assets) → integer share allocation.

Design contract:
  - No I/O, no formatting, no retained state between calls
  - Inputs are validated before any work starts; no partial results
  - Fully deterministic (ties resolve to the lower asset index)
  - All methods are @staticmethod
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from allocator import config as _config
from allocator.cancellation import CancellationToken
from allocator.enums import OptimizationMethod
from allocator.models import AllocationLine, AllocationResult, Asset
from allocator.validation import validate_assets, validate_budget

logger = logging.getLogger(__name__)


class KnapsackEngine:
    """
    Spend a budget on whole shares so that total expected monetary return
    is maximal.

    The problem is an unbounded integer knapsack: each asset may be bought
    any number of times, its weight is its price and its value is the money
    one share is expected to return (``price * expected_return / 100``).

    Currency is discretized to integer units (cents by default).  Prices are
    rounded **up** and the budget **down**, so the real cost of any solution
    the table admits never exceeds the real budget.  Units are then divided
    by the gcd of the buyable prices, which keeps round-dollar budgets small.

    Optional overrides (passed via *config*):
        ``units_per_currency`` – discretization resolution (default 100)
        ``max_dp_units``       – largest table before the greedy fallback
        ``max_dp_blocks``      – most fill iterations before the greedy fallback
        ``max_budget``         – budgets above this are rejected
        ``cancel_check_interval`` – units between cancellation polls
    All integer settings must be positive; ``max_budget`` non-negative.
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def optimize(
        budget: float,
        assets: Optional[Iterable[Any]],
        config: Optional[Dict] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> AllocationResult:
        """
        Allocate *budget* across *assets*.

        Parameters
        ----------
        budget:
            Non-negative amount of currency to spend.
        assets:
            Ordered :class:`Asset` objects or ``{symbol, price,
            expectedReturn}`` mappings.  Never mutated.
        config:
            Optional dict overriding values from :mod:`allocator.config`.
        cancel_token:
            Polled during the table fill; setting it raises
            :class:`OptimizationCancelled`.

        Returns
        -------
        AllocationResult with lines sorted by total return value, highest
        first.

        Raises
        ------
        InvalidBudgetError
            Budget negative, non-numeric or above ``max_budget``.
        InvalidAssetError
            Any asset with ``price <= 0``, ``expected_return < 0`` or a
            non-numeric field.
        """
        settings = KnapsackEngine._settings(config)

        budget = validate_budget(budget, settings["max_budget"])
        stocks = validate_assets(assets)

        if not stocks:
            return AllocationResult.empty(budget)

        scale = settings["units_per_currency"]
        capacity = KnapsackEngine._to_units(budget, scale, math.floor)
        # A price can never occupy zero units or the recurrence would not advance
        units = np.array(
            [max(1, KnapsackEngine._to_units(s.price, scale, math.ceil)) for s in stocks],
            dtype=np.int64,
        )
        values = np.array([s.return_value_per_unit for s in stocks], dtype=np.float64)

        units, capacity = KnapsackEngine._reduce(units, values, capacity)
        blocks = KnapsackEngine._block_count(units, values, capacity)

        if capacity > settings["max_dp_units"] or blocks > settings["max_dp_blocks"]:
            logger.warning(
                "Budget of %d units in %d blocks exceeds the DP ceiling "
                "(%d units, %d blocks); using greedy allocation.",
                capacity, blocks, settings["max_dp_units"], settings["max_dp_blocks"],
            )
            method = OptimizationMethod.GREEDY
            quantities, objective = KnapsackEngine._greedy(stocks, units, values, capacity)
        else:
            method = OptimizationMethod.EXACT
            quantities, objective = KnapsackEngine._solve_exact(
                units, values, capacity,
                settings["cancel_check_interval"], cancel_token,
            )

        logger.debug(
            "Optimized %d assets over %d units (%s): objective=%.6f",
            len(stocks), capacity, method.value, objective,
        )
        return KnapsackEngine._build_result(budget, stocks, quantities, objective, method)

    # ------------------------------------------------------------------ #
    #  Solvers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _solve_exact(
        units: np.ndarray,
        values: np.ndarray,
        capacity: int,
        check_interval: int,
        cancel_token: Optional[CancellationToken],
    ) -> Tuple[List[int], float]:
        """
        Fill ``dp[0..capacity]`` and backtrack the recorded choices.

        ``dp[w]`` is the best return value achievable spending at most *w*
        units; ``choice[w]`` is the asset whose purchase achieved it, or -1.
        Only assets with a positive return are candidates: a zero-return
        share would tie the best total and be bought as filler.

        Every candidate costs at least ``block`` units, so all of
        ``dp[start:start + block]`` depends only on earlier blocks and is
        computed in one vectorized step.  Candidate rows are in input order
        and ``np.argmax`` returns the first maximum, so ties go to the lower
        index; a cell is set only on strict improvement over 0.
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        quantities = [0] * len(units)
        candidates = np.flatnonzero(values > 0)
        if candidates.size == 0 or capacity < units[candidates].min():
            return quantities, 0.0

        cand_units = units[candidates][:, np.newaxis]
        cand_values = values[candidates][:, np.newaxis]
        block = int(cand_units.min())

        dp = np.zeros(capacity + 1, dtype=np.float64)
        choice = np.full(capacity + 1, -1, dtype=np.int64)

        next_poll = 0
        for start in range(block, capacity + 1, block):
            if cancel_token is not None and start >= next_poll:
                cancel_token.raise_if_cancelled()
                next_poll = start + check_interval

            stop = min(start + block, capacity + 1)
            prev = np.arange(start, stop)[np.newaxis, :] - cand_units
            totals = np.where(prev >= 0, dp[np.maximum(prev, 0)] + cand_values, -np.inf)
            best = np.argmax(totals, axis=0)
            best_totals = totals[best, np.arange(stop - start)]
            improved = best_totals > 0
            dp[start:stop] = np.where(improved, best_totals, 0.0)
            choice[start:stop] = np.where(improved, candidates[best], -1)

        w = capacity
        while w > 0 and choice[w] >= 0:
            i = int(choice[w])
            quantities[i] += 1
            w -= int(units[i])

        return quantities, float(dp[capacity])

    @staticmethod
    def _greedy(
        stocks: Sequence[Asset],
        units: np.ndarray,
        values: np.ndarray,
        capacity: int,
    ) -> Tuple[List[int], float]:
        """
        Fallback for budgets too large to tabulate.

        Every asset returns ``expected_return`` percent of what is spent on it,
        so assets are taken in descending return order (then by index), each
        in the largest whole quantity the remaining units allow.
        """
        order = sorted(range(len(stocks)), key=lambda i: (-stocks[i].expected_return, i))

        quantities = [0] * len(stocks)
        remaining = capacity
        for i in order:
            if values[i] <= 0:
                continue
            qty = remaining // int(units[i])
            quantities[i] = qty
            remaining -= qty * int(units[i])

        objective = math.fsum(q * float(v) for q, v in zip(quantities, values))
        return quantities, objective

    # ------------------------------------------------------------------ #
    #  Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _settings(config: Optional[Dict]) -> Dict[str, Any]:
        """Merge *config* over the module defaults; unknown or bad values raise."""
        settings = {
            "units_per_currency":    _config.UNITS_PER_CURRENCY,
            "max_dp_units":          _config.MAX_DP_UNITS,
            "max_dp_blocks":         _config.MAX_DP_BLOCKS,
            "max_budget":            _config.MAX_BUDGET,
            "cancel_check_interval": _config.CANCEL_CHECK_INTERVAL,
        }
        if not config:
            return settings

        unknown = set(config) - set(settings)
        if unknown:
            raise ValueError(
                f"Unknown optimizer config keys: {sorted(unknown)}. "
                f"Choose from {sorted(settings)}."
            )
        settings.update(config)

        for key in ("units_per_currency", "max_dp_units", "max_dp_blocks",
                    "cancel_check_interval"):
            value = settings[key]
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise ValueError(f"Config {key!r} must be a positive integer (got {value!r}).")

        max_budget = settings["max_budget"]
        if (isinstance(max_budget, bool) or not isinstance(max_budget, numbers.Real)
                or math.isnan(max_budget) or max_budget < 0):
            raise ValueError(f"Config 'max_budget' must be a non-negative number (got {max_budget!r}).")
        return settings

    @staticmethod
    def _reduce(units: np.ndarray, values: np.ndarray, capacity: int) -> Tuple[np.ndarray, int]:
        """
        Divide prices and capacity by the gcd of the buyable prices.

        Any purchase costs a multiple of the gcd, so flooring the capacity
        to it loses nothing.  Zero-return prices are never bought and are
        left out of the gcd.
        """
        positive = values > 0
        if not positive.any():
            return units, capacity
        step = int(np.gcd.reduce(units[positive]))
        if step == 1:
            return units, capacity
        return np.maximum(units // step, 1), capacity // step

    @staticmethod
    def _block_count(units: np.ndarray, values: np.ndarray, capacity: int) -> int:
        """Number of fill iterations :meth:`_solve_exact` would run."""
        positive = values > 0
        if not positive.any():
            return 0
        return capacity // int(units[positive].min())

    @staticmethod
    def _to_units(amount: float, scale: int, rounding: Callable[[float], int]) -> int:
        """
        Convert a currency amount to integer units.

        Values within ``DISCRETIZATION_TOLERANCE`` of an integer snap to it;
        anything else goes through *rounding* (``math.floor`` for budgets,
        ``math.ceil`` for prices).
        """
        scaled = amount * scale
        nearest = round(scaled)
        if abs(scaled - nearest) <= _config.DISCRETIZATION_TOLERANCE:
            return int(nearest)
        return int(rounding(scaled))

    @staticmethod
    def _build_result(
        budget: float,
        stocks: Sequence[Asset],
        quantities: Sequence[int],
        objective: float,
        method: OptimizationMethod,
    ) -> AllocationResult:
        """
        Aggregate per-asset quantities into a sorted result.

        Rows sharing a symbol are folded into a single line so ``lines``
        never repeats a symbol.
        """
        by_symbol: Dict[str, AllocationLine] = {}
        for stock, qty in zip(stocks, quantities):
            if qty <= 0:
                continue
            line = AllocationLine.for_asset(stock, qty)
            if stock.symbol in by_symbol:
                line = by_symbol[stock.symbol].combine(line)
            by_symbol[stock.symbol] = line

        lines = list(by_symbol.values())
        # sort() is stable: equal return values keep input order
        lines.sort(key=lambda line: line.total_return_value, reverse=True)

        total_investment = math.fsum(line.total_cost for line in lines)
        total_return = math.fsum(line.total_return_value for line in lines)

        # Snapped rounding can leave a float residue a hair below zero
        remaining = max(budget - total_investment, 0.0)

        return AllocationResult(
            budget=budget,
            lines=tuple(lines),
            total_investment=total_investment,
            total_expected_return_value=total_return,
            remaining_budget=remaining,
            objective_value=objective,
            method=method,
        )


def optimize(
    budget: float,
    assets: Optional[Iterable[Any]],
    config: Optional[Dict] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> AllocationResult:
    """Module-level shortcut for :meth:`KnapsackEngine.optimize`."""
    return KnapsackEngine.optimize(budget, assets, config=config, cancel_token=cancel_token)
