from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Tuple

import pandas as pd

from allocator.constants import (
    CSV_PRICE_COLUMN,
    CSV_RETURN_COLUMNS,
    CSV_SYMBOL_COLUMN,
    DEFAULT_ASSET_RECORDS,
)
from allocator.models import Asset
from allocator.validation import validate_assets


class AssetLoader:
    """
    Supplies validated asset lists to the optimizer.

    Three sources are supported: the built-in sample list, in-memory
    record lists, and CSV files with the columns::

        symbol,price,expectedReturn
        AAPL,175,12

    (``expected_return`` is accepted in place of ``expectedReturn``.)
    Every source goes through :func:`validate_assets`, so a bad row raises
    :class:`InvalidAssetError` naming its position.
    """

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @staticmethod
    def default_assets() -> Tuple[Asset, ...]:
        """Return the sample list shown on first launch."""
        return validate_assets(DEFAULT_ASSET_RECORDS)

    @staticmethod
    def from_records(records: Iterable[Mapping[str, Any]]) -> Tuple[Asset, ...]:
        return validate_assets(records)

    @staticmethod
    def load_csv(path: str | Path) -> Tuple[Asset, ...]:
        """
        Read assets from a CSV file, preserving row order.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        ValueError
            If a required column is missing.
        InvalidAssetError
            If a row has an empty symbol or a bad price / return.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Asset file not found: {path}")

        # Read every cell as text; numeric conversion happens per row below
        df = pd.read_csv(path, dtype=str, skipinitialspace=True)
        df.columns = [str(c).strip() for c in df.columns]

        return_col = next((c for c in CSV_RETURN_COLUMNS if c in df.columns), None)
        missing = {CSV_SYMBOL_COLUMN, CSV_PRICE_COLUMN} - set(df.columns)
        if return_col is None:
            missing.add(CSV_RETURN_COLUMNS[0])
        if missing:
            raise ValueError(f"Asset CSV {path} is missing columns: {sorted(missing)}")

        # Fully blank lines come through as all-NaN rows
        df = df.dropna(how="all").reset_index(drop=True)

        return validate_assets(
            _row_to_record(row, return_col) for row in df.itertuples(index=False)
        )


def _row_to_record(row: Any, return_col: str) -> dict:
    """Turn a pandas row into a plain record, leaving bad cells for validation."""
    data = row._asdict()
    symbol = data[CSV_SYMBOL_COLUMN]
    return {
        "symbol":         symbol.strip() if isinstance(symbol, str) else symbol,
        "price":          _to_number(data[CSV_PRICE_COLUMN]),
        "expectedReturn": _to_number(data[return_col]),
    }


def _to_number(value: Any) -> Any:
    """Coerce numeric-looking cells; anything else is passed through as-is."""
    if isinstance(value, str):
        value = value.strip()
    number = pd.to_numeric(value, errors="coerce")
    if pd.isna(number):
        return value
    return float(number)
