from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

from allocator.constants import DEFAULT_ASSET_RECORDS, NEW_ASSET_RECORD
from allocator.models import Asset
from allocator.validation import validate_asset, validate_assets

logger = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "symbol":          "symbol",
    "price":           "price",
    "expected_return": "expectedReturn",
    "expectedReturn":  "expectedReturn",
}


class AssetBook:
    """
    Editable, caller-owned list of assets.

    The optimizer never holds on to this object: callers pass
    :meth:`assets` (an immutable snapshot) to ``optimize`` and keep editing
    the book afterwards without affecting earlier results.
    """

    def __init__(self, assets: Optional[Iterable[Any]] = None):
        records = DEFAULT_ASSET_RECORDS if assets is None else assets
        self._assets: List[Asset] = list(validate_assets(records))

    def __len__(self) -> int:
        return len(self._assets)

    def __getitem__(self, index: int) -> Asset:
        return self._assets[index]

    def assets(self) -> Tuple[Asset, ...]:
        """Return a snapshot of the current list."""
        return tuple(self._assets)

    def add(
        self,
        symbol: str = NEW_ASSET_RECORD["symbol"],
        price: float = NEW_ASSET_RECORD["price"],
        expected_return: float = NEW_ASSET_RECORD["expectedReturn"],
    ) -> Asset:
        """Append an asset (a ``NEW`` placeholder row by default)."""
        asset = validate_asset(
            {"symbol": symbol, "price": price, "expectedReturn": expected_return},
            len(self._assets),
        )
        self._assets.append(asset)
        logger.debug("Added %s at position %d", asset.symbol, len(self._assets) - 1)
        return asset

    def update(self, index: int, **fields: Any) -> Asset:
        """
        Replace one or more fields of the asset at *index*.

        Accepts ``symbol``, ``price`` and ``expected_return`` (or
        ``expectedReturn``).  The edited row is validated before it replaces
        the old one, so a rejected edit leaves the book unchanged.
        """
        self._check_index(index)
        unknown = set(fields) - set(_FIELD_ALIASES)
        if unknown:
            raise ValueError(f"Unknown asset fields: {sorted(unknown)}")

        record = self._assets[index].to_dict()
        for name, value in fields.items():
            record[_FIELD_ALIASES[name]] = value

        asset = validate_asset(record, index)
        self._assets[index] = asset
        return asset

    def remove(self, index: int) -> Asset:
        """Delete and return the asset at *index*."""
        self._check_index(index)
        asset = self._assets.pop(index)
        logger.debug("Removed %s from position %d", asset.symbol, index)
        return asset

    def reset(self) -> None:
        """Restore the sample list."""
        self._assets = list(validate_assets(DEFAULT_ASSET_RECORDS))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._assets):
            raise IndexError(
                f"Asset index {index} out of range (book holds {len(self._assets)})."
            )
