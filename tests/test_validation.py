"""
tests/test_validation.py
------------------------
Unit tests for budget and asset boundary validation.
"""

import math
import unittest

import numpy as np

from allocator.errors import InvalidAssetError, InvalidBudgetError
from allocator.models import Asset
from allocator.validation import validate_asset, validate_assets, validate_budget


class TestValidateBudget(unittest.TestCase):

    def test_accepts_int_and_float(self):
        self.assertEqual(validate_budget(100), 100.0)
        self.assertEqual(validate_budget(99.5), 99.5)
        self.assertIsInstance(validate_budget(100), float)

    def test_accepts_zero(self):
        self.assertEqual(validate_budget(0), 0.0)

    def test_accepts_numpy_scalars(self):
        self.assertEqual(validate_budget(np.float64(12.5)), 12.5)
        self.assertEqual(validate_budget(np.int64(7)), 7.0)

    def test_rejects_negative(self):
        with self.assertRaises(InvalidBudgetError) as ctx:
            validate_budget(-0.01)
        self.assertEqual(ctx.exception.value, -0.01)

    def test_rejects_non_numeric(self):
        for bad in ("50", None, [], True, False, math.nan, math.inf, -math.inf):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidBudgetError):
                    validate_budget(bad)

    def test_ceiling(self):
        self.assertEqual(validate_budget(1000, max_budget=1000), 1000.0)
        with self.assertRaises(InvalidBudgetError) as ctx:
            validate_budget(1000.01, max_budget=1000)
        self.assertIn("ceiling", str(ctx.exception))


class TestValidateAsset(unittest.TestCase):

    def test_camel_case_record(self):
        asset = validate_asset({"symbol": "TCS", "price": 100, "expectedReturn": 12})
        self.assertEqual(asset, Asset("TCS", 100.0, 12.0))

    def test_snake_case_record(self):
        asset = validate_asset({"symbol": "TCS", "price": 100, "expected_return": 12})
        self.assertEqual(asset.expected_return, 12.0)

    def test_asset_passthrough(self):
        asset = Asset("A", 5.0, 1.0)
        self.assertEqual(validate_asset(asset), asset)

    def test_zero_return_allowed(self):
        self.assertEqual(
            validate_asset({"symbol": "Z", "price": 1, "expectedReturn": 0}).expected_return, 0.0
        )

    def test_rejects_non_positive_price(self):
        for bad in (0, -1, -0.5):
            with self.subTest(price=bad):
                with self.assertRaises(InvalidAssetError) as ctx:
                    validate_asset({"symbol": "A", "price": bad, "expectedReturn": 1}, 4)
                self.assertEqual(ctx.exception.index, 4)
                self.assertEqual(ctx.exception.field, "price")
                self.assertEqual(ctx.exception.value, bad)

    def test_rejects_negative_return(self):
        with self.assertRaises(InvalidAssetError) as ctx:
            validate_asset({"symbol": "A", "price": 1, "expectedReturn": -2})
        self.assertEqual(ctx.exception.field, "expectedReturn")

    def test_rejects_missing_return(self):
        with self.assertRaises(InvalidAssetError):
            validate_asset({"symbol": "A", "price": 1})

    def test_rejects_non_numeric_fields(self):
        for price, ret in (("10", 1), (10, "1"), (True, 1), (10, math.nan), (math.inf, 1)):
            with self.subTest(price=price, ret=ret):
                with self.assertRaises(InvalidAssetError):
                    validate_asset({"symbol": "A", "price": price, "expectedReturn": ret})

    def test_rejects_bad_symbol(self):
        for bad in ("", None, 42):
            with self.subTest(symbol=bad):
                with self.assertRaises(InvalidAssetError) as ctx:
                    validate_asset({"symbol": bad, "price": 1, "expectedReturn": 1})
                self.assertEqual(ctx.exception.field, "symbol")

    def test_symbol_format_not_checked(self):
        asset = validate_asset({"symbol": " odd sym! ", "price": 1, "expectedReturn": 1})
        self.assertEqual(asset.symbol, " odd sym! ")

    def test_rejects_non_mapping(self):
        with self.assertRaises(InvalidAssetError) as ctx:
            validate_asset(("A", 1, 1), 2)
        self.assertEqual(ctx.exception.field, "record")
        self.assertEqual(ctx.exception.index, 2)


class TestValidateAssets(unittest.TestCase):

    def test_preserves_order(self):
        assets = validate_assets([
            {"symbol": "B", "price": 2, "expectedReturn": 1},
            {"symbol": "A", "price": 1, "expectedReturn": 1},
        ])
        self.assertEqual([a.symbol for a in assets], ["B", "A"])
        self.assertIsInstance(assets, tuple)

    def test_reports_first_bad_index(self):
        with self.assertRaises(InvalidAssetError) as ctx:
            validate_assets([
                {"symbol": "A", "price": 1, "expectedReturn": 1},
                {"symbol": "B", "price": 1, "expectedReturn": 1},
                {"symbol": "C", "price": 0, "expectedReturn": 1},
                {"symbol": "D", "price": -1, "expectedReturn": 1},
            ])
        self.assertEqual(ctx.exception.index, 2)
        self.assertEqual(ctx.exception.symbol, "C")

    def test_none_is_empty(self):
        self.assertEqual(validate_assets(None), ())


if __name__ == "__main__":
    unittest.main()
