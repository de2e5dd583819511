"""
allocator/constants.py
----------------------
Default data and display constants shared by the loader, the asset book and
the formatter.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Sample asset list shown on first launch
# ---------------------------------------------------------------------------

DEFAULT_ASSET_RECORDS: list[dict] = [
    {"symbol": "AAPL",  "price": 175.0, "expectedReturn": 12.0},
    {"symbol": "GOOGL", "price": 140.0, "expectedReturn": 15.0},
    {"symbol": "MSFT",  "price": 380.0, "expectedReturn": 18.0},
    {"symbol": "AMZN",  "price": 145.0, "expectedReturn": 14.0},
    {"symbol": "TSLA",  "price": 240.0, "expectedReturn": 20.0},
]

# Values given to a row added with no arguments.
NEW_ASSET_RECORD: dict = {"symbol": "NEW", "price": 100.0, "expectedReturn": 10.0}


# ---------------------------------------------------------------------------
# CSV columns
# ---------------------------------------------------------------------------
# The return column may use either spelling.

CSV_SYMBOL_COLUMN: str = "symbol"
CSV_PRICE_COLUMN: str = "price"
CSV_RETURN_COLUMNS: tuple = ("expectedReturn", "expected_return")


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

CURRENCY_SYMBOL: str = "$"

EMPTY_SELECTION_MESSAGE: str = "No stocks selected. Try increasing your budget."
