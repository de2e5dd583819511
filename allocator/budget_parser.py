import re
from typing import Optional


# Amount with optional currency symbol, thousands separators and a suffix.
# Longer suffixes come first so "lakh" is not read as nothing + "l…".
_BUDGET_RE = re.compile(
    r"[\$₹€£]?\s*(\d[\d,]*\.?\d*)\s*(lakh|lac|cr|k|m)?\b",
    re.IGNORECASE,
)

_MULTIPLIERS = {
    "k":    1_000,
    "m":    1_000_000,
    "lakh": 100_000,
    "lac":  100_000,
    "cr":   10_000_000,
}


def parse_budget(text: str) -> Optional[float]:
    """
    Extract a budget amount from free text.

    Supports ``$`` / ``₹`` / ``€`` / ``£`` prefixes, comma separators and
    ``k`` / ``m`` / ``lakh`` / ``lac`` / ``cr`` suffixes::

        parse_budget("50k")        -> 50000.0
        parse_budget("$1,250.50")  -> 1250.5
        parse_budget("2 lakh")     -> 200000.0

    Returns ``None`` when *text* contains no number.  A leading minus sign
    is kept so the optimizer can reject negative budgets itself.
    """
    if not text:
        return None
    match = _BUDGET_RE.search(text)
    if not match:
        return None

    raw = float(match.group(1).replace(",", ""))
    suffix = (match.group(2) or "").lower()
    raw *= _MULTIPLIERS.get(suffix, 1)

    if text[:match.start()].strip().endswith("-"):
        raw = -raw
    return raw
