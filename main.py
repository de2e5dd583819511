import argparse
import logging
import sys
from typing import Optional, Sequence

from allocator.asset_loader import AssetLoader
from allocator.budget_parser import parse_budget
from allocator.errors import InvalidArgumentError
from allocator.knapsack_engine import optimize
from allocator.models import Asset
from allocator.result_formatter import ResultFormatter

_QUIT_WORDS = {"exit", "quit", "q", "bye"}


def describe_assets(assets: Sequence[Asset]) -> str:
    rows = [f"  {a.symbol:<8} {ResultFormatter.money(a.price):>12}  {a.expected_return:g}%"
            for a in assets]
    return "Candidate stocks:\n" + "\n".join(rows)


def run_once(budget_text: str, assets: Sequence[Asset]) -> str:
    """Parse *budget_text*, optimize, and return the text to print."""
    budget = parse_budget(budget_text)
    if budget is None or budget <= 0:
        return "Please enter a valid budget."
    if not assets:
        return "Please add at least one stock."
    try:
        result = optimize(budget, assets)
    except InvalidArgumentError as exc:
        return f"Error: {exc}"
    return ResultFormatter.render(result)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Spend a budget on whole shares to maximize expected return.",
    )
    parser.add_argument("--assets", help="CSV file with symbol,price,expectedReturn columns.")
    parser.add_argument("--budget", help="Optimize once for this budget and exit.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        assets = AssetLoader.load_csv(args.assets) if args.assets else AssetLoader.default_assets()
    except (FileNotFoundError, ValueError) as exc:
        print(f"Could not load assets: {exc}", file=sys.stderr)
        return 1

    if args.budget is not None:
        print(run_once(args.budget, assets))
        return 0

    print("Welcome to Stock It Up Allocator")
    print("Type 'exit' to quit.\n")
    print(describe_assets(assets))

    while True:
        try:
            user_input = input("\nBudget: ")
        except EOFError:
            break

        if user_input.strip().lower() in _QUIT_WORDS:
            break

        print(run_once(user_input, assets))

    return 0


if __name__ == "__main__":
    sys.exit(main())
