"""
tests/test_result_formatter.py
------------------------------
Unit tests for ResultFormatter.

Test coverage:
    Money formatting
    Summary block (totals, weighted return, greedy note)
    Allocation table rows and empty-selection message
"""

import unittest

from allocator.knapsack_engine import optimize
from allocator.models import AllocationResult
from allocator.result_formatter import ResultFormatter


def _assets(*rows) -> list:
    return [{"symbol": s, "price": p, "expectedReturn": r} for s, p, r in rows]


class TestMoney(unittest.TestCase):

    def test_two_decimals_and_separators(self):
        self.assertEqual(ResultFormatter.money(1234.5), "$1,234.50")

    def test_custom_currency(self):
        self.assertEqual(ResultFormatter.money(10, "₹"), "₹10.00")


class TestSummary(unittest.TestCase):

    def test_totals(self):
        text = ResultFormatter.summary(optimize(250, _assets(("A", 100, 10))))
        self.assertIn("$200.00", text)
        self.assertIn("10.00%", text)
        self.assertIn("$20.00", text)
        self.assertIn("Remaining budget : $50.00", text)

    def test_greedy_note(self):
        result = optimize(250, _assets(("A", 100, 10)), config={"max_dp_units": 1})
        self.assertIn("greedy", ResultFormatter.summary(result))

    def test_no_greedy_note_for_exact(self):
        self.assertNotIn("greedy", ResultFormatter.summary(optimize(250, _assets(("A", 100, 10)))))


class TestTable(unittest.TestCase):

    def test_empty_message(self):
        self.assertEqual(
            ResultFormatter.table(AllocationResult.empty(5)),
            "No stocks selected. Try increasing your budget.",
        )

    def test_one_row_per_line(self):
        result = optimize(40, _assets(("A", 10, 10), ("B", 15, 20)))
        rows = ResultFormatter.table(result).splitlines()
        # header + rule + two assets
        self.assertEqual(len(rows), 4)
        self.assertTrue(rows[2].startswith("B"))
        self.assertIn("$30.00", rows[2])
        self.assertIn("20.00%", rows[2])
        self.assertTrue(rows[3].startswith("A"))

    def test_render_combines_sections(self):
        result = optimize(30, _assets(("A", 10, 10), ("B", 15, 20)))
        text = ResultFormatter.render(result)
        self.assertIn("Total investment", text)
        self.assertIn("Symbol", text)


if __name__ == "__main__":
    unittest.main()
