import unittest

from allocator.budget_parser import parse_budget


class TestParseBudget(unittest.TestCase):

    def test_plain_numbers(self):
        self.assertEqual(parse_budget("250"), 250.0)
        self.assertEqual(parse_budget("99.95"), 99.95)

    def test_currency_and_separators(self):
        self.assertAlmostEqual(parse_budget("$1,250.50"), 1250.5)
        self.assertAlmostEqual(parse_budget("₹1,00,000"), 100000)

    def test_suffixes(self):
        self.assertAlmostEqual(parse_budget("50k"), 50000)
        self.assertAlmostEqual(parse_budget("1.5m"), 1500000)
        self.assertAlmostEqual(parse_budget("2 lakh"), 200000)
        self.assertAlmostEqual(parse_budget("3 lac"), 300000)
        self.assertAlmostEqual(parse_budget("1 cr"), 10000000)

    def test_embedded_in_sentence(self):
        self.assertAlmostEqual(parse_budget("I have 500 dollars"), 500)

    def test_negative_kept(self):
        self.assertEqual(parse_budget("-50"), -50.0)

    def test_no_number(self):
        self.assertIsNone(parse_budget("lots"))
        self.assertIsNone(parse_budget(""))


if __name__ == "__main__":
    unittest.main()
