import unittest

from salesmr.reporting import Report, growth, money, percent, round_half_up, units


class TestFormatting(unittest.TestCase):
    def test_units_round_half_up_with_separators(self) -> None:
        self.assertEqual(units(1234567.5), "1,234,568")
        self.assertEqual(units(2.5), "3")
        self.assertEqual(round_half_up(0.49), 0)

    def test_money(self) -> None:
        self.assertEqual(money(75), "$75.00")
        self.assertEqual(money(1234.5), "$1234.50")

    def test_growth(self) -> None:
        self.assertEqual(growth(150, 100), "+50.0%")
        self.assertEqual(growth(50, 100), "-50.0%")
        self.assertEqual(growth(100, 100), "+0.0%")
        self.assertEqual(growth(100, None), "N/A")
        self.assertEqual(growth(100, 0), "N/A")

    def test_percent_zero_denominator(self) -> None:
        self.assertEqual(percent(5, 0), 0.0)
        self.assertAlmostEqual(percent(30, 100), 30.0)


class TestReport(unittest.TestCase):
    def test_sections_and_table_rule(self) -> None:
        report = Report()
        report.section("TOTALS").table("Rank | Key", ["   1 | A"])
        self.assertEqual(report.render(), "=== TOTALS ===\nRank | Key\n-----|----\n   1 | A")


if __name__ == "__main__":
    unittest.main()
