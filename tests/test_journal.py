import os
import sys
import tempfile
import pandas as pd

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tradecalc.config.schema import CostsConfig
from tradecalc.formulas.errors import InvalidArgumentError
from tradecalc.worksheet.journal import RESULT_COLUMNS, evaluate_journal, load_journal

import unittest


def _journal() -> pd.DataFrame:
    return pd.DataFrame({
        'price_buy': [4138.00, 4178.50],
        'shares_buy': [4, 4],
        'price_sell': [4151.30, 4144.50],
        'shares_sell': [4, 4],
        'risk_initial': [117.4136, 119.4196],
    })


class TestEvaluateJournal(unittest.TestCase):
    def test_results_per_trade(self) -> None:
        out = evaluate_journal(_journal(), CostsConfig(tax_pct=0.0, commission=3.0))
        first, second = out.iloc[0], out.iloc[1]
        self.assertAlmostEqual(first['profit_loss'], 53.2)
        self.assertAlmostEqual(first['risk_actual'], 117.4136)
        self.assertAlmostEqual(first['r_multiple'], 53.2 / 117.4136)
        self.assertAlmostEqual(first['cost_total'], 6.0)
        self.assertAlmostEqual(second['profit_loss'], -136.0)
        self.assertAlmostEqual(second['risk_actual'], 142.0)
        self.assertAlmostEqual(second['r_multiple'], -136.0 / 119.4196)

    def test_input_is_not_modified(self) -> None:
        journal = _journal()
        evaluate_journal(journal, CostsConfig())
        self.assertNotIn('profit_loss', journal.columns)

    def test_cost_columns_override_defaults(self) -> None:
        journal = _journal()
        journal['commission_buy'] = [10.0, None]
        out = evaluate_journal(journal, CostsConfig(tax_pct=0.0, commission=3.0))
        self.assertAlmostEqual(out.iloc[0]['cost_total'], 13.0)
        self.assertAlmostEqual(out.iloc[1]['cost_total'], 6.0)

    def test_empty_journal(self) -> None:
        out = evaluate_journal(_journal().iloc[0:0], CostsConfig())
        self.assertTrue(out.empty)
        for column in RESULT_COLUMNS:
            self.assertIn(column, out.columns)


class TestLoadJournal(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_load_and_strip_headers(self) -> None:
        path = os.path.join(self.tmp.name, "journal.csv")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("price_buy, shares_buy, price_sell, shares_sell, risk_initial\n")
            fh.write("10.0,100,12.0,100,50.0\n")
        df = load_journal(path)
        self.assertEqual(len(df), 1)
        self.assertIn('shares_buy', df.columns)

    def test_missing_column_raises(self) -> None:
        path = os.path.join(self.tmp.name, "journal.csv")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("price_buy,shares_buy,price_sell\n10.0,100,12.0\n")
        with self.assertRaises(InvalidArgumentError):
            load_journal(path)

    def test_non_numeric_column_raises(self) -> None:
        path = os.path.join(self.tmp.name, "journal.csv")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("price_buy,shares_buy,price_sell,shares_sell,risk_initial,commission_buy\n")
            fh.write("10.0,100,12.0,100,50.0,free\n")
        with self.assertRaises(InvalidArgumentError):
            load_journal(path)

    def test_empty_file_raises(self) -> None:
        path = os.path.join(self.tmp.name, "journal.csv")
        open(path, "w", encoding="utf-8").close()
        with self.assertRaises(InvalidArgumentError):
            load_journal(path)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_journal(os.path.join(self.tmp.name, "nope.csv"))


if __name__ == '__main__':
    unittest.main()
