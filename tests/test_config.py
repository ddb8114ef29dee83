import os
import sys
import tempfile

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tradecalc.config.schema import Config, ConfigError, load_config
from tradecalc.formulas.errors import TradeCalcError

import unittest


class TestLoadConfig(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, text: str) -> str:
        path = os.path.join(self.tmp.name, "config.yaml")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
        return path

    def test_none_returns_defaults(self) -> None:
        cfg = load_config(None)
        self.assertEqual(cfg, Config())
        self.assertEqual(cfg.account.pool, 10_000.0)
        self.assertEqual(cfg.report.out_dir, "results")

    def test_partial_file_is_merged_with_defaults(self) -> None:
        path = self._write("account:\n  pool: 25000\ncosts:\n  commission: 3\n")
        cfg = load_config(path)
        self.assertEqual(cfg.account.pool, 25000.0)
        self.assertIsInstance(cfg.account.pool, float)
        self.assertEqual(cfg.account.risk_pct, 2.0)
        self.assertEqual(cfg.costs.commission, 3.0)
        self.assertEqual(cfg.costs.tax_pct, 0.0)
        self.assertTrue(cfg.report.plot)

    def test_empty_file_gives_defaults(self) -> None:
        self.assertEqual(load_config(self._write("")), Config())

    def test_example_config_loads(self) -> None:
        cfg = load_config(os.path.join(PROJECT_ROOT, "config.yaml"))
        self.assertEqual(cfg.costs.commission, 3.0)
        self.assertEqual(cfg.account.currency, "EUR")

    def test_unknown_section_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self._write("broker:\n  name: x\n"))

    def test_unknown_key_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self._write("costs:\n  spread: 0.1\n"))

    def test_non_mapping_document_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self._write("- 1\n- 2\n"))

    def test_non_mapping_section_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self._write("account: 5\n"))

    def test_config_error_is_a_package_error(self) -> None:
        self.assertTrue(issubclass(ConfigError, TradeCalcError))

    def test_non_numeric_value_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self._write("account:\n  pool: abc\n"))

    def test_malformed_yaml_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(self._write("account: [1,\n"))

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(os.path.join(self.tmp.name, "missing.yaml"))


if __name__ == '__main__':
    unittest.main()
