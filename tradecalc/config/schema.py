"""
Configuration schema and loader.

This module defines dataclasses that mirror the expected structure of
the YAML configuration file (`config.yaml`).  A helper function
`load_config()` reads a YAML file from disk and returns an instance
of `Config` populated with defaults for any missing fields.

The formulas never read configuration; only the worksheets and the
command-line tool use it to fill in account and cost parameters the
user did not pass explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, asdict
from typing import Optional, Dict, Any
import yaml

from ..formulas.errors import TradeCalcError


class ConfigError(TradeCalcError):
    """The configuration file could not be turned into a `Config`."""


@dataclass
class AccountConfig:
    """Describes the trading account.

    Attributes
    ----------
    pool : float
        Capital available for trading, in the account currency.
    risk_pct : float
        Percentage of the pool risked per trade (``2.0`` = 2 %).
    currency : str
        Account currency code, used for display only.
    exchange_rate : float
        Rate applied to prices quoted in the instrument's currency to
        express them in the account currency.
    """

    pool: float = 10_000.0
    risk_pct: float = 2.0
    currency: str = "EUR"
    exchange_rate: float = 1.0


@dataclass
class CostsConfig:
    """Models transaction costs.

    Attributes
    ----------
    tax_pct : float
        Tax levied on the amount of each transaction, 0–100 scale.
    commission : float
        Flat commission charged by the broker per transaction.
    """

    tax_pct: float = 0.0
    commission: float = 0.0


@dataclass
class ReportConfig:
    """Output settings for the command-line tool."""

    out_dir: str = "results"
    decimals: int = 4
    plot: bool = True


@dataclass
class Config:
    """Root configuration."""

    account: AccountConfig = field(default_factory=AccountConfig)
    costs: CostsConfig = field(default_factory=CostsConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


_SECTIONS = {
    'account': AccountConfig,
    'costs': CostsConfig,
    'report': ReportConfig,
}


def _merge_dict(defaults: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries.

    The values in `override` take precedence over those in `defaults`.
    """
    result: Dict[str, Any] = defaults.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def _build_section(name: str, values: Any) -> Any:
    cls = _SECTIONS[name]
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(values).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown key(s) in section '{name}': {', '.join(unknown)}")
    return cls(**values)


def load_config(path: Optional[str]) -> Config:
    """Load a configuration file from the given YAML path.

    Parameters
    ----------
    path : str or None
        Path to the YAML file.  ``None`` returns the defaults.

    Returns
    -------
    Config
        A populated configuration object.

    Raises
    ------
    ConfigError
        If the file cannot be read or parsed, the document or a section is
        not a mapping, a section holds keys the schema does not know, or a
        value cannot be converted to its field type.
    """
    if path is None:
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"{path}: cannot load configuration: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    unknown = sorted(set(raw) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"{path}: unknown section(s): {', '.join(unknown)}")

    defaults: Dict[str, Any] = asdict(Config())
    merged = _merge_dict(defaults, raw)

    cfg = Config(
        account=_build_section('account', merged['account']),
        costs=_build_section('costs', merged['costs']),
        report=_build_section('report', merged['report']),
    )
    try:
        cfg.account.pool = float(cfg.account.pool)
        cfg.account.risk_pct = float(cfg.account.risk_pct)
        cfg.account.exchange_rate = float(cfg.account.exchange_rate)
        cfg.costs.tax_pct = float(cfg.costs.tax_pct)
        cfg.costs.commission = float(cfg.costs.commission)
        cfg.report.decimals = int(cfg.report.decimals)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{path}: invalid value: {exc}") from exc
    return cfg
