"""
After-trade worksheet for a journal of completed trades.

A journal is a CSV file with one completed round trip per row.  The
expected schema is:

```
price_buy,shares_buy,price_sell,shares_sell,risk_initial[,tax_buy,commission_buy,tax_sell,commission_sell]
```

Missing cost columns (or empty cells in them) are filled with the
configured tax and commission.  Each row is evaluated on its own with
the after-trade formulas; no totals across rows are computed.
"""

from __future__ import annotations

from pathlib import Path
from typing import List
import logging
import pandas as pd

from ..config.schema import CostsConfig
from ..formulas import after_trade, before_trade
from ..formulas.errors import InvalidArgumentError


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: List[str] = ['price_buy', 'shares_buy', 'price_sell', 'shares_sell', 'risk_initial']
COST_COLUMNS: List[str] = ['tax_buy', 'commission_buy', 'tax_sell', 'commission_sell']
RESULT_COLUMNS: List[str] = ['profit_loss', 'risk_actual', 'r_multiple', 'cost_total']


def load_journal(path: str) -> pd.DataFrame:
    """Read a journal CSV into a DataFrame.

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    InvalidArgumentError
        If the file is not a readable CSV, or a required column is
        missing or not numeric.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Journal file not found: {file_path}")

    try:
        df = pd.read_csv(file_path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise InvalidArgumentError(f"Journal {file_path} is not a readable CSV file: {exc}") from exc
    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidArgumentError(
            f"Journal {file_path} is missing columns: {missing}. Found columns: {list(df.columns)}"
        )
    numeric = REQUIRED_COLUMNS + [c for c in COST_COLUMNS if c in df.columns]
    for column in numeric:
        try:
            df[column] = pd.to_numeric(df[column], errors="raise")
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Journal {file_path}: column '{column}' is not numeric: {exc}") from exc
    logger.info("Loaded %d trade(s) from %s", len(df), file_path)
    return df


def _evaluate_row(row: pd.Series) -> pd.Series:
    price_buy = float(row['price_buy'])
    shares_buy = row['shares_buy']
    price_sell = float(row['price_sell'])
    shares_sell = row['shares_sell']
    tax_buy = float(row['tax_buy'])
    commission_buy = float(row['commission_buy'])
    tax_sell = float(row['tax_sell'])
    commission_sell = float(row['commission_sell'])
    risk_initial = float(row['risk_initial'])

    profit_loss = after_trade.calculate_profit_loss(price_buy, shares_buy, price_sell, shares_sell)
    risk_actual = after_trade.calculate_risk_actual(
        price_buy, shares_buy, tax_buy, commission_buy,
        price_sell, shares_sell, tax_sell, commission_sell,
        risk_initial, profit_loss,
    )
    cost_total = after_trade.calculate_cost_total(
        before_trade.calculate_amount(price_buy, shares_buy), tax_buy, commission_buy,
        before_trade.calculate_amount(price_sell, shares_sell), tax_sell, commission_sell,
    )
    return pd.Series({
        'profit_loss': profit_loss,
        'risk_actual': risk_actual,
        'r_multiple': after_trade.calculate_r_multiple(profit_loss, risk_initial),
        'cost_total': cost_total,
    })


def evaluate_journal(journal: pd.DataFrame, costs: CostsConfig) -> pd.DataFrame:
    """Return a copy of `journal` with the after-trade results appended.

    Parameters
    ----------
    journal : pandas.DataFrame
        Completed trades, one per row, with at least `REQUIRED_COLUMNS`.
    costs : CostsConfig
        Default tax and commission for cost columns that are absent or
        empty.

    Returns
    -------
    pandas.DataFrame
        The journal plus the columns in `RESULT_COLUMNS`.
    """
    df = journal.copy()
    defaults = {
        'tax_buy': costs.tax_pct,
        'commission_buy': costs.commission,
        'tax_sell': costs.tax_pct,
        'commission_sell': costs.commission,
    }
    for column in COST_COLUMNS:
        if column in df.columns:
            df[column] = df[column].fillna(defaults[column])
        else:
            df[column] = defaults[column]

    if df.empty:
        for column in RESULT_COLUMNS:
            df[column] = pd.Series(dtype=float)
        return df

    results = df.apply(_evaluate_row, axis=1)
    for column in RESULT_COLUMNS:
        df[column] = results[column].astype(float)
    logger.debug("Evaluated %d trade(s)", len(df))
    return df
