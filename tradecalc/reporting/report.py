"""
Report generation utilities.

This module turns worksheet results into files: a JSON document for a
trade plan, and for an evaluated journal a CSV of the per-trade
results plus a PNG bar chart of the R-multiples.
"""

from __future__ import annotations

import os
import json
from dataclasses import asdict
import logging
import pandas as pd
import matplotlib

# Use non‑interactive backend for environments without display
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..worksheet.plan import TradePlan


logger = logging.getLogger(__name__)


def _round_value(value, decimals: int):
    if isinstance(value, float):
        return round(value, decimals)
    return value


def write_plan_report(plan: TradePlan, out_dir: str = "results", decimals: int = 4) -> str:
    """Write `plan.json` to `out_dir` and return its path.

    Float fields are rounded to `decimals` places; the share count and
    flags are written as they are.
    """
    os.makedirs(out_dir, exist_ok=True)
    data = {key: _round_value(value, decimals) for key, value in asdict(plan).items()}
    plan_path = os.path.join(out_dir, 'plan.json')
    with open(plan_path, 'w', encoding='utf-8') as fh:
        json.dump(data, fh, indent=2, ensure_ascii=False)
    logger.info("Trade plan written to %s", plan_path)
    return plan_path


def write_journal_report(
    evaluated: pd.DataFrame,
    out_dir: str = "results",
    decimals: int = 4,
    plot: bool = True,
) -> None:
    """Write the evaluated journal to `out_dir`.

    Creates the output directory if it does not exist and writes:

    - `evaluated.csv` – the journal with the after-trade columns
    - `r_multiples.png` – bar chart of the R-multiple of each trade
      (only when `plot` is true)
    """
    os.makedirs(out_dir, exist_ok=True)

    csv_path = os.path.join(out_dir, 'evaluated.csv')
    evaluated.round(decimals).to_csv(csv_path, index=False)
    logger.info("Evaluated journal written to %s", csv_path)

    if not plot:
        return

    fig, ax = plt.subplots(figsize=(10, 4))
    if not evaluated.empty:
        r_multiples = evaluated['r_multiple']
        colors = ['tab:green' if r >= 0 else 'tab:red' for r in r_multiples]
        ax.bar(range(1, len(r_multiples) + 1), r_multiples, color=colors)
        ax.axhline(0.0, color='black', linewidth=0.8)
        ax.set_title('R-multiple per trade')
        ax.set_xlabel('Trade')
        ax.set_ylabel('R')
    fig.tight_layout()
    plot_path = os.path.join(out_dir, 'r_multiples.png')
    fig.savefig(plot_path)
    plt.close(fig)
    logger.info("R-multiple chart written to %s", plot_path)
