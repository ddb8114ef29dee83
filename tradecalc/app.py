"""
Application entry point.

This module defines a simple command‑line interface around the
formulas: plan a trade before entering it, evaluate a journal of
completed trades, compute an average price, or print the version.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config.schema import Config, load_config
from .formulas import general
from .formulas.errors import InvalidArgumentError, TradeCalcError
from .formulas.models import SharesPrice
from .reporting.report import write_journal_report, write_plan_report
from .worksheet.journal import evaluate_journal, load_journal
from .worksheet.plan import TradePlanner


logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def parse_pair(text: str) -> SharesPrice:
    """Parse a ``SHARES:PRICE`` argument."""
    parts = text.split(':')
    if len(parts) != 2:
        raise InvalidArgumentError(f"Expected SHARES:PRICE, got {text!r}")
    try:
        return SharesPrice(shares=float(parts[0]), price=float(parts[1]))
    except ValueError as exc:
        raise InvalidArgumentError(f"Expected numeric SHARES:PRICE, got {text!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trading calculator")
    parser.add_argument('--config', default=None, help="Path to configuration YAML file")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    sub = parser.add_subparsers(dest='command', required=True)

    plan = sub.add_parser('plan', help="Plan a trade before entering it")
    plan.add_argument('--price', type=float, required=True, help="Entry price")
    plan.add_argument('--stoploss', type=float, required=True, help="Stoploss price")
    plan.add_argument('--short', action='store_true', help="Plan a short position")
    plan.add_argument('--shares', type=int, default=None, help="Shares (default: recommended for the pool)")

    evaluate = sub.add_parser('evaluate', help="Evaluate a CSV journal of completed trades")
    evaluate.add_argument('journal', help="Path to the journal CSV")

    average = sub.add_parser('average', help="Weighted average price of transactions")
    average.add_argument('pairs', nargs='+', help="Transactions as SHARES:PRICE")

    sub.add_parser('version', help="Print the library version")
    return parser


def _run(args: argparse.Namespace, config: Config) -> None:
    if args.command == 'plan':
        planner = TradePlanner(config)
        plan = planner.plan(args.price, args.stoploss, is_long=not args.short, shares=args.shares)
        logger.info(
            "%s %d shares at %.4f, stoploss %.4f: initial risk %.2f (%.2f%% of pool)",
            plan.side, plan.shares, plan.price, plan.stoploss, plan.risk_initial, plan.risk_initial_pct,
        )
        write_plan_report(plan, out_dir=config.report.out_dir, decimals=config.report.decimals)
    elif args.command == 'evaluate':
        journal = load_journal(args.journal)
        evaluated = evaluate_journal(journal, config.costs)
        write_journal_report(
            evaluated,
            out_dir=config.report.out_dir,
            decimals=config.report.decimals,
            plot=config.report.plot,
        )
    elif args.command == 'average':
        pairs = [parse_pair(p) for p in args.pairs]
        average = general.calculate_average_price(pairs)
        converted = general.convert_from_original(average, config.account.exchange_rate)
        print(f"{average:.{config.report.decimals}f}")
        print(f"{converted:.{config.report.decimals}f} {config.account.currency}")
    elif args.command == 'version':
        print(general.version())


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command‑line arguments and dispatch to the sub-command.

    Returns the process exit status: ``0`` on success, ``2`` when the
    input or configuration is rejected, or an input file cannot be read.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        config = load_config(args.config)
        _run(args, config)
    except (TradeCalcError, OSError) as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
