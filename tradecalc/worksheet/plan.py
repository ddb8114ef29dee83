"""
Before-trade worksheet.

`TradePlanner` combines the before-trade formulas into one summary of
a planned position: how many shares to take, what the position costs,
how much is at risk at the chosen stoploss and where the stoploss
would sit for the configured risk percentage.  Account and cost
parameters come from the configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from ..config.schema import Config
from ..formulas import before_trade, general
from ..formulas.errors import InvalidArgumentError
from ..formulas.models import TradeDirection


logger = logging.getLogger(__name__)


@dataclass
class TradePlan:
    """Figures for a single planned position."""
    side: str  # 'long' or 'short'
    price: float
    stoploss: float
    shares: int
    amount: float
    amount_with_tax: float
    amount_converted: float
    cost_transaction: float
    risk_input: float
    risk_initial: float
    risk_initial_pct: float
    stoploss_for_risk: float
    within_risk: bool


class TradePlanner:
    """Build `TradePlan` objects from the account and costs configuration."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def plan(self, price: float, stoploss: float, is_long: bool = True, shares: Optional[int] = None) -> TradePlan:
        """Evaluate a planned entry at `price` with an exit at `stoploss`.

        Parameters
        ----------
        price : float
            Intended entry price.
        stoploss : float
            Price at which the position would be closed at a loss.
        is_long : bool
            ``True`` to buy first, ``False`` to sell short first.
        shares : int, optional
            Number of shares.  When omitted, the number of shares the
            whole pool can buy after tax and commission is used.

        Raises
        ------
        InvalidArgumentError
            If the position would hold no shares.
        """
        account = self.config.account
        costs = self.config.costs
        side = 'long' if is_long else 'short'
        entry = TradeDirection.BUY if is_long else TradeDirection.SELL

        if shares is None:
            shares = before_trade.calculate_shares_recommended(
                account.pool, costs.commission, costs.tax_pct, price
            )
            logger.debug("Recommended shares for pool %.2f at %.4f: %d", account.pool, price, shares)
        if shares <= 0:
            raise InvalidArgumentError(
                f"A {side} position at {price} needs at least one share (got {shares})"
            )

        amount = before_trade.calculate_amount(price, shares)
        risk_input = before_trade.calculate_risk_input(account.pool, account.risk_pct)
        risk_initial = before_trade.calculate_risk_initial(
            price, shares, costs.tax_pct, costs.commission, stoploss, is_long
        )
        plan = TradePlan(
            side=side,
            price=price,
            stoploss=stoploss,
            shares=shares,
            amount=amount,
            amount_with_tax=before_trade.calculate_amount_with_tax(price, shares, costs.tax_pct, entry),
            amount_converted=general.convert_from_original(amount, account.exchange_rate),
            cost_transaction=before_trade.cost_transaction(price, shares, costs.tax_pct, costs.commission),
            risk_input=risk_input,
            risk_initial=risk_initial,
            risk_initial_pct=general.calculate_percentage_of(risk_initial, account.pool),
            stoploss_for_risk=before_trade.calculate_stoploss(
                price, shares, costs.tax_pct, costs.commission, account.risk_pct, account.pool, is_long
            ),
            within_risk=risk_initial <= risk_input,
        )
        if not plan.within_risk:
            logger.warning(
                "Initial risk %.2f exceeds the %.2f%% risk budget of %.2f",
                risk_initial, account.risk_pct, risk_input,
            )
        return plan
