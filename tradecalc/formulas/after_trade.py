"""
Calculations made after a trade is closed.

The inputs describe both legs of a completed round trip: the buy and
the sell transaction, each with its own price, shares, tax (0–100
scale) and commission.  The formulas are the same for long and short
positions.
"""

from __future__ import annotations


def calculate_risk_actual(
    price_buy: float,
    shares_buy: int,
    tax_buy: float,
    commission_buy: float,
    price_sell: float,
    shares_sell: int,
    tax_sell: float,
    commission_sell: float,
    risk_initial: float,
    profit_loss: float,
) -> float:
    """Return the risk that was actually taken on a completed trade.

    When the trade made a profit, or lost less than the planned
    `risk_initial`, the planned risk stands.  Otherwise the real
    exposure is::

        S_b * P_b * (1 + T_b/100) - S_s * P_s * (1 - T_s/100) + C_b + C_s

    >>> calculate_risk_actual(4138.00, 4, 0.0, 3.0, 4151.30, 4, 0.0, 3.0, 117.4136, 53.20)
    117.4136
    """
    if profit_loss >= 0.0 or abs(profit_loss) < risk_initial:
        return risk_initial
    return (
        shares_buy * price_buy * (1.0 + tax_buy / 100.0)
        - shares_sell * price_sell * (1.0 - tax_sell / 100.0)
        + commission_buy
        + commission_sell
    )


def calculate_r_multiple(profit_loss: float, risk_initial: float) -> float:
    """Return the profit or loss expressed as a multiple of the initial risk."""
    return profit_loss / risk_initial


def calculate_cost_total(
    amount_buy: float,
    tax_buy: float,
    commission_buy: float,
    amount_sell: float,
    tax_sell: float,
    commission_sell: float,
) -> float:
    """Return tax and commission paid over both transactions of a trade."""
    return (
        tax_buy / 100.0 * amount_buy
        + commission_buy
        + tax_sell / 100.0 * amount_sell
        + commission_sell
    )


def calculate_profit_loss(price_buy: float, shares_buy: int, price_sell: float, shares_sell: int) -> float:
    """Return the gross profit (positive) or loss (negative) of a trade."""
    return shares_sell * price_sell - shares_buy * price_buy
