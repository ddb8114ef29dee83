"""
General financial helpers.

Currency conversion, percentages, the weighted average price of a
series of transactions and a leverage heuristic.  All functions are
pure; a zero denominator raises `ZeroDivisionError`.
"""

from __future__ import annotations

import math
from typing import Iterable, Tuple, Union

from .errors import EmptyInputError
from .models import SharesPrice

VERSION = "0.0.0.1"


def version() -> str:
    """Return the version string of the library."""
    return VERSION


def calculate_percentage_of(value: float, from_value: float) -> float:
    """Return what percentage `value` is of `from_value`.

    >>> calculate_percentage_of(2.0, 50.0)
    4.0
    """
    return value / from_value * 100.0


def convert_from_original(price: float, exchange_rate: float) -> float:
    """Return `price` with the exchange rate applied to it."""
    return price * exchange_rate


def convert_to_original(converted_price: float, exchange_rate: float) -> float:
    """Return a converted price in the original currency again."""
    return converted_price / exchange_rate


def calculate_average_price(
    pairs: Iterable[Union[SharesPrice, Tuple[float, float]]],
) -> float:
    """Calculate the average price paid over previous transactions.

    When you add to a position you only know the total number of
    shares you hold afterwards.  The price to book is the average of
    all prices paid, weighted by the shares of each transaction::

        S1 * P1 + S2 * P2 = S3 * P3
        => P3 = (S1 * P1 + S2 * P2) / (S1 + S2)

    Parameters
    ----------
    pairs : iterable of SharesPrice or (shares, price) tuples
        The transactions, in any order.  At least one is required.

    Returns
    -------
    float
        ``sum(shares * price) / sum(shares)``.

    >>> round(calculate_average_price([SharesPrice(415, 23.65), SharesPrice(138, 16.50)]), 6)
    21.865732
    """
    total_amount = 0.0
    total_shares = 0.0
    count = 0
    for pair in pairs:
        if not isinstance(pair, SharesPrice):
            pair = SharesPrice(*pair)
        total_amount += pair.shares * pair.price
        total_shares += pair.shares
        count += 1
    if count == 0:
        raise EmptyInputError("calculate_average_price needs at least one transaction")
    return total_amount / total_shares


def calculate_leveraged_contracts(n: float) -> float:
    """Return the number of contracts to buy for an ideal amount of leverage.

    >>> calculate_leveraged_contracts(4.0)
    5.0
    """
    return float(math.ceil(n / 3.0)) - 1 + n
