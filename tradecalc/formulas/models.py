"""
Value types shared by the formula modules.

These are transient shapes handed from the caller to a single
function call; the library never stores them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class SharesPrice:
    """One executed transaction: how many shares, at which price."""
    shares: float
    price: float


class TradeDirection(str, Enum):
    """Side of a single transaction."""

    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: Union["TradeDirection", str]) -> "TradeDirection":
        """Return the direction for `value`.

        Accepts a `TradeDirection` or its textual form (``"buy"`` /
        ``"sell"``, case-insensitive).  Anything else raises
        `InvalidArgumentError`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise InvalidArgumentError(f"Unknown trade direction {value!r}; expected 'buy' or 'sell'")
