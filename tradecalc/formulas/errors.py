"""
Exception hierarchy.

Every error raised deliberately by the package derives from
`TradeCalcError`.  Division by a zero value supplied by the caller is
not wrapped: the formulas use the plain ``/`` operator and the
resulting `ZeroDivisionError` propagates unchanged.
"""


class TradeCalcError(Exception):
    """Base class for all package errors."""


class InvalidArgumentError(TradeCalcError, ValueError):
    """An argument outside the closed set of accepted values (e.g. a trade direction)."""


class EmptyInputError(TradeCalcError, ValueError):
    """A sequence that must contain at least one element was empty."""
