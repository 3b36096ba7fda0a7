"""
Analog Bench - Calculation Errors

Every core function fails fast by raising one of these.  All of them derive
from CalcError (itself a ValueError) so the console shell can catch a single
type, print the message and re-prompt.
"""


class CalcError(ValueError):
    """Base class for recoverable calculator errors."""


class InvalidUnit(CalcError):
    """A unit suffix is not valid for the requested dimension."""


class InvalidColorBand(CalcError):
    """A colour name is unknown, or not allowed in the band position used."""


class UnrepresentableValue(CalcError):
    """A resistance has no 3-band colour code (multiplier outside -2..9)."""


class DivisionByZero(CalcError, ZeroDivisionError):
    """A zero resistance, capacitance or factor ended up as a divisor."""


class InvalidGain(CalcError):
    """A Sallen-Key stage gain is not greater than 1."""


class NonPositiveInput(CalcError):
    """A magnitude that must be a positive finite number was not."""


class InvalidPoleCount(CalcError):
    """A filter pole count is not one of the tabulated values."""


class InvalidPolePair(CalcError):
    """A pole-pair index is outside the stages of the chosen filter."""
