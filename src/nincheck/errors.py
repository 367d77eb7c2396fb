"""
Rejection reasons raised while checking an identifier.

Every check in ``nincheck.checks`` raises one of these. The classifier catches
``NinError`` and turns it into an ``Outcome`` whose ``failed_step`` is
``str(exc)``, so callers of the public API never see them.
"""

from __future__ import annotations


class NinError(Exception):
    """Base class for every rejection."""


# ---- Shape of the input ----

class TechnicalError(NinError):
    """The string cannot be an identifier at all (length / characters)."""


class LengthError(TechnicalError):
    pass


class CharacterError(TechnicalError):
    pass


# ---- Embedded birth date ----

class DateError(NinError):
    pass


class MonthRangeError(DateError):
    pass


class DayRangeError(DateError):
    pass


class InvalidCalendarDateError(DateError):
    pass


class ImplausibleYearError(DateError):
    pass


# ---- Check digits ----

class ChecksumError(NinError):
    pass


class InvalidCheckDigitError(ChecksumError):
    pass


# ---- Category level ----

class IllegalNumberSeriesError(NinError):
    """FH number outside 800000000..999999999."""


class ProductionPolicyError(NinError):
    """Synthetic test number presented while running in production."""


class UnknownIdentifierError(NinError):
    """No category accepted the identifier."""
