"""
Free-function API.

Every function accepts any value, never raises, and records the reason of
its result in the context-local diagnostics (see ``last_failed_step``).

    >>> is_valid_nin("01112835470")
    True
    >>> classify("28894698995")
    'TenorTestNummer,FNummer'
    >>> is_valid_nin("31739556891")
    False
    >>> last_failed_step()
    'Synthetic test numbers are not valid in production.'
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .engine.categories import Category
from .engine.classifier import Classification, Classifier, Outcome
from .engine.diagnostics import last_failed_step, record

_classifier = Classifier()


def check_nin(nin: Optional[str], is_production: bool = True) -> Outcome:
    """Aggregate check returning the full outcome."""
    outcome = _classifier.validate(nin, production=is_production)
    record(outcome.failed_step)
    return outcome


def is_valid_nin(nin: Optional[str], is_production: bool = True) -> bool:
    """
    Valid as F, D, DUF, H or FH number.

    SyntPop / Tenor test numbers are rejected in production and accepted
    otherwise.
    """
    return check_nin(nin, is_production).is_valid


def classify_nin(nin: Optional[str]) -> Classification:
    result = _classifier.classify(nin)
    record(result.failed_step)
    return result


def classify(nin: Optional[str]) -> str:
    """
    One of FNummer, DNummer, HNummer, FHNummer, DufNummer, Unknown,
    '<test>,<base>' or 'Illegal test number, <test> only'.
    """
    return classify_nin(nin).label


def _is(nin: Optional[str], category: Category) -> bool:
    outcome = _classifier.check(nin, category)
    record(outcome.failed_step)
    return outcome.is_valid


def is_valid_f_number(nin: Optional[str]) -> bool:
    """Fødselsnummer: plain birth date, month may carry a test-number shift."""
    return _is(nin, Category.FNummer)


is_valid_birth_number = is_valid_f_number


def is_valid_d_number(nin: Optional[str]) -> bool:
    """
    D number: day + 40.

    A person born 1 January 1980 gets 410180, born 31 January 1980 gets 710180.
    """
    return _is(nin, Category.DNummer)


def is_valid_h_number(nin: Optional[str]) -> bool:
    """
    H number: month + 40.

    A person born 1 January 1980 gets 014180, born 31 January 1980 gets 314180.
    """
    return _is(nin, Category.HNummer)


def is_valid_fh_number(nin: Optional[str]) -> bool:
    """FH number: first nine digits in 800000000..999999999, then check digits."""
    return _is(nin, Category.FHNummer)


def is_valid_duf_number(nin: Optional[str]) -> bool:
    """DUF number: 12 digits, a plausible year followed by a serial number."""
    return _is(nin, Category.DufNummer)


def is_valid_syntpop_test_number(nin: Optional[str]) -> bool:
    """SyntPop synthetic test number: month + 65."""
    return _is(nin, Category.SyntPopTestNummer)


def is_valid_tenor_test_number(nin: Optional[str]) -> bool:
    """Tenor synthetic test number: month + 80."""
    return _is(nin, Category.TenorTestNummer)


def birthdate(nin: Optional[str]) -> Optional[date]:
    """
    Birth date of a valid F, D or H number; None for anything else.

    Day bounds allow February 29 in every year, so a number such as
    29020012380 is valid yet has no birth date: 1900-02-29 does not exist.
    Use ``Policy(strict_calendar=True)`` to reject such numbers instead.
    """
    return _classifier.birthdate(nin)


def has_birthdate(nin: Optional[str]) -> bool:
    """True when ``birthdate`` gives a date (see there for February 29)."""
    return birthdate(nin) is not None


__all__ = [
    "check_nin",
    "is_valid_nin",
    "classify_nin",
    "classify",
    "is_valid_f_number",
    "is_valid_birth_number",
    "is_valid_d_number",
    "is_valid_h_number",
    "is_valid_fh_number",
    "is_valid_duf_number",
    "is_valid_syntpop_test_number",
    "is_valid_tenor_test_number",
    "birthdate",
    "has_birthdate",
    "last_failed_step",
]
