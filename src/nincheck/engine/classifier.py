"""
Decide which identifier categories a digit string belongs to.

Each category is a *hypothesis* made of a fixed chain of checks:

  F / D / H / SyntPop / Tenor : normalize(11) -> decode(offsets) -> check digits
  DUF                         : normalize(12) -> literal year
  FH                          : normalize(11) -> 800000000..999999999 -> check digits

Checks raise ``NinError``; this module is the only place they are caught. Every
public method returns a value (``Outcome`` / ``Classification`` / date or
None) for any input, including None, empty strings and garbage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from ..checks.checksum import check_digits
from ..checks.dates import DecodedDate, check_duf_year, decode
from ..checks.digits import DUF_LENGTH, NIN_LENGTH, normalize
from ..config import Policy
from ..errors import (
    IllegalNumberSeriesError,
    LengthError,
    NinError,
    ProductionPolicyError,
    UnknownIdentifierError,
)
from ..text import to_int
from .categories import (
    BASE_CATEGORIES,
    BIRTHDATE_CATEGORIES,
    DATE_OFFSETS,
    FH_SERIES,
    TEST_CATEGORIES,
    Category,
)

logger = logging.getLogger(__name__)

PRODUCTION_REJECTION = "Synthetic test numbers are not valid in production."


@dataclass(frozen=True)
class Outcome:
    """Result of one validation call."""
    is_valid: bool
    category: Category
    failed_step: str = ""

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass(frozen=True)
class Classification:
    """
    Result of ``Classifier.classify``.

    Attributes:
        label:       'FNummer', 'TenorTestNummer,FNummer', 'Unknown', ...
        base:        matched structural category, if any.
        test:        matched synthetic test modifier, if any.
        failed_step: why nothing matched (empty when something did).
    """
    label: str
    base: Optional[Category] = None
    test: Optional[Category] = None
    failed_step: str = ""


def compose_label(base: Optional[Category], test: Optional[Category]) -> str:
    if base is None and test is None:
        return Category.Unknown.value
    if base is None:
        return f"Illegal test number, {test.value} only"
    if test is None:
        return base.value
    return f"{test.value},{base.value}"


class Classifier:
    """
    Runs category hypotheses under a ``Policy``.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, policy: Optional[Policy] = None, today: Optional[date] = None) -> None:
        self.policy = policy or Policy()
        self._today = today

    # ---------------- Public API ----------------

    def check(self, value: object, category: Category) -> Outcome:
        """Test a single category hypothesis."""
        _, error = self._attempt(value, category)
        if error is not None:
            return Outcome(False, category, str(error))
        return Outcome(True, category)

    def classify(self, value: object) -> Classification:
        """
        Label an identifier.

        Base category: F, else D; only when neither matches are DUF, H and FH
        tried, in that order. The test modifier (Tenor, else SyntPop) is
        evaluated independently of the base.
        """
        try:
            normalize(value)
        except NinError as e:
            return Classification(label=Category.Unknown.value, failed_step=str(e))

        errors: List[NinError] = []

        base: Optional[Category] = None
        for category in (Category.FNummer, Category.DNummer):
            _, error = self._attempt(value, category)
            if error is None:
                base = category
                break
            errors.append(error)

        if base is None:
            for category in (Category.DufNummer, Category.HNummer, Category.FHNummer):
                _, error = self._attempt(value, category)
                if error is None:
                    return Classification(label=category.value, base=category)
                errors.append(error)

        test: Optional[Category] = None
        for category in TEST_CATEGORIES:
            _, error = self._attempt(value, category)
            if error is None:
                test = category
                break
            errors.append(error)

        failed_step = ""
        if base is None and test is None:
            failed_step = str(self._unknown(errors))
        return Classification(
            label=compose_label(base, test), base=base, test=test, failed_step=failed_step
        )

    def validate(self, value: object, production: Optional[bool] = None) -> Outcome:
        """
        Aggregate validity check.

        In production, synthetic test numbers are rejected even when they are
        structurally valid. Otherwise any base category is enough, and outside
        production the test categories are accepted as a fallback.
        """
        if production is None:
            production = self.policy.production

        try:
            normalize(value)
        except NinError as e:
            return Outcome(False, Category.Unknown, str(e))

        if production:
            for category in TEST_CATEGORIES:
                if self.check(value, category):
                    logger.debug("%s rejected by production policy", category.value)
                    return Outcome(False, category, str(ProductionPolicyError(PRODUCTION_REJECTION)))

        errors: List[NinError] = []
        for category in BASE_CATEGORIES:
            _, error = self._attempt(value, category)
            if error is None:
                return Outcome(True, category)
            errors.append(error)

        if not production:
            for category in TEST_CATEGORIES:
                if self.check(value, category):
                    return Outcome(True, category)

        return Outcome(False, Category.Unknown, str(self._unknown(errors)))

    def decode_birth(self, value: object) -> Optional[DecodedDate]:
        """Decoded date of the first valid F, D or H hypothesis."""
        for category in BIRTHDATE_CATEGORIES:
            decoded, error = self._attempt(value, category)
            if error is None:
                return decoded
        return None

    def birthdate(self, value: object) -> Optional[date]:
        # None also for a valid number carrying Feb 29 of a non-leap year.
        decoded = self.decode_birth(value)
        return decoded.birthdate if decoded else None

    # --------------- Internals ------------------

    def _attempt(
        self, value: object, category: Category
    ) -> Tuple[Optional[DecodedDate], Optional[NinError]]:
        try:
            return self._run(value, category), None
        except NinError as e:
            logger.debug("%s rejected at %s", category.value, type(e).__name__)
            return None, e

    def _run(self, value: object, category: Category) -> Optional[DecodedDate]:
        if category is Category.DufNummer:
            digits = normalize(value, DUF_LENGTH)
            check_duf_year(digits, today=self._today)
            return None

        if category is Category.FHNummer:
            digits = normalize(value, NIN_LENGTH)
            low, high = FH_SERIES
            if not low <= to_int(digits[0:9]) <= high:
                raise IllegalNumberSeriesError("Ikke riktig tallserie")
            check_digits(digits)
            return None

        if category not in DATE_OFFSETS:
            raise UnknownIdentifierError(f"No checks defined for {category.value}")

        offsets = DATE_OFFSETS[category]
        digits = normalize(value, NIN_LENGTH)
        decoded = decode(
            digits,
            day_offsets=offsets.day,
            month_offsets=offsets.month,
            strict_calendar=self.policy.strict_calendar,
            today=self._today,
        )
        check_digits(digits)
        return decoded

    @staticmethod
    def _unknown(errors: List[NinError]) -> UnknownIdentifierError:
        """
        Pick the most telling failure.

        A length mismatch only says the string has the other length, so the
        first failure of a hypothesis that accepted the length wins.
        """
        if not errors:
            return UnknownIdentifierError("Unknown identifier")
        reason = next((e for e in errors if not isinstance(e, LengthError)), errors[0])
        return UnknownIdentifierError(str(reason))
