"""
MOD-11 check digits shared by every 11-digit identifier.

Steps:
  1) Weight digits 0..8 with FIRST_WEIGHTS, sum, k1 = 11 - (sum mod 11).
  2) Weight digits 0..9 with SECOND_WEIGHTS, sum, k2 = 11 - (sum mod 11).
  3) 11 maps to 0; 10 cannot be written as one digit, so the number is invalid.
  4) Valid iff digit 9 == k1 and digit 10 == k2.

DUF numbers have no check digits and never reach this module.
"""

from __future__ import annotations

from typing import Sequence

from ..errors import InvalidCheckDigitError

FIRST_WEIGHTS = (3, 7, 6, 1, 8, 9, 4, 5, 2)
SECOND_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)


def _check_digit(digits: str, weights: Sequence[int]) -> int:
    """
    Compute one check digit over ``len(weights)`` leading digits.

    Raises:
        InvalidCheckDigitError: when the computed value is 10.
    """
    total = 0
    for ch, w in zip(digits, weights):
        total += (ord(ch) - 48) * w  # '0' -> 48

    k = 11 - total % 11
    if k == 11:
        return 0
    if k == 10:
        raise InvalidCheckDigitError(
            f"CheckDigits: check digit {len(weights) - 8} computes to 10"
        )
    return k


def check_digits(digits: str) -> None:
    """
    Verify the two trailing check digits of a normalized 11-digit string.

    Raises:
        InvalidCheckDigitError: on a computed 10 or a mismatch.
    """
    k1 = _check_digit(digits, FIRST_WEIGHTS)
    k2 = _check_digit(digits, SECOND_WEIGHTS)
    expected = f"{k1}{k2}"
    if digits[9:11] != expected:
        raise InvalidCheckDigitError(
            f"CheckDigits: expected {expected}, got {digits[9:11]}"
        )


def checksum_ok(digits: str) -> bool:
    """True if ``check_digits`` accepts the string."""
    try:
        check_digits(digits)
    except InvalidCheckDigitError:
        return False
    return True


def compute_check_digits(prefix: str) -> str:
    """
    Return the two check digits for a 9-digit prefix.

    Raises:
        InvalidCheckDigitError: if the prefix has no valid check digits.
    """
    k1 = _check_digit(prefix, FIRST_WEIGHTS)
    k2 = _check_digit(prefix + str(k1), SECOND_WEIGHTS)
    return f"{k1}{k2}"
