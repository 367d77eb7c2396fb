"""
Gross shape check applied before any field is interpreted.

An identifier is 11 digits (F, D, H, FH and the synthetic test numbers) or 12
digits (DUF). Only ASCII 0-9 is accepted; the check is a character-class test,
so there is no upper bound on the numeric value.
"""

from __future__ import annotations

from typing import Optional

from ..errors import CharacterError, LengthError

NIN_LENGTH = 11
DUF_LENGTH = 12
ID_LENGTHS = (NIN_LENGTH, DUF_LENGTH)

_ASCII_DIGITS = frozenset("0123456789")


def normalize(value: object, length: Optional[int] = None) -> str:
    """
    Return ``value`` unchanged if it is a well-formed digit string.

    Args:
        value:  Candidate identifier.
        length: Exact length required by a category, or None to accept 11 or 12.

    Raises:
        LengthError:    empty, or the wrong number of characters.
        CharacterError: not a string, or anything other than ASCII digits.
    """
    if value is None or value == "":
        raise LengthError(f"CheckLength: Got 0, expected {_expected(length)}")
    if not isinstance(value, str):
        raise CharacterError(
            f"CheckCharacters: expected a string, got {type(value).__name__}"
        )

    n = len(value)
    if (length is None and n not in ID_LENGTHS) or (length is not None and n != length):
        raise LengthError(f"CheckLength: Got {n}, expected {_expected(length)}")

    if " " in value or not set(value) <= _ASCII_DIGITS:
        raise CharacterError("CheckCharacters: Nin contains invalid characters")

    return value


def _expected(length: Optional[int]) -> str:
    if length is None:
        return " or ".join(str(n) for n in ID_LENGTHS)
    return str(length)
