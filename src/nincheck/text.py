"""
Small string helpers shared by the checks.

They are deliberately forgiving: none of them raise, so the checks can read
fixed-width fields without guarding every slice.
"""

from __future__ import annotations

import re
from typing import Optional

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def exists(s: Optional[str]) -> bool:
    """
    Return True if the string carries any content.

    ``None``, the empty string, whitespace and NUL padding all count as absent.
    """
    if s is None:
        return False
    return bool(s.strip("\0").strip())


def to_int(s: Optional[str]) -> int:
    """
    Parse an integer, returning 0 when the input is not one.

    Examples:
      '12345'  -> 12345
      '123 45' -> 0
      'unf'    -> 0
      None     -> 0
    """
    if not exists(s) or not _INT_RE.fullmatch(s):
        return 0
    return int(s)


def is_numeric(s: str) -> bool:
    """True if every character is numeric (vacuously True for '')."""
    return all(ch.isnumeric() for ch in s)
