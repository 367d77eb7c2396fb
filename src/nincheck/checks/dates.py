"""
Decode the pseudo birth date embedded in an identifier.

Layout of an 11-digit identifier:

    DD MM YY SSS KK
    |  |  |  |   +-- check digits
    |  |  |  +------ sequence ("individnummer"), picks the century
    |  |  +--------- two-digit year
    |  +------------ month, possibly shifted (+40 H, +65 SyntPop, +80 Tenor)
    +--------------- day, possibly shifted (+40 D)

Each category hypothesis passes the offsets it allows. The month families
1-12, 41-52, 66-77 and 81-92 do not overlap, so at most one offset matches.

A 12-digit DUF number instead starts with a literal four-digit year.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..errors import (
    DayRangeError,
    ImplausibleYearError,
    InvalidCalendarDateError,
    MonthRangeError,
)
from ..text import to_int

# February allows 29 regardless of year.
DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MIN_BIRTH_YEAR = 1854


@dataclass(frozen=True)
class DecodedDate:
    """
    Fields read from an identifier, with offsets already removed.

    Attributes:
        day, month:   true calendar day / month.
        year2:        the two-digit year as written.
        sequence:     three-digit sequence number.
        year:         reconstructed four-digit year.
        day_offset:   0 or 40 (D number).
        month_offset: 0, 40, 65 or 80.
    """
    day: int
    month: int
    year2: int
    sequence: int
    year: int
    day_offset: int = 0
    month_offset: int = 0

    @property
    def birthdate(self) -> Optional[date]:
        # None for the tolerated Feb 29 in a non-leap year.
        try:
            return date(self.year, self.month, self.day)
        except ValueError:
            return None


def resolve_century(year2: int, sequence: int) -> int:
    """
    Turn a two-digit year into a four-digit one using the sequence number.

    First matching rule wins:
      year2 <= 40 and sequence <  500           -> 19xx
      year2 <= 40 and sequence >= 500           -> 20xx
      year2 >= 54 and 500 <= sequence <= 749    -> 18xx
      otherwise                                 -> 19xx
    """
    if year2 <= 40:
        return (1900 if sequence < 500 else 2000) + year2
    if year2 >= 54 and 500 <= sequence <= 749:
        return 1800 + year2
    return 1900 + year2


def _strip_offset(raw: int, offsets: Sequence[int], span: int) -> Optional[int]:
    """Return the offset whose range [o+1, o+span] contains ``raw``."""
    for offset in offsets:
        if offset + 1 <= raw <= offset + span:
            return offset
    return None


def _current_year(today: Optional[date]) -> int:
    return (today or date.today()).year


def decode(
    digits: str,
    day_offsets: Sequence[int] = (0,),
    month_offsets: Sequence[int] = (0,),
    strict_calendar: bool = False,
    today: Optional[date] = None,
) -> DecodedDate:
    """
    Decode and validate the date part of a normalized 11-digit string.

    Args:
        digits:          output of ``normalize(value, 11)``.
        day_offsets:     day shifts allowed by the category being tested.
        month_offsets:   month shifts allowed by the category being tested.
        strict_calendar: also reject dates the calendar does not have
                         (Feb 29 outside leap years).
        today:           reference date for the plausibility check.

    Raises:
        MonthRangeError, DayRangeError, ImplausibleYearError,
        InvalidCalendarDateError
    """
    raw_day = to_int(digits[0:2])
    raw_month = to_int(digits[2:4])
    year2 = to_int(digits[4:6])
    sequence = to_int(digits[6:9])

    month_offset = _strip_offset(raw_month, month_offsets, 12)
    if month_offset is None:
        raise MonthRangeError(f"CheckMonth: {digits[2:4]} is not a valid month")
    month = raw_month - month_offset

    day_offset = _strip_offset(raw_day, day_offsets, 31)
    if day_offset is None:
        raise DayRangeError(f"CheckDay: {digits[0:2]} is not a valid day")
    day = raw_day - day_offset
    if day > DAYS_IN_MONTH[month - 1]:
        raise DayRangeError(f"CheckDay: month {month} has no day {day}")

    year = resolve_century(year2, sequence)
    if not MIN_BIRTH_YEAR < year <= _current_year(today):
        raise ImplausibleYearError(f"Ikke sannsynlig årstall: {year}")

    decoded = DecodedDate(
        day=day,
        month=month,
        year2=year2,
        sequence=sequence,
        year=year,
        day_offset=day_offset,
        month_offset=month_offset,
    )
    if strict_calendar and decoded.birthdate is None:
        raise InvalidCalendarDateError(
            f"CheckDate: {year:04d}-{month:02d}-{day:02d} is not a calendar date"
        )
    return decoded


def check_duf_year(digits: str, today: Optional[date] = None) -> int:
    """
    Validate the literal year that opens a 12-digit DUF number.

    Raises:
        ImplausibleYearError: year outside [1854, current year]; the message
            carries the four characters as written (e.g. '0374').
    """
    literal = digits[0:4]
    year = to_int(literal)
    if not MIN_BIRTH_YEAR <= year <= _current_year(today):
        raise ImplausibleYearError(f"Ikke sannsynlig årstall: {literal}")
    return year
