from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Category(str, Enum):
    FNummer = "FNummer"
    DNummer = "DNummer"
    HNummer = "HNummer"
    FHNummer = "FHNummer"
    DufNummer = "DufNummer"
    SyntPopTestNummer = "SyntPopTestNummer"
    TenorTestNummer = "TenorTestNummer"
    Unknown = "Unknown"

    def __str__(self) -> str:
        return self.value


# ---- Date shifts ----
D_DAY_OFFSET = 40
H_MONTH_OFFSET = 40
SYNTPOP_MONTH_OFFSET = 65
TENOR_MONTH_OFFSET = 80


@dataclass(frozen=True)
class DateOffsets:
    day: Tuple[int, ...] = (0,)
    month: Tuple[int, ...] = (0,)


# Synthetic test numbers are F or D numbers with a shifted month, so F and D
# accept the test month families too. An H-shifted month is never an F month.
# D and H both tolerate the other's shift; D is tried first.
_F_MONTHS = (0, SYNTPOP_MONTH_OFFSET, TENOR_MONTH_OFFSET)
_D_MONTHS = (0, H_MONTH_OFFSET, SYNTPOP_MONTH_OFFSET, TENOR_MONTH_OFFSET)

DATE_OFFSETS: Dict[Category, DateOffsets] = {
    Category.FNummer: DateOffsets(day=(0,), month=_F_MONTHS),
    Category.DNummer: DateOffsets(day=(D_DAY_OFFSET,), month=_D_MONTHS),
    Category.HNummer: DateOffsets(day=(0, D_DAY_OFFSET), month=(H_MONTH_OFFSET,)),
    Category.SyntPopTestNummer: DateOffsets(day=(0, D_DAY_OFFSET), month=(SYNTPOP_MONTH_OFFSET,)),
    Category.TenorTestNummer: DateOffsets(day=(0, D_DAY_OFFSET), month=(TENOR_MONTH_OFFSET,)),
}

# Order matters: first match decides the label / birth date.
BASE_CATEGORIES = (
    Category.FNummer,
    Category.DNummer,
    Category.DufNummer,
    Category.HNummer,
    Category.FHNummer,
)
TEST_CATEGORIES = (Category.TenorTestNummer, Category.SyntPopTestNummer)
BIRTHDATE_CATEGORIES = (Category.FNummer, Category.DNummer, Category.HNummer)

FH_SERIES = (800_000_000, 999_999_999)
