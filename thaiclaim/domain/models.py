"""Domain type definitions for thaiclaim.

These NewTypes and value objects provide semantic clarity and help with type checking:
- IsoDate: Gregorian date in YYYY-MM-DD format ("" means unset)
- BuddhistYear: Buddhist-era year (Gregorian year + 543)
- Baht: Whole Baht amount
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

# ISO dates are always YYYY-MM-DD; the empty string means the field is unset
IsoDate = NewType("IsoDate", str)

# Buddhist-era year, e.g. 2567 for 2024
BuddhistYear = NewType("BuddhistYear", int)

# Whole Baht, satang are never lexicalized
Baht = NewType("Baht", int)

# Offset between the Buddhist era and the Gregorian calendar
BUDDHIST_ERA_OFFSET = 543


class DateStatus(Enum):
    """Validity of a raw date field."""

    UNSET = "unset"
    INVALID = "invalid"
    VALID = "valid"


@dataclass(frozen=True)
class DateParts:
    """Immutable day / month / Buddhist year triple.

    month_index is zero-based (0 = มกราคม).
    """

    day: int
    month_index: int
    buddhist_year: BuddhistYear


@dataclass(frozen=True)
class Interval:
    """Immutable whole years and months elapsed between two dates."""

    years: int
    months: int


@dataclass(frozen=True)
class MonthYearPair:
    """Immutable Thai month name paired with its Buddhist year."""

    month: str
    year: BuddhistYear
