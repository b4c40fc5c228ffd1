"""Domain models and types for thaiclaim.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Calendar and numeral logic separated from the CLI and config file
"""

from thaiclaim.domain.models import (
    BUDDHIST_ERA_OFFSET,
    Baht,
    BuddhistYear,
    DateParts,
    DateStatus,
    Interval,
    IsoDate,
    MonthYearPair,
)

__all__ = [
    "BUDDHIST_ERA_OFFSET",
    "Baht",
    "BuddhistYear",
    "DateParts",
    "DateStatus",
    "Interval",
    "IsoDate",
    "MonthYearPair",
]
