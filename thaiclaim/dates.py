"""Date utilities for thaiclaim.

Pure functions for converting between ISO dates and Buddhist-era date parts,
formatting Thai dates and calculating month sequences.

Functions that need a default year accept an injected ``today`` and only read
the clock when it is omitted.
"""

import calendar
from datetime import date, datetime

from thaiclaim.domain.models import (
    BUDDHIST_ERA_OFFSET,
    BuddhistYear,
    DateParts,
    DateStatus,
    Interval,
    IsoDate,
    MonthYearPair,
)
from thaiclaim.domain.numerals import to_thai_digits

THAI_MONTHS = (
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_buddhist_year(gregorian_year: int) -> BuddhistYear:
    """Convert a Gregorian year to the Buddhist era."""
    return BuddhistYear(gregorian_year + BUDDHIST_ERA_OFFSET)


def to_gregorian_year(buddhist_year: int) -> int:
    """Convert a Buddhist-era year to the Gregorian calendar."""
    return buddhist_year - BUDDHIST_ERA_OFFSET


def current_buddhist_year(today: date | None = None) -> BuddhistYear:
    """Get the Buddhist year of today (or of the injected date)."""
    if today is None:
        today = date.today()
    return to_buddhist_year(today.year)


def parse_iso_date(iso_date: str) -> date | None:
    """Parse a YYYY-MM-DD string.

    Args:
        iso_date: Date string, surrounding whitespace is ignored.

    Returns:
        The parsed date, or None if the string is empty or not a real date.
    """
    try:
        return datetime.strptime(iso_date.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def classify_date(iso_date: str) -> DateStatus:
    """Tell a blank date field apart from an unparseable one."""
    if not iso_date.strip():
        return DateStatus.UNSET
    if parse_iso_date(iso_date) is None:
        return DateStatus.INVALID
    return DateStatus.VALID


def decompose_date(iso_date: str, today: date | None = None) -> DateParts:
    """Split an ISO date into day, month index and Buddhist year.

    Unparseable input falls back to 1 มกราคม of the current Buddhist year.
    The fallback only fills defaults, it does not mean the input was valid.

    Args:
        iso_date: Date in YYYY-MM-DD format.
        today: Date used for the fallback year. Defaults to date.today().

    Returns:
        DateParts for the date, or the fallback parts.
    """
    parsed = parse_iso_date(iso_date)
    if parsed is None:
        return DateParts(day=1, month_index=0, buddhist_year=current_buddhist_year(today))

    return DateParts(
        day=parsed.day,
        month_index=parsed.month - 1,
        buddhist_year=to_buddhist_year(parsed.year),
    )


def compose_date(parts: DateParts) -> IsoDate:
    """Build an ISO date from day, month index and Buddhist year.

    Args:
        parts: Date parts to combine.

    Returns:
        Zero-padded YYYY-MM-DD string, or "" when the parts do not name a real
        date (e.g. 31 กุมภาพันธ์).
    """
    try:
        candidate = date(to_gregorian_year(parts.buddhist_year), parts.month_index + 1, parts.day)
    except (ValueError, OverflowError):
        return IsoDate("")
    return IsoDate(candidate.isoformat())


def last_day_of_month(buddhist_year: int, month_index: int) -> int:
    """Get the number of days in a month of a Buddhist year.

    Month indexes outside 0-11 roll into the neighbouring years, so 12 is
    มกราคม of the next year and -1 is ธันวาคม of the previous one.

    Args:
        buddhist_year: Buddhist-era year.
        month_index: Zero-based month index.

    Returns:
        Last valid day of the month (28-31).
    """
    year_shift, index = divmod(month_index, 12)
    gregorian_year = to_gregorian_year(buddhist_year) + year_shift
    if index == 1 and calendar.isleap(gregorian_year):
        return 29
    return _DAYS_IN_MONTH[index]


def update_date_part(
    iso_date: str,
    *,
    day: int | None = None,
    month_index: int | None = None,
    buddhist_year: int | None = None,
    today: date | None = None,
) -> IsoDate:
    """Change one part of a date, clamping the day to the month length.

    Picking กุมภาพันธ์ while the day is 31 gives the last day of February
    rather than an invalid date.

    Args:
        iso_date: Current value of the field ("" when unset).
        day: New day, if changing.
        month_index: New zero-based month, if changing.
        buddhist_year: New Buddhist year, if changing.
        today: Date used for defaults when the field is unset.

    Returns:
        The updated ISO date, or iso_date unchanged if no valid date results.
    """
    current = decompose_date(iso_date, today)
    merged = DateParts(
        day=current.day if day is None else day,
        month_index=current.month_index if month_index is None else month_index,
        buddhist_year=current.buddhist_year if buddhist_year is None else BuddhistYear(buddhist_year),
    )

    last_day = last_day_of_month(merged.buddhist_year, merged.month_index)
    safe = DateParts(
        day=min(merged.day, last_day),
        month_index=merged.month_index,
        buddhist_year=merged.buddhist_year,
    )

    composed = compose_date(safe)
    if not composed:
        return IsoDate(iso_date)
    return composed


def format_thai_date(iso_date: str) -> str:
    """Format an ISO date as a Thai date string.

    Args:
        iso_date: Date in YYYY-MM-DD format.

    Returns:
        e.g. "๑๕ มิถุนายน ..๒๕๖๗.." for "2024-06-15". Empty input gives "",
        unparseable input is returned with its digits converted to Thai.
    """
    if not iso_date:
        return ""

    parsed = parse_iso_date(iso_date)
    if parsed is None:
        return to_thai_digits(iso_date)

    day = to_thai_digits(parsed.day)
    month_name = THAI_MONTHS[parsed.month - 1]
    year = to_thai_digits(to_buddhist_year(parsed.year))
    return f"{day} {month_name} ..{year}.."


def date_interval(start_date: str, end_date: str) -> Interval:
    """Calculate whole years and months between two ISO dates.

    A month only counts once the end day reaches the start day. An end date
    before the start gives zero years and months.

    Args:
        start_date: Start date in YYYY-MM-DD format.
        end_date: End date in YYYY-MM-DD format.

    Returns:
        Interval of elapsed years and months; Interval(0, 0) if either date is
        missing or invalid, or the end is before the start.
    """
    if not start_date or not end_date:
        return Interval(years=0, months=0)

    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if start is None or end is None or end < start:
        return Interval(years=0, months=0)

    years = end.year - start.year
    months = end.month - start.month

    if end.day < start.day:
        months -= 1

    if months < 0:
        years -= 1
        months += 12

    return Interval(years=max(0, years), months=max(0, months))


def find_month_index(month_name: str) -> int:
    """Get the zero-based index of a Thai month name, falling back to 0."""
    try:
        return THAI_MONTHS.index(month_name)
    except ValueError:
        return 0


def month_sequence(start_month: str, start_year: int) -> list[MonthYearPair]:
    """Calculate twelve consecutive months starting from a month and year.

    Args:
        start_month: Thai month name. Unknown names start from มกราคม.
        start_year: Buddhist year of the first month.

    Returns:
        Twelve MonthYearPair values, the year advancing after ธันวาคม.
    """
    start_index = find_month_index(start_month)
    sequence = []
    for offset in range(12):
        year_shift, index = divmod(start_index + offset, 12)
        sequence.append(MonthYearPair(month=THAI_MONTHS[index], year=BuddhistYear(start_year + year_shift)))
    return sequence
