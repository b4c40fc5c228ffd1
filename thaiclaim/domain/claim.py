"""Pure functions for building the twelve monthly claim pages.

This module contains the functional core for claim forms:
- No I/O operations (no config file, no console)
- No side effects
- Pure data transformations
- Easy to test

Each page covers one month of the claim period. The service tenure printed on
a page is counted to the end of that month, so it grows by one month per page.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import date

from thaiclaim.dates import (
    THAI_MONTHS,
    classify_date,
    current_buddhist_year,
    date_interval,
    format_thai_date,
    month_sequence,
    parse_iso_date,
)
from thaiclaim.domain.models import BuddhistYear, DateStatus, Interval, IsoDate

RPH_LABEL = "รพศ/รพท"
RHC_LABEL = "รพช"


@dataclass(frozen=True)
class TrainingPlacement:
    """Immutable internship placement at one hospital."""

    hospital: str = ""
    province: str = ""
    start: IsoDate = IsoDate("")
    end: IsoDate = IsoDate("")


@dataclass(frozen=True)
class TrainingLine:
    """Immutable printed lines for one placement."""

    main: str
    period: str


@dataclass(frozen=True)
class LinePlaceholders:
    """Dotted fillers printed where a placement field is blank."""

    hospital: str
    province: str
    start: str
    end: str


RPH_PLACEHOLDERS = LinePlaceholders(
    hospital="." * 21,
    province="." * 20,
    start="." * 33,
    end="." * 37,
)

RHC_PLACEHOLDERS = LinePlaceholders(
    hospital="." * 27,
    province="." * 20,
    start="." * 34,
    end="." * 37,
)


@dataclass(frozen=True)
class ClaimForm:
    """Immutable personnel data entered for a claim.

    Numeric fields are None when nothing was entered.
    """

    name: str = ""
    surname: str = ""
    position: str = ""
    current_workplace: str = ""
    province: str = ""
    level: str = ""
    unit: str = ""
    years_worked: int | None = None
    months_worked: int | None = None
    training_practice_years: int | None = None
    training_practice_months: int | None = None
    start_date: IsoDate = IsoDate("")
    end_date: IsoDate = IsoDate("")
    start_month: str = ""
    start_year: int | None = None
    amount: float | None = None
    rph: TrainingPlacement = field(default_factory=TrainingPlacement)
    rhc: TrainingPlacement = field(default_factory=TrainingPlacement)


@dataclass(frozen=True)
class ClaimPage:
    """Immutable data for one monthly page."""

    month: str
    year: BuddhistYear
    tenure: Interval


REQUIRED_TEXT_FIELDS = (
    ("name", "Name"),
    ("surname", "Surname"),
    ("position", "Position"),
    ("current_workplace", "Current workplace"),
    ("province", "Province"),
    ("unit", "Service unit"),
    ("level", "Level/group"),
)


def validate_form(form: ClaimForm) -> list[str]:
    """Check a claim form for missing or inconsistent values.

    Args:
        form: Claim form to check.

    Returns:
        List of error messages, empty when the form is complete.
    """
    errors = [f"{label} is required" for attr, label in REQUIRED_TEXT_FIELDS if not getattr(form, attr).strip()]

    if form.years_worked is None or form.months_worked is None:
        errors.append("Years and months worked are required")
    elif form.years_worked < 0 or form.months_worked < 0:
        errors.append("Years and months worked must not be negative")

    if form.amount is None:
        errors.append("Amount is required")
    elif not math.isfinite(form.amount) or form.amount < 0:
        errors.append("Amount must not be negative")

    if form.start_month not in THAI_MONTHS:
        errors.append("Start month must be a Thai month name")
    if form.start_year is None:
        errors.append("Start year is required")

    for attr, label in (("start_date", "Start date"), ("end_date", "End date")):
        if classify_date(getattr(form, attr)) is DateStatus.INVALID:
            errors.append(f"{label} is not a valid YYYY-MM-DD date")

    start = parse_iso_date(form.start_date)
    end = parse_iso_date(form.end_date)
    if start is not None and end is not None and end < start:
        errors.append("End date is before start date")

    return errors


def fill_worked_from_dates(form: ClaimForm) -> ClaimForm:
    """Recalculate years and months worked when both work dates are set.

    Args:
        form: Claim form.

    Returns:
        Form with years_worked/months_worked taken from the date interval, or
        the form unchanged when either date is blank.
    """
    if not form.start_date or not form.end_date:
        return form

    interval = date_interval(form.start_date, form.end_date)
    return replace(form, years_worked=interval.years, months_worked=interval.months)


def service_tenure(years_worked: int, months_worked: int, offset: int) -> Interval:
    """Calculate the tenure printed on a page.

    Args:
        years_worked: Whole years worked at the first claimed month.
        months_worked: Extra months worked at the first claimed month.
        offset: Page number, zero-based.

    Returns:
        Interval with months normalised to 0-11.
    """
    total_months = years_worked * 12 + months_worked + offset
    years, months = divmod(total_months, 12)
    return Interval(years=years, months=months)


def resolve_start(form: ClaimForm, today: date | None = None) -> tuple[str, BuddhistYear]:
    """Get the first claimed month and year, with defaults for blanks.

    Unknown month names start at มกราคม; a missing year uses the current
    Buddhist year.
    """
    month = form.start_month if form.start_month in THAI_MONTHS else THAI_MONTHS[0]
    year = BuddhistYear(form.start_year) if form.start_year is not None else current_buddhist_year(today)
    return month, year


def build_claim_pages(form: ClaimForm, today: date | None = None) -> list[ClaimPage]:
    """Build the twelve monthly pages for a claim.

    Args:
        form: Claim form.
        today: Date used when the start year is blank.

    Returns:
        Twelve ClaimPage values in month order.
    """
    start_month, start_year = resolve_start(form, today)
    years_worked = form.years_worked or 0
    months_worked = form.months_worked or 0

    return [
        ClaimPage(
            month=pair.month,
            year=pair.year,
            tenure=service_tenure(years_worked, months_worked, offset),
        )
        for offset, pair in enumerate(month_sequence(start_month, start_year))
    ]


def build_training_line(label: str, placement: TrainingPlacement, placeholders: LinePlaceholders) -> TrainingLine:
    """Build the printed lines for an internship placement.

    Args:
        label: Hospital type label (e.g. "รพช").
        placement: Placement entered by the user.
        placeholders: Dotted fillers for blank fields.

    Returns:
        TrainingLine with blank fields replaced by their dotted fillers.
    """
    hospital = placement.hospital.strip()
    province = placement.province.strip()
    start = format_thai_date(placement.start.strip())
    end = format_thai_date(placement.end.strip())

    hospital_text = f" {hospital}" if hospital else placeholders.hospital
    province_text = f" {province}" if province else placeholders.province
    start_text = f" {start}" if start else placeholders.start
    end_text = f" {end}" if end else placeholders.end

    return TrainingLine(
        main=f"• {label}{hospital_text} จังหวัด{province_text}",
        period=f"ตั้งแต่{start_text}ถึง{end_text}",
    )
