"""Conversion commands for Thai dates, amounts and month sequences."""

import math
import sys

from rich.console import Console
from rich.table import Table

from thaiclaim.dates import THAI_MONTHS, date_interval, format_thai_date, month_sequence, parse_iso_date
from thaiclaim.domain.numerals import amount_to_thai_text, to_thai_digits

console = Console()


def months_command(start_month: str, start_year: int) -> None:
    """Show twelve months starting from a Thai month and Buddhist year."""
    if start_month not in THAI_MONTHS:
        console.print(f"[yellow]Unknown month '{start_month}', starting from {THAI_MONTHS[0]}[/yellow]")

    table = Table(title="Claim months")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Month", style="cyan")
    table.add_column("พ.ศ.", justify="right")

    for idx, pair in enumerate(month_sequence(start_month, start_year), 1):
        table.add_row(str(idx), pair.month, to_thai_digits(pair.year))

    console.print(table)


def thai_date_command(iso_date: str) -> None:
    """Print an ISO date in Thai."""
    if parse_iso_date(iso_date) is None:
        console.print(f"[red]Not a valid YYYY-MM-DD date: {iso_date}[/red]")
        sys.exit(1)
    console.print(format_thai_date(iso_date))


def baht_command(amount: float) -> None:
    """Print an amount in Thai digits and words."""
    text = amount_to_thai_text(amount)
    if not text:
        console.print("[red]Amount must be a finite, non-negative number[/red]")
        sys.exit(1)
    console.print(f"{to_thai_digits(math.floor(amount))} บาท ({text})")


def interval_command(start_date: str, end_date: str) -> None:
    """Print whole years and months between two ISO dates."""
    for value in (start_date, end_date):
        if parse_iso_date(value) is None:
            console.print(f"[red]Not a valid YYYY-MM-DD date: {value}[/red]")
            sys.exit(1)

    interval = date_interval(start_date, end_date)
    console.print(
        f"{to_thai_digits(interval.years)} ปี {to_thai_digits(interval.months)} เดือน "
        f"[dim]({interval.years} years, {interval.months} months)[/dim]"
    )
