"""Set-date command for editing one part of a date in the config."""

import sys
from datetime import date

from rich.console import Console

from thaiclaim.commands.common import load_config_or_exit, resolve_config_path
from thaiclaim.config import save_config
from thaiclaim.dates import THAI_MONTHS, classify_date, format_thai_date, to_buddhist_year, update_date_part
from thaiclaim.domain.models import DateStatus

console = Console()

# Field name on the command line -> (config section path, key)
DATE_FIELDS = {
    "start": (("claimant",), "start_date"),
    "end": (("claimant",), "end_date"),
    "rph-start": (("training", "rph"), "start"),
    "rph-end": (("training", "rph"), "end"),
    "rhc-start": (("training", "rhc"), "start"),
    "rhc-end": (("training", "rhc"), "end"),
}

MIN_BUDDHIST_YEAR = to_buddhist_year(date.min.year)
MAX_BUDDHIST_YEAR = to_buddhist_year(date.max.year)


def parse_month_option(month: str) -> int | None:
    """Parse a month option to a zero-based index.

    Args:
        month: Thai month name or number 1-12.

    Returns:
        Month index, or None if not recognised.
    """
    if month in THAI_MONTHS:
        return THAI_MONTHS.index(month)
    if month.isdigit() and 1 <= int(month) <= 12:
        return int(month) - 1
    return None


def set_date_command(
    field: str,
    day: int | None = None,
    month: str | None = None,
    year: int | None = None,
    clear: bool = False,
    config_path: str | None = None,
) -> None:
    """Change the day, month or Buddhist year of a date in the config."""
    if field not in DATE_FIELDS:
        console.print(f"[red]Unknown date field '{field}'[/red]")
        console.print(f"[dim]Choose from: {', '.join(DATE_FIELDS)}[/dim]")
        sys.exit(1)

    month_index = None
    if month is not None:
        month_index = parse_month_option(month)
        if month_index is None:
            console.print(f"[red]Unknown month '{month}'[/red]")
            sys.exit(1)

    if day is not None and not 1 <= day <= 31:
        console.print(f"[red]Day must be between 1 and 31, got {day}[/red]")
        sys.exit(1)

    if year is not None and not MIN_BUDDHIST_YEAR <= year <= MAX_BUDDHIST_YEAR:
        console.print(f"[red]Year must be a Buddhist year between {MIN_BUDDHIST_YEAR} and {MAX_BUDDHIST_YEAR}[/red]")
        sys.exit(1)

    path = resolve_config_path(config_path)
    config = load_config_or_exit(path)

    sections, key = DATE_FIELDS[field]
    section = config
    for name in sections:
        section = section.setdefault(name, {})
        if not isinstance(section, dict):
            console.print(f"[red]'{name}' in the config must be a table[/red]", style="bold")
            sys.exit(1)

    current = str(section.get(key, ""))
    if clear:
        updated = ""
    else:
        updated = update_date_part(current, day=day, month_index=month_index, buddhist_year=year, today=date.today())
        if classify_date(updated) is not DateStatus.VALID:
            console.print("[red]That change does not give a valid date; field left unchanged[/red]", style="bold")
            sys.exit(1)

    section[key] = updated
    try:
        save_config(config, path)
    except OSError as e:
        console.print(f"[red]Could not save config: {e}[/red]", style="bold")
        sys.exit(1)

    display = format_thai_date(updated) or "[dim](blank)[/dim]"
    console.print(f"[green]✓[/green] {field}: {display}")
