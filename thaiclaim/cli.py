"""CLI entry point for thaiclaim."""

import typer

from thaiclaim.commands.admin import init_command
from thaiclaim.commands.convert import baht_command, interval_command, months_command, thai_date_command
from thaiclaim.commands.edit import set_date_command
from thaiclaim.commands.generate import generate_command

app = typer.Typer(
    name="thaiclaim",
    help="Twelve-month per-diem compensation claim forms for Thai public health staff",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Twelve-month per-diem compensation claim forms for Thai public health staff."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config: str = typer.Option(None, "--config", "-c", help="Config file (default: XDG config location)"),
) -> None:
    """Create a blank claimant config file."""
    init_command(force, config)


@app.command()
def generate(
    config: str = typer.Option(None, "--config", "-c", help="Config file (default: XDG config location)"),
    output: str = typer.Option(None, "--output", "-o", help="Write pages to this file instead of the console"),
    start_month: str = typer.Option(None, "--start-month", help="First claimed month (Thai name or 1-12)"),
    start_year: int = typer.Option(None, "--start-year", help="Buddhist year of the first claimed month"),
    draft: bool = typer.Option(False, "--draft", help="Skip validation and print blank fields as dots"),
) -> None:
    """Generate the twelve monthly claim pages."""
    generate_command(config, output, start_month, start_year, draft)


@app.command(name="set-date")
def set_date(
    field: str = typer.Argument(..., help="start, end, rph-start, rph-end, rhc-start or rhc-end"),
    day: int = typer.Option(None, "--day", help="Day of month"),
    month: str = typer.Option(None, "--month", help="Thai month name or 1-12"),
    year: int = typer.Option(None, "--year", help="Buddhist year"),
    clear: bool = typer.Option(False, "--clear", help="Blank the date"),
    config: str = typer.Option(None, "--config", "-c", help="Config file (default: XDG config location)"),
) -> None:
    """Change one part of a date in the config, keeping the day within the month."""
    set_date_command(field, day, month, year, clear, config)


@app.command()
def months(
    start_month: str,
    start_year: int,
) -> None:
    """Show the twelve claim months from a starting month and Buddhist year."""
    months_command(start_month, start_year)


@app.command(name="thai-date")
def thai_date(iso_date: str) -> None:
    """Format an ISO date (YYYY-MM-DD) as a Thai date."""
    thai_date_command(iso_date)


@app.command()
def baht(amount: float) -> None:
    """Spell out a Baht amount in Thai words."""
    baht_command(amount)


@app.command()
def interval(start_date: str, end_date: str) -> None:
    """Show whole years and months between two ISO dates."""
    interval_command(start_date, end_date)


if __name__ == "__main__":
    app()
