"""Generate command for producing the twelve monthly claim pages."""

import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

from rich.console import Console

from thaiclaim.commands.common import load_config_or_exit, resolve_config_path
from thaiclaim.config import load_claim_form
from thaiclaim.dates import THAI_MONTHS
from thaiclaim.domain.claim import ClaimForm, build_claim_pages, fill_worked_from_dates, validate_form
from thaiclaim.domain.document import render_document

console = Console()


def apply_overrides(form: ClaimForm, start_month: str | None, start_year: int | None) -> ClaimForm:
    """Apply command-line start month/year over the config values.

    Args:
        form: Claim form from the config.
        start_month: Thai month name or 1-12, if given.
        start_year: Buddhist year, if given.

    Returns:
        Updated claim form.
    """
    if start_month:
        if start_month.isdigit() and 1 <= int(start_month) <= 12:
            start_month = THAI_MONTHS[int(start_month) - 1]
        form = replace(form, start_month=start_month)
    if start_year is not None:
        form = replace(form, start_year=start_year)
    return form


def generate_command(
    config_path: str | None = None,
    output: str | None = None,
    start_month: str | None = None,
    start_year: int | None = None,
    draft: bool = False,
) -> None:
    """Generate claim pages for twelve months from the config file."""
    path = resolve_config_path(config_path)
    config = load_config_or_exit(path)

    try:
        form = load_claim_form(config)
    except ValueError as e:
        console.print(f"[red]Invalid claimant data: {e}[/red]", style="bold")
        sys.exit(1)

    form = fill_worked_from_dates(apply_overrides(form, start_month, start_year))

    if not draft:
        errors = validate_form(form)
        if errors:
            console.print("[red]Claim form is incomplete:[/red]", style="bold")
            for error in errors:
                console.print(f"  • {error}")
            console.print("\n[yellow]Fix the config or use --draft to print with blanks[/yellow]")
            sys.exit(1)

    pages = build_claim_pages(form, date.today())
    document = render_document(form, pages)

    first, last = pages[0], pages[-1]
    period = f"{first.month} {first.year} - {last.month} {last.year}"

    if output is None:
        console.print(f"[bold cyan]{period}[/bold cyan]\n")
        console.print(document, markup=False, highlight=False, soft_wrap=True)
        return

    output_path = Path(output).expanduser()
    try:
        output_path.write_text(document, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Could not write {output_path}: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] {len(pages)} pages ({period}) written to: {output_path}")
