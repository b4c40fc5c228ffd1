"""Admin command for creating the claimant config file."""

import sys

from rich.console import Console

from thaiclaim.commands.common import resolve_config_path
from thaiclaim.config import create_default_config

console = Console()


def init_command(force: bool = False, config: str | None = None) -> None:
    """Create a blank claimant config file."""
    config_path = resolve_config_path(config)

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'thaiclaim init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print("[dim]Fill in the \\[claimant] section, then run 'thaiclaim generate'[/dim]")
