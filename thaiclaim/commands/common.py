"""Helpers shared by commands that read the claimant config."""

import sys
import tomllib
from pathlib import Path
from typing import Any

from rich.console import Console

from thaiclaim.config import get_config_path, load_config

console = Console()


def resolve_config_path(config_path: str | None) -> Path:
    """Get the config path from an option value or the default location."""
    if config_path:
        return Path(config_path).expanduser()
    return get_config_path()


def load_config_or_exit(path: Path) -> dict[str, Any]:
    """Load the config file, exiting with a message if it can't be read."""
    try:
        return load_config(path)
    except FileNotFoundError:
        console.print(f"[red]Config not found: {path}[/red]", style="bold")
        console.print("[yellow]Run 'thaiclaim init' first[/yellow]")
        sys.exit(1)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {path}: {e}[/red]", style="bold")
        sys.exit(1)
