"""Configuration file management for thaiclaim.

The config file holds the claimant's details so a claim can be regenerated
each year without retyping them.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from thaiclaim.domain.claim import ClaimForm, TrainingPlacement
from thaiclaim.domain.models import IsoDate

TEXT_FIELDS = (
    "name",
    "surname",
    "position",
    "current_workplace",
    "province",
    "level",
    "unit",
    "start_date",
    "end_date",
    "start_month",
)

INT_FIELDS = (
    "years_worked",
    "months_worked",
    "training_practice_years",
    "training_practice_months",
    "start_year",
)

PLACEMENT_FIELDS = ("hospital", "province", "start", "end")


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "thaiclaim" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build a config with every claimant field present and blank.

    TOML has no null, so blank numbers are written as empty strings.
    """
    claimant: dict[str, Any] = {name: "" for name in TEXT_FIELDS + INT_FIELDS}
    claimant["amount"] = ""
    placement = {name: "" for name in PLACEMENT_FIELDS}
    return {
        "claimant": claimant,
        "training": {"rph": dict(placement), "rhc": dict(placement)},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _optional_int(section: dict[str, Any], key: str) -> int | None:
    value = section.get(key, "")
    if value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be a whole number, got {value!r}")
    return value


def _optional_amount(section: dict[str, Any], key: str) -> float | None:
    value = section.get(key, "")
    if value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return value


def _text(section: dict[str, Any], key: str) -> str:
    value = section.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be text, got {value!r}")
    return value


def _table(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a table, got {value!r}")
    return value


def _load_placement(section: dict[str, Any]) -> TrainingPlacement:
    return TrainingPlacement(
        hospital=_text(section, "hospital"),
        province=_text(section, "province"),
        start=IsoDate(_text(section, "start")),
        end=IsoDate(_text(section, "end")),
    )


def load_claim_form(config: dict[str, Any]) -> ClaimForm:
    """Build a claim form from a loaded config.

    Missing keys are treated as blank fields.

    Args:
        config: Configuration dictionary.

    Returns:
        ClaimForm with the claimant and training details.

    Raises:
        ValueError: If a field has the wrong type.
    """
    claimant = _table(config, "claimant")
    training = _table(config, "training")

    return ClaimForm(
        **{name: _text(claimant, name) for name in TEXT_FIELDS},
        **{name: _optional_int(claimant, name) for name in INT_FIELDS},
        amount=_optional_amount(claimant, "amount"),
        rph=_load_placement(_table(training, "rph")),
        rhc=_load_placement(_table(training, "rhc")),
    )


def claim_form_to_config(form: ClaimForm) -> dict[str, Any]:
    """Convert a claim form back into the config layout.

    Args:
        form: Claim form.

    Returns:
        Configuration dictionary, blanks written as empty strings.
    """
    claimant: dict[str, Any] = {name: getattr(form, name) for name in TEXT_FIELDS}
    for name in INT_FIELDS + ("amount",):
        value = getattr(form, name)
        claimant[name] = "" if value is None else value

    return {
        "claimant": claimant,
        "training": {
            "rph": {name: getattr(form.rph, name) for name in PLACEMENT_FIELDS},
            "rhc": {name: getattr(form.rhc, name) for name in PLACEMENT_FIELDS},
        },
    }
