# src/microtest/core/config.py
"""Harness configuration.

Uses Pydantic for validation (frozen model), PyYAML for the bundled
presets and Dynaconf for config file plus environment loading.

Precedence (highest to lowest):
1. overrides - explicit values from the caller or CLI flags
2. environment variables (MICROTEST_*) and the YAML config file
3. preset - a named YAML file shipped in ``microtest/core/presets``
4. defaults - Pydantic field defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

PRESETS_DIR = Path(__file__).parent / "presets"
ENVVAR_PREFIX = "MICROTEST"

# Dynaconf bookkeeping keys that are not settings
_INTERNAL_KEYS = frozenset({"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"})


class HarnessSettings(BaseModel):
    """Initial output configuration and generator/resource settings."""

    model_config = {"frozen": True, "extra": "forbid"}

    ansi_colors: bool = Field(
        default=False,
        description="Wrap tags and locations of check lines in ANSI color codes",
    )
    omit_pass_log: bool = Field(
        default=False,
        description="Count passing checks without writing their lines",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the random value generator (entropy when unset)",
    )
    temp_root: Path | None = Field(
        default=None,
        description="Directory for scoped temp files and directories (system temp when unset)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Level of harness diagnostic logging on stderr",
    )
    json_logs: bool = Field(
        default=False,
        description="Render harness diagnostics as JSON",
    )
    preset_name: str | None = Field(
        default=None,
        description="Preset these settings were layered on (informational)",
    )


def list_presets(presets_dir: Path = PRESETS_DIR) -> list[str]:
    """Names accepted by ``--preset``, sorted."""
    return sorted(path.stem for path in presets_dir.glob("*.yaml")) if presets_dir.is_dir() else []


def load_preset(preset_name: str, presets_dir: Path = PRESETS_DIR) -> dict[str, Any]:
    """Read the settings layer stored in ``<presets_dir>/<preset_name>.yaml``.

    An empty preset file is an empty layer.

    Raises:
        FileNotFoundError: If no such preset exists; the message lists the known ones.
        ValueError: If the file holds something other than a mapping.
    """
    preset_path = presets_dir / f"{preset_name}.yaml"
    try:
        layer = yaml.safe_load(preset_path.read_text()) or {}
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Unknown preset {preset_name!r}; available presets: {', '.join(list_presets(presets_dir)) or 'none'}"
        ) from None
    if not isinstance(layer, dict):
        raise ValueError(f"Preset {preset_name!r} must map setting names to values, got {type(layer).__name__}")
    return layer


def _load_file_and_environment(config_file: Path | None) -> dict[str, Any]:
    """Read the optional config file and MICROTEST_* variables through Dynaconf."""
    from dynaconf import Dynaconf

    if config_file is not None and not config_file.exists():
        # Dynaconf silently accepts missing files
        raise FileNotFoundError(f"Config file not found: {config_file}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[str(config_file)] if config_file is not None else [],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )
    # Dynaconf returns uppercase keys
    return {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in _INTERNAL_KEYS}


def load_settings(
    config_file: Path | None = None,
    *,
    preset: str | None = None,
    overrides: dict[str, Any] | None = None,
    presets_dir: Path = PRESETS_DIR,
) -> HarnessSettings:
    """Load harness settings with precedence handling.

    Args:
        config_file: Optional YAML config file.
        preset: Optional preset name used as the base layer.
        overrides: Values that win over every other source. ``None``
            values are ignored so unset CLI flags do not mask lower layers.
        presets_dir: Directory holding preset YAML files.

    Raises:
        FileNotFoundError: If the preset or config file does not exist.
        yaml.YAMLError: If YAML is malformed.
        pydantic.ValidationError: If the merged config fails validation.
    """
    # Settings are flat: each layer replaces keys of the layers below it
    layers: dict[str, Any] = load_preset(preset, presets_dir) if preset is not None else {}
    layers.update(_load_file_and_environment(config_file))
    layers.update({key: value for key, value in (overrides or {}).items() if value is not None})
    layers["preset_name"] = preset
    return HarnessSettings(**layers)
