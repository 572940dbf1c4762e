"""Core infrastructure: configuration, diagnostic logging, environment helpers."""

from microtest.core.config import HarnessSettings, list_presets, load_preset, load_settings
from microtest.core.logging import configure_logging, get_logger
from microtest.core.numeric import round_to, sequence
from microtest.core.platform import environment_entries, is_windows

__all__ = [
    "HarnessSettings",
    "configure_logging",
    "environment_entries",
    "get_logger",
    "is_windows",
    "list_presets",
    "load_preset",
    "load_settings",
    "round_to",
    "sequence",
]
