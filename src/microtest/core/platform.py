# src/microtest/core/platform.py
"""Read-only inspection of the process environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping


def environment_entries(environ: Mapping[str, str] | None = None) -> list[str]:
    """Render an environment mapping as ``NAME=value`` entries.

    Mirrors the ``envp`` vector a C test program receives, which is what
    TestEnvironment exposes to test bodies.
    """
    source = os.environ if environ is None else environ
    return [f"{name}={value}" for name, value in source.items()]


def is_windows(environ: Mapping[str, str] | Iterable[str] | None = None) -> bool:
    """True if the environment carries a ``WINDIR`` entry.

    Args:
        environ: Environment mapping, or an iterable of ``NAME=value``
            entries. Defaults to ``os.environ``.
    """
    if environ is None:
        environ = os.environ
    if isinstance(environ, Mapping):
        entries: Iterable[str] = environment_entries(environ)
    else:
        entries = environ
    # Windows treats variable names case-insensitively; MSYS shells export "windir"
    return any(entry.upper().startswith("WINDIR=") for entry in entries)
