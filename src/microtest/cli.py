# src/microtest/cli.py
"""microtest command line interface.

Usage:
    # Run test(args) from a file; extra arguments are passed to the body
    microtest run tests/t0001_logging.py -- --verbose-body

    # Pick the function and output settings
    microtest run mypkg.checks:smoke --ansi --omit-pass --seed 1234

    # Layer settings on a preset or a YAML file
    microtest run t.py --preset ci --config microtest.yaml

    microtest presets
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from microtest import __version__
from microtest.core.config import list_presets, load_settings
from microtest.core.logging import configure_logging
from microtest.engine.harness import Harness
from microtest.runner import load_test_body, run_test_body

app = typer.Typer(
    name="microtest",
    help="microtest: lightweight check harness for test programs.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"microtest version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """microtest: lightweight check harness for test programs."""


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    target: Annotated[
        str,
        typer.Argument(help="Test body as path/to/file.py[:func] or package.module[:func] (default func: test)."),
    ],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Arguments passed to the test body."),
    ] = None,
    ansi: Annotated[
        bool | None,
        typer.Option("--ansi/--no-ansi", help="Force ANSI colored check lines on or off."),
    ] = None,
    omit_pass: Annotated[
        bool | None,
        typer.Option("--omit-pass/--log-pass", help="Count passing checks without logging them."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed for random test values.", min=0),
    ] = None,
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="Preset configuration. Use 'microtest presets' to list them."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML configuration file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug diagnostics on stderr."),
    ] = False,
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Render diagnostics as JSON."),
    ] = False,
) -> None:
    """Run a test body and exit with its summary code."""
    overrides = {
        "ansi_colors": ansi,
        "omit_pass_log": omit_pass,
        "seed": seed,
        "log_level": "DEBUG" if verbose else None,
        "json_logs": json_logs or None,
    }
    try:
        settings = load_settings(config_file, preset=preset, overrides=overrides)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        # pydantic.ValidationError is a ValueError
        detail = str(exc) if not isinstance(exc, ValidationError) else exc.errors()[0]["msg"]
        typer.secho(f"Error: invalid configuration: {detail}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2) from None

    configure_logging(json_output=settings.json_logs, level=settings.log_level)

    try:
        body = load_test_body(target)
    except (FileNotFoundError, ImportError, AttributeError, TypeError) as exc:
        typer.secho(f"Error: cannot load test body '{target}': {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2) from None

    code = run_test_body(body, args or [], os.environ, Harness(settings))
    raise typer.Exit(code)


@app.command()
def presets() -> None:
    """List available configuration presets."""
    for name in list_presets():
        typer.echo(name)


if __name__ == "__main__":
    app()
