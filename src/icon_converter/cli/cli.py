#!/usr/bin/env python3
"""
icon_converter.cli.cli

Typer-based CLI for converting SVG icons to square and wide PNGs.

Examples
--------
Convert using ``config.yml`` in the working directory:

    svg2png convert

Convert a custom configuration with verbose logs, four tasks at a time:

    svg2png convert --config config-url-sample.yml --verbose --parallel
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path

import typer

from icon_converter.config import DEFAULT_CONFIG_PATH
from icon_converter.errors import IconConverterError
from icon_converter.logging_config import LogConfig

app = typer.Typer(
    name="svg2png",
    help="Convert SVG icons to PNG with customizable size and color.",
    no_args_is_help=True,
)

CONFIG_HELP = "Configuration file to use."


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while loading or converting.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Initialize shared CLI state."""
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c", help=CONFIG_HELP
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    parallel: bool = typer.Option(
        False, "--parallel", "-p", help="Process tasks in concurrent batches of four."
    ),
) -> None:
    """Convert every configured icon into square and wide PNGs.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    config_path : Path
        YAML configuration file.
    verbose : bool, default=False
        Whether to log DEBUG records.
    parallel : bool, default=False
        Whether to use batched concurrent execution.

    Notes
    -----
    - Failed conversions are reported in the summary but do not change the
      exit code; configuration errors exit before any file is written.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    logger = LogConfig(verbose=verbose).configure()

    try:
        from icon_converter.api import convert_icons

        summary = convert_icons(config_path, parallel=parallel, logger=logger)
        typer.echo(
            f"✓ Converted {summary.successful}/{summary.total} images "
            f"({summary.failed} failed)"
        )
    except IconConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))


@app.command("validate")
def validate_cmd(
    ctx: typer.Context,
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c", help=CONFIG_HELP
    ),
) -> None:
    """Validate a configuration file without converting anything."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from icon_converter.config import load_config

        config = load_config(config_path)
    except IconConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    wide = config.settings.resolved_wide()
    typer.echo(f"✓ Valid: {config_path}")
    typer.echo(f"icons: {len(config.icons)}")
    typer.echo(f"sources: {', '.join(source.suffix for source in config.sources)}")
    typer.echo(f"square: {config.settings.size}x{config.settings.size}px")
    typer.echo(f"wide: {wide.width}x{wide.height}px (icon {wide.icon_size}px)")
    typer.echo(f"tasks: {2 * len(config.icons) * len(config.sources)}")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions."""
    import importlib.metadata as metadata

    modules = [
        "icon-converter",
        "cairosvg",
        "pillow",
        "httpx",
        "pydantic",
        "pyyaml",
        "typer",
    ]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    try:
        import cairosvg  # noqa: F401

        typer.echo("cairo: available")
    except (ImportError, OSError) as exc:
        # cairocffi raises OSError when the native cairo library is missing.
        typer.echo(f"cairo: <unavailable> ({exc})")


if __name__ == "__main__":
    app()
