"""Batch SVG icon to PNG conversion."""

from __future__ import annotations

from pathlib import Path

from icon_converter.application.results import RunSummary
from icon_converter.errors import (
    ConfigValidationError,
    FetchError,
    IconConverterError,
    MalformedMarkupError,
    RasterError,
    WriteError,
)
from icon_converter.schemas import ConversionConfig

__version__ = "0.1.0"


def convert_icons(
    config: ConversionConfig | Path | str,
    *,
    parallel: bool = False,
) -> RunSummary:
    """Convert configured icons to PNG.

    Parameters
    ----------
    config : ConversionConfig | Path | str
        Validated configuration or path to a YAML configuration file.
    parallel : bool, default=False
        Use batched concurrent execution.

    Returns
    -------
    RunSummary
        Run totals.
    """
    from .api import convert_icons as _impl

    return _impl(config, parallel=parallel)


def load_config(path: Path | str) -> ConversionConfig:
    """Load and validate a YAML configuration file."""
    from .config import load_config as _impl

    return _impl(path)


__all__ = [
    "ConfigValidationError",
    "ConversionConfig",
    "FetchError",
    "IconConverterError",
    "MalformedMarkupError",
    "RasterError",
    "RunSummary",
    "WriteError",
    "convert_icons",
    "load_config",
]
