"""Public synchronous conversion API (delegates to application use-cases)."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from icon_converter.application.results import RunSummary
from icon_converter.application.use_cases import run_conversion
from icon_converter.config import load_config
from icon_converter.schemas import ConversionConfig


def convert_icons(
    config: ConversionConfig | Path | str,
    *,
    parallel: bool = False,
    logger: logging.Logger | None = None,
) -> RunSummary:
    """Convert every configured icon to square and wide PNGs.

    Parameters
    ----------
    config : ConversionConfig | Path | str
        A validated configuration, or the path of a YAML file to load.
    parallel : bool, default=False
        Run tasks in concurrent batches of four instead of one at a time.
    logger : logging.Logger | None, default=None
        Sink for progress messages.

    Returns
    -------
    RunSummary
        Counts, output bytes and elapsed wall time.

    Raises
    ------
    ConfigValidationError
        If a configuration path is given and the file is invalid.
    """
    if not isinstance(config, ConversionConfig):
        config = load_config(config)
    mode = "batched" if parallel else "sequential"
    return asyncio.run(run_conversion(config, mode, logger=logger))


__all__ = ["convert_icons", "load_config"]
