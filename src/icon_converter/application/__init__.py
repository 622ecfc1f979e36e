"""Application-layer use-cases, option and result objects."""

from __future__ import annotations

import logging

from icon_converter.application.options import SquareOptions, WideOptions
from icon_converter.application.ports import (
    ContentFetcher,
    OutputWriter,
    Rasterizer,
    StyleTransformer,
)
from icon_converter.application.results import RunStatistics, RunSummary, TaskResult
from icon_converter.schemas import ConversionConfig
from icon_converter.types import ExecutionMode


async def run_conversion(
    config: ConversionConfig,
    mode: ExecutionMode = "sequential",
    *,
    fetcher: ContentFetcher | None = None,
    transformer: StyleTransformer | None = None,
    rasterizer: Rasterizer | None = None,
    writer: OutputWriter | None = None,
    logger: logging.Logger | None = None,
) -> RunSummary:
    """Run a conversion via lazy use-case import."""
    from icon_converter.application.use_cases import run_conversion as _impl

    return await _impl(
        config,
        mode,
        fetcher=fetcher,
        transformer=transformer,
        rasterizer=rasterizer,
        writer=writer,
        logger=logger,
    )


__all__ = [
    "SquareOptions",
    "WideOptions",
    "TaskResult",
    "RunStatistics",
    "RunSummary",
    "run_conversion",
]
