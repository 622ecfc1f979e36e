"""Human-readable run banner and summary lines."""

from __future__ import annotations

import logging

from icon_converter.application.results import RunSummary
from icon_converter.schemas import ConversionConfig
from icon_converter.sources import is_url
from icon_converter.types import ExecutionMode

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_bytes(size: int) -> str:
    """Format a byte count as ``1.5 KB``."""
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_BYTE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 2):g} {_BYTE_UNITS[exponent]}"


def describe_sources(locations: list[str]) -> str:
    """Classify configured sources as local, remote or mixed."""
    remote = [is_url(location) for location in locations]
    if remote and all(remote):
        return "remote URLs"
    if not any(remote):
        return "local directories"
    return "mixed sources"


def log_run_banner(
    logger: logging.Logger, config: ConversionConfig, mode: ExecutionMode
) -> None:
    """Log what is about to be converted."""
    settings = config.settings
    wide = settings.resolved_wide()
    source_kind = describe_sources([source.location for source in config.sources])
    logger.info(
        "🚀 Starting conversion of %d SVG files from %s in %d styles",
        len(config.icons),
        source_kind,
        len(config.sources),
    )
    logger.info("📏 Square: %dx%dpx", settings.size, settings.size)
    logger.info("📏 Wide: %dx%dpx", wide.width, wide.height)
    logger.info("🎨 Color: %s", settings.color or "original")
    logger.info("📁 Output: %s/", settings.output_directory)
    if mode == "batched":
        logger.info("⚡ Parallel processing enabled")


def log_run_summary(logger: logging.Logger, summary: RunSummary) -> None:
    """Log counts, total size and duration of a finished run."""
    logger.info("🎉 Conversion completed!")
    logger.info(
        "📊 Results: %d successful, %d failed", summary.successful, summary.failed
    )
    logger.info("📁 Total files: %d", summary.successful)
    logger.info("💾 Total size: %s", format_bytes(summary.total_bytes))
    logger.info("⏱️  Duration: %.2fs", summary.elapsed_millis / 1000)
    if summary.failed > 0:
        logger.warning(
            "%d conversions failed - check logs above", summary.failed
        )
