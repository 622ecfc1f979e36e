"""Explicit logging configuration for the converter."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

PACKAGE_LOGGER = "icon_converter"
LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


@dataclass(frozen=True)
class LogConfig:
    """Verbosity and sink for converter logs.

    Parameters
    ----------
    verbose : bool, default=False
        Emit DEBUG records (cache hits, per-file sizes) when ``True``.
    stream : TextIO | None, default=None
        Destination stream; ``sys.stderr`` when omitted.
    """

    verbose: bool = False
    stream: TextIO | None = None

    @property
    def level(self) -> int:
        return logging.DEBUG if self.verbose else logging.INFO

    def configure(self) -> logging.Logger:
        """Attach a single stream handler to the package logger and return it."""
        logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(logger.handlers):
            if getattr(handler, "_icon_converter_handler", False):
                logger.removeHandler(handler)

        handler = logging.StreamHandler(self.stream or sys.stderr)
        handler.setLevel(self.level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._icon_converter_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.setLevel(self.level)
        logger.propagate = False
        return logger
