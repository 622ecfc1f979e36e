"""Filesystem output adapter."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from icon_converter.errors import WriteError


class FileOutputWriter:
    """Write encoded PNG files to disk."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and its parents; existing directories are fine."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"Could not create directory {path}: {exc}") from exc
        self._logger.debug("Directory ensured: %s", path)

    async def write(self, path: Path, data: bytes) -> int:
        """Write ``data`` off the event loop and return the byte count."""
        try:
            return await asyncio.to_thread(path.write_bytes, data)
        except OSError as exc:
            raise WriteError(f"Could not write {path}: {exc}") from exc
