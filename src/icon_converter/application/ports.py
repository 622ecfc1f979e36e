"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from PIL import Image


class ContentFetcher(Protocol):
    """Retrieve raw SVG markup from a URL or a local path."""

    async def fetch(self, source: str, use_cache: bool = True) -> str:
        """Return markup text for ``source``."""


class StyleTransformer(Protocol):
    """Rewrite SVG dimensions and colour attributes."""

    def transform(
        self,
        markup: str,
        *,
        color: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> str:
        """Return restyled markup."""


class Rasterizer(Protocol):
    """Turn SVG markup into transparent RGBA images."""

    def render_square(self, markup: str, size: int) -> Image.Image:
        """Render into a ``size`` x ``size`` image."""

    def render_wide(
        self,
        markup: str,
        icon_size: int,
        canvas_width: int,
        canvas_height: int,
    ) -> Image.Image:
        """Render an icon centred on a wider canvas."""

    def encode_png(self, image: Image.Image) -> bytes:
        """Encode an image as PNG bytes."""


class OutputWriter(Protocol):
    """Persist encoded images."""

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` (and parents) if missing."""

    async def write(self, path: Path, data: bytes) -> int:
        """Write ``data`` to ``path`` and return the number of bytes written."""
