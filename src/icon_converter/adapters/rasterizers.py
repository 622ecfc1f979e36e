"""SVG rasterization and transparent canvas composition."""

from __future__ import annotations

import io
import math

import cairosvg
from PIL import Image, ImageOps

from icon_converter.errors import RasterError

TRANSPARENT = (0, 0, 0, 0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def centered_offsets(
    icon_size: int, canvas_width: int, canvas_height: int
) -> tuple[int, int]:
    """Return ``(left, top)`` that centre a square icon on a canvas."""
    return (
        _round_half_up((canvas_width - icon_size) / 2),
        _round_half_up((canvas_height - icon_size) / 2),
    )


def _rasterize(markup: str, scale: float = 1.0) -> Image.Image:
    try:
        png = cairosvg.svg2png(bytestring=markup.encode("utf-8"), scale=scale)
    except Exception as exc:
        raise RasterError(f"SVG rasterization failed: {exc}") from exc
    try:
        with Image.open(io.BytesIO(png)) as rendered:
            image = rendered.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise RasterError(f"Rasterized output could not be decoded: {exc}") from exc
    if image.width == 0 or image.height == 0:
        raise RasterError("SVG rasterized to an empty image")
    return image


class CairoRasterizer:
    """Render SVG markup with cairosvg and compose with Pillow."""

    def render_square(self, markup: str, size: int) -> Image.Image:
        """Render ``markup`` fitted into a transparent ``size`` x ``size`` image.

        The drawing is scaled to fit while preserving its aspect ratio and is
        centred; the remaining area stays fully transparent.
        """
        if size < 1:
            raise RasterError(f"size must be positive, got {size}")
        image = _rasterize(markup)
        scale = min(size / image.width, size / image.height)
        if not math.isclose(scale, 1.0):
            # Re-render at the target resolution instead of resampling pixels.
            image = _rasterize(markup, scale=scale)

        fitted = ImageOps.contain(image, (size, size))
        canvas = Image.new("RGBA", (size, size), TRANSPARENT)
        canvas.alpha_composite(
            fitted, dest=((size - fitted.width) // 2, (size - fitted.height) // 2)
        )
        return canvas

    def render_wide(
        self,
        markup: str,
        icon_size: int,
        canvas_width: int,
        canvas_height: int,
    ) -> Image.Image:
        """Render the icon at ``icon_size`` and centre it on a wider canvas.

        Raises
        ------
        RasterError
            If the icon does not fit within the canvas.
        """
        if icon_size > min(canvas_width, canvas_height):
            raise RasterError(
                f"icon size {icon_size} does not fit a "
                f"{canvas_width}x{canvas_height} canvas"
            )
        icon = self.render_square(markup, icon_size)
        canvas = Image.new("RGBA", (canvas_width, canvas_height), TRANSPARENT)
        canvas.alpha_composite(
            icon, dest=centered_offsets(icon_size, canvas_width, canvas_height)
        )
        return canvas

    def encode_png(self, image: Image.Image) -> bytes:
        """Encode ``image`` as PNG bytes."""
        buffer = io.BytesIO()
        try:
            image.save(buffer, format="PNG")
        except (OSError, ValueError) as exc:
            raise RasterError(f"PNG encoding failed: {exc}") from exc
        return buffer.getvalue()
