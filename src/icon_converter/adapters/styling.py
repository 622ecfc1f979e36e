"""SVG restyling: dimensions, outline/solid detection and colour rewrite."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from icon_converter.errors import MalformedMarkupError
from icon_converter.types import IconStyle

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
SHAPE_TAGS = frozenset(
    {"path", "circle", "rect", "ellipse", "line", "polyline", "polygon"}
)
STYLE_ATTRIBUTES = ("fill", "stroke", "stroke-width")
DEFAULT_STROKE_WIDTH = "1.5"

# Serialize SVG as the default namespace instead of ``ns0:``; ElementTree only
# supports this through its global prefix registry.
ET.register_namespace("", SVG_NAMESPACE)
ET.register_namespace("xlink", XLINK_NAMESPACE)


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def find_svg_root(markup: str) -> ET.Element:
    """Parse markup and return the first ``<svg>`` element (document order).

    Raises
    ------
    MalformedMarkupError
        If the markup is not well-formed XML or contains no ``<svg>``.
    """
    try:
        document = ET.fromstring(markup)
    except ET.ParseError as exc:
        raise MalformedMarkupError(f"SVG markup could not be parsed: {exc}") from exc
    for element in document.iter():
        if _local_name(element.tag) == "svg":
            return element
    raise MalformedMarkupError("No SVG element found in content")


def shape_elements(root: ET.Element) -> list[ET.Element]:
    """Return shape descendants of ``root`` (the root itself excluded)."""
    return [
        element
        for element in root.iter()
        if element is not root and _local_name(element.tag) in SHAPE_TAGS
    ]


def detect_icon_style(root: ET.Element) -> IconStyle:
    """Classify an icon as outline or solid.

    A single shape that has a ``stroke``, has ``fill="none"`` or has no
    ``fill`` makes the whole icon an outline icon.
    """
    for shape in shape_elements(root):
        fill = shape.get("fill")
        if shape.get("stroke") is not None or fill == "none" or not fill:
            return "outline"
    return "solid"


def apply_color(root: ET.Element, color: str) -> IconStyle:
    """Replace existing paint attributes with ``color`` in place.

    Returns
    -------
    IconStyle
        The detected style that drove the rewrite.
    """
    style = detect_icon_style(root)

    for element in root.iter():
        for attribute in STYLE_ATTRIBUTES:
            element.attrib.pop(attribute, None)

    shapes = shape_elements(root)
    if style == "outline":
        root.set("stroke", color)
        root.set("fill", "none")
        root.set("stroke-width", DEFAULT_STROKE_WIDTH)
        for shape in shapes:
            shape.set("stroke", color)
            shape.set("fill", "none")
            shape.set("stroke-width", DEFAULT_STROKE_WIDTH)
    else:
        root.set("fill", color)
        for shape in shapes:
            shape.set("fill", color)
    return style


class SvgStyleTransformer:
    """Apply dimensions and a uniform colour to SVG markup."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def transform(
        self,
        markup: str,
        *,
        color: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> str:
        """Return restyled markup for the first ``<svg>`` element.

        Parameters
        ----------
        markup : str
            Source SVG document.
        color : str | None, default=None
            Colour value passed through verbatim; ``None`` keeps original paint.
        width, height : int | None, default=None
            Root dimensions to set, overriding existing values.

        Raises
        ------
        MalformedMarkupError
            If no ``<svg>`` element can be found.
        """
        root = find_svg_root(markup)
        if width is not None:
            root.set("width", str(width))
        if height is not None:
            root.set("height", str(height))
        if color:
            style = apply_color(root, color)
            self._logger.debug("Applied %s styling with color %s", style, color)
        return ET.tostring(root, encoding="unicode")
